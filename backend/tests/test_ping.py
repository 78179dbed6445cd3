def test_ping_endpoint_reports_database_connectivity(client):
    """
    Validate the public health endpoint payload.

    1. Call the public ping endpoint without authentication.
    2. Parse the response payload returned by the backend.
    3. Validate the expected message value.
    4. Validate the DB connectivity flag is true.
    """
    response = client.get("/api/v1/ping")
    assert response.status_code == 200

    payload = response.json()
    assert payload["message"] == "Blogboard API is running"
    assert payload["db_connected"] is True


def test_root_endpoint_is_public(client):
    response = client.get("/")
    assert response.status_code == 200
    assert response.json() == {"message": "Blogboard API is running"}
