import uuid

from tests.helpers.auth import auth_header, token_for_user


def test_get_me_requires_token(client):
    assert client.get("/api/v1/users/me").status_code == 401


def test_get_me_returns_current_user(client, seeded_users):
    response = client.get("/api/v1/users/me", headers=auth_header(token_for_user(seeded_users["bob"])))
    assert response.status_code == 200
    assert response.json()["username"] == "bob"


def test_get_user_by_id_is_public(client, seeded_users):
    """
    Validate public user lookups.

    1. Fetch a seeded user by id without a token.
    2. Fetch an unknown id.
    3. Validate the found payload and the 404 detail.
    """
    found = client.get(f"/api/v1/users/{seeded_users['alice'].id}")
    missing = client.get(f"/api/v1/users/{uuid.uuid4()}")
    assert found.status_code == 200
    assert found.json()["username"] == "alice"
    assert missing.status_code == 404
    assert missing.json()["detail"] == "User not found"


def test_token_for_deleted_user_is_rejected(client, db_session, seeded_users):
    token = token_for_user(seeded_users["bob"])
    db_session.delete(seeded_users["bob"])
    db_session.commit()
    response = client.get("/api/v1/users/me", headers=auth_header(token))
    assert response.status_code == 401
    assert response.json()["detail"] == "User not found"
