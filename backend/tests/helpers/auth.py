from blogboard.application.services.security_service import create_access_token
from blogboard.infrastructure.db.models import User


def login(client, username: str) -> str:
    response = client.post("/api/v1/auth/login", json={"username": username})
    assert response.status_code == 200
    return response.json()["access_token"]


def token_for_user(user: User) -> str:
    return create_access_token(str(user.id), user.username)


def auth_header(token: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {token}"}
