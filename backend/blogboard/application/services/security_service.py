from datetime import datetime, timedelta, timezone
from typing import Any, cast

from jose import JWTError, jwt

from blogboard.config import settings


def create_access_token(user_id: str, username: str, expires_minutes: int | None = None) -> str:
    lifetime = expires_minutes if expires_minutes is not None else settings.jwt_access_token_expire_minutes
    expires_at = datetime.now(timezone.utc) + timedelta(minutes=lifetime)
    payload = {"sub": str(user_id), "username": username, "exp": expires_at}
    return cast(str, jwt.encode(payload, settings.jwt_secret_key, algorithm=settings.jwt_algorithm))


def decode_access_token(token: str) -> dict[str, Any] | None:
    try:
        payload = cast(dict[str, Any], jwt.decode(token, settings.jwt_secret_key, algorithms=[settings.jwt_algorithm]))
    except JWTError:
        return None
    if not payload.get("sub"):
        return None
    return payload
