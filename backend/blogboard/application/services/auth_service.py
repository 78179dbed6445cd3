from sqlalchemy.orm import Session

from blogboard.application.services.security_service import create_access_token
from blogboard.application.services.user_service import create_user, get_user_by_username, serialize_user_response
from blogboard.config import settings
from blogboard.infrastructure.logging import get_logger

logger = get_logger(__name__)


def login(db: Session, username: str) -> dict:
    """Issue a token for ``username``, registering the user on first login."""
    user = get_user_by_username(db, username)
    if user is None:
        user = create_user(db, username)

    logger.info("user_logged_in", user_id=str(user.id))
    return {
        "access_token": create_access_token(str(user.id), user.username),
        "token_type": "bearer",
        "expires_in": settings.jwt_access_token_expire_minutes * 60,
        "user": serialize_user_response(user),
    }
