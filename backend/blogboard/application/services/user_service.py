import uuid

from sqlalchemy import select
from sqlalchemy.orm import Session

from blogboard.application.errors import ConflictError
from blogboard.infrastructure.db.models import User
from blogboard.infrastructure.logging import get_logger

logger = get_logger(__name__)


def serialize_user_response(user: User) -> dict:
    return {
        "id": user.id,
        "username": user.username,
        "created_at": user.created_at,
    }


def get_user_by_id(db: Session, user_id: uuid.UUID) -> User | None:
    return db.get(User, user_id)


def get_user_by_username(db: Session, username: str) -> User | None:
    return db.execute(select(User).where(User.username == username)).scalar_one_or_none()


def create_user(db: Session, username: str) -> User:
    if get_user_by_username(db, username) is not None:
        logger.warning("user_create_conflict", username=username)
        raise ConflictError("Username already exists")

    user = User(username=username)
    db.add(user)
    db.commit()
    db.refresh(user)
    logger.info("user_created", user_id=str(user.id), username=username)
    return user
