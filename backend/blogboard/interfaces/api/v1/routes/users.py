import uuid

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from blogboard.application.errors import NotFoundError
from blogboard.application.services.user_service import get_user_by_id, serialize_user_response
from blogboard.infrastructure.db.models import User
from blogboard.infrastructure.db.session import get_db
from blogboard.interfaces.api.v1.dependencies.auth import require_authenticated
from blogboard.interfaces.api.v1.schemas.user import UserResponse

router = APIRouter(prefix="/users", tags=["users"])


@router.get(
    "/me",
    response_model=UserResponse,
    summary="Get current user",
    responses={401: {"description": "Unauthorized"}},
)
def get_me(current_user: User = Depends(require_authenticated)):
    return serialize_user_response(current_user)


@router.get(
    "/{user_id}",
    response_model=UserResponse,
    summary="Get user by id",
    responses={404: {"description": "User not found"}},
)
def get_user(user_id: uuid.UUID, db: Session = Depends(get_db)):
    user = get_user_by_id(db, user_id)
    if user is None:
        raise NotFoundError("User not found")
    return serialize_user_response(user)
