from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.security import OAuth2PasswordRequestForm
from sqlalchemy.orm import Session

from blogboard.application.services.auth_service import login
from blogboard.infrastructure.db.session import get_db
from blogboard.interfaces.api.v1.schemas.auth import LoginRequest, TokenResponse

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post(
    "/login",
    response_model=TokenResponse,
    summary="Log in by username",
    description="Return a bearer token for the username, registering the user on first login.",
    responses={422: {"description": "Invalid username"}},
)
def login_endpoint(payload: LoginRequest, db: Session = Depends(get_db)):
    return login(db=db, username=payload.username)


@router.post(
    "/token",
    response_model=TokenResponse,
    summary="Issue access token",
    description="OAuth2 form variant of login used by the interactive docs. The password field is ignored.",
    responses={400: {"description": "Invalid username"}},
)
def issue_token(form_data: OAuth2PasswordRequestForm = Depends(), db: Session = Depends(get_db)):
    username = form_data.username.strip()
    if not username or len(username) > 50:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Username must be 1-50 characters")
    return login(db=db, username=username)
