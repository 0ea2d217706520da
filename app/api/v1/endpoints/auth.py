"""Authentication API endpoints."""
from __future__ import annotations

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from app.api import deps
from app.config import settings
from app.db.models.user import User
from app.schemas import (
    CurrentUserResponse,
    MessageResponse,
    Token,
    UserCreate,
    UserLogin,
    UserRead,
)
from app.services.auth import AuthService
from app.utils.exceptions import (
    EmailAlreadyExistsError,
    InvalidCredentialsError,
    handle_email_exists,
    handle_invalid_credentials,
)


router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/register", response_model=UserRead, status_code=status.HTTP_201_CREATED)
def register_user(payload: UserCreate, db: Session = Depends(deps.get_db)) -> UserRead:
    """Register a new user and return the created entity."""

    service = AuthService(db)
    try:
        user = service.register_user(payload)
    except EmailAlreadyExistsError as exc:
        raise handle_email_exists(exc) from exc
    return user


@router.post("/login", response_model=Token)
def login(payload: UserLogin, response: Response, db: Session = Depends(deps.get_db)) -> Token:
    """Authenticate a user, set the auth cookie and return the token."""

    service = AuthService(db)
    try:
        user = service.authenticate_user(payload.email, payload.password)
    except InvalidCredentialsError as exc:
        raise handle_invalid_credentials(exc) from exc

    token = service.create_token(user)
    response.set_cookie(
        key=settings.AUTH_COOKIE_NAME,
        value=token.access_token,
        max_age=settings.ACCESS_TOKEN_EXPIRE_MINUTES * 60,
        httponly=True,
        secure=settings.AUTH_COOKIE_SECURE,
        samesite="lax",
        path="/",
    )
    return token


@router.post("/logout", response_model=MessageResponse)
def logout(response: Response) -> MessageResponse:
    """Clear the auth cookie."""

    response.delete_cookie(key=settings.AUTH_COOKIE_NAME, path="/")
    return MessageResponse(message="Logged out")


@router.get("/me", response_model=CurrentUserResponse)
def read_current_user(current_user: User = Depends(deps.get_current_user)) -> CurrentUserResponse:
    """Return the authenticated user with their preferences."""

    return CurrentUserResponse(user=UserRead.model_validate(current_user))
