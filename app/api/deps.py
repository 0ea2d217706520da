"""Shared API dependencies."""
from __future__ import annotations

from typing import Callable

from fastapi import Depends, HTTPException, Request, status
from fastapi.security import OAuth2PasswordBearer
from pydantic import ValidationError
from sqlalchemy.orm import Session

from app.config import settings
from app.core.security import InvalidTokenError, decode_token
from app.db.models.user import User
from app.db.session import SessionLocal, get_db
from app.schemas import TokenPayload
from app.services.stats import StatsService
from app.services.uploads import UploadService

oauth2_scheme = OAuth2PasswordBearer(
    tokenUrl=f"{settings.API_PREFIX}/auth/login", auto_error=False
)

__all__ = [
    "get_db",
    "get_current_user",
    "get_session_factory",
    "get_stats_service",
    "get_upload_service",
]


def get_current_user(
    request: Request,
    bearer_token: str | None = Depends(oauth2_scheme),
    db: Session = Depends(get_db),
) -> User:
    """Resolve the authenticated user from the auth cookie or Authorization header."""

    credentials_exception = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Unauthorized",
        headers={"WWW-Authenticate": "Bearer"},
    )

    token = bearer_token or request.cookies.get(settings.AUTH_COOKIE_NAME)
    if not token:
        raise credentials_exception

    try:
        payload = decode_token(token)
        if payload.get("type") != "access":
            raise InvalidTokenError("Token must be an access token")
        token_data = TokenPayload.model_validate(payload)
    except (InvalidTokenError, ValidationError, ValueError, KeyError) as exc:
        raise credentials_exception from exc

    user = db.get(User, token_data.sub)
    if not user or not user.is_active:
        raise credentials_exception
    return user


def get_session_factory() -> Callable[[], Session]:
    """Return the factory used by services that open their own sessions."""

    return SessionLocal


def get_stats_service(
    session_factory: Callable[[], Session] = Depends(get_session_factory),
) -> StatsService:
    return StatsService(session_factory)


def get_upload_service() -> UploadService:
    return UploadService()
