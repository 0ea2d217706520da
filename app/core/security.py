"""Security utilities for password hashing and JWT handling."""
from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Any, Dict

import bcrypt
from jose import JWTError, jwt

from app.config import settings


ALGORITHM = "HS256"


class InvalidTokenError(Exception):
    """Raised when a JWT cannot be decoded or is invalid."""


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Validate a plaintext password against a hashed value."""

    return bcrypt.checkpw(plain_password.encode("utf-8"), hashed_password.encode("utf-8"))


def get_password_hash(password: str) -> str:
    """Hash a password using bcrypt with a fresh salt."""

    return bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt()).decode("utf-8")


def create_access_token(
    subject: str | Any, email: str, expires_minutes: int | None = None
) -> str:
    """Create a signed JWT access token carrying the user id and email."""

    minutes = expires_minutes or settings.ACCESS_TOKEN_EXPIRE_MINUTES
    expire = datetime.now(timezone.utc) + timedelta(minutes=minutes)
    payload: Dict[str, Any] = {
        "exp": expire,
        "sub": str(subject),
        "email": email,
        "type": "access",
    }
    return jwt.encode(payload, settings.SECRET_KEY, algorithm=ALGORITHM)


def decode_token(token: str) -> Dict[str, Any]:
    """Decode a JWT and return its payload, raising ``InvalidTokenError`` if invalid."""

    try:
        return jwt.decode(token, settings.SECRET_KEY, algorithms=[ALGORITHM])
    except JWTError as exc:
        raise InvalidTokenError(str(exc)) from exc
