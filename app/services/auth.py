"""Registration, sign-in and token issuing."""
from __future__ import annotations

from loguru import logger
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.core.security import create_access_token, get_password_hash, verify_password
from app.db.models.user import User, UserPreferences
from app.schemas import Token, UserCreate
from app.utils.exceptions import EmailAlreadyExistsError, InvalidCredentialsError


def normalize_email(email: str) -> str:
    return email.strip().lower()


class AuthService:
    """Accounts are keyed by lower-cased email."""

    def __init__(self, db: Session):
        self.db = db

    def _find_by_email(self, email: str) -> User | None:
        return self.db.scalar(select(User).where(User.email == normalize_email(email)))

    def register_user(self, payload: UserCreate) -> User:
        """Create an account together with its default preferences row."""

        email = normalize_email(payload.email)
        if self._find_by_email(email):
            raise EmailAlreadyExistsError("A user with this email already exists.")

        user = User(
            email=email,
            hashed_password=get_password_hash(payload.password),
            name=payload.name,
            preferences=UserPreferences(),
        )
        self.db.add(user)
        try:
            self.db.commit()
        except IntegrityError as exc:
            # Lost a race with a concurrent registration for the same address.
            self.db.rollback()
            raise EmailAlreadyExistsError("A user with this email already exists.") from exc

        self.db.refresh(user)
        logger.info(f"Registered user {user.id}")
        return user

    def authenticate_user(self, email: str, password: str) -> User:
        user = self._find_by_email(email)
        if user is None or not user.is_active:
            raise InvalidCredentialsError("Incorrect email or password")
        if not verify_password(password, user.hashed_password):
            logger.warning(f"Failed sign-in for user {user.id}")
            raise InvalidCredentialsError("Incorrect email or password")
        return user

    def create_token(self, user: User) -> Token:
        return Token(access_token=create_access_token(str(user.id), email=user.email))
