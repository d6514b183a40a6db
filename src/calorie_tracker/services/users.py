"""User registration and login."""

import logging
from dataclasses import dataclass
from typing import Protocol
from uuid import UUID

import bcrypt

from calorie_tracker.domain.models import UserRecord
from calorie_tracker.services.errors import (
    InvalidCredentialsError,
    UserAlreadyExistsError,
)

_logger = logging.getLogger(__name__)


class UserRepository(Protocol):
    """Persistence interface for user data."""

    def get_by_email(self, email: str) -> UserRecord | None:
        """Return the user for an email, if present."""

    def get_by_id(self, user_id: UUID) -> UserRecord | None:
        """Return the user for an id, if present."""

    def create_user(self, name: str, email: str, password_hash: str) -> UserRecord:
        """Create and return a new user record."""


@dataclass
class UserService:
    """Application service for sign-up and login."""

    repository: UserRepository
    bcrypt_rounds: int = 12

    def register(self, name: str, email: str, password: str) -> UserRecord:
        """Create a user with a hashed password."""
        normalized = _normalize_email(email)
        if self.repository.get_by_email(normalized):
            raise UserAlreadyExistsError(normalized)
        created = self.repository.create_user(
            name=name.strip(),
            email=normalized,
            password_hash=hash_password(password, self.bcrypt_rounds),
        )
        _logger.info("Registered user %s", created.id)
        return created

    def authenticate(self, email: str, password: str) -> UserRecord:
        """Return the user when the password matches."""
        user = self.repository.get_by_email(_normalize_email(email))
        if user is None or not verify_password(password, user.password_hash):
            raise InvalidCredentialsError
        return user

    def get_user(self, user_id: UUID) -> UserRecord | None:
        """Return a user by id."""
        return self.repository.get_by_id(user_id)


def hash_password(password: str, rounds: int = 12) -> str:
    """Hash a password with bcrypt."""
    hashed = bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt(rounds=rounds))
    return hashed.decode("utf-8")


def verify_password(password: str, password_hash: str) -> bool:
    """Check a password against a bcrypt hash."""
    try:
        return bcrypt.checkpw(password.encode("utf-8"), password_hash.encode("utf-8"))
    except ValueError:
        return False


def _normalize_email(email: str) -> str:
    return email.strip().lower()
