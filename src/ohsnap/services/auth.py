"""Signup, login and profile management."""

import logging
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Protocol
from uuid import UUID

from ohsnap.domain.models import Identity, ProfilePatch, UserRecord
from ohsnap.domain.sessions import SessionRecord
from ohsnap.errors import AuthError, ConflictError, ValidationError
from ohsnap.services.passwords import MIN_ROUNDS, hash_password, verify_password
from ohsnap.services.sessions import SessionService

_logger = logging.getLogger(__name__)

INVALID_CREDENTIALS = "Invalid credentials"


class UserRepository(Protocol):
    """Persistence interface for user data."""

    def get_by_username(self, username: str) -> UserRecord | None:
        """Return the user with this exact username, if present."""

    def create_user(
        self, username: str, email: str, password_hash: str, created_at: datetime
    ) -> UserRecord:
        """Create and return a new user record with an empty bio."""

    def update_user(self, user_id: UUID, changes: dict[str, object]) -> None:
        """Apply field changes to a user record."""


@dataclass
class AuthService:
    """Application service for account lifecycle actions."""

    repository: UserRepository
    session_service: SessionService
    bcrypt_rounds: int = MIN_ROUNDS

    def signup(
        self, username: str | None, email: str | None, password: str | None
    ) -> tuple[UserRecord, SessionRecord]:
        """Register a user and open a session for them."""
        if not username or not email or not password:
            raise ValidationError("All fields are required")
        if self.repository.get_by_username(username) is not None:
            raise ConflictError("Username already exists")

        user = self.repository.create_user(
            username=username,
            email=email,
            password_hash=hash_password(password, self.bcrypt_rounds),
            created_at=datetime.now(tz=UTC),
        )
        _logger.info("User signed up", extra={"user_id": str(user.id)})
        return user, self.session_service.open(user)

    def login(
        self, username: str | None, password: str | None
    ) -> tuple[UserRecord, SessionRecord]:
        """Check credentials and open a session.

        Unknown usernames and wrong passwords fail with the same error so the
        response does not reveal which accounts exist.
        """
        if not username or not password:
            raise ValidationError("All fields are required")
        user = self.repository.get_by_username(username)
        if user is None or not verify_password(password, user.password_hash):
            _logger.info("Failed login attempt")
            raise AuthError(INVALID_CREDENTIALS)
        _logger.info("User logged in", extra={"user_id": str(user.id)})
        return user, self.session_service.open(user)

    def logout(self, token: str | None) -> None:
        """Destroy the caller's session."""
        identity = self.session_service.resolve(token)
        if identity is None:
            raise AuthError("Authentication required")
        self.session_service.destroy(identity.token)

    def current_user(self, identity: Identity | None) -> Identity:
        """Return the caller as recorded in their session."""
        if identity is None:
            raise AuthError("Not authenticated")
        return identity

    def update_profile(self, identity: Identity | None, patch: ProfilePatch) -> None:
        """Apply the provided profile fields for the caller."""
        if identity is None:
            raise AuthError("Not authenticated")
        changes = patch.changes()
        changes["updated_at"] = datetime.now(tz=UTC)
        self.repository.update_user(identity.user_id, changes)
        if "email" in changes:
            self.session_service.update_email(identity.token, patch.email or "")
