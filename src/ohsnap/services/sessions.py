"""Server-side login sessions."""

import logging
import secrets
from dataclasses import dataclass
from datetime import UTC, datetime, timedelta
from typing import Protocol
from uuid import UUID

from ohsnap.domain.models import Identity, UserRecord
from ohsnap.domain.sessions import SessionRecord
from ohsnap.errors import ServerError

_logger = logging.getLogger(__name__)


class SessionRepository(Protocol):
    """Persistence interface for login sessions."""

    def create_session(  # noqa: PLR0913
        self,
        token: str,
        user_id: UUID,
        username: str,
        email: str,
        expires_at: datetime,
    ) -> SessionRecord:
        """Create a session row and return it."""

    def get_session(self, token: str) -> SessionRecord | None:
        """Return a session by token, if present."""

    def touch_session(self, token: str, expires_at: datetime) -> None:
        """Push the session expiry forward."""

    def update_email(self, token: str, email: str) -> None:
        """Mirror a changed email into the session."""

    def delete_session(self, token: str) -> None:
        """Remove a session."""


@dataclass
class SessionService:
    """Opens, resolves and destroys sessions with a sliding expiry."""

    repository: SessionRepository
    ttl: timedelta = timedelta(days=7)

    def open(self, user: UserRecord) -> SessionRecord:
        """Create a new session for the user."""
        return self.repository.create_session(
            token=secrets.token_urlsafe(32),
            user_id=user.id,
            username=user.username,
            email=user.email,
            expires_at=datetime.now(tz=UTC) + self.ttl,
        )

    def resolve(self, token: str | None) -> Identity | None:
        """Return the caller identity for a live session token."""
        if not token:
            return None
        session = self.repository.get_session(token)
        if session is None:
            return None
        now = datetime.now(tz=UTC)
        if session.expires_at <= now:
            self.repository.delete_session(token)
            return None
        self.repository.touch_session(token, now + self.ttl)
        return Identity(
            user_id=session.user_id,
            username=session.username,
            email=session.email,
            token=session.token,
        )

    def update_email(self, token: str, email: str) -> None:
        """Mirror a changed email into the live session."""
        self.repository.update_email(token, email)

    def destroy(self, token: str) -> None:
        """Delete a session, surfacing store failures as server errors."""
        try:
            self.repository.delete_session(token)
        except Exception as exc:
            _logger.exception("Failed to destroy session")
            raise ServerError("Could not logout") from exc
