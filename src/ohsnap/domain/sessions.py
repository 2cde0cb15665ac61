"""Domain models for login sessions."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID


@dataclass(frozen=True)
class SessionRecord:
    """Represents a persisted server-side session."""

    token: str
    user_id: UUID
    username: str
    email: str
    expires_at: datetime
