"""Domain models for users and authenticated callers."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID


@dataclass(frozen=True)
class UserRecord:
    """Represents a user stored in the database."""

    id: UUID
    username: str
    email: str
    password_hash: str
    bio: str
    created_at: datetime
    updated_at: datetime | None = None


@dataclass(frozen=True)
class Identity:
    """The authenticated caller of a request, taken from its session."""

    user_id: UUID
    username: str
    email: str
    token: str


@dataclass(frozen=True)
class ProfilePatch:
    """Optional profile changes; unset fields are left untouched."""

    email: str | None = None
    bio: str | None = None

    def changes(self) -> dict[str, object]:
        """Return the fields that should be written."""
        changes: dict[str, object] = {}
        if self.email:
            changes["email"] = self.email
        if self.bio is not None:
            changes["bio"] = self.bio
        return changes
