"""Supabase-backed user repository."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from postgrest import APIError
from supabase import Client

from ohsnap.domain.models import UserRecord
from ohsnap.errors import ConflictError
from ohsnap.services.auth import UserRepository

_UNIQUE_VIOLATION = "23505"
_COLUMNS = "id, username, email, password_hash, bio, created_at, updated_at"


@dataclass
class SupabaseUserRepository(UserRepository):
    """Supabase implementation for user persistence."""

    client: Client

    def get_by_username(self, username: str) -> UserRecord | None:
        """Return the user with this exact username, if present."""
        response = (
            self.client.table("users")
            .select(_COLUMNS)
            .eq("username", username)
            .limit(1)
            .execute()
        )
        if response.data:
            return _parse_user(response.data[0])
        return None

    def create_user(
        self, username: str, email: str, password_hash: str, created_at: datetime
    ) -> UserRecord:
        """Create a new user row and return it."""
        try:
            response = (
                self.client.table("users")
                .insert(
                    {
                        "username": username,
                        "email": email,
                        "password_hash": password_hash,
                        "bio": "",
                        "created_at": created_at.isoformat(),
                    }
                )
                .execute()
            )
        except APIError as exc:
            if exc.code == _UNIQUE_VIOLATION:
                raise ConflictError("Username already exists") from exc
            raise
        if not response.data:
            raise RuntimeError("Failed to create user in Supabase")
        return _parse_user(response.data[0])

    def update_user(self, user_id: UUID, changes: dict[str, object]) -> None:
        """Apply profile changes to a user row."""
        payload = {
            key: value.isoformat() if isinstance(value, datetime) else value
            for key, value in changes.items()
        }
        self.client.table("users").update(payload).eq("id", str(user_id)).execute()


def _parse_user(row: dict[str, object]) -> UserRecord:
    updated_raw = row.get("updated_at")
    return UserRecord(
        id=UUID(str(row["id"])),
        username=str(row["username"]),
        email=str(row.get("email") or ""),
        password_hash=str(row["password_hash"]),
        bio=str(row.get("bio") or ""),
        created_at=datetime.fromisoformat(str(row["created_at"])),
        updated_at=(
            datetime.fromisoformat(updated_raw)
            if isinstance(updated_raw, str) and updated_raw
            else None
        ),
    )
