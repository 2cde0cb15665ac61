"""Supabase-backed session repository."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from supabase import Client

from ohsnap.domain.sessions import SessionRecord
from ohsnap.services.sessions import SessionRepository


@dataclass
class SupabaseSessionRepository(SessionRepository):
    """Supabase implementation for login sessions."""

    client: Client

    def create_session(  # noqa: PLR0913
        self,
        token: str,
        user_id: UUID,
        username: str,
        email: str,
        expires_at: datetime,
    ) -> SessionRecord:
        """Create a session row and return it."""
        response = (
            self.client.table("sessions")
            .insert(
                {
                    "token": token,
                    "user_id": str(user_id),
                    "username": username,
                    "email": email,
                    "expires_at": expires_at.isoformat(),
                }
            )
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to create session")
        return _parse_session(response.data[0])

    def get_session(self, token: str) -> SessionRecord | None:
        """Return a session by token, if present."""
        response = (
            self.client.table("sessions")
            .select("token, user_id, username, email, expires_at")
            .eq("token", token)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_session(response.data[0])

    def touch_session(self, token: str, expires_at: datetime) -> None:
        """Push the session expiry forward."""
        self.client.table("sessions").update(
            {"expires_at": expires_at.isoformat()}
        ).eq("token", token).execute()

    def update_email(self, token: str, email: str) -> None:
        """Mirror a changed email into the session."""
        self.client.table("sessions").update({"email": email}).eq(
            "token", token
        ).execute()

    def delete_session(self, token: str) -> None:
        """Remove a session row."""
        self.client.table("sessions").delete().eq("token", token).execute()


def _parse_session(row: dict[str, object]) -> SessionRecord:
    return SessionRecord(
        token=str(row["token"]),
        user_id=UUID(str(row["user_id"])),
        username=str(row["username"]),
        email=str(row.get("email") or ""),
        expires_at=datetime.fromisoformat(str(row["expires_at"])),
    )
