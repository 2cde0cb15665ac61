"""Supabase implementation for shot logs."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from supabase import Client

from ohsnap.adapters.postgrest_filters import contains_pattern
from ohsnap.domain.shots import ShotFilters, ShotRecord
from ohsnap.services.shots import ShotRepository


@dataclass
class SupabaseShotRepository(ShotRepository):
    """Supabase-backed repository for shots."""

    client: Client

    def create_shot(self, fields: dict[str, object]) -> ShotRecord:
        """Create a shot row and return it."""
        response = self.client.table("shots").insert(_to_row(fields)).execute()
        if not response.data:
            raise RuntimeError("Failed to create shot")
        return _parse_shot(response.data[0])

    def get_shot(self, shot_id: UUID) -> ShotRecord | None:
        """Return a shot by id, if present."""
        response = (
            self.client.table("shots")
            .select("*")
            .eq("id", str(shot_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_shot(response.data[0])

    def list_shots(self, filters: ShotFilters) -> list[ShotRecord]:
        """Return matching shots, newest first."""
        query = self.client.table("shots").select("*")
        if not filters.include_private:
            query = query.eq("is_private", False)
        if filters.user_id:
            query = query.eq("user_id", str(filters.user_id))
        if filters.location_id:
            query = query.eq("location_id", str(filters.location_id))
        if filters.camera_model:
            pattern = contains_pattern(filters.camera_model)
            query = query.ilike("camera_model", pattern)
        if filters.lens:
            query = query.ilike("lens", contains_pattern(filters.lens))
        response = query.order("date", desc=True).execute()
        return [_parse_shot(row) for row in response.data or []]

    def list_location_shots(self, location_id: UUID) -> list[ShotRecord]:
        """Return public shots for a location, best rated first then newest."""
        response = (
            self.client.table("shots")
            .select("*")
            .eq("location_id", str(location_id))
            .eq("is_private", False)
            .order("rating", desc=True)
            .order("date", desc=True)
            .execute()
        )
        return [_parse_shot(row) for row in response.data or []]

    def update_shot(self, shot_id: UUID, changes: dict[str, object]) -> None:
        """Apply field changes to a shot row."""
        self.client.table("shots").update(_to_row(changes)).eq(
            "id", str(shot_id)
        ).execute()

    def delete_shot(self, shot_id: UUID) -> None:
        """Remove a shot row."""
        self.client.table("shots").delete().eq("id", str(shot_id)).execute()


def _to_row(fields: dict[str, object]) -> dict[str, object]:
    row: dict[str, object] = {}
    for key, value in fields.items():
        if isinstance(value, datetime):
            row[key] = value.isoformat()
        elif isinstance(value, UUID):
            row[key] = str(value)
        else:
            row[key] = value
    return row


def _parse_shot(row: dict[str, object]) -> ShotRecord:
    """Parse a shot row into a domain model."""
    aperture = row.get("aperture")
    iso = row.get("iso")
    return ShotRecord(
        id=UUID(str(row["id"])),
        location_id=UUID(str(row["location_id"])),
        user_id=UUID(str(row["user_id"])),
        username=str(row.get("username") or ""),
        date=datetime.fromisoformat(str(row["date"])),
        weather=str(row.get("weather") or ""),
        description=str(row.get("description") or ""),
        camera_model=str(row.get("camera_model") or ""),
        lens=str(row.get("lens") or ""),
        aperture=float(aperture) if aperture is not None else None,
        shutter_speed=str(row.get("shutter_speed") or ""),
        iso=int(iso) if iso is not None else None,
        photos=list(row.get("photos") or []),
        rating=int(row.get("rating") or 0),
        is_private=bool(row.get("is_private")),
        created_at=datetime.fromisoformat(str(row["created_at"])),
        updated_at=datetime.fromisoformat(str(row["updated_at"])),
    )
