"""Supabase implementation for the location directory."""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from uuid import UUID

from supabase import Client

from ohsnap.adapters.postgrest_filters import contains_pattern, quoted
from ohsnap.domain.locations import (
    Accessibility,
    Coordinates,
    Difficulty,
    LocationFilters,
    LocationRecord,
    PhotographyStyle,
    Season,
    TimeOfDay,
)
from ohsnap.services.locations import LocationRepository


@dataclass
class SupabaseLocationRepository(LocationRepository):
    """Supabase-backed repository for locations."""

    client: Client

    def create_location(self, fields: dict[str, object]) -> LocationRecord:
        """Create a location row and return it."""
        response = self.client.table("locations").insert(_to_row(fields)).execute()
        if not response.data:
            raise RuntimeError("Failed to create location")
        return _parse_location(response.data[0])

    def get_location(self, location_id: UUID) -> LocationRecord | None:
        """Return a location by id, if present."""
        response = (
            self.client.table("locations")
            .select("*")
            .eq("id", str(location_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_location(response.data[0])

    def list_locations(
        self, filters: LocationFilters, offset: int, limit: int
    ) -> tuple[list[LocationRecord], int]:
        """Return one window of matching locations and the total match count."""
        query = self.client.table("locations").select("*", count="exact")
        if filters.city:
            query = query.ilike("city", contains_pattern(filters.city))
        if filters.search:
            pattern = quoted(contains_pattern(filters.search))
            query = query.or_(f"name.ilike.{pattern},description.ilike.{pattern}")
        if filters.style:
            query = query.contains("photography_styles", [filters.style])
        if filters.time_of_day:
            query = query.contains("best_time_of_day", [filters.time_of_day])
        if filters.season:
            query = query.contains("seasons", [filters.season])
        if filters.difficulty:
            query = query.eq("difficulty", filters.difficulty)
        if filters.accessibility:
            query = query.eq("accessibility", filters.accessibility)

        response = (
            query.order("created_at", desc=False)
            .range(offset, offset + limit - 1)
            .execute()
        )
        locations = [_parse_location(row) for row in response.data or []]
        return locations, response.count or 0

    def update_location(
        self, location_id: UUID, changes: dict[str, object]
    ) -> LocationRecord | None:
        """Apply changes and return the updated row, if the store returned one."""
        response = (
            self.client.table("locations")
            .update(_to_row(changes))
            .eq("id", str(location_id))
            .execute()
        )
        if not response.data:
            return None
        return _parse_location(response.data[0])

    def delete_location(self, location_id: UUID) -> None:
        """Remove a location row."""
        self.client.table("locations").delete().eq("id", str(location_id)).execute()


def _to_row(fields: dict[str, object]) -> dict[str, object]:
    row: dict[str, object] = {}
    for key, value in fields.items():
        if isinstance(value, Coordinates):
            row["latitude"] = value.latitude
            row["longitude"] = value.longitude
        elif isinstance(value, datetime):
            row[key] = value.isoformat()
        elif isinstance(value, UUID):
            row[key] = str(value)
        elif isinstance(value, Enum):
            row[key] = value.value
        elif isinstance(value, list):
            row[key] = [
                item.value if isinstance(item, Enum) else item for item in value
            ]
        else:
            row[key] = value
    return row


def _parse_location(row: dict[str, object]) -> LocationRecord:
    """Parse a location row into a domain model."""
    return LocationRecord(
        id=UUID(str(row["id"])),
        name=str(row.get("name", "")),
        description=str(row.get("description") or ""),
        city=str(row.get("city", "")),
        coordinates=Coordinates(
            latitude=float(row["latitude"]),
            longitude=float(row["longitude"]),
        ),
        best_time_of_day=[
            TimeOfDay(item) for item in row.get("best_time_of_day") or []
        ],
        seasons=[Season(item) for item in row.get("seasons") or []],
        difficulty=Difficulty(row.get("difficulty") or Difficulty.MODERATE),
        accessibility=Accessibility(
            row.get("accessibility") or Accessibility.MODERATE
        ),
        photography_styles=[
            PhotographyStyle(item) for item in row.get("photography_styles") or []
        ],
        sample_photo_url=str(row.get("sample_photo_url") or ""),
        created_by=UUID(str(row["created_by"])),
        created_at=datetime.fromisoformat(str(row["created_at"])),
        updated_at=datetime.fromisoformat(str(row["updated_at"])),
        rating=float(row.get("rating") or 0),
        rating_count=int(row.get("rating_count") or 0),
        shot_count=int(row.get("shot_count") or 0),
    )
