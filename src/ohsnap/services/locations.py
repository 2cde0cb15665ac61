"""Location directory business logic."""

import logging
import math
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Protocol
from uuid import UUID

from ohsnap.domain.locations import (
    Accessibility,
    Coordinates,
    Difficulty,
    LocationFilters,
    LocationPage,
    LocationPatch,
    LocationRecord,
)
from ohsnap.errors import ForbiddenError, NotFoundError, ValidationError
from ohsnap.services.clock import next_timestamp

_logger = logging.getLogger(__name__)

MAX_LATITUDE = 90
MAX_LONGITUDE = 180


class LocationRepository(Protocol):
    """Persistence interface for locations."""

    def create_location(self, fields: dict[str, object]) -> LocationRecord:
        """Create a location and return it."""

    def get_location(self, location_id: UUID) -> LocationRecord | None:
        """Return a location by id, if present."""

    def list_locations(
        self, filters: LocationFilters, offset: int, limit: int
    ) -> tuple[list[LocationRecord], int]:
        """Return one window of matching locations and the total match count."""

    def update_location(
        self, location_id: UUID, changes: dict[str, object]
    ) -> LocationRecord | None:
        """Apply changes and return the updated location when the store provides it."""

    def delete_location(self, location_id: UUID) -> None:
        """Remove a location."""


@dataclass
class LocationService:
    """Application service for location operations."""

    repository: LocationRepository
    default_page_size: int = 20
    max_page_size: int = 100

    def create(self, creator_id: UUID, payload: dict[str, object]) -> LocationRecord:
        """Validate and store a new location owned by the creator."""
        name = payload.get("name")
        city = payload.get("city")
        raw_coordinates = payload.get("coordinates")
        if not name or not city or raw_coordinates is None:
            raise ValidationError("Name, city, and coordinates required")
        coordinates = parse_coordinates(raw_coordinates)

        now = datetime.now(tz=UTC)
        location = self.repository.create_location(
            {
                "name": name,
                "description": payload.get("description") or "",
                "city": city,
                "coordinates": coordinates,
                "best_time_of_day": payload.get("best_time_of_day") or [],
                "seasons": payload.get("seasons") or [],
                "difficulty": payload.get("difficulty") or Difficulty.MODERATE,
                "accessibility": payload.get("accessibility")
                or Accessibility.MODERATE,
                "photography_styles": payload.get("photography_styles") or [],
                "sample_photo_url": payload.get("sample_photo_url") or "",
                "created_by": creator_id,
                "created_at": now,
                "updated_at": now,
                "rating": 0,
                "rating_count": 0,
                "shot_count": 0,
            }
        )
        _logger.info(
            "Location created",
            extra={"location_id": str(location.id), "user_id": str(creator_id)},
        )
        return location

    def search(
        self, filters: LocationFilters, page: int = 1, limit: int | None = None
    ) -> LocationPage:
        """Return one page of locations matching every provided filter."""
        if page < 1:
            raise ValidationError("Page must be a positive integer")
        resolved_limit = self.default_page_size if limit is None else limit
        if resolved_limit < 1:
            raise ValidationError("Limit must be a positive integer")
        resolved_limit = min(resolved_limit, self.max_page_size)

        items, total = self.repository.list_locations(
            filters, offset=(page - 1) * resolved_limit, limit=resolved_limit
        )
        return LocationPage(
            items=items[:resolved_limit],
            total=total,
            page=page,
            limit=resolved_limit,
            pages=math.ceil(total / resolved_limit),
        )

    def get(self, location_id: str) -> LocationRecord:
        """Return a location or raise when the id is malformed or unknown."""
        location = self.repository.get_location(_parse_location_id(location_id))
        if location is None:
            raise NotFoundError("Location not found")
        return location

    def update(
        self, location_id: str, patch: LocationPatch, caller_id: UUID
    ) -> LocationRecord:
        """Merge the provided fields into a location owned by the caller."""
        location = self.get(location_id)
        if location.created_by != caller_id:
            raise ForbiddenError("Not authorized to update this location")

        changes = patch.changes()
        if "coordinates" in changes:
            changes["coordinates"] = parse_coordinates(changes["coordinates"])
        changes["updated_at"] = next_timestamp(location.updated_at)

        updated = self.repository.update_location(location.id, changes)
        if updated is None:
            updated = self.repository.get_location(location.id)
        if updated is None:
            raise NotFoundError("Location not found")
        return updated

    def delete(self, location_id: str, caller_id: UUID) -> None:
        """Delete a location owned by the caller."""
        location = self.get(location_id)
        if location.created_by != caller_id:
            raise ForbiddenError("Not authorized to delete this location")
        self.repository.delete_location(location.id)
        _logger.info(
            "Location deleted",
            extra={"location_id": str(location.id), "user_id": str(caller_id)},
        )


def parse_coordinates(raw: object) -> Coordinates:
    """Parse latitude/longitude from numbers or numeric strings."""
    if isinstance(raw, Coordinates):
        latitude, longitude = raw.latitude, raw.longitude
    elif isinstance(raw, dict):
        latitude, longitude = raw.get("latitude"), raw.get("longitude")
    else:
        raise ValidationError("Invalid coordinates format")

    parsed_latitude = _to_float(latitude)
    parsed_longitude = _to_float(longitude)
    if parsed_latitude is None or parsed_longitude is None:
        raise ValidationError("Invalid coordinates format")
    if abs(parsed_latitude) > MAX_LATITUDE or abs(parsed_longitude) > MAX_LONGITUDE:
        raise ValidationError("Coordinates out of range")
    return Coordinates(latitude=parsed_latitude, longitude=parsed_longitude)


def _to_float(value: object) -> float | None:
    if isinstance(value, bool) or value is None:
        return None
    if isinstance(value, int | float):
        number = float(value)
    elif isinstance(value, str):
        try:
            number = float(value.strip())
        except ValueError:
            return None
    else:
        return None
    return number if math.isfinite(number) else None


def _parse_location_id(raw: str) -> UUID:
    try:
        return UUID(raw)
    except ValueError:
        raise ValidationError("Invalid location ID") from None
