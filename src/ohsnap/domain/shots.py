"""Domain models for logged photo shoots."""

from dataclasses import dataclass, fields
from datetime import datetime
from uuid import UUID


@dataclass(frozen=True)
class ShotRecord:
    """Represents a shot stored in the database."""

    id: UUID
    location_id: UUID
    user_id: UUID
    username: str
    date: datetime
    weather: str
    description: str
    camera_model: str
    lens: str
    aperture: float | None
    shutter_speed: str
    iso: int | None
    photos: list[str]
    rating: int
    is_private: bool
    created_at: datetime
    updated_at: datetime


@dataclass(frozen=True)
class ShotFilters:
    """Filters for shot listing."""

    user_id: UUID | None = None
    location_id: UUID | None = None
    camera_model: str | None = None
    lens: str | None = None
    include_private: bool = False


@dataclass(frozen=True)
class ShotPatch:
    """Optional shot changes; unset fields are left untouched."""

    weather: str | None = None
    description: str | None = None
    camera_model: str | None = None
    lens: str | None = None
    aperture: float | None = None
    shutter_speed: str | None = None
    iso: int | None = None
    photos: list[str] | None = None
    rating: int | None = None
    is_private: bool | None = None

    def changes(self) -> dict[str, object]:
        """Return the fields that should be written."""
        changes = {
            item.name: getattr(self, item.name)
            for item in fields(self)
            if getattr(self, item.name) is not None
        }
        if not self.camera_model:
            changes.pop("camera_model", None)
        return changes
