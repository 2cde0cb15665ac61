"""Domain models for photographer statistics."""

from dataclasses import dataclass, field
from uuid import UUID


@dataclass(frozen=True)
class LocationCount:
    """Number of shots a photographer logged at one location."""

    location_id: UUID
    count: int


@dataclass(frozen=True)
class PhotographerStats:
    """Aggregates over a photographer's shots."""

    total_shots: int = 0
    average_rating: float = 0
    favorite_camera: str | None = None
    favorite_lens: str | None = None
    top_locations: list[LocationCount] = field(default_factory=list)
