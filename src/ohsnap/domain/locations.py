"""Domain models for photography locations."""

from dataclasses import dataclass, fields
from datetime import datetime
from enum import StrEnum
from uuid import UUID


class TimeOfDay(StrEnum):
    """Best time of day to shoot a location."""

    SUNRISE = "sunrise"
    GOLDEN_HOUR = "golden hour"
    MIDDAY = "midday"
    BLUE_HOUR = "blue hour"
    NIGHT = "night"


class Season(StrEnum):
    """Season in which a location is worth visiting."""

    SPRING = "spring"
    SUMMER = "summer"
    FALL = "fall"
    WINTER = "winter"


class Difficulty(StrEnum):
    """How hard a location is to shoot."""

    EASY = "easy"
    MODERATE = "moderate"
    CHALLENGING = "challenging"


class Accessibility(StrEnum):
    """How easy a location is to reach."""

    VERY_ACCESSIBLE = "very accessible"
    MODERATE = "moderate"
    DIFFICULT = "difficult to access"


class PhotographyStyle(StrEnum):
    """Photography style a location suits."""

    LANDSCAPE = "landscape"
    PORTRAIT = "portrait"
    MACRO = "macro"
    WILDLIFE = "wildlife"
    ARCHITECTURE = "architecture"
    STREET = "street"
    AERIAL = "aerial"
    NATURE = "nature"


@dataclass(frozen=True)
class Coordinates:
    """GPS position in decimal degrees."""

    latitude: float
    longitude: float


@dataclass(frozen=True)
class LocationRecord:
    """Represents a location stored in the database."""

    id: UUID
    name: str
    description: str
    city: str
    coordinates: Coordinates
    best_time_of_day: list[TimeOfDay]
    seasons: list[Season]
    difficulty: Difficulty
    accessibility: Accessibility
    photography_styles: list[PhotographyStyle]
    sample_photo_url: str
    created_by: UUID
    created_at: datetime
    updated_at: datetime
    rating: float = 0
    rating_count: int = 0
    shot_count: int = 0


@dataclass(frozen=True)
class LocationFilters:
    """Conjunctive filters for location search."""

    city: str | None = None
    search: str | None = None
    style: str | None = None
    time_of_day: str | None = None
    season: str | None = None
    difficulty: str | None = None
    accessibility: str | None = None


@dataclass(frozen=True)
class LocationPatch:
    """Optional location changes; unset fields are left untouched."""

    name: str | None = None
    description: str | None = None
    city: str | None = None
    coordinates: Coordinates | dict[str, object] | None = None
    best_time_of_day: list[TimeOfDay] | None = None
    seasons: list[Season] | None = None
    difficulty: Difficulty | None = None
    accessibility: Accessibility | None = None
    photography_styles: list[PhotographyStyle] | None = None
    sample_photo_url: str | None = None

    def changes(self) -> dict[str, object]:
        """Return the fields that should be written."""
        return {
            item.name: getattr(self, item.name)
            for item in fields(self)
            if getattr(self, item.name) is not None
        }


@dataclass(frozen=True)
class LocationPage:
    """One page of location search results."""

    items: list[LocationRecord]
    total: int
    page: int
    limit: int
    pages: int
