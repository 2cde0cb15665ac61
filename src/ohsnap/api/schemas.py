"""Pydantic models for request payloads."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from ohsnap.domain.locations import (
    Accessibility,
    Difficulty,
    PhotographyStyle,
    Season,
    TimeOfDay,
)


class CamelModel(BaseModel):
    """Base model accepting camelCase keys from the web client."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class SignupRequest(CamelModel):
    """Signup payload."""

    username: str | None = None
    email: str | None = None
    password: str | None = None


class LoginRequest(CamelModel):
    """Login payload."""

    username: str | None = None
    password: str | None = None


class ProfileRequest(CamelModel):
    """Profile update payload."""

    email: str | None = None
    bio: str | None = None


class CoordinatesIn(CamelModel):
    """Coordinates as sent by the client, numbers or numeric strings."""

    latitude: float | str | None = None
    longitude: float | str | None = None


class LocationCreateRequest(CamelModel):
    """Location creation payload."""

    name: str | None = None
    description: str | None = None
    city: str | None = None
    coordinates: CoordinatesIn | None = None
    best_time_of_day: list[TimeOfDay] | None = None
    seasons: list[Season] | None = None
    difficulty: Difficulty | None = None
    accessibility: Accessibility | None = None
    photography_styles: list[PhotographyStyle] | None = None
    sample_photo_url: str | None = None


class LocationUpdateRequest(LocationCreateRequest):
    """Location update payload; every field is optional."""


class ShotUpdateRequest(CamelModel):
    """Shot update payload; location and date cannot be changed."""

    weather: str | None = None
    description: str | None = None
    camera_model: str | None = None
    lens: str | None = None
    aperture: float | None = None
    shutter_speed: str | None = None
    iso: int | None = None
    photos: list[str] | None = None
    rating: int | None = Field(default=None, ge=0, le=5)
    is_private: bool | None = None


class ShotCreateRequest(ShotUpdateRequest):
    """Shot creation payload."""

    location_id: str | None = None
    date: datetime | None = None
