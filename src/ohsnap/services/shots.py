"""Shot logging business logic."""

import logging
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Protocol
from uuid import UUID

from ohsnap.domain.models import Identity
from ohsnap.domain.shots import ShotFilters, ShotPatch, ShotRecord
from ohsnap.errors import ForbiddenError, NotFoundError, ValidationError
from ohsnap.services.clock import as_utc, next_timestamp

_logger = logging.getLogger(__name__)


class ShotRepository(Protocol):
    """Persistence interface for shots."""

    def create_shot(self, fields: dict[str, object]) -> ShotRecord:
        """Create a shot and return it."""

    def get_shot(self, shot_id: UUID) -> ShotRecord | None:
        """Return a shot by id, if present."""

    def list_shots(self, filters: ShotFilters) -> list[ShotRecord]:
        """Return matching shots, newest first."""

    def list_location_shots(self, location_id: UUID) -> list[ShotRecord]:
        """Return public shots for a location, best rated first then newest."""

    def update_shot(self, shot_id: UUID, changes: dict[str, object]) -> None:
        """Apply field changes to a shot."""

    def delete_shot(self, shot_id: UUID) -> None:
        """Remove a shot."""


@dataclass
class ShotService:
    """Application service for shot operations."""

    repository: ShotRepository

    def create(self, owner: Identity, payload: dict[str, object]) -> ShotRecord:
        """Log a shot for the owner, snapshotting their username."""
        location_id = payload.get("location_id")
        date = payload.get("date")
        camera_model = payload.get("camera_model")
        if not location_id or not date or not camera_model:
            raise ValidationError("Location, date, and camera model are required")
        if not isinstance(date, datetime):
            raise ValidationError("Invalid date")

        now = datetime.now(tz=UTC)
        shot = self.repository.create_shot(
            {
                "location_id": _parse_reference(location_id, "Invalid location ID"),
                "user_id": owner.user_id,
                "username": owner.username,
                "date": as_utc(date),
                "weather": payload.get("weather") or "",
                "description": payload.get("description") or "",
                "camera_model": camera_model,
                "lens": payload.get("lens") or "",
                "aperture": payload.get("aperture") or None,
                "shutter_speed": payload.get("shutter_speed") or "",
                "iso": payload.get("iso") or None,
                "photos": payload.get("photos") or [],
                "rating": payload.get("rating") or 0,
                "is_private": bool(payload.get("is_private")),
                "created_at": now,
                "updated_at": now,
            }
        )
        _logger.info(
            "Shot logged",
            extra={"shot_id": str(shot.id), "user_id": str(owner.user_id)},
        )
        return shot

    def list_shots(
        self, filters: ShotFilters, requester: Identity | None
    ) -> list[ShotRecord]:
        """List shots, revealing private ones only to their owner."""
        include_private = (
            filters.user_id is not None
            and requester is not None
            and requester.user_id == filters.user_id
        )
        return self.repository.list_shots(
            ShotFilters(
                user_id=filters.user_id,
                location_id=filters.location_id,
                camera_model=filters.camera_model,
                lens=filters.lens,
                include_private=include_private,
            )
        )

    def get(self, shot_id: str, requester: Identity | None) -> ShotRecord:
        """Return a shot the requester is allowed to see."""
        shot = self._get_existing(shot_id)
        is_owner = requester is not None and requester.user_id == shot.user_id
        if shot.is_private and not is_owner:
            raise ForbiddenError("This shot is private")
        return shot

    def update(self, shot_id: str, patch: ShotPatch, caller_id: UUID) -> None:
        """Merge the provided fields into a shot owned by the caller."""
        shot = self._get_owned(shot_id, caller_id)
        changes = patch.changes()
        changes["updated_at"] = next_timestamp(shot.updated_at)
        self.repository.update_shot(shot.id, changes)

    def delete(self, shot_id: str, caller_id: UUID) -> None:
        """Delete a shot owned by the caller."""
        shot = self._get_owned(shot_id, caller_id)
        self.repository.delete_shot(shot.id)
        _logger.info(
            "Shot deleted", extra={"shot_id": str(shot.id), "user_id": str(caller_id)}
        )

    def list_by_location(self, location_id: UUID) -> list[ShotRecord]:
        """Return public shots taken at a location."""
        return self.repository.list_location_shots(location_id)

    def _get_existing(self, shot_id: str) -> ShotRecord:
        try:
            parsed_id = UUID(shot_id)
        except ValueError:
            raise NotFoundError("Shot not found") from None
        shot = self.repository.get_shot(parsed_id)
        if shot is None:
            raise NotFoundError("Shot not found")
        return shot

    def _get_owned(self, shot_id: str, caller_id: UUID) -> ShotRecord:
        shot = self._get_existing(shot_id)
        if shot.user_id != caller_id:
            raise ForbiddenError("Unauthorized")
        return shot


def _parse_reference(raw: object, message: str) -> UUID:
    if isinstance(raw, UUID):
        return raw
    try:
        return UUID(str(raw))
    except ValueError:
        raise ValidationError(message) from None
