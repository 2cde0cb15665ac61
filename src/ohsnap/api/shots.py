"""Shot logging endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID  # noqa: TC003

from fastapi import APIRouter, Depends, Query, Request, status

from ohsnap.api.dependencies import get_container, optional_identity, require_identity
from ohsnap.api.schemas import ShotCreateRequest, ShotUpdateRequest
from ohsnap.api.serializers import serialize_shot, serialize_stats
from ohsnap.domain.models import Identity
from ohsnap.domain.shots import ShotFilters, ShotPatch

if TYPE_CHECKING:
    from ohsnap.containers import AppContainer

router = APIRouter(prefix="/api/shots", tags=["shots"])


@router.post("", status_code=status.HTTP_201_CREATED)
def create_shot(
    payload: ShotCreateRequest,
    request: Request,
    identity: Identity = Depends(require_identity),
) -> dict[str, str]:
    """Log a shot for the caller."""
    container: AppContainer = get_container(request)
    shot = container.shot_service.create(
        identity, payload.model_dump(exclude_none=True)
    )
    return {"message": "Shot logged successfully", "shotId": str(shot.id)}


@router.get("")
def list_shots(  # noqa: PLR0913
    request: Request,
    user_id: UUID | None = Query(default=None, alias="userId"),
    location_id: UUID | None = Query(default=None, alias="locationId"),
    camera_model: str | None = Query(default=None, alias="cameraModel"),
    lens: str | None = None,
    identity: Identity | None = Depends(optional_identity),
) -> list[dict[str, object]]:
    """List public shots, plus the caller's own private ones when filtered to them."""
    container: AppContainer = get_container(request)
    filters = ShotFilters(
        user_id=user_id,
        location_id=location_id,
        camera_model=camera_model or None,
        lens=lens or None,
    )
    shots = container.shot_service.list_shots(filters, identity)
    return [serialize_shot(shot) for shot in shots]


@router.get("/stats/{user_id}")
def photographer_stats(user_id: UUID, request: Request) -> dict[str, object]:
    """Return aggregates over a photographer's shots."""
    container: AppContainer = get_container(request)
    return serialize_stats(container.stats_service.get_photographer_stats(user_id))


@router.get("/by-location/{location_id}")
def shots_by_location(location_id: UUID, request: Request) -> list[dict[str, object]]:
    """Return public shots taken at a location, best rated first."""
    container: AppContainer = get_container(request)
    shots = container.shot_service.list_by_location(location_id)
    return [serialize_shot(shot) for shot in shots]


@router.get("/{shot_id}")
def get_shot(
    shot_id: str,
    request: Request,
    identity: Identity | None = Depends(optional_identity),
) -> dict[str, object]:
    """Return a shot, hiding private shots from everyone but the owner."""
    container: AppContainer = get_container(request)
    return serialize_shot(container.shot_service.get(shot_id, identity))


@router.put("/{shot_id}")
def update_shot(
    shot_id: str,
    payload: ShotUpdateRequest,
    request: Request,
    identity: Identity = Depends(require_identity),
) -> dict[str, str]:
    """Update a shot owned by the caller."""
    container: AppContainer = get_container(request)
    patch = ShotPatch(**payload.model_dump(exclude_none=True))
    container.shot_service.update(shot_id, patch, identity.user_id)
    return {"message": "Shot updated successfully"}


@router.delete("/{shot_id}")
def delete_shot(
    shot_id: str,
    request: Request,
    identity: Identity = Depends(require_identity),
) -> dict[str, str]:
    """Delete a shot owned by the caller."""
    container: AppContainer = get_container(request)
    container.shot_service.delete(shot_id, identity.user_id)
    return {"message": "Shot deleted successfully"}
