"""Location directory endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, Depends, Query, Request, status

from ohsnap.api.dependencies import get_container, require_identity
from ohsnap.api.schemas import LocationCreateRequest, LocationUpdateRequest
from ohsnap.api.serializers import serialize_location, serialize_location_page
from ohsnap.domain.locations import LocationFilters, LocationPatch
from ohsnap.domain.models import Identity

if TYPE_CHECKING:
    from ohsnap.containers import AppContainer

router = APIRouter(prefix="/api/locations", tags=["locations"])


@router.post("", status_code=status.HTTP_201_CREATED)
def create_location(
    payload: LocationCreateRequest,
    request: Request,
    identity: Identity = Depends(require_identity),
) -> dict[str, object]:
    """Add a location owned by the caller."""
    container: AppContainer = get_container(request)
    location = container.location_service.create(
        identity.user_id, payload.model_dump(exclude_none=True)
    )
    return {
        "message": "Location created successfully",
        "location": serialize_location(location),
    }


@router.get("")
def list_locations(  # noqa: PLR0913
    request: Request,
    city: str | None = None,
    search: str | None = None,
    style: str | None = None,
    time_of_day: str | None = Query(default=None, alias="timeOfDay"),
    season: str | None = None,
    difficulty: str | None = None,
    accessibility: str | None = None,
    page: int = 1,
    limit: int | None = None,
) -> dict[str, object]:
    """Search locations with optional filters and pagination."""
    container: AppContainer = get_container(request)
    filters = LocationFilters(
        city=city or None,
        search=search or None,
        style=style or None,
        time_of_day=time_of_day or None,
        season=season or None,
        difficulty=difficulty or None,
        accessibility=accessibility or None,
    )
    result = container.location_service.search(filters, page=page, limit=limit)
    return serialize_location_page(result)


@router.get("/{location_id}")
def get_location(location_id: str, request: Request) -> dict[str, object]:
    """Return a single location."""
    container: AppContainer = get_container(request)
    return serialize_location(container.location_service.get(location_id))


@router.put("/{location_id}")
def update_location(
    location_id: str,
    payload: LocationUpdateRequest,
    request: Request,
    identity: Identity = Depends(require_identity),
) -> dict[str, object]:
    """Update a location created by the caller."""
    container: AppContainer = get_container(request)
    patch = LocationPatch(**payload.model_dump(exclude_none=True))
    location = container.location_service.update(
        location_id, patch, identity.user_id
    )
    return {
        "message": "Location updated successfully",
        "location": serialize_location(location),
    }


@router.delete("/{location_id}")
def delete_location(
    location_id: str,
    request: Request,
    identity: Identity = Depends(require_identity),
) -> dict[str, str]:
    """Delete a location created by the caller."""
    container: AppContainer = get_container(request)
    container.location_service.delete(location_id, identity.user_id)
    return {"message": "Location deleted successfully"}
