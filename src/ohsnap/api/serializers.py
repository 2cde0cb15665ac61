"""JSON views of domain records in the web client's camelCase shape."""

from ohsnap.domain.locations import LocationPage, LocationRecord
from ohsnap.domain.shots import ShotRecord
from ohsnap.domain.stats import PhotographerStats


def serialize_location(location: LocationRecord) -> dict[str, object]:
    """Return the wire representation of a location."""
    return {
        "_id": str(location.id),
        "name": location.name,
        "description": location.description,
        "city": location.city,
        "coordinates": {
            "latitude": location.coordinates.latitude,
            "longitude": location.coordinates.longitude,
        },
        "bestTimeOfDay": [item.value for item in location.best_time_of_day],
        "seasons": [item.value for item in location.seasons],
        "difficulty": location.difficulty.value,
        "accessibility": location.accessibility.value,
        "photographyStyles": [item.value for item in location.photography_styles],
        "samplePhotoUrl": location.sample_photo_url,
        "createdBy": str(location.created_by),
        "createdAt": location.created_at.isoformat(),
        "updatedAt": location.updated_at.isoformat(),
        "rating": location.rating,
        "ratingCount": location.rating_count,
        "shotCount": location.shot_count,
    }


def serialize_location_page(page: LocationPage) -> dict[str, object]:
    """Return a page of locations with its pagination block."""
    return {
        "locations": [serialize_location(item) for item in page.items],
        "pagination": {
            "total": page.total,
            "page": page.page,
            "limit": page.limit,
            "pages": page.pages,
        },
    }


def serialize_shot(shot: ShotRecord) -> dict[str, object]:
    """Return the wire representation of a shot."""
    return {
        "_id": str(shot.id),
        "locationId": str(shot.location_id),
        "userId": str(shot.user_id),
        "username": shot.username,
        "date": shot.date.isoformat(),
        "weather": shot.weather,
        "description": shot.description,
        "cameraModel": shot.camera_model,
        "lens": shot.lens,
        "aperture": shot.aperture,
        "shutterSpeed": shot.shutter_speed,
        "iso": shot.iso,
        "photos": list(shot.photos),
        "rating": shot.rating,
        "isPrivate": shot.is_private,
        "createdAt": shot.created_at.isoformat(),
        "updatedAt": shot.updated_at.isoformat(),
    }


def serialize_stats(stats: PhotographerStats) -> dict[str, object]:
    """Return the wire representation of photographer statistics."""
    return {
        "totalShots": stats.total_shots,
        "averageRating": stats.average_rating,
        "favoriteCamera": stats.favorite_camera,
        "favoriteLens": stats.favorite_lens,
        "topLocations": [
            {"locationId": str(item.location_id), "count": item.count}
            for item in stats.top_locations
        ],
    }
