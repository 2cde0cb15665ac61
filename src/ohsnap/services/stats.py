"""Photographer statistics computed from logged shots."""

import math
from collections import Counter
from collections.abc import Iterable
from dataclasses import dataclass
from uuid import UUID

from ohsnap.domain.shots import ShotFilters, ShotRecord
from ohsnap.domain.stats import LocationCount, PhotographerStats
from ohsnap.services.shots import ShotRepository

TOP_LOCATIONS = 5


@dataclass
class StatsService:
    """Service for computing per-photographer aggregates."""

    repository: ShotRepository

    def get_photographer_stats(self, user_id: UUID) -> PhotographerStats:
        """Return aggregates over every shot the user logged.

        Private shots are included in the aggregates for any caller.
        """
        shots = self.repository.list_shots(
            ShotFilters(user_id=user_id, include_private=True)
        )
        return aggregate_shots(shots)


def aggregate_shots(shots: list[ShotRecord]) -> PhotographerStats:
    """Aggregate counts, average rating and favourites over shots."""
    if not shots:
        return PhotographerStats()

    total = len(shots)
    average = sum(shot.rating or 0 for shot in shots) / total
    location_counts = Counter(shot.location_id for shot in shots)
    return PhotographerStats(
        total_shots=total,
        average_rating=_round_half_up(average),
        favorite_camera=_most_common(shot.camera_model for shot in shots),
        favorite_lens=_most_common(shot.lens for shot in shots),
        top_locations=[
            LocationCount(location_id=location_id, count=count)
            for location_id, count in location_counts.most_common(TOP_LOCATIONS)
        ],
    )


def _round_half_up(value: float) -> float:
    # Halves round up: 2.25 becomes 2.3.
    return math.floor(value * 10 + 0.5) / 10


def _most_common(values: Iterable[str]) -> str | None:
    # Counter keeps first-seen order, and most_common sorts stably, so ties
    # go to the value encountered first.
    counts = Counter(value for value in values if value)
    if not counts:
        return None
    return counts.most_common(1)[0][0]
