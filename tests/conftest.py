"""Shared test fixtures."""

from dataclasses import dataclass, field, replace
from datetime import datetime, timedelta
from uuid import UUID, uuid4

import pytest

from ohsnap.config import Settings
from ohsnap.containers import AppContainer
from ohsnap.domain.locations import LocationFilters, LocationRecord
from ohsnap.domain.models import UserRecord
from ohsnap.domain.sessions import SessionRecord
from ohsnap.domain.shots import ShotFilters, ShotRecord
from ohsnap.services.auth import AuthService, UserRepository
from ohsnap.services.locations import LocationRepository, LocationService
from ohsnap.services.sessions import SessionRepository, SessionService
from ohsnap.services.shots import ShotRepository, ShotService
from ohsnap.services.stats import StatsService


@dataclass
class InMemoryUserRepository(UserRepository):
    """In-memory user repository for tests."""

    users: dict[UUID, UserRecord] = field(default_factory=dict)

    def get_by_username(self, username: str) -> UserRecord | None:
        for user in self.users.values():
            if user.username == username:
                return user
        return None

    def create_user(
        self, username: str, email: str, password_hash: str, created_at: datetime
    ) -> UserRecord:
        user = UserRecord(
            id=uuid4(),
            username=username,
            email=email,
            password_hash=password_hash,
            bio="",
            created_at=created_at,
        )
        self.users[user.id] = user
        return user

    def update_user(self, user_id: UUID, changes: dict[str, object]) -> None:
        self.users[user_id] = replace(self.users[user_id], **changes)


@dataclass
class InMemorySessionRepository(SessionRepository):
    """In-memory session repository for tests."""

    sessions: dict[str, SessionRecord] = field(default_factory=dict)
    fail_on_delete: bool = False

    def create_session(  # noqa: PLR0913
        self,
        token: str,
        user_id: UUID,
        username: str,
        email: str,
        expires_at: datetime,
    ) -> SessionRecord:
        session = SessionRecord(
            token=token,
            user_id=user_id,
            username=username,
            email=email,
            expires_at=expires_at,
        )
        self.sessions[token] = session
        return session

    def get_session(self, token: str) -> SessionRecord | None:
        return self.sessions.get(token)

    def touch_session(self, token: str, expires_at: datetime) -> None:
        self.sessions[token] = replace(self.sessions[token], expires_at=expires_at)

    def update_email(self, token: str, email: str) -> None:
        if token in self.sessions:
            self.sessions[token] = replace(self.sessions[token], email=email)

    def delete_session(self, token: str) -> None:
        if self.fail_on_delete:
            raise RuntimeError("session store unavailable")
        self.sessions.pop(token, None)


@dataclass
class InMemoryLocationRepository(LocationRepository):
    """In-memory location repository for tests."""

    locations: dict[UUID, LocationRecord] = field(default_factory=dict)
    return_updated: bool = True

    def create_location(self, fields: dict[str, object]) -> LocationRecord:
        location = LocationRecord(id=uuid4(), **fields)
        self.locations[location.id] = location
        return location

    def get_location(self, location_id: UUID) -> LocationRecord | None:
        return self.locations.get(location_id)

    def list_locations(
        self, filters: LocationFilters, offset: int, limit: int
    ) -> tuple[list[LocationRecord], int]:
        matches = [
            location
            for location in sorted(
                self.locations.values(), key=lambda item: item.created_at
            )
            if _location_matches(location, filters)
        ]
        return matches[offset : offset + limit], len(matches)

    def update_location(
        self, location_id: UUID, changes: dict[str, object]
    ) -> LocationRecord | None:
        if location_id not in self.locations:
            return None
        updated = replace(self.locations[location_id], **changes)
        self.locations[location_id] = updated
        return updated if self.return_updated else None

    def delete_location(self, location_id: UUID) -> None:
        self.locations.pop(location_id, None)


def _location_matches(location: LocationRecord, filters: LocationFilters) -> bool:
    checks = [
        not filters.city or filters.city.lower() in location.city.lower(),
        not filters.search
        or filters.search.lower() in location.name.lower()
        or filters.search.lower() in location.description.lower(),
        not filters.style or filters.style in location.photography_styles,
        not filters.time_of_day or filters.time_of_day in location.best_time_of_day,
        not filters.season or filters.season in location.seasons,
        not filters.difficulty or filters.difficulty == location.difficulty,
        not filters.accessibility or filters.accessibility == location.accessibility,
    ]
    return all(checks)


@dataclass
class InMemoryShotRepository(ShotRepository):
    """In-memory shot repository for tests."""

    shots: dict[UUID, ShotRecord] = field(default_factory=dict)

    def create_shot(self, fields: dict[str, object]) -> ShotRecord:
        shot = ShotRecord(id=uuid4(), **fields)
        self.shots[shot.id] = shot
        return shot

    def get_shot(self, shot_id: UUID) -> ShotRecord | None:
        return self.shots.get(shot_id)

    def list_shots(self, filters: ShotFilters) -> list[ShotRecord]:
        matches = [
            shot
            for shot in self.shots.values()
            if (filters.include_private or not shot.is_private)
            and (filters.user_id is None or shot.user_id == filters.user_id)
            and (filters.location_id is None or shot.location_id == filters.location_id)
            and (
                not filters.camera_model
                or filters.camera_model.lower() in shot.camera_model.lower()
            )
            and (not filters.lens or filters.lens.lower() in shot.lens.lower())
        ]
        return sorted(matches, key=lambda shot: shot.date, reverse=True)

    def list_location_shots(self, location_id: UUID) -> list[ShotRecord]:
        matches = [
            shot
            for shot in self.shots.values()
            if shot.location_id == location_id and not shot.is_private
        ]
        return sorted(matches, key=lambda shot: (shot.rating, shot.date), reverse=True)

    def update_shot(self, shot_id: UUID, changes: dict[str, object]) -> None:
        self.shots[shot_id] = replace(self.shots[shot_id], **changes)

    def delete_shot(self, shot_id: UUID) -> None:
        self.shots.pop(shot_id, None)


@dataclass
class ResourceTracker:
    """Records whether the container released its resources."""

    closed: bool = False

    async def close(self) -> None:
        self.closed = True


@pytest.fixture
def settings() -> Settings:
    return Settings(
        supabase_url="https://example.supabase.co",
        supabase_service_key="header.payload.signature",
        environment="test",
    )


@pytest.fixture
def user_repository() -> InMemoryUserRepository:
    return InMemoryUserRepository()


@pytest.fixture
def session_repository() -> InMemorySessionRepository:
    return InMemorySessionRepository()


@pytest.fixture
def location_repository() -> InMemoryLocationRepository:
    return InMemoryLocationRepository()


@pytest.fixture
def shot_repository() -> InMemoryShotRepository:
    return InMemoryShotRepository()


@pytest.fixture
def resource_tracker() -> ResourceTracker:
    return ResourceTracker()


@pytest.fixture
def container(  # noqa: PLR0913
    settings: Settings,
    user_repository: InMemoryUserRepository,
    session_repository: InMemorySessionRepository,
    location_repository: InMemoryLocationRepository,
    shot_repository: InMemoryShotRepository,
    resource_tracker: ResourceTracker,
) -> AppContainer:
    session_service = SessionService(
        session_repository, ttl=timedelta(days=settings.session_ttl_days)
    )
    return AppContainer(
        settings=settings,
        session_service=session_service,
        auth_service=AuthService(
            repository=user_repository,
            session_service=session_service,
            bcrypt_rounds=settings.bcrypt_rounds,
        ),
        location_service=LocationService(
            location_repository,
            default_page_size=settings.default_page_size,
            max_page_size=settings.max_page_size,
        ),
        shot_service=ShotService(shot_repository),
        stats_service=StatsService(shot_repository),
        close_resources=resource_tracker.close,
    )
