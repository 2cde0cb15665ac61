"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from datetime import timedelta

from supabase import create_client

from ohsnap.adapters.supabase_location_repository import SupabaseLocationRepository
from ohsnap.adapters.supabase_session_repository import SupabaseSessionRepository
from ohsnap.adapters.supabase_shot_repository import SupabaseShotRepository
from ohsnap.adapters.supabase_user_repository import SupabaseUserRepository
from ohsnap.config import Settings
from ohsnap.services.auth import AuthService
from ohsnap.services.locations import LocationService
from ohsnap.services.sessions import SessionService
from ohsnap.services.shots import ShotService
from ohsnap.services.stats import StatsService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    session_service: SessionService
    auth_service: AuthService
    location_service: LocationService
    shot_service: ShotService
    stats_service: StatsService
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    shot_repository = SupabaseShotRepository(supabase_client)
    session_service = SessionService(
        SupabaseSessionRepository(supabase_client),
        ttl=timedelta(days=resolved_settings.session_ttl_days),
    )
    auth_service = AuthService(
        repository=SupabaseUserRepository(supabase_client),
        session_service=session_service,
        bcrypt_rounds=resolved_settings.bcrypt_rounds,
    )
    location_service = LocationService(
        SupabaseLocationRepository(supabase_client),
        default_page_size=resolved_settings.default_page_size,
        max_page_size=resolved_settings.max_page_size,
    )

    async def close_resources() -> None:
        supabase_client.postgrest.session.close()

    return AppContainer(
        settings=resolved_settings,
        session_service=session_service,
        auth_service=auth_service,
        location_service=location_service,
        shot_service=ShotService(shot_repository),
        stats_service=StatsService(shot_repository),
        close_resources=close_resources,
    )
