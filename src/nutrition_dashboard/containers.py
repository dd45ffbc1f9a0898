"""Dependency container wiring for the application."""

from dataclasses import dataclass

from supabase import create_client

from nutrition_dashboard.adapters.supabase_key_value_store import (
    SupabaseKeyValueStore,
)
from nutrition_dashboard.config import Settings
from nutrition_dashboard.services.calendar import Calendar, SystemCalendar
from nutrition_dashboard.services.daily_state import DailyStateService
from nutrition_dashboard.services.dashboard import DashboardService
from nutrition_dashboard.services.profile import ProfileService
from nutrition_dashboard.services.storage import InMemoryKeyValueStore, KeyValueStore


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    store: KeyValueStore
    calendar: Calendar
    daily_state_service: DailyStateService
    profile_service: ProfileService
    dashboard_service: DashboardService


def build_container(
    settings: Settings | None = None,
    store: KeyValueStore | None = None,
    calendar: Calendar | None = None,
) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    resolved_store = store or _build_store(resolved_settings)
    resolved_calendar = calendar or SystemCalendar(resolved_settings.timezone)
    daily_state_service = DailyStateService(
        store=resolved_store,
        calendar=resolved_calendar,
        state_key=resolved_settings.state_key,
    )
    profile_service = ProfileService(
        store=resolved_store,
        preferences_key=resolved_settings.preferences_key,
        wearable_key=resolved_settings.wearable_key,
    )
    return AppContainer(
        settings=resolved_settings,
        store=resolved_store,
        calendar=resolved_calendar,
        daily_state_service=daily_state_service,
        profile_service=profile_service,
        dashboard_service=DashboardService(daily_state_service),
    )


def _build_store(settings: Settings) -> KeyValueStore:
    if settings.storage_backend == "memory":
        return InMemoryKeyValueStore()
    if not settings.supabase_url or not settings.supabase_service_key:
        raise RuntimeError("Supabase storage requires SUPABASE_URL and key")
    client = create_client(settings.supabase_url, settings.supabase_service_key)
    return SupabaseKeyValueStore(client=client, table=settings.supabase_table)
