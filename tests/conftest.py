"""Shared test fixtures."""

from dataclasses import dataclass, field

import pytest

from nutrition_dashboard.config import Settings
from nutrition_dashboard.containers import AppContainer, build_container
from nutrition_dashboard.domain.meals import Meal, MealMacros, MealMicros
from nutrition_dashboard.services.calendar import FixedCalendar
from nutrition_dashboard.services.daily_state import DailyStateService
from nutrition_dashboard.services.profile import ProfileService
from nutrition_dashboard.services.storage import KeyValueStore

TODAY = "2026-10-18"


@dataclass
class RecordingKeyValueStore(KeyValueStore):
    """In-memory store that records every write."""

    entries: dict[str, str] = field(default_factory=dict)
    writes: list[tuple[str, str]] = field(default_factory=list)

    def read(self, key: str) -> str | None:
        return self.entries.get(key)

    def write(self, key: str, value: str) -> None:
        self.writes.append((key, value))
        self.entries[key] = value


def make_meal(  # noqa: PLR0913
    name: str = "Oats",
    kcal: float | None = 350,
    protein_g: float | None = 12,
    carbs_g: float | None = 60,
    fat_g: float | None = 6,
    fiber_g: float | None = 8,
    sodium_mg: float | None = 150,
    iron_mg: float | None = 3,
    vitamin_d_mcg: float | None = None,
) -> Meal:
    """Build a meal with sensible defaults."""
    return Meal(
        time="08:15",
        name=name,
        description="with berries",
        macros=MealMacros(
            kcal=kcal,
            protein_g=protein_g,
            carbs_g=carbs_g,
            fat_g=fat_g,
            fiber_g=fiber_g,
            sodium_mg=sodium_mg,
        ),
        micros=MealMicros(iron_mg=iron_mg, vitamin_d_mcg=vitamin_d_mcg),
    )


@pytest.fixture
def settings() -> Settings:
    return Settings(storage_backend="memory", timezone="UTC")


@pytest.fixture
def store() -> RecordingKeyValueStore:
    return RecordingKeyValueStore()


@pytest.fixture
def calendar() -> FixedCalendar:
    return FixedCalendar(TODAY)


@pytest.fixture
def daily_state_service(
    store: RecordingKeyValueStore, calendar: FixedCalendar
) -> DailyStateService:
    return DailyStateService(store=store, calendar=calendar)


@pytest.fixture
def profile_service(store: RecordingKeyValueStore) -> ProfileService:
    return ProfileService(store=store)


@pytest.fixture
def container(
    settings: Settings, store: RecordingKeyValueStore, calendar: FixedCalendar
) -> AppContainer:
    return build_container(settings, store=store, calendar=calendar)
