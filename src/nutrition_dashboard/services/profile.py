"""User profile service backed by key-value storage."""

import json
import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import TypeVar

from nutrition_dashboard.domain.profile import (
    GoalSession,
    Preferences,
    WearableReading,
)
from nutrition_dashboard.services.goals import compute_goals
from nutrition_dashboard.services.serialization import (
    preferences_from_dict,
    preferences_to_dict,
    wearable_from_dict,
    wearable_to_dict,
)
from nutrition_dashboard.services.storage import KeyValueStore

_logger = logging.getLogger(__name__)

_T = TypeVar("_T")


@dataclass
class ProfileService:
    """Service for preferences and the latest wearable reading."""

    store: KeyValueStore
    preferences_key: str = "prefs"
    wearable_key: str = "lastWearable"

    def get_preferences(self) -> Preferences:
        """Return stored preferences or defaults."""
        return self._read(self.preferences_key, preferences_from_dict, Preferences())

    def set_preferences(self, preferences: Preferences) -> None:
        """Persist preferences."""
        self.store.write(
            self.preferences_key, json.dumps(preferences_to_dict(preferences))
        )

    def get_wearable(self) -> WearableReading:
        """Return the latest wearable reading or an empty one."""
        return self._read(self.wearable_key, wearable_from_dict, WearableReading())

    def set_wearable(self, reading: WearableReading) -> None:
        """Persist the latest wearable reading."""
        self.store.write(self.wearable_key, json.dumps(wearable_to_dict(reading)))

    def start_session(self) -> GoalSession:
        """Compute the goals used until the profile changes."""
        wearable = self.get_wearable()
        goals = compute_goals(self.get_preferences(), wearable)
        _logger.info(
            "Goal session started: calories=%s protein_g=%s sodium_mg=%s iron_mg=%s",
            goals.calories,
            goals.protein_g,
            goals.sodium_mg,
            goals.iron_mg,
        )
        return GoalSession(goals=goals, wearable=wearable)

    def _read(self, key: str, parser: Callable[[object], _T], default: _T) -> _T:
        raw = self.store.read(key)
        if raw is None:
            return default
        try:
            return parser(json.loads(raw))
        except ValueError:
            _logger.warning("Ignoring unreadable profile data", extra={"key": key})
            return default
