"""Daily state persistence with day rollover and recovery."""

import json
import logging
from dataclasses import dataclass, replace

from nutrition_dashboard.domain.meals import DailyState, Meal
from nutrition_dashboard.services.calendar import Calendar
from nutrition_dashboard.services.serialization import (
    daily_state_from_dict,
    daily_state_to_dict,
)
from nutrition_dashboard.services.storage import KeyValueStore
from nutrition_dashboard.services.totals import aggregate

_logger = logging.getLogger(__name__)


@dataclass
class DailyStateService:
    """Service that loads, refreshes and stores the day's meal log."""

    store: KeyValueStore
    calendar: Calendar
    state_key: str = "nutritionData"

    def load(self) -> DailyState:
        """Return today's state, starting fresh on a new day or bad data."""
        today = self.calendar.today()
        raw = self.store.read(self.state_key)
        if raw is None:
            return DailyState(date=today)
        try:
            state = daily_state_from_dict(json.loads(raw))
        except ValueError:
            _logger.warning(
                "Discarding unreadable daily state", extra={"key": self.state_key}
            )
            return DailyState(date=today)
        if state.date != today:
            _logger.info("Starting new day: stored=%s today=%s", state.date, today)
            return DailyState(date=today)
        return state

    def save(self, state: DailyState) -> None:
        """Persist a daily state."""
        self.store.write(self.state_key, json.dumps(daily_state_to_dict(state)))

    def refresh(self) -> DailyState:
        """Recompute totals from today's meals and persist them."""
        state = self.load()
        state = replace(state, totals=aggregate(state.meals))
        self.save(state)
        return state

    def append_meal(self, meal: Meal) -> DailyState:
        """Append a meal to today's log and persist updated totals."""
        state = self.load()
        meals = (*state.meals, meal)
        state = replace(state, meals=meals, totals=aggregate(meals))
        self.save(state)
        _logger.info("Meal logged: name=%s meals=%s", meal.name, len(meals))
        return state

    def reset(self) -> DailyState:
        """Clear today's log."""
        state = DailyState(date=self.calendar.today())
        self.save(state)
        return state
