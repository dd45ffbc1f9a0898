"""Dashboard refresh orchestration."""

import logging
from dataclasses import dataclass

from nutrition_dashboard.domain.dashboard import DashboardSnapshot
from nutrition_dashboard.domain.meals import DailyState
from nutrition_dashboard.domain.nutrients import NutrientGoals
from nutrition_dashboard.domain.profile import WearableReading
from nutrition_dashboard.services.daily_state import DailyStateService
from nutrition_dashboard.services.insights import generate_insights
from nutrition_dashboard.services.progress import macro_progress, micro_progress

_logger = logging.getLogger(__name__)


@dataclass
class DashboardService:
    """Service that refreshes totals and builds the dashboard view."""

    daily_state_service: DailyStateService

    def refresh(
        self, goals: NutrientGoals, wearable: WearableReading | None = None
    ) -> DashboardSnapshot:
        """Recompute and persist today's totals, then build a snapshot."""
        state = self.daily_state_service.refresh()
        _logger.debug(
            "Dashboard refreshed: date=%s meals=%s", state.date, len(state.meals)
        )
        return build_snapshot(state, goals, wearable)


def build_snapshot(
    state: DailyState, goals: NutrientGoals, wearable: WearableReading | None = None
) -> DashboardSnapshot:
    """Build a dashboard snapshot for a state whose totals are current."""
    return DashboardSnapshot(
        date=state.date,
        goals=goals,
        totals=state.totals,
        meals=state.meals,
        macros=macro_progress(state.totals, goals),
        micros=micro_progress(state.totals, goals),
        insights=generate_insights(state.totals, goals, wearable),
    )
