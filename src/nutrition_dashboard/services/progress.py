"""Percentages and remaining amounts for dashboard cards."""

import math

from nutrition_dashboard.domain.dashboard import (
    MacroProgress,
    MicroProgress,
    MicroStatus,
)
from nutrition_dashboard.domain.nutrients import NutrientGoals, NutrientTotals
from nutrition_dashboard.services.ratios import percent_of_goal, round_half_up

MACRO_PERCENT_CAP = 100
MICRO_PERCENT_CAP = 150
MICRO_DEFICIENT_BELOW = 50
MICRO_EXCESS_ABOVE = 120

_MACRO_CARDS = (
    ("calories", "calories", "kcal"),
    ("protein", "protein_g", "g"),
    ("carbs", "carbs_g", "g"),
    ("fat", "fat_g", "g"),
)
_MICRO_BARS = (
    ("iron", "iron_mg"),
    ("calcium", "calcium_mg"),
    ("vitaminA", "vitamin_a_mcg"),
    ("vitaminC", "vitamin_c_mg"),
    ("vitaminD", "vitamin_d_mcg"),
    ("vitaminB12", "vitamin_b12_mcg"),
)


def capped_percent(consumed: float, goal: float, cap: int) -> int:
    """Return the rounded percentage of goal, capped; undefined ratios are 0."""
    percent = percent_of_goal(consumed, goal)
    if percent is None:
        return 0
    return min(round_half_up(percent), cap)


def finite_or_zero(value: float) -> float:
    """Return value, or 0 when it is infinite or NaN."""
    return value if math.isfinite(value) else 0


def micro_status(percent: int) -> MicroStatus:
    """Classify a micronutrient percentage."""
    if percent < MICRO_DEFICIENT_BELOW:
        return MicroStatus.DEFICIENT
    if percent <= MICRO_EXCESS_ABOVE:
        return MicroStatus.GOOD
    return MicroStatus.EXCESS


def macro_progress(totals: NutrientTotals, goals: NutrientGoals) -> list[MacroProgress]:
    """Build the macro cards for calories, protein, carbs and fat."""
    cards = []
    for name, field_name, unit in _MACRO_CARDS:
        consumed = finite_or_zero(getattr(totals, field_name))
        goal = getattr(goals, field_name)
        cards.append(
            MacroProgress(
                name=name,
                unit=unit,
                consumed=round_half_up(consumed),
                goal=goal,
                percent=capped_percent(consumed, goal, MACRO_PERCENT_CAP),
                remaining=round_half_up(max(goal - consumed, 0)),
            )
        )
    return cards


def micro_progress(totals: NutrientTotals, goals: NutrientGoals) -> list[MicroProgress]:
    """Build the micronutrient bars with their coverage status."""
    bars = []
    for name, field_name in _MICRO_BARS:
        consumed = finite_or_zero(getattr(totals, field_name))
        goal = getattr(goals, field_name)
        percent = capped_percent(consumed, goal, MICRO_PERCENT_CAP)
        bars.append(
            MicroProgress(
                name=name,
                consumed=consumed,
                goal=goal,
                percent=percent,
                status=micro_status(percent),
            )
        )
    return bars
