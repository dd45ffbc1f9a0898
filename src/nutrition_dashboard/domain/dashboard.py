"""Dashboard presentation models."""

from dataclasses import dataclass
from enum import Enum

from nutrition_dashboard.domain.insights import Insight
from nutrition_dashboard.domain.meals import Meal
from nutrition_dashboard.domain.nutrients import NutrientGoals, NutrientTotals


class MicroStatus(Enum):
    """Coverage band for a micronutrient."""

    DEFICIENT = "deficient"
    GOOD = "good"
    EXCESS = "excess"


@dataclass(frozen=True)
class MacroProgress:
    """Progress card values for a macronutrient."""

    name: str
    unit: str
    consumed: int
    goal: float
    percent: int
    remaining: int


@dataclass(frozen=True)
class MicroProgress:
    """Progress bar values for a micronutrient."""

    name: str
    consumed: float
    goal: float
    percent: int
    status: MicroStatus


@dataclass(frozen=True)
class DashboardSnapshot:
    """Everything the dashboard shows after a refresh."""

    date: str
    goals: NutrientGoals
    totals: NutrientTotals
    meals: tuple[Meal, ...]
    macros: list[MacroProgress]
    micros: list[MicroProgress]
    insights: list[Insight]


@dataclass(frozen=True)
class ExportArtifact:
    """Downloadable export of a daily state."""

    filename: str
    content: str
    media_type: str = "application/json"
