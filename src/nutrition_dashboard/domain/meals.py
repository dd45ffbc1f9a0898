"""Meal and daily state domain models."""

from dataclasses import dataclass, field

from nutrition_dashboard.domain.nutrients import NutrientTotals


@dataclass(frozen=True)
class MealMacros:
    """Macronutrients for a logged meal."""

    kcal: float | None = None
    protein_g: float | None = None
    carbs_g: float | None = None
    fat_g: float | None = None
    fiber_g: float | None = None
    sodium_mg: float | None = None


@dataclass(frozen=True)
class MealMicros:
    """Micronutrients for a logged meal."""

    iron_mg: float | None = None
    calcium_mg: float | None = None
    vitamin_a_mcg: float | None = None
    vitamin_c_mg: float | None = None
    vitamin_d_mcg: float | None = None
    vitamin_b12_mcg: float | None = None


@dataclass(frozen=True)
class Meal:
    """A meal appended to the day's log."""

    time: str
    name: str
    description: str | None = None
    macros: MealMacros | None = None
    micros: MealMicros | None = None


@dataclass(frozen=True)
class DailyState:
    """The persisted record for a single calendar day."""

    date: str
    meals: tuple[Meal, ...] = ()
    totals: NutrientTotals = field(default_factory=NutrientTotals)
