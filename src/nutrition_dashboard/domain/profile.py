"""User profile domain models."""

from dataclasses import dataclass
from enum import Enum

from nutrition_dashboard.domain.nutrients import NutrientGoals


class Diet(Enum):
    """Diet preference that affects nutrient goals."""

    OMNIVORE = "omnivore"
    VEGETARIAN = "vegetarian"

    @classmethod
    def parse(cls, raw: object) -> "Diet":
        """Parse a stored diet value, accepting the legacy "veg" form."""
        if isinstance(raw, str) and raw.strip().lower() in {"veg", "vegetarian"}:
            return cls.VEGETARIAN
        return cls.OMNIVORE


@dataclass(frozen=True)
class Preferences:
    """User dietary preferences."""

    diet: Diet = Diet.OMNIVORE


@dataclass(frozen=True)
class WearableReading:
    """Latest reading synced from a wearable device."""

    calories_burned: float | None = None
    bp_systolic: float | None = None


@dataclass(frozen=True)
class GoalSession:
    """Goals and the wearable reading they were derived from."""

    goals: NutrientGoals
    wearable: WearableReading
