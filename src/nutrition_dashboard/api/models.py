"""Pydantic models for API request payloads."""

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field

from nutrition_dashboard.domain.meals import Meal, MealMacros, MealMicros
from nutrition_dashboard.domain.profile import Diet, Preferences, WearableReading

MAX_AMOUNT = 1_000_000


def _amount() -> Any:
    return Field(default=None, ge=0, le=MAX_AMOUNT, allow_inf_nan=False)


class MacrosPayload(BaseModel):
    """Macronutrients of a logged meal."""

    kcal: float | None = _amount()
    protein_g: float | None = _amount()
    carbs_g: float | None = _amount()
    fat_g: float | None = _amount()
    fiber_g: float | None = _amount()
    sodium_mg: float | None = _amount()


class MicrosPayload(BaseModel):
    """Micronutrients of a logged meal."""

    iron_mg: float | None = _amount()
    calcium_mg: float | None = _amount()
    vitamin_a_mcg: float | None = _amount()
    vitamin_c_mg: float | None = _amount()
    vitamin_d_mcg: float | None = _amount()
    vitamin_b12_mcg: float | None = _amount()


class MealPayload(BaseModel):
    """Meal logged through the API."""

    time: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1)
    description: str | None = None
    macros: MacrosPayload | None = None
    micros: MicrosPayload | None = None

    def to_domain(self) -> Meal:
        """Convert the payload to a domain meal."""
        return Meal(
            time=self.time,
            name=self.name,
            description=self.description,
            macros=MealMacros(**self.macros.model_dump()) if self.macros else None,
            micros=MealMicros(**self.micros.model_dump()) if self.micros else None,
        )


class PreferencesPayload(BaseModel):
    """Dietary preferences update."""

    diet: Literal["omnivore", "vegetarian", "veg"] = "omnivore"

    def to_domain(self) -> Preferences:
        """Convert the payload to domain preferences."""
        return Preferences(diet=Diet.parse(self.diet))


class WearablePayload(BaseModel):
    """Latest wearable reading update."""

    model_config = ConfigDict(populate_by_name=True)

    calories_burned: float | None = Field(
        default=None, alias="caloriesBurned", ge=0, allow_inf_nan=False
    )
    bp_systolic: float | None = Field(
        default=None, alias="bpSystolic", gt=0, allow_inf_nan=False
    )

    def to_domain(self) -> WearableReading:
        """Convert the payload to a domain reading."""
        return WearableReading(
            calories_burned=self.calories_burned, bp_systolic=self.bp_systolic
        )
