"""Personalized nutrient goals."""

from dataclasses import replace

from nutrition_dashboard.domain.nutrients import BASELINE_GOALS, NutrientGoals
from nutrition_dashboard.domain.profile import Diet, Preferences, WearableReading
from nutrition_dashboard.services.ratios import round_half_up

ACTIVITY_BONUS_CAP_KCAL = 800
HIGH_ACTIVITY_KCAL = 400
HIGH_ACTIVITY_PROTEIN_FACTOR = 1.3
HYPERTENSION_SYSTOLIC = 130
HYPERTENSION_SODIUM_MG = 1500
VEGETARIAN_IRON_FACTOR = 1.8


def compute_goals(
    preferences: Preferences, wearable: WearableReading | None = None
) -> NutrientGoals:
    """Derive daily goals from baseline adult values and profile data."""
    reading = wearable or WearableReading()
    goals = BASELINE_GOALS
    burned = reading.calories_burned

    if burned is not None:
        goals = replace(
            goals, calories=goals.calories + min(burned, ACTIVITY_BONUS_CAP_KCAL)
        )

    if burned is not None and burned > HIGH_ACTIVITY_KCAL:
        goals = replace(
            goals,
            protein_g=round_half_up(goals.protein_g * HIGH_ACTIVITY_PROTEIN_FACTOR),
        )

    systolic = reading.bp_systolic
    if systolic is not None and systolic >= HYPERTENSION_SYSTOLIC:
        goals = replace(goals, sodium_mg=HYPERTENSION_SODIUM_MG)

    if preferences.diet is Diet.VEGETARIAN:
        goals = replace(
            goals, iron_mg=round_half_up(goals.iron_mg * VEGETARIAN_IRON_FACTOR)
        )

    return goals
