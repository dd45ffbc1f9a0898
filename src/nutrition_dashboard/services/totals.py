"""Aggregation of meals into daily totals."""

from collections.abc import Iterable

from nutrition_dashboard.domain.meals import Meal
from nutrition_dashboard.domain.nutrients import NUTRIENT_FIELDS, NutrientTotals

_MACRO_FIELDS = {
    "kcal": "calories",
    "protein_g": "protein_g",
    "carbs_g": "carbs_g",
    "fat_g": "fat_g",
    "fiber_g": "fiber_g",
    "sodium_mg": "sodium_mg",
}
_MICRO_FIELDS = (
    "iron_mg",
    "calcium_mg",
    "vitamin_a_mcg",
    "vitamin_c_mg",
    "vitamin_d_mcg",
    "vitamin_b12_mcg",
)


def aggregate(meals: Iterable[Meal]) -> NutrientTotals:
    """Sum macro and micro values across meals; missing values count as zero."""
    sums = dict.fromkeys(NUTRIENT_FIELDS, 0)
    for meal in meals:
        if meal.macros is not None:
            for source, target in _MACRO_FIELDS.items():
                sums[target] += getattr(meal.macros, source) or 0
        if meal.micros is not None:
            for name in _MICRO_FIELDS:
                sums[name] += getattr(meal.micros, name) or 0
    return NutrientTotals(**sums)
