"""Nutrient goal and total records."""

from dataclasses import dataclass

NUTRIENT_FIELDS = (
    "calories",
    "protein_g",
    "carbs_g",
    "fat_g",
    "fiber_g",
    "sodium_mg",
    "iron_mg",
    "calcium_mg",
    "vitamin_a_mcg",
    "vitamin_c_mg",
    "vitamin_d_mcg",
    "vitamin_b12_mcg",
)


@dataclass(frozen=True)
class NutrientGoals:
    """Daily nutrient targets for one session."""

    calories: float
    protein_g: float
    carbs_g: float
    fat_g: float
    fiber_g: float
    sodium_mg: float
    iron_mg: float
    calcium_mg: float
    vitamin_a_mcg: float
    vitamin_c_mg: float
    vitamin_d_mcg: float
    vitamin_b12_mcg: float


@dataclass(frozen=True)
class NutrientTotals:
    """Cumulative intake across the day's meals."""

    calories: float = 0
    protein_g: float = 0
    carbs_g: float = 0
    fat_g: float = 0
    fiber_g: float = 0
    sodium_mg: float = 0
    iron_mg: float = 0
    calcium_mg: float = 0
    vitamin_a_mcg: float = 0
    vitamin_c_mg: float = 0
    vitamin_d_mcg: float = 0
    vitamin_b12_mcg: float = 0


BASELINE_GOALS = NutrientGoals(
    calories=2000,
    protein_g=50,
    carbs_g=250,
    fat_g=65,
    fiber_g=25,
    sodium_mg=2300,
    iron_mg=18,
    calcium_mg=1000,
    vitamin_a_mcg=900,
    vitamin_c_mg=90,
    vitamin_d_mcg=20,
    vitamin_b12_mcg=2.4,
)
