"""Rule-based insights comparing daily totals to goals."""

from collections.abc import Callable

from nutrition_dashboard.domain.insights import Insight, Severity
from nutrition_dashboard.domain.nutrients import NutrientGoals, NutrientTotals
from nutrition_dashboard.domain.profile import WearableReading
from nutrition_dashboard.services.goals import HYPERTENSION_SYSTOLIC
from nutrition_dashboard.services.ratios import percent_of_goal, round_half_up

PROTEIN_LOW_PERCENT = 50
PROTEIN_MET_PERCENT = 80
IRON_LOW_PERCENT = 40
SODIUM_HIGH_PERCENT = 80
VITAMIN_D_LOW_PERCENT = 30
PROTEIN_SHARE_LOW_PERCENT = 15
FIBER_LOW_PERCENT = 40

_KCAL_PER_GRAM_PROTEIN = 4

InsightRule = Callable[
    [NutrientTotals, NutrientGoals, WearableReading | None], Insight | None
]


def generate_insights(
    totals: NutrientTotals,
    goals: NutrientGoals,
    wearable: WearableReading | None = None,
) -> list[Insight]:
    """Evaluate each rule in presentation order and collect the insights.

    A rule whose ratio cannot be computed (non-positive goal, no calories
    logged) is skipped. When no rule fires a single positive insight is
    returned.
    """
    insights = [
        insight
        for rule in _RULES
        if (insight := rule(totals, goals, wearable)) is not None
    ]
    if not insights:
        insights.append(
            Insight(
                topic="balance",
                icon="🎉",
                text="Excellent nutrition balance today! Keep up the great work.",
                severity=Severity.SUCCESS,
            )
        )
    return insights


def _protein_insight(
    totals: NutrientTotals, goals: NutrientGoals, _wearable: WearableReading | None
) -> Insight | None:
    percent = percent_of_goal(totals.protein_g, goals.protein_g)
    if percent is None:
        return None
    if percent < PROTEIN_LOW_PERCENT:
        return Insight(
            topic="protein",
            icon="🥩",
            text=(
                f"You're at {round_half_up(percent)}% of your protein goal. "
                "Add protein-rich foods like paneer, chicken, or dal to your "
                "next meal."
            ),
            severity=Severity.WARNING,
        )
    if percent >= PROTEIN_MET_PERCENT:
        return Insight(
            topic="protein",
            icon="✅",
            text=(
                f"Great job! You've met {round_half_up(percent)}% "
                "of your protein goal."
            ),
            severity=Severity.SUCCESS,
        )
    return None


def _iron_insight(
    totals: NutrientTotals, goals: NutrientGoals, _wearable: WearableReading | None
) -> Insight | None:
    percent = percent_of_goal(totals.iron_mg, goals.iron_mg)
    if percent is None or percent >= IRON_LOW_PERCENT:
        return None
    return Insight(
        topic="iron",
        icon="🩸",
        text=(
            f"Your iron intake is low ({round_half_up(percent)}%). "
            "Consider adding spinach, rajma, or fortified foods."
        ),
        severity=Severity.WARNING,
    )


def _sodium_insight(
    totals: NutrientTotals, goals: NutrientGoals, wearable: WearableReading | None
) -> Insight | None:
    percent = percent_of_goal(totals.sodium_mg, goals.sodium_mg)
    if percent is None or percent <= SODIUM_HIGH_PERCENT:
        return None
    text = f"Sodium intake is high ({round_half_up(percent)}%). "
    if _has_elevated_bp(wearable):
        text += "Your wearable shows elevated BP - try low-sodium options."
    else:
        text += "Try low-sodium options."
    return Insight(topic="sodium", icon="🧂", text=text, severity=Severity.ALERT)


def _vitamin_d_insight(
    totals: NutrientTotals, goals: NutrientGoals, _wearable: WearableReading | None
) -> Insight | None:
    percent = percent_of_goal(totals.vitamin_d_mcg, goals.vitamin_d_mcg)
    if percent is None or percent >= VITAMIN_D_LOW_PERCENT:
        return None
    return Insight(
        topic="vitamin_d",
        icon="☀️",
        text=(
            "Vitamin D is low. Get 15 minutes of sunlight or add fortified "
            "foods, eggs, or mushrooms."
        ),
        severity=Severity.INFO,
    )


def _macro_balance_insight(
    totals: NutrientTotals, _goals: NutrientGoals, _wearable: WearableReading | None
) -> Insight | None:
    share = percent_of_goal(totals.protein_g * _KCAL_PER_GRAM_PROTEIN, totals.calories)
    if share is None or share >= PROTEIN_SHARE_LOW_PERCENT:
        return None
    return Insight(
        topic="macro_balance",
        icon="⚖️",
        text=(
            f"Your meals are low in protein ({round_half_up(share)}% of calories). "
            "Aim for 15-30% for better satiety."
        ),
        severity=Severity.INFO,
    )


def _fiber_insight(
    totals: NutrientTotals, goals: NutrientGoals, _wearable: WearableReading | None
) -> Insight | None:
    percent = percent_of_goal(totals.fiber_g, goals.fiber_g)
    if percent is None or percent >= FIBER_LOW_PERCENT:
        return None
    return Insight(
        topic="fiber",
        icon="🌾",
        text=(
            "Boost your fiber intake with whole grains, fruits, and vegetables "
            "for better digestion."
        ),
        severity=Severity.INFO,
    )


def _has_elevated_bp(wearable: WearableReading | None) -> bool:
    if wearable is None or wearable.bp_systolic is None:
        return False
    return wearable.bp_systolic >= HYPERTENSION_SYSTOLIC


_RULES: tuple[InsightRule, ...] = (
    _protein_insight,
    _iron_insight,
    _sodium_insight,
    _vitamin_d_insight,
    _macro_balance_insight,
    _fiber_insight,
)
