"""Tests for dashboard progress helpers."""

from dataclasses import replace

import pytest

from nutrition_dashboard.domain.dashboard import MicroStatus
from nutrition_dashboard.domain.nutrients import BASELINE_GOALS, NutrientTotals
from nutrition_dashboard.services.progress import (
    capped_percent,
    macro_progress,
    micro_progress,
    micro_status,
)
from nutrition_dashboard.services.ratios import percent_of_goal, round_half_up


def test_round_half_up() -> None:
    assert round_half_up(2.5) == 3
    assert round_half_up(32.4) == 32
    assert round_half_up(50 * 1.3) == 65


@pytest.mark.parametrize("goal", [0, -5, float("inf"), float("nan")])
def test_percent_of_goal_undefined(goal: float) -> None:
    assert percent_of_goal(10, goal) is None


def test_capped_percent() -> None:
    assert capped_percent(300, 200, 100) == 100
    assert capped_percent(50, 200, 100) == 25
    assert capped_percent(50, 0, 100) == 0


@pytest.mark.parametrize(
    ("percent", "expected"),
    [
        (0, MicroStatus.DEFICIENT),
        (49, MicroStatus.DEFICIENT),
        (50, MicroStatus.GOOD),
        (120, MicroStatus.GOOD),
        (121, MicroStatus.EXCESS),
        (150, MicroStatus.EXCESS),
    ],
)
def test_micro_status(percent: int, expected: MicroStatus) -> None:
    assert micro_status(percent) is expected


def test_macro_progress_cards() -> None:
    totals = NutrientTotals(calories=2500.4, protein_g=20.6, carbs_g=100, fat_g=0)

    cards = {card.name: card for card in macro_progress(totals, BASELINE_GOALS)}

    assert list(cards) == ["calories", "protein", "carbs", "fat"]
    assert cards["calories"].percent == 100
    assert cards["calories"].remaining == 0
    assert cards["calories"].consumed == 2500
    assert cards["protein"].percent == 41
    assert cards["protein"].remaining == 29
    assert cards["protein"].unit == "g"
    assert cards["fat"].percent == 0
    assert cards["fat"].remaining == 65


def test_micro_progress_bars() -> None:
    totals = NutrientTotals(iron_mg=9, calcium_mg=2000, vitamin_c_mg=120)

    bars = {bar.name: bar for bar in micro_progress(totals, BASELINE_GOALS)}

    assert list(bars) == [
        "iron",
        "calcium",
        "vitaminA",
        "vitaminC",
        "vitaminD",
        "vitaminB12",
    ]
    assert bars["iron"].percent == 50
    assert bars["iron"].status is MicroStatus.GOOD
    assert bars["calcium"].percent == 150
    assert bars["calcium"].status is MicroStatus.EXCESS
    assert bars["vitaminC"].percent == 133
    assert bars["vitaminA"].status is MicroStatus.DEFICIENT


def test_micro_progress_with_zero_goal() -> None:
    goals = replace(BASELINE_GOALS, iron_mg=0)

    bars = micro_progress(NutrientTotals(iron_mg=5), goals)

    assert bars[0].percent == 0


def test_progress_with_non_finite_totals() -> None:
    totals = NutrientTotals(calories=float("inf"), iron_mg=float("nan"))

    cards = macro_progress(totals, BASELINE_GOALS)
    bars = micro_progress(totals, BASELINE_GOALS)

    assert cards[0].consumed == 0
    assert cards[0].percent == 0
    assert cards[0].remaining == 2000
    assert bars[0].consumed == 0
    assert bars[0].percent == 0
    assert bars[0].status is MicroStatus.DEFICIENT
