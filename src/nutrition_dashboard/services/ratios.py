"""Ratio and rounding helpers shared by goals, insights and progress."""

import math


def round_half_up(value: float) -> int:
    """Round to the nearest integer with halves rounded up."""
    return math.floor(value + 0.5)


def percent_of_goal(consumed: float, goal: float) -> float | None:
    """Return consumed as a percentage of goal, or None when undefined."""
    if not math.isfinite(goal) or goal <= 0:
        return None
    percent = consumed * 100 / goal
    if not math.isfinite(percent):
        return None
    return percent
