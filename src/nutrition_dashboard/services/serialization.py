"""Conversion between domain records and their stored JSON shape.

The stored shape matches what the browser dashboard kept in local storage:
camelCase wearable keys, ``kcal`` inside meal macros and ``calories`` in the
totals. Parsers raise ``ValueError`` on anything structurally wrong so callers
can fall back to defaults.
"""

import math
from dataclasses import asdict, fields
from typing import Any

from nutrition_dashboard.domain.meals import DailyState, Meal, MealMacros, MealMicros
from nutrition_dashboard.domain.nutrients import NUTRIENT_FIELDS, NutrientTotals
from nutrition_dashboard.domain.profile import Diet, Preferences, WearableReading


def daily_state_to_dict(state: DailyState) -> dict[str, Any]:
    """Return the stored representation of a daily state."""
    return {
        "date": state.date,
        "meals": [meal_to_dict(meal) for meal in state.meals],
        "totals": asdict(state.totals),
    }


def daily_state_from_dict(payload: object) -> DailyState:
    """Parse a stored daily state."""
    data = _require_mapping(payload, "daily state")
    date = data.get("date")
    if not isinstance(date, str) or not date:
        raise ValueError("Daily state is missing a date")
    meals_raw = data.get("meals", [])
    if not isinstance(meals_raw, list):
        raise ValueError("Daily state meals must be a list")
    totals_raw = _require_mapping(data.get("totals") or {}, "totals")
    totals = NutrientTotals(
        **{
            name: _number(totals_raw.get(name), name) or 0
            for name in NUTRIENT_FIELDS
        }
    )
    return DailyState(
        date=date,
        meals=tuple(meal_from_dict(meal) for meal in meals_raw),
        totals=totals,
    )


def meal_to_dict(meal: Meal) -> dict[str, Any]:
    """Return the stored representation of a meal, omitting absent values."""
    payload: dict[str, Any] = {"time": meal.time, "name": meal.name}
    if meal.description is not None:
        payload["description"] = meal.description
    if meal.macros is not None:
        payload["macros"] = _present_values(asdict(meal.macros))
    if meal.micros is not None:
        payload["micros"] = _present_values(asdict(meal.micros))
    return payload


def meal_from_dict(payload: object) -> Meal:
    """Parse a stored meal."""
    data = _require_mapping(payload, "meal")
    description = data.get("description")
    macros_raw = data.get("macros")
    micros_raw = data.get("micros")
    return Meal(
        time=str(data.get("time", "")),
        name=str(data.get("name", "")),
        description=str(description) if description is not None else None,
        macros=(
            MealMacros(**_numbers(macros_raw, MealMacros))
            if macros_raw is not None
            else None
        ),
        micros=(
            MealMicros(**_numbers(micros_raw, MealMicros))
            if micros_raw is not None
            else None
        ),
    )


def preferences_to_dict(preferences: Preferences) -> dict[str, Any]:
    """Return the stored representation of preferences."""
    return {"diet": preferences.diet.value}


def preferences_from_dict(payload: object) -> Preferences:
    """Parse stored preferences."""
    data = _require_mapping(payload, "preferences")
    return Preferences(diet=Diet.parse(data.get("diet")))


def wearable_to_dict(reading: WearableReading) -> dict[str, Any]:
    """Return the stored representation of a wearable reading."""
    return _present_values(
        {
            "caloriesBurned": reading.calories_burned,
            "bpSystolic": reading.bp_systolic,
        }
    )


def wearable_from_dict(payload: object) -> WearableReading:
    """Parse a stored wearable reading."""
    data = _require_mapping(payload, "wearable reading")
    return WearableReading(
        calories_burned=_number(data.get("caloriesBurned"), "caloriesBurned"),
        bp_systolic=_number(data.get("bpSystolic"), "bpSystolic"),
    )


def _require_mapping(payload: object, label: str) -> dict[str, Any]:
    if not isinstance(payload, dict):
        raise ValueError(f"Expected an object for {label}")
    return payload


def _number(value: object, name: str) -> float | None:
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, int | float):
        raise ValueError(f"Expected a number for {name}")
    if not math.isfinite(value):
        raise ValueError(f"Expected a finite number for {name}")
    return value


def _numbers(payload: object, record: type) -> dict[str, float | None]:
    data = _require_mapping(payload, record.__name__)
    return {
        item.name: _number(data.get(item.name), item.name) for item in fields(record)
    }


def _present_values(values: dict[str, Any]) -> dict[str, Any]:
    return {key: value for key, value in values.items() if value is not None}
