"""Tests for the dashboard HTTP API."""

import json

from fastapi.testclient import TestClient

from nutrition_dashboard.api.app import create_app
from tests.conftest import TODAY

MEAL = {
    "time": "13:05",
    "name": "Rajma rice",
    "description": "homemade",
    "macros": {"kcal": 200, "protein_g": 5},
}


def test_health(container) -> None:
    client = TestClient(create_app(container))

    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_empty_dashboard(container) -> None:
    client = TestClient(create_app(container))

    response = client.get("/dashboard")

    assert response.status_code == 200
    data = response.json()
    assert data["date"] == TODAY
    assert data["meals"] == []
    assert data["totals"]["calories"] == 0
    assert data["goals"]["calories"] == 2000
    assert [card["name"] for card in data["macros"]] == [
        "calories",
        "protein",
        "carbs",
        "fat",
    ]
    assert "macro_balance" not in [insight["topic"] for insight in data["insights"]]


def test_log_meal_updates_totals_and_insights(container, store) -> None:
    client = TestClient(create_app(container))

    response = client.post("/meals", json=MEAL)

    assert response.status_code == 201
    data = response.json()
    assert data["totals"]["calories"] == 200
    assert data["meals"][0]["name"] == "Rajma rice"
    assert data["insights"][0]["topic"] == "protein"
    assert data["insights"][0]["severity"] == "warning"
    stored = json.loads(store.entries["nutritionData"])
    assert stored["totals"]["protein_g"] == 5


def test_log_meal_rejects_negative_values(container) -> None:
    client = TestClient(create_app(container))

    response = client.post(
        "/meals", json={"time": "09:00", "name": "Bad", "macros": {"kcal": -1}}
    )

    assert response.status_code == 422


def test_reset_meals(container) -> None:
    client = TestClient(create_app(container))
    client.post("/meals", json=MEAL)

    response = client.delete("/meals")

    assert response.status_code == 200
    assert response.json()["meals"] == []


def test_profile_updates_start_new_goal_session(container) -> None:
    client = TestClient(create_app(container))

    prefs = client.put("/profile/preferences", json={"diet": "veg"})
    wearable = client.put(
        "/profile/wearable", json={"caloriesBurned": 900, "bpSystolic": 131}
    )

    assert prefs.status_code == 200
    assert prefs.json()["preferences"] == {"diet": "vegetarian"}
    assert prefs.json()["goals"]["iron_mg"] == 32
    goals = wearable.json()["goals"]
    assert goals["calories"] == 2800
    assert goals["protein_g"] == 65
    assert goals["sodium_mg"] == 1500
    assert client.get("/dashboard").json()["goals"] == goals


def test_high_sodium_alert_references_blood_pressure(container) -> None:
    client = TestClient(create_app(container))
    client.put("/profile/wearable", json={"bpSystolic": 150})

    response = client.post(
        "/meals",
        json={"time": "19:00", "name": "Ramen", "macros": {"sodium_mg": 1400}},
    )

    sodium = [i for i in response.json()["insights"] if i["topic"] == "sodium"]
    assert sodium[0]["severity"] == "alert"
    assert "elevated BP" in sodium[0]["text"]


def test_export_returns_attachment(container) -> None:
    client = TestClient(create_app(container))
    client.post("/meals", json=MEAL)

    response = client.get("/export")

    assert response.status_code == 200
    assert response.headers["content-type"].startswith("application/json")
    assert (
        response.headers["content-disposition"]
        == f'attachment; filename="nutrition-data-{TODAY}.json"'
    )
    assert response.json()["meals"][0]["name"] == "Rajma rice"


def test_oversized_meal_amounts_are_rejected(container, store) -> None:
    client = TestClient(create_app(container))
    huge = {"time": "10:00", "name": "Glitch", "macros": {"kcal": 1e308}}

    first = client.post("/meals", json=huge)
    second = client.post("/meals", json=huge)
    dashboard = client.get("/dashboard")

    assert first.status_code == 422
    assert second.status_code == 422
    assert dashboard.status_code == 200
    assert dashboard.json()["totals"]["calories"] == 0


def test_non_finite_meal_amounts_are_rejected(container) -> None:
    client = TestClient(create_app(container))

    response = client.post(
        "/meals",
        content='{"time": "10:00", "name": "Glitch", "micros": {"iron_mg": NaN}}',
        headers={"Content-Type": "application/json"},
    )

    assert response.status_code == 422


def test_corrupted_stored_state_still_renders(container, store) -> None:
    store.entries["nutritionData"] = (
        '{"date": "' + TODAY + '", "meals": '
        '[{"time": "09:00", "name": "Glitch", "macros": {"kcal": NaN}}]}'
    )
    client = TestClient(create_app(container))

    response = client.get("/dashboard")

    assert response.status_code == 200
    assert response.json()["meals"] == []


def test_negative_calories_burned_is_rejected(container) -> None:
    client = TestClient(create_app(container))

    response = client.put("/profile/wearable", json={"caloriesBurned": -50})

    assert response.status_code == 422
