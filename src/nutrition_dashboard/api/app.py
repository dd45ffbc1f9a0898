"""FastAPI application factory."""

import logging
from dataclasses import asdict
from typing import TYPE_CHECKING

from fastapi import FastAPI, Request, Response, status

from nutrition_dashboard.api.models import (
    MealPayload,
    PreferencesPayload,
    WearablePayload,
)
from nutrition_dashboard.app_logging import configure_logging
from nutrition_dashboard.domain.dashboard import DashboardSnapshot
from nutrition_dashboard.domain.profile import GoalSession
from nutrition_dashboard.services.dashboard import build_snapshot
from nutrition_dashboard.services.export import export_daily_state
from nutrition_dashboard.services.serialization import (
    meal_to_dict,
    preferences_to_dict,
    wearable_to_dict,
)

if TYPE_CHECKING:
    from nutrition_dashboard.containers import AppContainer


def create_app(container: "AppContainer") -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging()
    logger = logging.getLogger(__name__)

    app = FastAPI()
    app.state.container = container
    app.state.session = container.profile_service.start_session()

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.get("/dashboard")
    async def dashboard(request: Request) -> dict[str, object]:
        """Refresh today's totals and return the dashboard."""
        return _refresh(request)

    @app.post("/dashboard/refresh")
    async def refresh_dashboard(request: Request) -> dict[str, object]:
        """Recompute totals from today's meals."""
        return _refresh(request)

    @app.post("/meals", status_code=status.HTTP_201_CREATED)
    async def log_meal(payload: MealPayload, request: Request) -> dict[str, object]:
        """Append a meal to today's log."""
        state_container: AppContainer = request.app.state.container
        session: GoalSession = request.app.state.session
        state = state_container.daily_state_service.append_meal(payload.to_domain())
        return _snapshot_payload(build_snapshot(state, session.goals, session.wearable))

    @app.delete("/meals")
    async def reset_meals(request: Request) -> dict[str, object]:
        """Clear today's meal log."""
        state_container: AppContainer = request.app.state.container
        session: GoalSession = request.app.state.session
        state = state_container.daily_state_service.reset()
        logger.info("Daily log reset: date=%s", state.date)
        return _snapshot_payload(build_snapshot(state, session.goals, session.wearable))

    @app.get("/profile")
    async def profile(request: Request) -> dict[str, object]:
        """Return preferences, the latest wearable reading and session goals."""
        return _profile_payload(request)

    @app.put("/profile/preferences")
    async def update_preferences(
        payload: PreferencesPayload, request: Request
    ) -> dict[str, object]:
        """Store preferences and start a new goal session."""
        state_container: AppContainer = request.app.state.container
        state_container.profile_service.set_preferences(payload.to_domain())
        request.app.state.session = state_container.profile_service.start_session()
        return _profile_payload(request)

    @app.put("/profile/wearable")
    async def update_wearable(
        payload: WearablePayload, request: Request
    ) -> dict[str, object]:
        """Store a wearable reading and start a new goal session."""
        state_container: AppContainer = request.app.state.container
        state_container.profile_service.set_wearable(payload.to_domain())
        request.app.state.session = state_container.profile_service.start_session()
        return _profile_payload(request)

    @app.get("/export")
    async def export(request: Request) -> Response:
        """Download today's state as a JSON file."""
        state_container: AppContainer = request.app.state.container
        artifact = export_daily_state(state_container.daily_state_service.load())
        return Response(
            content=artifact.content,
            media_type=artifact.media_type,
            headers={
                "Content-Disposition": f'attachment; filename="{artifact.filename}"'
            },
        )

    return app


def _refresh(request: Request) -> dict[str, object]:
    state_container: AppContainer = request.app.state.container
    session: GoalSession = request.app.state.session
    snapshot = state_container.dashboard_service.refresh(
        session.goals, session.wearable
    )
    return _snapshot_payload(snapshot)


def _profile_payload(request: Request) -> dict[str, object]:
    state_container: AppContainer = request.app.state.container
    session: GoalSession = request.app.state.session
    return {
        "preferences": preferences_to_dict(
            state_container.profile_service.get_preferences()
        ),
        "wearable": wearable_to_dict(session.wearable),
        "goals": asdict(session.goals),
    }


def _snapshot_payload(snapshot: DashboardSnapshot) -> dict[str, object]:
    payload = asdict(snapshot)
    payload["meals"] = [meal_to_dict(meal) for meal in snapshot.meals]
    payload["micros"] = [
        {**asdict(bar), "status": bar.status.value} for bar in snapshot.micros
    ]
    payload["insights"] = [
        {**asdict(insight), "severity": insight.severity.value}
        for insight in snapshot.insights
    ]
    return payload
