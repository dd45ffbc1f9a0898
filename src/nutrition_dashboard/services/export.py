"""Export of the daily state as a downloadable JSON file."""

import json

from nutrition_dashboard.domain.dashboard import ExportArtifact
from nutrition_dashboard.domain.meals import DailyState
from nutrition_dashboard.services.serialization import daily_state_to_dict


def export_daily_state(state: DailyState) -> ExportArtifact:
    """Serialize a daily state to a pretty-printed JSON artifact."""
    return ExportArtifact(
        filename=f"nutrition-data-{state.date}.json",
        content=json.dumps(daily_state_to_dict(state), indent=2),
    )
