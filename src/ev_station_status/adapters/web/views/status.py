"""JSON render model of the dashboard."""

from __future__ import annotations

from dataclasses import asdict
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from ev_station_status.adapters.web.state.dashboard_state import DashboardState


def build_status_payload(state: DashboardState, station_ids: tuple[str, ...]) -> dict[str, Any]:
    """Build the ``/api/status`` response body.

    Args:
        state: Latest published dashboard state.
        station_ids: IDs currently tracked by the registry.
    """
    return {
        "stations": list(station_ids),
        "status": state.api_status,
        "status_message": state.status_message,
        "last_update": state.last_update.isoformat() if state.last_update else None,
        "rows": [asdict(row) for row in state.rows],
        "failures": [asdict(failure) for failure in state.failures],
    }
