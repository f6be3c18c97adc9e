"""Updater for dashboard state."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from ev_station_status.adapters.web.state.dashboard_state import (
    DashboardState,  # noqa: TC001 - Runtime dependency: used in __init__
)
from ev_station_status.application.services.row_builder import build_rows
from ev_station_status.domain.contracts.state_updater import StateUpdaterProtocol

if TYPE_CHECKING:
    from ev_station_status.domain.models.refresh_result import RefreshResult

logger = logging.getLogger(__name__)


def _api_status(result: RefreshResult) -> str:
    if result.no_stations_configured:
        return "idle"
    if not result.has_failures:
        return "success"
    if result.has_data:
        return "partial"
    return "error"


class StateUpdater(StateUpdaterProtocol):
    """Publishes refresh results into the dashboard state."""

    def __init__(self, dashboard_state: DashboardState) -> None:
        """Initialize the state updater.

        Args:
            dashboard_state: The DashboardState instance to update.
        """
        self.dashboard_state = dashboard_state

    def update_result(self, result: RefreshResult) -> None:
        """Replace the published rows and failures with a new result.

        Nothing from the previous result is kept.

        Args:
            result: The outcome of the latest refresh cycle.
        """
        self.dashboard_state.result = result
        self.dashboard_state.rows = build_rows(result.stations)
        self.dashboard_state.last_update = result.completed_at
        self.dashboard_state.api_status = _api_status(result)
        logger.debug(
            f"Updated dashboard state: {len(self.dashboard_state.rows)} rows, "
            f"{len(result.failures)} failures, status: {self.dashboard_state.api_status}"
        )

    def reset(self) -> None:
        """Drop the published result so the page shows the loading state.

        Called when the tracked stations change; rows of the previous
        stations must not be shown under the new list.
        """
        self.dashboard_state.result = None
        self.dashboard_state.rows = []
        self.dashboard_state.last_update = None
        self.dashboard_state.api_status = "unknown"
        logger.debug("Reset dashboard state until the next refresh")
