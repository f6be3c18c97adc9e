"""Dashboard state dataclass."""

from dataclasses import dataclass, field
from datetime import datetime

from ev_station_status.domain.models.display_row import DisplayRow
from ev_station_status.domain.models.refresh_result import RefreshResult, StationFailure

NO_STATIONS_MESSAGE = "Add ?stations=ID1,ID2"
NO_DATA_MESSAGE = "No data"
LOADING_MESSAGE = "Loading…"


@dataclass
class DashboardState:
    """Latest published render model of the dashboard."""

    result: RefreshResult | None = None
    rows: list[DisplayRow] = field(default_factory=list)
    last_update: datetime | None = None
    # "unknown" until the first cycle, then "idle", "success", "partial" or "error"
    api_status: str = "unknown"

    @property
    def failures(self) -> tuple[StationFailure, ...]:
        return self.result.failures if self.result is not None else ()

    @property
    def status_message(self) -> str:
        """Short status line shown above the table (empty when all is well)."""
        if self.result is None:
            return LOADING_MESSAGE
        if self.result.no_stations_configured:
            return NO_STATIONS_MESSAGE
        if not self.result.has_data:
            return NO_DATA_MESSAGE
        return ""

    @property
    def failure_lines(self) -> list[str]:
        return [f"Failed {f.station_id}: {f.message}" for f in self.failures]
