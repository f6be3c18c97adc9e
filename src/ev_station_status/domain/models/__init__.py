"""Domain models for EV station status."""

from ev_station_status.domain.models.classification import (
    OFFLINE_INDICATOR,
    ONLINE_INDICATOR,
    BadgeCategory,
    Classification,
    OnlineState,
)
from ev_station_status.domain.models.display_row import DisplayRow, PortCells, StationCells
from ev_station_status.domain.models.error_details import ErrorDetails
from ev_station_status.domain.models.refresh_result import RefreshResult, StationFailure
from ev_station_status.domain.models.station_snapshot import (
    UNKNOWN_VALUE,
    PortSnapshot,
    StationSnapshot,
)

__all__ = [
    "OFFLINE_INDICATOR",
    "ONLINE_INDICATOR",
    "UNKNOWN_VALUE",
    "BadgeCategory",
    "Classification",
    "DisplayRow",
    "ErrorDetails",
    "OnlineState",
    "PortCells",
    "PortSnapshot",
    "RefreshResult",
    "StationCells",
    "StationFailure",
    "StationSnapshot",
]
