"""Domain layer - core models and ports."""

from ev_station_status.domain.exceptions import FetchError
from ev_station_status.domain.models import (
    Classification,
    DisplayRow,
    PortSnapshot,
    RefreshResult,
    StationFailure,
    StationSnapshot,
)
from ev_station_status.domain.ports import (
    DisplayAdapter,
    QueryState,
    StationRepository,
)

__all__ = [
    "Classification",
    "DisplayAdapter",
    "DisplayRow",
    "FetchError",
    "PortSnapshot",
    "QueryState",
    "RefreshResult",
    "StationFailure",
    "StationRepository",
    "StationSnapshot",
]
