"""Application services."""

from ev_station_status.application.services.refresh_service import RefreshService
from ev_station_status.application.services.row_builder import build_rows, build_station_rows
from ev_station_status.application.services.station_ids import (
    NO_VALID_IDS_MESSAGE,
    StationInput,
    format_station_ids,
    parse_station_ids,
    validate_station_input,
)
from ev_station_status.application.services.station_registry import (
    STATIONS_PARAMETER,
    StationRegistry,
)
from ev_station_status.application.services.status_classifier import classify

__all__ = [
    "NO_VALID_IDS_MESSAGE",
    "STATIONS_PARAMETER",
    "RefreshService",
    "StationInput",
    "StationRegistry",
    "build_rows",
    "build_station_rows",
    "classify",
    "format_station_ids",
    "parse_station_ids",
    "validate_station_input",
]
