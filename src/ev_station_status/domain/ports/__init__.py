"""Ports (interfaces) for the ports-and-adapters architecture."""

from ev_station_status.domain.ports.display_adapter import DisplayAdapter
from ev_station_status.domain.ports.query_state import QueryState
from ev_station_status.domain.ports.station_repository import StationRepository

__all__ = [
    "DisplayAdapter",
    "QueryState",
    "StationRepository",
]
