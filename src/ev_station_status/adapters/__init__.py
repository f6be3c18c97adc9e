"""Adapters layer - external system integrations."""

from ev_station_status.adapters.chargepoint_api import ChargePointStationRepository
from ev_station_status.adapters.config import AppConfig
from ev_station_status.adapters.url_query_state import UrlQueryState

__all__ = [
    "AppConfig",
    "ChargePointStationRepository",
    "UrlQueryState",
]
