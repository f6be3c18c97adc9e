"""ChargePoint API adapter."""

from ev_station_status.adapters.chargepoint_api.station_parser import parse_station_payload
from ev_station_status.adapters.chargepoint_api.station_repository import (
    ChargePointStationRepository,
)

__all__ = ["ChargePointStationRepository", "parse_station_payload"]
