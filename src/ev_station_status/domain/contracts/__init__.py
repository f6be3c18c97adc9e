"""Contracts (protocols) between adapters."""

from ev_station_status.domain.contracts.refresh_poller import RefreshPollerProtocol
from ev_station_status.domain.contracts.state_updater import StateUpdaterProtocol

__all__ = ["RefreshPollerProtocol", "StateUpdaterProtocol"]
