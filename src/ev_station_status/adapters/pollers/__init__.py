"""Pollers driving the refresh cycle."""

from ev_station_status.adapters.pollers.refresh_poller import RefreshPoller

__all__ = ["RefreshPoller"]
