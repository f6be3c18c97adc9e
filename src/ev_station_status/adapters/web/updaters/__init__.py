"""State updaters for the web adapter."""

from ev_station_status.adapters.web.updaters.state_updater import StateUpdater

__all__ = ["StateUpdater"]
