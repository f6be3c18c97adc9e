"""Dashboard state shared between the poller and the web views."""

from ev_station_status.adapters.web.state.dashboard_state import DashboardState

__all__ = ["DashboardState"]
