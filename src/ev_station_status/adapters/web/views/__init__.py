"""Views for the web adapter."""

from ev_station_status.adapters.web.views.dashboard import (
    DASHBOARD_TEMPLATE,
    build_dashboard_context,
    render_dashboard,
    templates,
)
from ev_station_status.adapters.web.views.status import build_status_payload

__all__ = [
    "DASHBOARD_TEMPLATE",
    "build_dashboard_context",
    "build_status_payload",
    "render_dashboard",
    "templates",
]
