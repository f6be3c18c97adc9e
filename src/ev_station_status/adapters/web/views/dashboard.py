"""Template data and rendering of the station status dashboard."""

from __future__ import annotations

from datetime import datetime
from pathlib import Path
from typing import TYPE_CHECKING, Any

from starlette.templating import Jinja2Templates

if TYPE_CHECKING:
    from ev_station_status.adapters.web.state.dashboard_state import DashboardState
    from ev_station_status.domain.models.display_row import DisplayRow

TEMPLATE_DIRECTORY = Path(__file__).parent.parent / "templates"
DASHBOARD_TEMPLATE = "dashboard.html"

TIME_FORMAT = "%H:%M:%S"
TABLE_HEADERS = ("Station", "Model", "Software", "Port", "Status", "State")
# Reload quickly while the first result for the current stations is pending
LOADING_RELOAD_SECONDS = 5

templates = Jinja2Templates(directory=str(TEMPLATE_DIRECTORY))


def format_last_update(last_update: datetime | None) -> str:
    """Render the completion time of the last cycle in local time."""
    if last_update is None:
        return "never"
    return last_update.astimezone().strftime(TIME_FORMAT)


def group_rows(rows: list[DisplayRow]) -> list[list[DisplayRow]]:
    """Split display rows into one group per station.

    Each group is rendered as its own ``<tbody>`` so a hover on any of its
    rows highlights the whole station, including the merged station cells.
    """
    groups: list[list[DisplayRow]] = []
    for row in rows:
        if row.starts_station or not groups:
            groups.append([])
        groups[-1].append(row)
    return groups


def build_dashboard_context(
    state: DashboardState,
    *,
    title: str,
    station_input: str,
    station_link_base: str,
    refresh_interval_seconds: int,
    input_error: str | None = None,
) -> dict[str, Any]:
    """Build the template variables of the dashboard page.

    Args:
        state: Latest published dashboard state.
        title: Page title.
        station_input: Pre-filled value of the edit form.
        station_link_base: Base URL of the public station page.
        refresh_interval_seconds: Reload interval of the page.
        input_error: Validation message to show under the edit form.
    """
    reload_seconds = refresh_interval_seconds
    if state.result is None:
        reload_seconds = min(refresh_interval_seconds, LOADING_RELOAD_SECONDS)

    return {
        "title": title,
        "reload_seconds": reload_seconds,
        "api_status": state.api_status,
        "last_update": format_last_update(state.last_update),
        "status_message": state.status_message,
        "failure_lines": state.failure_lines,
        "headers": TABLE_HEADERS,
        "station_groups": group_rows(state.rows),
        "station_link_base": station_link_base,
        "station_input": station_input,
        "input_error": input_error,
    }


def render_dashboard(state: DashboardState, **options: Any) -> str:
    """Render the full dashboard page to a string.

    Accepts the same keyword arguments as ``build_dashboard_context``.
    """
    template = templates.get_template(DASHBOARD_TEMPLATE)
    return template.render(build_dashboard_context(state, **options))
