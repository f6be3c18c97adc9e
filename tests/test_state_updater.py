"""Tests for dashboard state and its updater."""

from datetime import UTC, datetime

from ev_station_status.adapters.web.state import DashboardState
from ev_station_status.adapters.web.state.dashboard_state import (
    LOADING_MESSAGE,
    NO_DATA_MESSAGE,
    NO_STATIONS_MESSAGE,
)
from ev_station_status.adapters.web.updaters import StateUpdater
from ev_station_status.domain.models import (
    PortSnapshot,
    RefreshResult,
    StationFailure,
    StationSnapshot,
)

STATION = StationSnapshot(
    station_id="1",
    name_parts=("Depot",),
    ports=(
        PortSnapshot(outlet_number=1, status="available"),
        PortSnapshot(outlet_number=2, status="in_use"),
    ),
)


def test_initial_state_is_loading() -> None:
    """Given no published result, when reading the status, then it is loading."""
    state = DashboardState()

    assert state.status_message == LOADING_MESSAGE
    assert state.api_status == "unknown"
    assert state.failure_lines == []


def test_update_with_stations_builds_rows() -> None:
    """Given a successful result, when updating, then rows and status are published."""
    state = DashboardState()
    completed_at = datetime(2024, 5, 1, 12, 0, tzinfo=UTC)

    StateUpdater(state).update_result(RefreshResult(stations=(STATION,), completed_at=completed_at))

    assert len(state.rows) == 2
    assert state.last_update == completed_at
    assert state.api_status == "success"
    assert state.status_message == ""


def test_update_with_no_stations_shows_hint() -> None:
    """Given an empty registry result, when updating, then the hint is shown."""
    state = DashboardState()

    StateUpdater(state).update_result(RefreshResult.no_stations())

    assert state.status_message == NO_STATIONS_MESSAGE
    assert state.api_status == "idle"
    assert state.rows == []


def test_update_with_only_failures_shows_no_data() -> None:
    """Given only failures, when updating, then No data and failure lines are shown."""
    state = DashboardState()
    result = RefreshResult(failures=(StationFailure(station_id="9", message="HTTP 500"),))

    StateUpdater(state).update_result(result)

    assert state.status_message == NO_DATA_MESSAGE
    assert state.api_status == "error"
    assert state.failure_lines == ["Failed 9: HTTP 500"]


def test_update_with_partial_failure() -> None:
    """Given successes and failures, when updating, then the status is partial."""
    state = DashboardState()
    result = RefreshResult(
        stations=(STATION,),
        failures=(StationFailure(station_id="9", message="Request timed out"),),
    )

    StateUpdater(state).update_result(result)

    assert state.api_status == "partial"
    assert state.status_message == ""
    assert state.failure_lines == ["Failed 9: Request timed out"]


def test_update_replaces_previous_rows() -> None:
    """Given a previous result, when a new one is published, then nothing old remains."""
    state = DashboardState()
    updater = StateUpdater(state)
    updater.update_result(RefreshResult(stations=(STATION,)))

    updater.update_result(RefreshResult(failures=(StationFailure(station_id="1", message="x"),)))

    assert state.rows == []
    assert state.failure_lines == ["Failed 1: x"]


def test_reset_returns_to_loading_state() -> None:
    """Given a published result, when resetting, then the previous rows are gone."""
    state = DashboardState()
    updater = StateUpdater(state)
    updater.update_result(
        RefreshResult(stations=(STATION,), completed_at=datetime(2024, 5, 1, tzinfo=UTC))
    )

    updater.reset()

    assert state.result is None
    assert state.rows == []
    assert state.last_update is None
    assert state.api_status == "unknown"
    assert state.status_message == LOADING_MESSAGE
