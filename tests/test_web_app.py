"""Tests for the Starlette web adapter routes."""

from unittest.mock import AsyncMock, MagicMock

import pytest
from starlette.testclient import TestClient

from ev_station_status.adapters.config import AppConfig
from ev_station_status.adapters.url_query_state import UrlQueryState
from ev_station_status.adapters.web import StarletteWebAdapter
from ev_station_status.application.services import NO_VALID_IDS_MESSAGE, StationRegistry
from ev_station_status.domain import DisplayAdapter
from ev_station_status.domain.models import (
    PortSnapshot,
    RefreshResult,
    StationFailure,
    StationSnapshot,
)


@pytest.fixture
def query_state() -> UrlQueryState:
    """Create the canonical URL tracking one station."""
    return UrlQueryState("/?stations=1")


@pytest.fixture
def registry(query_state: UrlQueryState) -> StationRegistry:
    """Create a registry bound to the canonical URL."""
    return StationRegistry.from_query_state(query_state)


@pytest.fixture
def adapter(registry: StationRegistry, query_state: UrlQueryState) -> StarletteWebAdapter:
    """Create a web adapter with a mocked refresh service."""
    config = AppConfig.for_testing(title="Test Chargers", refresh_interval_seconds=30)
    return StarletteWebAdapter(registry, query_state, AsyncMock(), config)


@pytest.fixture
def client(adapter: StarletteWebAdapter) -> TestClient:
    """Create a test client that does not follow redirects."""
    return TestClient(adapter.build_app(), follow_redirects=False)


class TestDashboardRoute:
    """Tests for GET /."""

    def test_canonical_url_renders_page(self, client: TestClient) -> None:
        """Given the canonical URL, when requesting, then the dashboard is rendered."""
        response = client.get("/?stations=1")

        assert response.status_code == 200
        assert "Test Chargers" in response.text
        assert 'value="1"' in response.text
        assert 'content="5"' in response.text

    def test_missing_parameter_redirects_to_canonical(self, client: TestClient) -> None:
        """Given no stations parameter, when requesting, then it redirects to the canonical URL."""
        response = client.get("/")

        assert response.status_code == 307
        assert response.headers["location"] == "/?stations=1"

    def test_new_stations_in_url_replace_registry(
        self,
        client: TestClient,
        adapter: StarletteWebAdapter,
        registry: StationRegistry,
        query_state: UrlQueryState,
    ) -> None:
        """Given a different stations parameter, when requesting, then the registry is replaced."""
        adapter.poller.request_refresh = MagicMock()  # type: ignore[method-assign]

        response = client.get("/?stations=2,3")

        assert response.status_code == 200
        assert registry.current() == ("2", "3")
        assert str(query_state.url) == "/?stations=2,3"
        adapter.poller.request_refresh.assert_called_once_with()

    def test_non_canonical_stations_are_normalised(
        self, client: TestClient, registry: StationRegistry
    ) -> None:
        """Given a messy list equal to the registry, when requesting, then it redirects."""
        response = client.get("/?stations=1;;x")

        assert response.status_code == 307
        assert response.headers["location"] == "/?stations=1"
        assert registry.current() == ("1",)

    def test_empty_parameter_clears_registry(
        self, client: TestClient, registry: StationRegistry
    ) -> None:
        """Given an empty stations parameter, when requesting, then tracking is cleared."""
        response = client.get("/?stations=")

        assert response.status_code == 307
        assert response.headers["location"] == "/"
        assert registry.is_empty

    def test_published_result_is_rendered(
        self, client: TestClient, adapter: StarletteWebAdapter
    ) -> None:
        """Given a published result, when requesting, then rows and failures are shown."""
        station = StationSnapshot(
            station_id="1",
            name_parts=("Depot",),
            ports=(PortSnapshot(outlet_number=1, status="in_use"),),
        )
        adapter.state_updater.update_result(
            RefreshResult(
                stations=(station,),
                failures=(StationFailure(station_id="2", message="HTTP 503"),),
            )
        )

        response = client.get("/?stations=1")

        assert "Depot" in response.text
        assert "In Use" in response.text
        assert "Failed 2: HTTP 503" in response.text


class TestEditStationsRoute:
    """Tests for POST /stations."""

    def test_valid_input_replaces_and_redirects(
        self, client: TestClient, registry: StationRegistry
    ) -> None:
        """Given valid IDs, when submitting, then the registry is replaced and 303 is returned."""
        response = client.post("/stations", data={"stations": "5, 6;5"})

        assert response.status_code == 303
        assert response.headers["location"] == "/?stations=5,6"
        assert registry.current() == ("5", "6")

    def test_invalid_input_is_rejected(self, client: TestClient, registry: StationRegistry) -> None:
        """Given no valid ID, when submitting, then 400 is returned and the registry is kept."""
        response = client.post("/stations", data={"stations": "abc"})

        assert response.status_code == 400
        assert NO_VALID_IDS_MESSAGE in response.text
        assert 'value="abc"' in response.text
        assert registry.current() == ("1",)

    def test_missing_field_is_rejected(self, client: TestClient) -> None:
        """Given no stations field, when submitting, then 400 is returned."""
        response = client.post("/stations", data={})

        assert response.status_code == 400


class TestAuxiliaryRoutes:
    """Tests for status, health and static routes."""

    def test_status_json(self, client: TestClient, adapter: StarletteWebAdapter) -> None:
        """Given a published result, when requesting the status, then JSON mirrors it."""
        adapter.state_updater.update_result(RefreshResult.no_stations())

        response = client.get("/api/status")

        assert response.status_code == 200
        body = response.json()
        assert body["stations"] == ["1"]
        assert body["status"] == "idle"
        assert body["status_message"] == "Add ?stations=ID1,ID2"

    def test_healthz(self, client: TestClient) -> None:
        """Given a running app, when checking health, then Ok is returned."""
        response = client.get("/healthz")

        assert response.status_code == 200
        assert response.text == "Ok"

    def test_static_css_has_cache_headers(self, client: TestClient) -> None:
        """Given the stylesheet, when requesting it, then cache headers are set."""
        response = client.get("/static/dashboard.css")

        assert response.status_code == 200
        assert response.headers["cache-control"] == "public, max-age=60, must-revalidate"


@pytest.mark.asyncio
async def test_stop_without_start(adapter: StarletteWebAdapter) -> None:
    """Given an adapter never started, when stopping, then nothing fails."""
    await adapter.stop()

    assert not adapter.poller.is_running


class TestStationChanges:
    """Tests for what the page shows after the tracked stations change."""

    @pytest.fixture
    def published(self, adapter: StarletteWebAdapter) -> StarletteWebAdapter:
        """Publish a result for the initially tracked station."""
        adapter.state_updater.update_result(
            RefreshResult(stations=(StationSnapshot(station_id="1", name_parts=("OldDepot",)),))
        )
        return adapter

    def test_form_change_hides_previous_rows(
        self, client: TestClient, published: StarletteWebAdapter
    ) -> None:
        """Given a published table, when the form replaces the stations, then old rows are gone."""
        response = client.post("/stations", data={"stations": "999"}, follow_redirects=True)

        assert response.status_code == 200
        assert str(response.url).endswith("/?stations=999")
        assert "OldDepot" not in response.text
        assert "Loading" in response.text
        assert published.dashboard_state.result is None

    def test_url_change_hides_previous_rows(
        self, client: TestClient, published: StarletteWebAdapter
    ) -> None:
        """Given a published table, when the URL replaces the stations, then old rows are gone."""
        response = client.get("/?stations=999")

        assert response.status_code == 200
        assert "OldDepot" not in response.text
        assert published.dashboard_state.rows == []

    def test_unchanged_url_keeps_published_rows(
        self, client: TestClient, published: StarletteWebAdapter
    ) -> None:
        """Given the current stations in the URL, when requesting, then the table stays."""
        response = client.get("/?stations=1")

        assert "OldDepot" in response.text

    def test_replacement_requests_refresh(
        self, client: TestClient, adapter: StarletteWebAdapter
    ) -> None:
        """Given new stations, when submitting the form, then a refresh is requested."""
        adapter.poller.request_refresh = MagicMock()  # type: ignore[method-assign]

        client.post("/stations", data={"stations": "5"})

        adapter.poller.request_refresh.assert_called_once_with()


def test_url_changes_can_be_disabled(query_state: UrlQueryState) -> None:
    """Given URL station changes disabled, when a link carries other IDs, then nothing changes."""
    registry = StationRegistry.from_query_state(query_state)
    config = AppConfig.for_testing(url_station_changes=False)
    adapter = StarletteWebAdapter(registry, query_state, AsyncMock(), config)
    client = TestClient(adapter.build_app(), follow_redirects=False)

    response = client.get("/?stations=2,3")

    assert response.status_code == 307
    assert response.headers["location"] == "/?stations=1"
    assert registry.current() == ("1",)


def test_form_still_works_with_url_changes_disabled(query_state: UrlQueryState) -> None:
    """Given URL station changes disabled, when submitting the form, then stations change."""
    registry = StationRegistry.from_query_state(query_state)
    config = AppConfig.for_testing(url_station_changes=False)
    adapter = StarletteWebAdapter(registry, query_state, AsyncMock(), config)
    client = TestClient(adapter.build_app(), follow_redirects=False)

    response = client.post("/stations", data={"stations": "2"})

    assert response.status_code == 303
    assert registry.current() == ("2",)


def test_display_adapter_port_is_lifecycle_only(
    registry: StationRegistry, query_state: UrlQueryState
) -> None:
    """Given the display port, then it only requires start and stop; results go through the state updater."""
    adapter = StarletteWebAdapter(registry, query_state, AsyncMock(), AppConfig.for_testing())

    assert DisplayAdapter.__abstractmethods__ == frozenset({"start", "stop"})
    assert isinstance(adapter, DisplayAdapter)
    assert not hasattr(adapter, "display_result")
