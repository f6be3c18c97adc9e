"""Starlette web adapter for displaying station status."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from starlette.applications import Starlette
from starlette.responses import JSONResponse, RedirectResponse, Response
from starlette.routing import Route

from ev_station_status.adapters.pollers import RefreshPoller
from ev_station_status.adapters.web.servers import static_mount
from ev_station_status.adapters.web.state import DashboardState
from ev_station_status.adapters.web.updaters import StateUpdater
from ev_station_status.adapters.web.views import (
    DASHBOARD_TEMPLATE,
    build_dashboard_context,
    build_status_payload,
    templates,
)
from ev_station_status.application.services.station_ids import (
    format_station_ids,
    parse_station_ids,
    validate_station_input,
)
from ev_station_status.domain.ports import DisplayAdapter

if TYPE_CHECKING:
    from starlette.requests import Request

    from ev_station_status.adapters.config import AppConfig
    from ev_station_status.adapters.url_query_state import UrlQueryState
    from ev_station_status.application.services.refresh_service import RefreshService
    from ev_station_status.application.services.station_registry import StationRegistry

logger = logging.getLogger(__name__)


class StarletteWebAdapter(DisplayAdapter):
    """Starlette-based web adapter serving the station status dashboard."""

    def __init__(
        self,
        registry: StationRegistry,
        query_state: UrlQueryState,
        refresh_service: RefreshService,
        config: AppConfig,
    ) -> None:
        """Initialize the web adapter.

        Args:
            registry: Registry of tracked stations, shared with the poller.
            query_state: Canonical dashboard URL kept in sync by the registry.
            refresh_service: Service running a single refresh cycle.
            config: Application configuration.
        """
        self.registry = registry
        self.query_state = query_state
        self.config = config
        self.dashboard_state = DashboardState()
        self.state_updater = StateUpdater(self.dashboard_state)
        self.poller = RefreshPoller(
            registry,
            refresh_service,
            self.state_updater,
            refresh_interval_seconds=config.refresh_interval_seconds,
        )
        registry.bind_refresh(self._on_stations_replaced)
        self._server: Any | None = None

    def _on_stations_replaced(self) -> None:
        """Hide the previous stations' rows and refresh the new ones right away."""
        self.state_updater.reset()
        self.poller.request_refresh()

    def _render(
        self,
        request: Request,
        station_input: str,
        input_error: str | None = None,
        status_code: int = 200,
    ) -> Response:
        context = build_dashboard_context(
            self.dashboard_state,
            title=self.config.title,
            station_input=station_input,
            station_link_base=self.config.station_link_base,
            refresh_interval_seconds=self.config.refresh_interval_seconds,
            input_error=input_error,
        )
        return templates.TemplateResponse(
            request, DASHBOARD_TEMPLATE, context, status_code=status_code
        )

    def _canonical_redirect(self, status_code: int) -> RedirectResponse:
        return RedirectResponse(url=str(self.query_state.url), status_code=status_code)

    async def dashboard(self, request: Request) -> Response:
        """Render the dashboard.

        A ``stations`` query that differs from the registry replaces it when URL
        station changes are enabled; any other non-canonical query is redirected.
        """
        requested = request.query_params.get(self.registry.parameter)
        if requested is not None and self.config.url_station_changes:
            station_ids = tuple(dict.fromkeys(parse_station_ids(requested)))
            if station_ids != self.registry.current():
                logger.info(f"Stations changed via URL: {requested!r}")
                self.registry.replace(station_ids)

        if not self.query_state.matches(request.query_params):
            return self._canonical_redirect(307)

        return self._render(request, format_station_ids(self.registry.current()))

    async def edit_stations(self, request: Request) -> Response:
        """Handle the station edit form."""
        form = await request.form()
        raw = form.get(self.registry.parameter)
        station_input = validate_station_input(raw if isinstance(raw, str) else None)

        if not station_input.is_valid:
            logger.info(f"Rejected station input: {station_input.raw!r}")
            return self._render(
                request, station_input.raw, input_error=station_input.error, status_code=400
            )

        self.registry.replace(station_input.station_ids)
        return self._canonical_redirect(303)

    async def status(self, _request: Request) -> Response:
        """Return the latest render model as JSON."""
        return JSONResponse(build_status_payload(self.dashboard_state, self.registry.current()))

    async def healthz(self, _request: Request) -> Response:
        """Health check endpoint for load balancers and monitoring."""
        return Response(content="Ok", media_type="text/plain")

    def build_app(self) -> Starlette:
        """Create the Starlette application with all dashboard routes."""
        routes = [
            Route("/", self.dashboard, methods=["GET"]),
            Route("/stations", self.edit_stations, methods=["POST"]),
            Route("/api/status", self.status, methods=["GET"]),
            Route("/healthz", self.healthz, methods=["GET"]),
            static_mount(),
        ]
        return Starlette(routes=routes)

    async def start(self) -> None:
        """Start the refresh poller and the web server."""
        import uvicorn

        await self.poller.start()

        config = uvicorn.Config(
            self.build_app(),
            host=self.config.host,
            port=self.config.port,
            log_level=self.config.log_level.lower(),
        )
        self._server = uvicorn.Server(config)
        logger.info(f"Serving dashboard on http://{self.config.host}:{self.config.port}/")

        await self._server.serve()

    async def stop(self) -> None:
        """Stop the web server."""
        await self.poller.stop()

        if self._server:
            self._server.should_exit = True
