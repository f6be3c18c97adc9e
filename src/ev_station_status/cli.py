"""Command line client printing the status of EV charging stations."""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from typing import TYPE_CHECKING, TextIO

import aiohttp

from ev_station_status.adapters.chargepoint_api import ChargePointStationRepository
from ev_station_status.adapters.config import AppConfig
from ev_station_status.adapters.pollers import RefreshPoller
from ev_station_status.adapters.url_query_state import UrlQueryState
from ev_station_status.adapters.web.state import DashboardState
from ev_station_status.adapters.web.updaters import StateUpdater
from ev_station_status.adapters.web.views import build_status_payload
from ev_station_status.adapters.web.views.dashboard import format_last_update
from ev_station_status.application.services import (
    NO_VALID_IDS_MESSAGE,
    RefreshService,
    StationRegistry,
    validate_station_input,
)
from ev_station_status.domain.contracts import StateUpdaterProtocol

if TYPE_CHECKING:
    from collections.abc import Sequence

    from ev_station_status.domain.models.refresh_result import RefreshResult

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_ALL_FAILED = 1
EXIT_NO_STATIONS = 2
EXIT_INVALID_CONFIG = 2

TABLE_HEADERS = ("Station", "Model", "Software", "Port", "Status", "State")


def format_table(state: DashboardState) -> str:
    """Format the published rows as an aligned text table plus failure lines."""
    table: list[tuple[str, ...]] = [TABLE_HEADERS]
    for row in state.rows:
        station = ("", "", "")
        if row.station is not None:
            name = row.station.name or row.station.station_id
            station = (
                f"{name} ({row.station.station_id})",
                row.station.model_number,
                row.station.software_version,
            )
        port = ("-", "No ports reported", "")
        if row.port is not None:
            classification = row.port.classification
            port = (row.port.label, classification.display_text, classification.state_text)
        table.append(station + port)

    widths = [max(len(line[i]) for line in table) for i in range(len(TABLE_HEADERS))]
    lines: list[str] = []
    if state.rows:
        for line in table:
            cells = (cell.ljust(width) for cell, width in zip(line, widths, strict=True))
            lines.append("  ".join(cells).rstrip())

    if state.status_message:
        lines.append(state.status_message)
    lines.extend(state.failure_lines)
    lines.append(f"Last update: {format_last_update(state.last_update)}")
    return "\n".join(lines)


class ConsoleStateUpdater(StateUpdaterProtocol):
    """Publishes every refresh result to a text stream."""

    def __init__(
        self,
        station_ids: Sequence[str],
        as_json: bool = False,
        stream: TextIO | None = None,
    ) -> None:
        """Initialize the console updater.

        Args:
            station_ids: Tracked IDs, echoed in JSON output.
            as_json: Print the JSON render model instead of a table.
            stream: Output stream; defaults to stdout.
        """
        self.state = DashboardState()
        self._state_updater = StateUpdater(self.state)
        self._station_ids = tuple(station_ids)
        self._as_json = as_json
        self._stream = stream or sys.stdout

    def update_result(self, result: RefreshResult) -> None:
        """Render the result and write it to the stream."""
        self._state_updater.update_result(result)
        if self._as_json:
            output = json.dumps(build_status_payload(self.state, self._station_ids), indent=2)
        else:
            output = format_table(self.state)
        print(output, file=self._stream, flush=True)


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        description="Show the live status of EV charging stations",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # One-shot status of two stations
  ev-station-status --stations "123456, 234567"

  # Track the stations of a dashboard link
  ev-station-status --url "http://localhost:8000/?stations=123456,234567"

  # Keep polling every 30 seconds
  ev-station-status --stations 123456 --watch --interval 30
        """,
    )
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument("--stations", help="Station IDs separated by commas, semicolons or spaces")
    source.add_argument("--url", help="Dashboard URL carrying a ?stations= parameter")
    parser.add_argument("--watch", action="store_true", help="Keep polling until interrupted")
    parser.add_argument(
        "--interval",
        type=int,
        default=None,
        help="Seconds between refresh cycles in watch mode (default: from configuration)",
    )
    parser.add_argument("--json", action="store_true", help="Output as JSON")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def build_registry(args: argparse.Namespace) -> StationRegistry | None:
    """Create the registry from ``--stations`` or ``--url``; None when no ID is valid."""
    if args.url is not None:
        registry = StationRegistry.from_query_state(UrlQueryState(args.url))
        return None if registry.is_empty else registry

    station_input = validate_station_input(args.stations)
    if not station_input.is_valid:
        return None
    return StationRegistry(UrlQueryState(), station_input.station_ids)


async def run(args: argparse.Namespace, registry: StationRegistry, config: AppConfig) -> int:
    """Run one refresh cycle, or keep polling in watch mode."""
    updater = ConsoleStateUpdater(registry.current(), as_json=args.json)

    async with aiohttp.ClientSession() as session:
        station_repo = ChargePointStationRepository(
            session,
            base_url=config.api_base_url,
            timeout_seconds=config.api_timeout_seconds,
        )
        refresh_service = RefreshService(
            station_repo, max_concurrent_requests=config.max_concurrent_requests
        )

        if not args.watch:
            result = await refresh_service.refresh(registry)
            updater.update_result(result)
            if result.has_failures and not result.has_data:
                return EXIT_ALL_FAILED
            return EXIT_OK

        poller = RefreshPoller(
            registry,
            refresh_service,
            updater,
            refresh_interval_seconds=args.interval or config.refresh_interval_seconds,
        )
        await poller.start()
        try:
            await asyncio.Event().wait()
        finally:
            await poller.stop()
    return EXIT_OK


def main(argv: Sequence[str] | None = None) -> int:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )

    if args.interval is not None and args.interval <= 0:
        parser.error("--interval must be greater than 0")

    registry = build_registry(args)
    if registry is None:
        print(NO_VALID_IDS_MESSAGE, file=sys.stderr)
        return EXIT_NO_STATIONS

    try:
        config = AppConfig.load()
    except (ValueError, FileNotFoundError) as e:
        print(f"Invalid configuration: {e}", file=sys.stderr)
        return EXIT_INVALID_CONFIG

    try:
        return asyncio.run(run(args, registry, config))
    except KeyboardInterrupt:
        return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
