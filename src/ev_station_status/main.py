"""Main entry point for the EV station status dashboard."""

import asyncio
import logging
import sys

import aiohttp
from pydantic import ValidationError

from ev_station_status.adapters.chargepoint_api import ChargePointStationRepository
from ev_station_status.adapters.config import AppConfig
from ev_station_status.adapters.url_query_state import UrlQueryState
from ev_station_status.adapters.web import StarletteWebAdapter
from ev_station_status.application.services import (
    STATIONS_PARAMETER,
    RefreshService,
    StationRegistry,
    format_station_ids,
    parse_station_ids,
)

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
    stream=sys.stderr,
)

logger = logging.getLogger(__name__)


def load_config() -> AppConfig:
    """Load configuration from the environment and the optional TOML file.

    Exits the process with status 1 when the configuration is invalid.
    """
    try:
        config = AppConfig.load()
    except (ValidationError, ValueError, FileNotFoundError) as e:
        logger.error(f"Invalid configuration: {e}")
        sys.exit(1)

    logging.getLogger().setLevel(config.log_level)
    return config


def initial_url(stations: str) -> str:
    """Build the starting dashboard URL from the configured station list."""
    station_ids = parse_station_ids(stations)
    if not station_ids:
        return "/"
    return f"/?{STATIONS_PARAMETER}={format_station_ids(dict.fromkeys(station_ids))}"


async def main() -> None:
    """Main application entry point."""
    config = load_config()

    query_state = UrlQueryState(initial_url(config.stations))
    registry = StationRegistry.from_query_state(query_state)
    logger.info(f"Tracking {len(registry)} station(s) at startup")

    # Create aiohttp session for efficient HTTP connections
    async with aiohttp.ClientSession() as session:
        station_repo = ChargePointStationRepository(
            session,
            base_url=config.api_base_url,
            timeout_seconds=config.api_timeout_seconds,
        )

        refresh_service = RefreshService(
            station_repo,
            max_concurrent_requests=config.max_concurrent_requests,
        )

        display_adapter = StarletteWebAdapter(registry, query_state, refresh_service, config)

        try:
            await display_adapter.start()
        except KeyboardInterrupt:
            logger.info("Shutting down...")
        finally:
            await display_adapter.stop()


def run() -> None:
    """Console script entry point."""
    asyncio.run(main())


if __name__ == "__main__":
    run()
