"""Refresh orchestration across all tracked stations."""

from __future__ import annotations

import asyncio
import logging
from datetime import UTC, datetime
from typing import TYPE_CHECKING

from ev_station_status.domain.exceptions import FetchError
from ev_station_status.domain.models.refresh_result import RefreshResult, StationFailure
from ev_station_status.domain.models.station_snapshot import StationSnapshot

if TYPE_CHECKING:
    from collections.abc import Sequence

    from ev_station_status.application.services.station_registry import StationRegistry
    from ev_station_status.domain.ports.station_repository import StationRepository

logger = logging.getLogger(__name__)


class RefreshService:
    """Runs one refresh cycle: fetch every tracked station, aggregate the outcome."""

    def __init__(
        self, station_repository: StationRepository, max_concurrent_requests: int = 0
    ) -> None:
        """Initialize the refresh service.

        Args:
            station_repository: Repository used to fetch each station.
            max_concurrent_requests: Upper bound on simultaneous fetches
                (0 means all stations are fetched at once).
        """
        self._station_repository = station_repository
        self._max_concurrent_requests = max_concurrent_requests

    async def refresh(self, registry: StationRegistry) -> RefreshResult:
        """Fetch all stations of the registry and return a fresh result."""
        return await self.refresh_ids(registry.current())

    async def refresh_ids(self, station_ids: Sequence[str]) -> RefreshResult:
        """Fetch the given stations concurrently.

        Each fetch is isolated - a failure in one request never affects the
        others. Successes and failures keep the order of ``station_ids``, not
        the order in which responses arrive.
        """
        if not station_ids:
            logger.debug("No stations configured, skipping fetch")
            return RefreshResult.no_stations(completed_at=datetime.now(UTC))

        semaphore = (
            asyncio.Semaphore(self._max_concurrent_requests)
            if self._max_concurrent_requests > 0
            else None
        )
        outcomes = await asyncio.gather(
            *(self._fetch_isolated(station_id, semaphore) for station_id in station_ids)
        )

        stations = tuple(o for o in outcomes if isinstance(o, StationSnapshot))
        failures = tuple(o for o in outcomes if isinstance(o, StationFailure))
        logger.info(
            f"Refresh cycle finished: {len(stations)} station(s) fetched, "
            f"{len(failures)} failure(s)"
        )
        return RefreshResult(
            stations=stations,
            failures=failures,
            completed_at=datetime.now(UTC),
        )

    async def _fetch_isolated(
        self, station_id: str, semaphore: asyncio.Semaphore | None
    ) -> StationSnapshot | StationFailure:
        """Fetch one station, converting any failure into a StationFailure."""
        try:
            if semaphore is None:
                return await self._station_repository.get_station(station_id)
            async with semaphore:
                return await self._station_repository.get_station(station_id)
        except FetchError as e:
            logger.warning(f"Failed to fetch station {station_id}: {e.message}")
            return StationFailure(station_id=station_id, message=e.message)
        except Exception as e:
            # Catch everything so one broken response cannot abort the cycle
            logger.error(f"Unexpected error fetching station {station_id}: {e}", exc_info=True)
            return StationFailure(station_id=station_id, message=str(e) or type(e).__name__)
