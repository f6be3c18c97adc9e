"""Periodic refresh of all tracked stations."""

from __future__ import annotations

import asyncio
import contextlib
import logging
from typing import TYPE_CHECKING

from ev_station_status.domain.contracts.refresh_poller import RefreshPollerProtocol

if TYPE_CHECKING:
    from ev_station_status.application.services.refresh_service import RefreshService
    from ev_station_status.application.services.station_registry import StationRegistry
    from ev_station_status.domain.contracts.state_updater import StateUpdaterProtocol
    from ev_station_status.domain.models.refresh_result import RefreshResult

logger = logging.getLogger(__name__)


class RefreshPoller(RefreshPollerProtocol):
    """Runs refresh cycles on a fixed interval and publishes their results.

    Cycles never overlap: they run one after another in a single task and the
    interval is measured from the end of the previous cycle, so a timer tick
    that would fall inside a running cycle is skipped. A refresh requested
    while a cycle is running is coalesced into one cycle right after it.
    """

    def __init__(
        self,
        registry: StationRegistry,
        refresh_service: RefreshService,
        state_updater: StateUpdaterProtocol,
        refresh_interval_seconds: float = 60,
    ) -> None:
        """Initialize the poller.

        Args:
            registry: Registry of tracked stations (read only).
            refresh_service: Service running a single refresh cycle.
            state_updater: Consumer of every published result.
            refresh_interval_seconds: Seconds between the end of one cycle
                and the start of the next.
        """
        self.registry = registry
        self.refresh_service = refresh_service
        self.state_updater = state_updater
        self.refresh_interval_seconds = refresh_interval_seconds
        self._refresh_requested = asyncio.Event()
        self._task: asyncio.Task | None = None

    @property
    def is_running(self) -> bool:
        return self._task is not None and not self._task.done()

    async def start(self) -> None:
        """Start the poller; the first cycle runs immediately."""
        if self.is_running:
            logger.warning("Refresh poller already running")
            return

        self._task = asyncio.create_task(self._poll_loop())
        logger.info(
            f"Started refresh poller (interval: {self.refresh_interval_seconds}s, "
            f"stations: {len(self.registry)})"
        )

    async def stop(self) -> None:
        """Stop the poller."""
        if self._task and not self._task.done():
            self._task.cancel()
            with contextlib.suppress(asyncio.CancelledError):
                await self._task
            logger.info("Stopped refresh poller")
        self._task = None

    def request_refresh(self) -> None:
        """Run a cycle as soon as the current one (if any) has finished."""
        self._refresh_requested.set()

    async def _wait_for_next_cycle(self) -> None:
        """Sleep until the interval elapses or a refresh is requested."""
        with contextlib.suppress(TimeoutError):
            await asyncio.wait_for(
                self._refresh_requested.wait(), timeout=self.refresh_interval_seconds
            )

    async def _poll_loop(self) -> None:
        """Main polling loop."""
        try:
            while True:
                self._refresh_requested.clear()
                await self._refresh_with_error_handling()
                await self._wait_for_next_cycle()
        except asyncio.CancelledError:
            logger.info("Refresh poller cancelled")
            raise

    async def _refresh_with_error_handling(self) -> None:
        """Run one cycle; errors are logged and retried on the next cycle."""
        try:
            await self.refresh_once()
        except Exception as e:
            logger.error(f"Error in refresh cycle (will retry): {e}", exc_info=True)

    async def refresh_once(self) -> RefreshResult | None:
        """Run a single cycle and publish its result.

        Returns:
            The published result, or None when the registry changed while the
            cycle was running and the result was discarded as stale.
        """
        station_ids = self.registry.current()
        result = await self.refresh_service.refresh_ids(station_ids)

        if self.registry.current() != station_ids:
            logger.info("Registry changed during refresh, discarding stale result")
            return None

        self.state_updater.update_result(result)
        return result
