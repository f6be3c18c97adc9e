"""Registry of tracked station identifiers."""

import logging
from collections.abc import Callable, Iterable

from ev_station_status.application.services.station_ids import (
    format_station_ids,
    parse_station_ids,
)
from ev_station_status.domain.ports.query_state import QueryState

logger = logging.getLogger(__name__)

STATIONS_PARAMETER = "stations"


class StationRegistry:
    """Ordered set of tracked station IDs, mirrored into the navigable URL.

    The registry is the single source of truth for what is tracked. It is only
    ever replaced as a whole; the refresh path reads ``current()`` snapshots.
    """

    def __init__(
        self,
        query_state: QueryState,
        station_ids: Iterable[str] = (),
        parameter: str = STATIONS_PARAMETER,
    ) -> None:
        """Initialize the registry without touching the URL.

        Args:
            query_state: The navigable URL query state to keep in sync.
            station_ids: Initially tracked station IDs.
            parameter: Name of the query parameter holding the IDs.
        """
        self._query_state = query_state
        self._parameter = parameter
        self._station_ids: tuple[str, ...] = _unique(station_ids)
        self._refresh_trigger: Callable[[], None] | None = None

    @classmethod
    def from_query_state(
        cls, query_state: QueryState, parameter: str = STATIONS_PARAMETER
    ) -> "StationRegistry":
        """Create a registry from the IDs currently present in the URL."""
        station_ids = parse_station_ids(query_state.get(parameter))
        if not station_ids:
            logger.info("No stations configured in the URL")
        return cls(query_state, station_ids, parameter=parameter)

    @property
    def parameter(self) -> str:
        return self._parameter

    @property
    def query_value(self) -> str:
        """Comma-joined IDs as written to the URL."""
        return format_station_ids(self._station_ids)

    @property
    def is_empty(self) -> bool:
        return not self._station_ids

    def __len__(self) -> int:
        return len(self._station_ids)

    def current(self) -> tuple[str, ...]:
        """Return the tracked IDs in stable order."""
        return self._station_ids

    def bind_refresh(self, trigger: Callable[[], None] | None) -> None:
        """Attach the callable invoked after every replacement."""
        self._refresh_trigger = trigger

    def replace(self, station_ids: Iterable[str]) -> tuple[str, ...]:
        """Replace the tracked IDs, sync them into the URL and request a refresh.

        The parameter is removed from the URL entirely when no IDs remain.

        Returns:
            The new tracked IDs, de-duplicated in first-seen order.
        """
        self._station_ids = _unique(station_ids)
        self._query_state.replace(self._parameter, self.query_value or None)
        logger.info(f"Tracking {len(self._station_ids)} station(s): {self.query_value or '-'}")

        if self._refresh_trigger is not None:
            self._refresh_trigger()
        return self._station_ids


def _unique(station_ids: Iterable[str]) -> tuple[str, ...]:
    return tuple(dict.fromkeys(station_ids))
