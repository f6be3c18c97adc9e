"""Navigable URL query state backed by a Starlette URL."""

import logging
from urllib.parse import urlencode

from starlette.datastructures import URL, QueryParams

from ev_station_status.domain.ports.query_state import QueryState

logger = logging.getLogger(__name__)


class UrlQueryState(QueryState):
    """Holds the canonical dashboard URL and rewrites its query in place.

    Every write replaces the held URL; there is no history of previous values.
    Commas stay unescaped so lists read naturally in the address bar.
    """

    def __init__(self, url: str | URL = "/") -> None:
        """Initialize with the starting URL (path and optional query)."""
        self._url = URL(str(url))

    @property
    def url(self) -> URL:
        return self._url

    @property
    def query_params(self) -> QueryParams:
        return QueryParams(self._url.query)

    def get(self, name: str) -> str | None:
        """Return the value of a query parameter, or None if absent."""
        return self.query_params.get(name)

    def replace(self, name: str, value: str | None) -> None:
        """Set ``name`` to ``value`` keeping its position, or drop it when value is None."""
        items: list[tuple[str, str]] = []
        placed = False
        for key, current in self.query_params.multi_items():
            if key != name:
                items.append((key, current))
            elif value is not None and not placed:
                items.append((name, value))
                placed = True
        if value is not None and not placed:
            items.append((name, value))

        self._url = self._url.replace(query=urlencode(items, safe=","))
        logger.debug(f"URL query state replaced: {self._url}")

    def matches(self, query_params: QueryParams) -> bool:
        """Whether the given query carries the same parameters as the held URL."""
        return sorted(query_params.multi_items()) == sorted(self.query_params.multi_items())
