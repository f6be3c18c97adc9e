"""Navigable URL query state port."""

from typing import Protocol


class QueryState(Protocol):
    """Port for reading and writing parameters of the navigable URL.

    Writes replace the current location rather than adding a history entry.
    """

    def get(self, name: str) -> str | None:
        """Return the raw value of a query parameter, or None if absent."""
        ...

    def replace(self, name: str, value: str | None) -> None:
        """Set a query parameter, or remove it entirely when value is None."""
        ...
