"""Parsing of station identifier lists."""

import re
from collections.abc import Iterable
from dataclasses import dataclass, field

STATION_ID_PATTERN = re.compile(r"^[0-9]+$")
_SEPARATORS = re.compile(r"[;,\s]+")

NO_VALID_IDS_MESSAGE = "Enter at least one numeric station ID (separate IDs with commas)."


def parse_station_ids(raw: str | None) -> list[str]:
    """Extract numeric station IDs from free text or a URL parameter value.

    Tokens are separated by any run of commas, semicolons or whitespace.
    Malformed tokens are dropped silently and order is preserved; duplicates
    are kept and collapsed later by the registry.
    """
    if not raw:
        return []
    tokens = (token.strip() for token in _SEPARATORS.split(raw))
    return [token for token in tokens if token and STATION_ID_PATTERN.match(token)]


def format_station_ids(station_ids: Iterable[str]) -> str:
    """Join station IDs into the comma-separated form used in URLs and forms."""
    return ",".join(station_ids)


@dataclass(frozen=True)
class StationInput:
    """Validated user input from the station edit form."""

    raw: str
    station_ids: list[str] = field(default_factory=list)
    error: str | None = None

    @property
    def is_valid(self) -> bool:
        return self.error is None


def validate_station_input(raw: str | None) -> StationInput:
    """Parse user-entered station IDs, reporting a message when none are valid."""
    text = raw or ""
    station_ids = parse_station_ids(text)
    if not station_ids:
        return StationInput(raw=text, error=NO_VALID_IDS_MESSAGE)
    return StationInput(raw=text, station_ids=station_ids)
