"""Station snapshot domain models."""

from dataclasses import dataclass, field

UNKNOWN_VALUE = "Unknown"


@dataclass(frozen=True)
class PortSnapshot:
    """Raw status of a single charging outlet at fetch time."""

    outlet_number: int
    status: str | None = None
    status_v2: str | None = None

    @property
    def effective_status(self) -> str | None:
        """Status code to classify, preferring the v2 field when it is set."""
        return self.status_v2 or self.status


@dataclass(frozen=True)
class StationSnapshot:
    """Raw payload for one station at one point in time."""

    station_id: str
    name_parts: tuple[str, ...] = ()
    model_number: str = UNKNOWN_VALUE
    software_version: str = UNKNOWN_VALUE
    ports: tuple[PortSnapshot, ...] = field(default_factory=tuple)

    @property
    def display_name(self) -> str:
        """Name parts joined for display."""
        return " ".join(self.name_parts)
