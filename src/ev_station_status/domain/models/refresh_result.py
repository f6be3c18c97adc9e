"""Refresh result domain models."""

from dataclasses import dataclass, field
from datetime import datetime

from ev_station_status.domain.models.station_snapshot import StationSnapshot


@dataclass(frozen=True)
class StationFailure:
    """A station that could not be fetched in a refresh cycle."""

    station_id: str
    message: str


@dataclass(frozen=True)
class RefreshResult:
    """Outcome of one refresh cycle.

    Stations and failures are both in registry order. ``completed_at`` is
    excluded from equality so two cycles over unchanged data compare equal.
    """

    stations: tuple[StationSnapshot, ...] = ()
    failures: tuple[StationFailure, ...] = ()
    no_stations_configured: bool = False
    completed_at: datetime | None = field(default=None, compare=False)

    @classmethod
    def no_stations(cls, completed_at: datetime | None = None) -> "RefreshResult":
        """Result for an empty registry; no fetch was attempted."""
        return cls(no_stations_configured=True, completed_at=completed_at)

    @property
    def has_failures(self) -> bool:
        return bool(self.failures)

    @property
    def has_data(self) -> bool:
        return bool(self.stations)
