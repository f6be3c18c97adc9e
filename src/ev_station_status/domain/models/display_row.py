"""Display row domain models."""

from dataclasses import dataclass

from ev_station_status.domain.models.classification import Classification


@dataclass(frozen=True)
class StationCells:
    """Station-level fields, shown once and spanning all rows of the station."""

    station_id: str
    name: str
    model_number: str
    software_version: str
    row_span: int


@dataclass(frozen=True)
class PortCells:
    """Port-level fields of a display row."""

    label: str
    classification: Classification


@dataclass(frozen=True)
class DisplayRow:
    """One rendered table row."""

    station_id: str
    station: StationCells | None = None
    port: PortCells | None = None

    @property
    def starts_station(self) -> bool:
        """Whether this row carries the merged station cells."""
        return self.station is not None
