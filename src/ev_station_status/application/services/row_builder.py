"""Projection of station snapshots into display rows."""

from collections.abc import Iterable

from ev_station_status.application.services.status_classifier import classify
from ev_station_status.domain.models.display_row import DisplayRow, PortCells, StationCells
from ev_station_status.domain.models.station_snapshot import PortSnapshot, StationSnapshot


def port_label(port: PortSnapshot) -> str:
    return f"Port {port.outlet_number}"


def _station_cells(station: StationSnapshot, row_span: int) -> StationCells:
    return StationCells(
        station_id=station.station_id,
        name=station.display_name,
        model_number=station.model_number,
        software_version=station.software_version,
        row_span=row_span,
    )


def build_station_rows(station: StationSnapshot) -> list[DisplayRow]:
    """Build the rows of a single station.

    The first row carries the station cells spanning every port row; a station
    without ports still yields one row so it does not disappear from the table.
    """
    if not station.ports:
        return [DisplayRow(station_id=station.station_id, station=_station_cells(station, 1))]

    rows = []
    for index, port in enumerate(station.ports):
        rows.append(
            DisplayRow(
                station_id=station.station_id,
                station=_station_cells(station, len(station.ports)) if index == 0 else None,
                port=PortCells(
                    label=port_label(port),
                    classification=classify(port.effective_status),
                ),
            )
        )
    return rows


def build_rows(stations: Iterable[StationSnapshot]) -> list[DisplayRow]:
    """Flatten stations into display rows, keeping station and port order."""
    rows: list[DisplayRow] = []
    for station in stations:
        rows.extend(build_station_rows(station))
    return rows
