"""Station repository port."""

from typing import Protocol

from ev_station_status.domain.models.station_snapshot import StationSnapshot


class StationRepository(Protocol):
    """Port for retrieving live station data."""

    async def get_station(self, station_id: str) -> StationSnapshot:
        """Fetch a fresh snapshot of one station.

        Raises:
            FetchError: If the station could not be retrieved.
        """
        ...
