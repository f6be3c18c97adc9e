"""Domain exceptions."""

from ev_station_status.domain.models.error_details import ErrorDetails


class FetchError(RuntimeError):
    """Raised when station data cannot be retrieved from the vendor API.

    Covers both non-success HTTP responses and transport failures so the
    refresh cycle only has to handle a single failure kind.
    """

    def __init__(
        self, station_id: str, message: str, details: ErrorDetails | None = None
    ) -> None:
        super().__init__(f"Failed to fetch station {station_id}: {message}")
        self.station_id = station_id
        self.message = message
        self.details = details
