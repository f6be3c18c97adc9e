"""Protocol for publishing refresh results."""

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from ev_station_status.domain.models.refresh_result import RefreshResult


class StateUpdaterProtocol(Protocol):
    """Protocol for consumers of refresh results."""

    def update_result(self, result: "RefreshResult") -> None:
        """Replace the published state with a new refresh result.

        Args:
            result: The outcome of the latest refresh cycle.
        """
        ...
