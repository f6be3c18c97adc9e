"""Protocol for periodic station refreshing."""

from typing import Protocol


class RefreshPollerProtocol(Protocol):
    """Protocol for polling station status on a fixed interval."""

    async def start(self) -> None:
        """Start the poller."""
        ...

    async def stop(self) -> None:
        """Stop the poller."""
        ...

    def request_refresh(self) -> None:
        """Ask for a refresh cycle as soon as possible."""
        ...
