"""Static file server implementation."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any

from starlette.routing import Mount
from starlette.staticfiles import StaticFiles

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable, MutableMapping

logger = logging.getLogger(__name__)

STATIC_DIRECTORY = Path(__file__).parent.parent / "static"
CACHE_CONTROL = b"public, max-age=60, must-revalidate"


class StaticFileCacheApp:
    """ASGI app wrapper that adds cache headers to static file responses."""

    def __init__(self, static_files: StaticFiles) -> None:
        """Initialize with a StaticFiles instance."""
        self.static_files = static_files

    async def __call__(
        self,
        scope: dict[str, Any],
        receive: Callable[[], Awaitable[dict[str, Any]]],
        send: Callable[[MutableMapping[str, Any]], Awaitable[None]],
    ) -> None:
        """Handle ASGI request and add cache headers."""

        async def send_with_cache_headers(
            message: MutableMapping[str, Any],
        ) -> None:
            """Add cache headers before sending response."""
            if message["type"] == "http.response.start":
                # Headers in ASGI are already a list of (bytes, bytes) tuples
                headers = list(message.get("headers", []))
                has_cache_control = any(header[0].lower() == b"cache-control" for header in headers)
                if not has_cache_control:
                    headers.append((b"cache-control", CACHE_CONTROL))
                    message["headers"] = headers
            await send(message)

        await self.static_files(scope, receive, send_with_cache_headers)


def static_mount(directory: Path = STATIC_DIRECTORY) -> Mount:
    """Build the ``/static`` mount serving the dashboard stylesheet.

    Args:
        directory: Directory holding the static assets.
    """
    static_files = StaticFiles(directory=str(directory))
    logger.info(f"Mounted static files from {directory} with 1-minute cache headers")
    return Mount("/static", app=StaticFileCacheApp(static_files), name="static")
