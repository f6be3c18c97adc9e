"""Servers for the web adapter."""

from ev_station_status.adapters.web.servers.static_file_server import (
    StaticFileCacheApp,
    static_mount,
)

__all__ = ["StaticFileCacheApp", "static_mount"]
