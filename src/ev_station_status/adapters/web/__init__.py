"""Web adapter serving the station status dashboard."""

from ev_station_status.adapters.web.starlette_app import StarletteWebAdapter

__all__ = ["StarletteWebAdapter"]
