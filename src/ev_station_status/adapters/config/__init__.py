"""Configuration adapters."""

from ev_station_status.adapters.config.app_config import AppConfig

__all__ = ["AppConfig"]
