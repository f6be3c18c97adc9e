"""12-factor configuration adapter using environment variables and TOML config."""

import logging
import tomllib
from pathlib import Path
from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_API_BASE_URL = "https://mc.chargepoint.com/map-prod/v3/station/info"
DEFAULT_STATION_LINK_BASE = "https://driver.chargepoint.com/stations/"


def _positive_interval(value: int) -> int:
    if value <= 0:
        raise ValueError("refresh_interval_seconds must be greater than 0")
    return value


class AppConfig(BaseSettings):
    """Application configuration following 12-factor principles."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Server configuration
    host: str = Field(default="0.0.0.0", description="Host to bind the server to")
    port: int = Field(default=8000, description="Port to bind the server to")
    log_level: str = Field(default="INFO", description="Root log level")

    # Vendor API configuration
    api_base_url: str = Field(
        default=DEFAULT_API_BASE_URL,
        description="Station info endpoint; the device ID is passed as ?deviceId=",
    )
    api_timeout_seconds: int = Field(
        default=10, description="Timeout for a single station request in seconds"
    )
    max_concurrent_requests: int = Field(
        default=0,
        description="Maximum simultaneous station requests per cycle (0 for no limit)",
    )

    # Dashboard configuration
    stations: str = Field(
        default="",
        description="Initially tracked station IDs, comma/semicolon/space separated",
    )
    refresh_interval_seconds: int = Field(
        default=60, description="Interval between refresh cycles in seconds"
    )
    title: str = Field(default="EV Station Status", description="Page title")
    station_link_base: str = Field(
        default=DEFAULT_STATION_LINK_BASE,
        description="Base URL of the public station page; the station ID is appended",
    )
    url_station_changes: bool = Field(
        default=True,
        description=(
            "Let a ?stations= query on GET / replace the tracked stations for every viewer; "
            "when disabled only the edit form changes them"
        ),
    )

    # Optional TOML config file
    config_file: str | None = Field(
        default=None,
        description="Path to TOML configuration file with [dashboard] and [api] sections",
    )

    @classmethod
    def load(cls) -> "AppConfig":
        """Load settings from the environment, then apply the TOML file if configured.

        Raises:
            ValidationError: If an environment value is invalid.
            ValueError: If a TOML value is invalid.
            FileNotFoundError: If the configured TOML file does not exist.
        """
        config = cls()
        config.load_toml_overrides()
        return config

    @classmethod
    def for_testing(cls, **overrides: Any) -> "AppConfig":
        """Create a configuration that ignores any .env file."""
        return cls(_env_file=None, **overrides)

    @field_validator("refresh_interval_seconds")
    @classmethod
    def validate_refresh_interval(cls, v: int) -> int:
        """Validate refresh interval is positive."""
        return _positive_interval(v)

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is a standard logging level name."""
        level = v.upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"log_level must be a logging level name, got '{v}'")
        return level

    def _load_toml_data(self) -> dict[str, Any]:
        """Load and parse the TOML file."""
        if not self.config_file:
            raise ValueError("config_file must be set to load TOML configuration")

        config_path = Path(self.config_file)
        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {config_path}")

        with open(config_path, "rb") as f:
            return tomllib.load(f)

    def load_toml_overrides(self) -> None:
        """Apply [dashboard] and [api] settings from the TOML file, if configured."""
        if not self.config_file:
            return

        toml_data = self._load_toml_data()

        dashboard = toml_data.get("dashboard", {})
        if "stations" in dashboard:
            stations = dashboard["stations"]
            if isinstance(stations, list):
                self.stations = ",".join(str(s) for s in stations)
            elif isinstance(stations, (str, int)):
                self.stations = str(stations)
            else:
                raise ValueError("TOML config 'dashboard.stations' must be a list or a string")
        if "refresh_interval_seconds" in dashboard:
            interval = dashboard["refresh_interval_seconds"]
            self.refresh_interval_seconds = _positive_interval(interval)
        if "title" in dashboard:
            self.title = dashboard["title"]
        if "station_link_base" in dashboard:
            self.station_link_base = dashboard["station_link_base"]
        if "url_station_changes" in dashboard:
            self.url_station_changes = bool(dashboard["url_station_changes"])

        api = toml_data.get("api", {})
        if "base_url" in api:
            self.api_base_url = api["base_url"]
        if "timeout_seconds" in api:
            self.api_timeout_seconds = api["timeout_seconds"]
        if "max_concurrent_requests" in api:
            self.max_concurrent_requests = api["max_concurrent_requests"]
