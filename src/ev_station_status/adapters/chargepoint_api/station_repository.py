"""ChargePoint station repository adapter."""

from __future__ import annotations

import asyncio
import logging
import os
from typing import TYPE_CHECKING, Any
from urllib.parse import urlencode

import aiohttp

from ev_station_status.adapters.chargepoint_api.station_parser import parse_station_payload
from ev_station_status.domain.exceptions import FetchError
from ev_station_status.domain.models.error_details import ErrorDetails
from ev_station_status.domain.ports.station_repository import StationRepository

if TYPE_CHECKING:
    from ev_station_status.domain.models.station_snapshot import StationSnapshot

logger = logging.getLogger(__name__)

# Station status is live data; ask every intermediary to skip its cache
NO_CACHE_HEADERS = {
    "accept": "application/json",
    "cache-control": "no-cache, no-store",
    "pragma": "no-cache",
}


def should_log_requests() -> bool:
    """Check if request tracing is enabled via the EVS_LOG_REQUESTS environment variable."""
    return os.getenv("EVS_LOG_REQUESTS", "").lower() == "true"


def error_details_from_status(status_code: int) -> ErrorDetails:
    """Describe a non-success HTTP status."""
    if status_code == 429:
        reason = "Rate limit exceeded"
    elif status_code == 502:
        reason = "Bad gateway (server error)"
    elif status_code == 503:
        reason = "Service unavailable"
    elif status_code == 504:
        reason = "Gateway timeout"
    else:
        reason = f"HTTP {status_code}"
    return ErrorDetails(status_code=status_code, reason=reason)


def error_details_from_exception(error: BaseException) -> ErrorDetails:
    """Describe a transport failure (DNS, TLS, connection reset, timeout)."""
    if isinstance(error, (asyncio.TimeoutError, aiohttp.ServerTimeoutError)):
        return ErrorDetails(reason="Request timed out")
    if isinstance(error, aiohttp.ClientResponseError):
        return error_details_from_status(error.status)
    name = type(error).__name__
    message = str(error)
    return ErrorDetails(reason=f"{name}: {message}" if message else name)


class ChargePointStationRepository(StationRepository):
    """Adapter for the ChargePoint station info endpoint."""

    def __init__(
        self,
        session: aiohttp.ClientSession | None,
        base_url: str,
        timeout_seconds: float = 10,
    ) -> None:
        """Initialize the repository.

        Args:
            session: Shared aiohttp session used for all requests.
            base_url: Station info endpoint, queried with ``?deviceId=<id>``.
            timeout_seconds: Total timeout of a single request.
        """
        self._session = session
        self._base_url = base_url
        self._timeout = aiohttp.ClientTimeout(total=timeout_seconds)

    async def _read_payload(self, response: aiohttp.ClientResponse, station_id: str) -> Any:
        if not 200 <= response.status < 300:
            details = error_details_from_status(response.status)
            raise FetchError(station_id, details.describe(), details)
        try:
            return await response.json(content_type=None)
        except ValueError as e:
            details = ErrorDetails(status_code=response.status, reason="Invalid JSON response")
            raise FetchError(station_id, details.reason, details) from e

    async def get_station(self, station_id: str) -> StationSnapshot:
        """Fetch a fresh snapshot of one station.

        Raises:
            FetchError: On a non-2xx response, a transport failure or a body
                that is not a JSON object.
        """
        if not self._session:
            raise RuntimeError("ChargePoint API requires an aiohttp session")

        params = {"deviceId": station_id}
        if should_log_requests():
            logger.info(f"API Request: GET {self._base_url}?{urlencode(params)}")

        try:
            async with self._session.get(
                self._base_url,
                params=params,
                headers=NO_CACHE_HEADERS,
                timeout=self._timeout,
            ) as response:
                payload = await self._read_payload(response, station_id)
        except FetchError:
            raise
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            details = error_details_from_exception(e)
            raise FetchError(station_id, details.describe(), details) from e

        if not isinstance(payload, dict):
            details = ErrorDetails(reason="Unexpected response format")
            raise FetchError(station_id, details.reason, details)

        station = parse_station_payload(payload, station_id)
        logger.debug(f"Fetched station {station_id} with {len(station.ports)} port(s)")
        return station
