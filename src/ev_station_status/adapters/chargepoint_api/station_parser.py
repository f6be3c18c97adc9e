"""Parser for ChargePoint station info payloads.

Payload shape::

    {
      "deviceId": 123456,
      "name": ["ACME", "LOT 4"],
      "modelNumber": "CT4021-GW1",
      "deviceSoftwareVersion": "5.5.2.14",
      "portsInfo": {"ports": [{"outletNumber": 1, "status": "available",
                               "statusV2": "in_use"}]}
    }
"""

from typing import Any

from ev_station_status.domain.models.station_snapshot import (
    UNKNOWN_VALUE,
    PortSnapshot,
    StationSnapshot,
)


def _optional_text(value: Any) -> str | None:
    if value is None:
        return None
    text = str(value)
    return text or None


def _name_parts(value: Any) -> tuple[str, ...]:
    if isinstance(value, list):
        return tuple(str(part) for part in value if part)
    if value:
        return (str(value),)
    return ()


def _outlet_number(value: Any, position: int) -> int:
    try:
        return int(value)
    except (TypeError, ValueError):
        return position


def parse_port(data: dict[str, Any], position: int) -> PortSnapshot:
    """Parse one port entry; ``position`` is the 1-based fallback outlet number."""
    return PortSnapshot(
        outlet_number=_outlet_number(data.get("outletNumber"), position),
        status=_optional_text(data.get("status")),
        status_v2=_optional_text(data.get("statusV2")),
    )


def parse_station_payload(data: dict[str, Any], station_id: str) -> StationSnapshot:
    """Parse a station info response into a StationSnapshot.

    Args:
        data: Decoded JSON object returned by the station info endpoint.
        station_id: The requested ID, used when the payload carries none.
    """
    ports_info = data.get("portsInfo") or {}
    raw_ports = ports_info.get("ports") if isinstance(ports_info, dict) else None
    ports = tuple(
        parse_port(port, position)
        for position, port in enumerate(raw_ports or [], start=1)
        if isinstance(port, dict)
    )

    device_id = data.get("deviceId")
    return StationSnapshot(
        station_id=str(device_id) if device_id not in (None, "") else station_id,
        name_parts=_name_parts(data.get("name")),
        model_number=_optional_text(data.get("modelNumber")) or UNKNOWN_VALUE,
        software_version=_optional_text(data.get("deviceSoftwareVersion")) or UNKNOWN_VALUE,
        ports=ports,
    )
