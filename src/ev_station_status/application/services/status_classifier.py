"""Classification of raw vendor status codes."""

from ev_station_status.domain.models.classification import (
    OFFLINE_INDICATOR,
    ONLINE_INDICATOR,
    Classification,
)

UNKNOWN_STATUS = "unknown"

_ONLINE_STATUSES: dict[str, Classification] = {
    "in_use": Classification(
        display_text="In Use", badge="in-use", online_state="Online", indicator=ONLINE_INDICATOR
    ),
    "available": Classification(
        display_text="Available",
        badge="available",
        online_state="Online",
        indicator=ONLINE_INDICATOR,
    ),
}

_KNOWN_OFFLINE_STATUSES = frozenset({"unreachable", "unavailable", "maintenance_required"})

# Only this token is abbreviated.
_ABBREVIATIONS = {"maintenance_required": "Maintenance Req."}


def _offline(display_text: str) -> Classification:
    return Classification(
        display_text=display_text,
        badge="offline",
        online_state="Offline",
        indicator=OFFLINE_INDICATOR,
    )


def classify(raw_status: str | None) -> Classification:
    """Map a raw vendor status code to its presentation category.

    Precedence: exact Online matches, then the known Offline set (with its
    single abbreviation), then a generic upper-cased Offline fallback. Never
    raises; missing input is treated as ``unknown``.
    """
    status = (raw_status or UNKNOWN_STATUS).lower()

    online = _ONLINE_STATUSES.get(status)
    if online is not None:
        return online

    spaced = status.replace("_", " ")
    if status in _KNOWN_OFFLINE_STATUSES:
        return _offline(_ABBREVIATIONS.get(status, spaced.title()))

    return _offline(spaced.upper())
