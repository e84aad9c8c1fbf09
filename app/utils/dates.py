"""
Exercise Tracker API - Date and Number Helpers.

Lenient parsing of client-supplied dates and integers, and the fixed
textual date form used in every exercise response.
"""

import math
import re
from datetime import datetime, timezone
from typing import Optional, Union

WEEKDAY_NAMES = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")
MONTH_NAMES = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)

_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")


def utcnow() -> datetime:
    """Current time as a naive UTC datetime (the form MongoDB hands back)."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


def to_naive_utc(value: datetime) -> datetime:
    if value.tzinfo is not None:
        value = value.astimezone(timezone.utc).replace(tzinfo=None)
    return value


def parse_date(value: Optional[str]) -> Optional[datetime]:
    """
    Parse a client date string into a naive UTC datetime.

    Accepts ``YYYY-MM-DD`` (midnight UTC), full ISO 8601 datetimes with
    or without an offset, and the ``Www Mmm DD YYYY`` form this service
    returns. Anything else yields None.

    Args:
        value: Raw date string from the request.

    Returns:
        Optional[datetime]: Parsed datetime, or None if absent or malformed.
    """
    if not value:
        return None
    text = value.strip()
    try:
        parsed = datetime.fromisoformat(text)
    except ValueError:
        return _parse_date_string(text)
    return to_naive_utc(parsed)


def _parse_date_string(text: str) -> Optional[datetime]:
    # Inverse of format_date_string; names are matched against the fixed tables
    parts = text.split()
    if len(parts) != 4 or parts[0] not in WEEKDAY_NAMES or parts[1] not in MONTH_NAMES:
        return None
    if not (parts[2].isdigit() and parts[3].isdigit()):
        return None
    try:
        return datetime(int(parts[3]), MONTH_NAMES.index(parts[1]) + 1, int(parts[2]))
    except ValueError:
        return None


def parse_int(value: Union[str, int, float, None]) -> Optional[int]:
    """
    Parse the leading integer of a value.

    ``"30"`` -> 30, ``"30min"`` -> 30, ``"2.5"`` -> 2, ``"abc"`` -> None.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if math.isfinite(value) else None
    match = _INT_PREFIX.match(str(value))
    if not match:
        return None
    return int(match.group(1))


def format_date_string(value: datetime) -> str:
    """
    Render a datetime as ``Www Mmm DD YYYY`` (e.g. ``Mon Jan 01 2024``).

    Names are fixed English abbreviations so output never depends on
    the process locale. Naive datetimes are taken as UTC.
    """
    value = to_naive_utc(value)
    return (
        f"{WEEKDAY_NAMES[value.weekday()]} "
        f"{MONTH_NAMES[value.month - 1]} "
        f"{value.day:02d} "
        f"{value.year:04d}"
    )
