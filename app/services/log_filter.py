"""
Exercise Tracker API - Exercise Log Filter.

Builds the MongoDB predicate and result cap for a user's exercise log.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from app.utils.dates import parse_date, parse_int


@dataclass
class LogFilter:
    """
    Query for a user's exercises.

    Attributes:
        query: MongoDB predicate over the exercises collection.
        limit: Maximum number of results, or None for all.
    """

    query: Dict[str, Any] = field(default_factory=dict)
    limit: Optional[int] = None


def build_log_filter(
    user_id: str,
    from_: Optional[str] = None,
    to: Optional[str] = None,
    limit: Optional[str] = None
) -> LogFilter:
    """
    Build the exercise log query from the optional query parameters.

    Both date bounds are inclusive. A bound that fails to parse is
    dropped rather than rejected, and so is a limit that is missing,
    unparseable or zero. A negative limit caps at its absolute value,
    as MongoDB does.

    Args:
        user_id: Owning user's identifier; always part of the predicate.
        from_: Lower date bound (``YYYY-MM-DD``).
        to: Upper date bound (``YYYY-MM-DD``).
        limit: Maximum number of entries.

    Returns:
        LogFilter: Predicate and cap.
    """
    query: Dict[str, Any] = {"user_id": user_id}

    date_range: Dict[str, Any] = {}
    lower = parse_date(from_)
    if lower is not None:
        date_range["$gte"] = lower
    upper = parse_date(to)
    if upper is not None:
        date_range["$lte"] = upper
    if date_range:
        query["date"] = date_range

    cap = parse_int(limit)
    cap = abs(cap) if cap else None

    return LogFilter(query=query, limit=cap)
