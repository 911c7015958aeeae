"""
Common utility functions for the job board.

Number and date parsing shared by the query builder and both validators,
plus the relative-time label and JSON serialization used on read.
"""

import math
from datetime import date, datetime, timezone
from typing import Any, Dict, Optional, Union

from bson import ObjectId

SECONDS_PER_MINUTE = 60
SECONDS_PER_HOUR = 60 * 60
SECONDS_PER_DAY = 24 * 60 * 60


def parse_number(value: Any) -> Optional[float]:
    """
    Parse a salary-like value into a finite float.

    Accepts ints, floats and numeric strings (surrounding whitespace allowed).
    Returns None for anything else, including blanks, booleans, NaN and
    infinities.

    Example:
        >>> parse_number(" 50000 ")
        50000.0
        >>> parse_number("50k") is None
        True
    """
    if isinstance(value, bool) or value is None:
        return None
    if isinstance(value, (int, float)):
        number = float(value)
    elif isinstance(value, str):
        text = value.strip()
        if not text:
            return None
        try:
            number = float(text)
        except ValueError:
            return None
    else:
        return None

    if not math.isfinite(number):
        return None
    return number


def ensure_utc(value: datetime) -> datetime:
    """Treat naive datetimes (as returned by pymongo) as UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def parse_datetime(value: Any) -> Optional[datetime]:
    """
    Parse an ISO-8601 date or datetime into an aware UTC datetime.

    Date-only input ("2025-06-30") resolves to midnight UTC, the same instant
    a browser assigns to a date-only string.

    Returns:
        Aware datetime, or None when the value cannot be parsed
    """
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, date):
        return datetime(value.year, value.month, value.day, tzinfo=timezone.utc)
    elif not isinstance(value, str) or not value.strip():
        return None
    else:
        try:
            parsed = datetime.fromisoformat(value.strip())
        except ValueError:
            return None

    try:
        return ensure_utc(parsed)
    except OverflowError:
        # Offset pushes the instant outside year 1..9999
        return None


def _pluralize(count: int, unit: str) -> str:
    return f"{count} {unit if count == 1 else unit + 's'} Ago"


def format_time_ago(created_at: Union[datetime, str, None], now: datetime) -> str:
    """
    Human-readable label for how long ago a posting was created.

    Thresholds: under a minute is "Just now"; then minutes, hours, days,
    weeks (days // 7), months (days // 30) and years (days // 365).

    Args:
        created_at: Creation timestamp (naive values are UTC); None means now
        now: Current instant

    Example:
        >>> start = datetime(2024, 1, 1, tzinfo=timezone.utc)
        >>> format_time_ago(start, datetime(2024, 1, 1, 1, 30, tzinfo=timezone.utc))
        '1 hour Ago'
    """
    now = ensure_utc(now)
    created = parse_datetime(created_at) if created_at is not None else None
    if created is None:
        created = now

    elapsed = (now - created).total_seconds()
    minutes = math.floor(elapsed / SECONDS_PER_MINUTE)
    hours = math.floor(elapsed / SECONDS_PER_HOUR)
    days = math.floor(elapsed / SECONDS_PER_DAY)

    if minutes < 1:
        return "Just now"
    if minutes < 60:
        return _pluralize(minutes, "minute")
    if hours < 24:
        return _pluralize(hours, "hour")
    if days < 7:
        return _pluralize(days, "day")
    if days < 30:
        return _pluralize(days // 7, "week")
    if days < 365:
        return _pluralize(days // 30, "month")
    return _pluralize(days // 365, "year")


def serialize_document(doc: Dict[str, Any]) -> Dict[str, Any]:
    """
    Serialize a MongoDB document for JSON response.

    Handles ObjectId conversion and date formatting.
    """
    result = {}
    for key, value in doc.items():
        if isinstance(value, ObjectId):
            result[key] = str(value)
        elif isinstance(value, datetime):
            result[key] = ensure_utc(value).isoformat().replace("+00:00", "Z")
        else:
            result[key] = value
    return result
