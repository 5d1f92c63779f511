"""
DateTime utilities for consistent timezone handling.
"""
from datetime import datetime, timezone
from typing import Optional


def utc_now() -> datetime:
    """
    Get the current UTC time with timezone awareness.

    The value is truncated to millisecond precision, the resolution every
    store is required to preserve, so that a timestamp read back from
    storage compares equal to the one that was written.

    Returns:
        datetime: Current UTC time with timezone info
    """
    now = datetime.now(timezone.utc)
    return now.replace(microsecond=(now.microsecond // 1000) * 1000)


def ensure_utc(dt: Optional[datetime]) -> Optional[datetime]:
    """
    Ensure datetime has UTC timezone.

    If datetime is naive (no timezone), assumes it's UTC and adds timezone info.
    If datetime has timezone, converts to UTC.

    Args:
        dt: Datetime to process

    Returns:
        UTC datetime with timezone info, or None if dt is None
    """
    if dt is None:
        return None
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    elif dt.tzinfo != timezone.utc:
        return dt.astimezone(timezone.utc)
    return dt


def format_iso8601(dt: Optional[datetime]) -> Optional[str]:
    """
    Format a datetime as an ISO 8601 UTC string with millisecond precision.

    Args:
        dt: Datetime to format

    Returns:
        String like ``2024-01-01T12:00:00.123Z`` or None
    """
    if dt is None:
        return None
    return ensure_utc(dt).isoformat(timespec="milliseconds").replace("+00:00", "Z")
