"""
Timezone and datetime utilities.

Provides the timezone-aware clock used to stamp new weight records.
"""

from datetime import datetime

import pytz


def now_in_timezone(timezone_str: str = "UTC") -> datetime:
    """
    Get the current time as a timezone-aware datetime.

    Args:
        timezone_str: Timezone string (e.g., "Africa/Cairo").

    Returns:
        Timezone-aware datetime object.
    """
    return datetime.now(pytz.timezone(timezone_str))


def make_timezone_aware(dt: datetime, timezone_str: str = "UTC") -> datetime:
    """
    Make a datetime object timezone-aware.

    Naive datetimes are assumed to already be local to ``timezone_str``.

    Args:
        dt: Datetime object (may be naive or aware).
        timezone_str: Timezone string.

    Returns:
        Timezone-aware datetime object.
    """
    tz = pytz.timezone(timezone_str)

    if dt.tzinfo is None:
        return tz.localize(dt)
    return dt.astimezone(tz)


def format_display_timestamp(
    dt: datetime, date_format: str, timezone_str: str = "UTC"
) -> str:
    """
    Render a timestamp as the human-readable string stored on a record.

    Args:
        dt: Timestamp to render.
        date_format: strftime format string.
        timezone_str: Timezone the string is rendered in.

    Returns:
        Display string.
    """
    return make_timezone_aware(dt, timezone_str).strftime(date_format)
