"""ISO 8601 datetime/date conversion utilities.

This module centralizes all transformations between Python datetime objects
and ISO 8601 strings. Formatting always uses fixed layouts with no
fractional seconds:

    date:      2006-01-02
    datetime:  2006-01-02T15:04:05Z  or  2006-01-02T15:04:05-07:00
"""

import logging
from datetime import UTC, datetime, timedelta, tzinfo
from typing import Callable

from ..exceptions import ParseError
from .clock import Clock

logger = logging.getLogger(__name__)

Parser = Callable[[str], datetime]


def _offset_suffix(offset: timedelta | None) -> str:
    if not offset:
        return "Z"
    total = int(offset.total_seconds())
    minutes = abs(total) // 60
    # sub-minute offsets render as +00:00 whatever their sign
    sign = "-" if total < 0 and minutes else "+"
    return f"{sign}{minutes // 60:02d}:{minutes % 60:02d}"


def to_datestring(dt: datetime) -> str:
    """Convert datetime to ISO 8601 date string (YYYY-MM-DD) in its own zone."""
    # strftime("%Y") does not zero-pad years below 1000 on every platform
    return f"{dt.year:04d}-{dt.month:02d}-{dt.day:02d}"


def to_timestamp(dt: datetime) -> str:
    """Convert datetime to ISO 8601 timestamp string in its own zone.

    Naive datetimes are treated as UTC. A zero offset is written as "Z".
    """
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=UTC)
    return (
        f"{to_datestring(dt)}T{dt.hour:02d}:{dt.minute:02d}:{dt.second:02d}"
        f"{_offset_suffix(dt.utcoffset())}"
    )


def to_local_timestamp(dt: datetime, tz: tzinfo) -> str:
    """Convert datetime to zone tz, then to an ISO 8601 timestamp string.

    Naive datetimes are treated as UTC, as in to_timestamp.
    """
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=UTC)
    return to_timestamp(dt.astimezone(tz))


def to_datestring_or_none(dt: datetime | None) -> str | None:
    return to_datestring(dt) if dt is not None else None


def to_timestamp_or_none(dt: datetime | None) -> str | None:
    return to_timestamp(dt) if dt is not None else None


def to_local_timestamp_or_none(dt: datetime | None, tz: tzinfo) -> str | None:
    return to_local_timestamp(dt, tz) if dt is not None else None


def parse_iso8601(text: str) -> datetime:
    """Default ISO 8601 parser; keeps whatever offset the text carries."""
    return datetime.fromisoformat(text.replace('Z', '+00:00'))


def to_datetime(timestamp: str, parser: Parser = parse_iso8601) -> datetime:
    """Convert ISO 8601 string to datetime, keeping the written offset.

    Strings without an offset (including plain dates) are taken as UTC.

    Raises:
        ParseError: If the text is not valid ISO 8601.
    """
    try:
        dt = parser(timestamp)
    except (ValueError, TypeError) as e:
        logger.debug(f"Failed to parse ISO 8601 value {timestamp!r}: {e}")
        raise ParseError(
            f"cannot parse {timestamp!r} as ISO 8601",
            details={"value": timestamp, "reason": str(e)}
        ) from e
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=UTC)
    return dt


def to_utc_datetime(timestamp: str, parser: Parser = parse_iso8601) -> datetime:
    """Convert ISO 8601 string to a UTC datetime.

    Note that a positive offset can move the calendar date back:
    "2006-01-02T01:04:05+04:00" becomes 2006-01-01 21:04:05 UTC.
    """
    return to_datetime(timestamp, parser).astimezone(UTC)


def now(clock: Clock) -> str:
    """Get the clock's current time as an ISO 8601 timestamp string."""
    return to_timestamp(clock.now())
