"""Day-boundary helpers.

Boundaries are computed from the calendar fields of the value as given;
no zone conversion happens first.
"""

from datetime import UTC, datetime


def start_of_day(t: datetime) -> datetime:
    """Return 00:00:00 UTC on t's calendar date."""
    return datetime(t.year, t.month, t.day, tzinfo=UTC)


def end_of_day(t: datetime) -> datetime:
    """Return 23:59:59 UTC on t's calendar date.

    Sub-second fields are always zero.
    """
    return datetime(t.year, t.month, t.day, 23, 59, 59, tzinfo=UTC)


def is_same_date(t1: datetime, t2: datetime) -> bool:
    """True if both values fall on the same year/month/day, each in its own zone."""
    return (t1.year, t1.month, t1.day) == (t2.year, t2.month, t2.day)


def is_start_of_day(t: datetime) -> bool:
    return t.hour == 0 and t.minute == 0 and t.second == 0


def is_end_of_day(t: datetime) -> bool:
    return t.hour == 23 and t.minute == 59 and t.second == 59
