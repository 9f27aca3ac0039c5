"""Conversions between datetime and the structured TimeOfDay type."""

from datetime import UTC, datetime, timedelta

from ..schemas import TimeOfDay

# datetime has no year 0, so the earliest representable day is the anchor.
EPOCH_DAY = datetime(1, 1, 1, tzinfo=UTC)


def time_to_timeofday(t: datetime) -> TimeOfDay:
    """Return the time-of-day part of t; date and zone are dropped."""
    return TimeOfDay(
        hours=t.hour,
        minutes=t.minute,
        seconds=t.second,
        nanos=t.microsecond * 1000,
    )


def timeofday_to_time(tod: TimeOfDay) -> datetime:
    """Anchor a TimeOfDay on EPOCH_DAY in UTC.

    Values past the end of the day roll forward, so hours=24 lands on
    midnight of the following day.
    """
    return EPOCH_DAY + timedelta(
        hours=tod.hours,
        minutes=tod.minutes,
        seconds=tod.seconds,
        microseconds=tod.nanos // 1000,
    )
