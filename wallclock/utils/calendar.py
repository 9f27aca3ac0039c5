"""Conversions between datetime and the structured Date/DateTime types.

    from wallclock.utils import calendar
    start = calendar.date_to_utc_time(Date(year=2012, month=4, day=21))
    record = calendar.time_to_datetime(some_datetime)

Fields are composed the way a civil calendar would: an overflowing day
rolls into the following month rather than failing.
"""

import re
from datetime import UTC, datetime, timedelta, timezone, tzinfo
from zoneinfo import ZoneInfo

from ..exceptions import InvalidValue
from ..schemas import Date, DateTime, TimeZone, UtcOffset
from . import zones

# Zone names produced by zones.fixed_zone (and similar fixed-offset labels)
_UTC_OFFSET_NAME = re.compile(r"^UTC([+-]\d{1,2})$")
# datetime.timezone created without a name reports e.g. "UTC+07:00"
_UNNAMED_OFFSET_NAME = re.compile(r"^UTC[+-]\d{2}:\d{2}")


def _compose(
    year: int,
    month: int,
    day: int,
    hours: int = 0,
    minutes: int = 0,
    seconds: int = 0,
    nanos: int = 0,
    tz: tzinfo | None = UTC,
) -> datetime:
    try:
        first = datetime(year, month, 1, tzinfo=tz)
        return first + timedelta(
            days=day - 1,
            hours=hours,
            minutes=minutes,
            seconds=seconds,
            microseconds=nanos // 1000,
        )
    except (ValueError, OverflowError) as e:
        raise InvalidValue(
            f"cannot build time from {year:04d}-{month:02d}-{day:02d}",
            details={"reason": str(e)}
        ) from e


def _check_ymd(d: Date | DateTime | None) -> None:
    if d is None:
        raise InvalidValue("date parameter not set")
    if d.year < 1 or d.month < 1 or d.day < 1:
        raise InvalidValue(
            "year, month, day not set",
            details={"year": d.year, "month": d.month, "day": d.day}
        )


def date_to_time(d: Date | None, tz: tzinfo) -> datetime:
    """Return midnight of the given date in zone tz.

    Raises:
        InvalidValue: If d is None or its year, month or day is below 1.
    """
    _check_ymd(d)
    return _compose(d.year, d.month, d.day, tz=tz)


def date_to_utc_time(d: Date | None) -> datetime:
    """Return midnight UTC of the given date."""
    return date_to_time(d, UTC)


def date_to_local_time(d: Date | None) -> datetime:
    """Return midnight of the given date in the process-local zone.

    Uses settings.local_timezone when set, otherwise the OS local zone.
    """
    return date_to_time(d, zones.local_zone())


def time_to_date(t: datetime) -> Date:
    """Return the calendar date of t as observed in t's own zone."""
    return Date(year=t.year, month=t.month, day=t.day)


def datetime_to_time(dt: DateTime | None, resolver: zones.ZoneResolver = ZoneInfo) -> datetime:
    """Convert a DateTime record to a datetime.

    The zone is taken from the record's time_offset: a named zone is looked
    up with resolver, a UTC offset becomes a fixed "UTC±H" zone, and no
    descriptor means UTC.

    Raises:
        InvalidValue: If dt is None or its year, month or day is below 1.
        UnknownTimeZone: If the named zone cannot be resolved.
    """
    _check_ymd(dt)

    tz: tzinfo = UTC
    if isinstance(dt.time_offset, TimeZone):
        tz = zones.load_zone(dt.time_offset.id, resolver)
    elif isinstance(dt.time_offset, UtcOffset):
        tz = zones.fixed_zone(dt.time_offset.seconds)

    return _compose(
        dt.year, dt.month, dt.day,
        dt.hours, dt.minutes, dt.seconds, dt.nanos,
        tz=tz,
    )


def _is_fixed_offset(t: datetime) -> bool:
    name = t.tzname() or ""
    if not name or _UTC_OFFSET_NAME.match(name):
        return True
    return isinstance(t.tzinfo, timezone) and _UNNAMED_OFFSET_NAME.match(name) is not None


def time_to_datetime(t: datetime) -> DateTime:
    """Convert a datetime to a DateTime record.

    Fixed-offset zones are encoded as a UtcOffset only when the offset is
    positive; zero and negative offsets are left without a descriptor and
    read back as UTC. Named zones, UTC included, are encoded by their
    database key (or zone name when there is no key).
    """
    time_offset: TimeZone | UtcOffset | None = None

    if _is_fixed_offset(t):
        offset = t.utcoffset()
        if offset is not None and offset > timedelta(0):
            time_offset = UtcOffset(seconds=int(offset.total_seconds()))
    else:
        zone_id = getattr(t.tzinfo, "key", None) or t.tzname()
        time_offset = TimeZone(id=zone_id)

    return DateTime(
        year=t.year,
        month=t.month,
        day=t.day,
        hours=t.hour,
        minutes=t.minute,
        seconds=t.second,
        nanos=t.microsecond * 1000,
        time_offset=time_offset,
    )
