"""Utility functions for wallclock.

Import convention: use module-level imports for clarity.

    from wallclock.utils import calendar, isodatetime, daybounds
    start = calendar.date_to_utc_time(some_date)
    stamp = isodatetime.to_timestamp(daybounds.end_of_day(start))
    parsed = isodatetime.to_utc_datetime("2006-01-02T15:04:05-07:00")
"""

from . import calendar, clock, daybounds, isodatetime, timeofday, zones

__all__ = ["calendar", "clock", "daybounds", "isodatetime", "timeofday", "zones"]
