"""Structured calendar types.

These mirror the google.type Date, DateTime and TimeOfDay messages and are
the interchange format other components depend on. All models are frozen
value types.
"""

from pydantic import BaseModel, ConfigDict, Field


class _CalendarModel(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")


class Date(_CalendarModel):
    """A whole calendar date.

    All-zero fields mean "not set"; conversion to a time value requires
    year, month and day to be at least 1.
    """

    year: int = Field(default=0, ge=0, le=9999)
    month: int = Field(default=0, ge=0, le=12)
    day: int = Field(default=0, ge=0, le=31)


class TimeZone(_CalendarModel):
    """A named zone from the IANA time zone database, e.g. "America/New_York"."""

    id: str
    version: str = ""


class UtcOffset(_CalendarModel):
    """A fixed offset from UTC, in seconds."""

    seconds: int = Field(gt=-86400, lt=86400)


class DateTime(_CalendarModel):
    """A civil date and time, optionally annotated with a zone or a UTC offset.

    time_offset holds at most one descriptor. None means UTC.
    """

    year: int = Field(default=0, ge=0, le=9999)
    month: int = Field(default=0, ge=0, le=12)
    day: int = Field(default=0, ge=0, le=31)
    hours: int = Field(default=0, ge=0, le=23)
    minutes: int = Field(default=0, ge=0, le=59)
    seconds: int = Field(default=0, ge=0, le=60)
    nanos: int = Field(default=0, ge=0, le=999_999_999)
    time_offset: TimeZone | UtcOffset | None = None

    @property
    def time_zone(self) -> TimeZone | None:
        if isinstance(self.time_offset, TimeZone):
            return self.time_offset
        return None

    @property
    def utc_offset(self) -> UtcOffset | None:
        if isinstance(self.time_offset, UtcOffset):
            return self.time_offset
        return None


class TimeOfDay(_CalendarModel):
    """A time of day with no date or zone.

    hours may be 24 to express end-of-day; it rolls into the next day on
    conversion.
    """

    hours: int = Field(default=0, ge=0, le=24)
    minutes: int = Field(default=0, ge=0, le=59)
    seconds: int = Field(default=0, ge=0, le=60)
    nanos: int = Field(default=0, ge=0, le=999_999_999)
