"""Pydantic schemas for structured calendar values."""

from .calendar import (
    Date,
    DateTime,
    TimeOfDay,
    TimeZone,
    UtcOffset,
)

__all__ = [
    "Date",
    "DateTime",
    "TimeOfDay",
    "TimeZone",
    "UtcOffset",
]
