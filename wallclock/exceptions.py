"""Custom exceptions for wallclock.

Every conversion failure is raised as a subclass of WallclockError so
callers can catch the whole family with a single except clause.
"""


class WallclockError(Exception):
    """Base exception for all wallclock errors."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class InvalidValue(WallclockError):
    """A required Date/DateTime is missing or its year, month or day is unset."""


class UnknownTimeZone(WallclockError):
    """A time zone identifier could not be resolved against the zone database."""


class ParseError(WallclockError):
    """Text is not valid ISO 8601."""
