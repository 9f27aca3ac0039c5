"""wallclock: conversions between datetime, ISO 8601 text and structured calendar types."""

from . import schemas, utils
from .exceptions import InvalidValue, ParseError, UnknownTimeZone, WallclockError

__all__ = [
    "schemas",
    "utils",
    "WallclockError",
    "InvalidValue",
    "UnknownTimeZone",
    "ParseError",
]
