"""Clock abstraction for injectable time source.

Code that needs "now" takes a Clock argument; there is no module-level
default instance.
"""

from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Protocol


class Clock(Protocol):
    def now(self) -> datetime: ...


class UTCClock:
    """System clock, always in UTC."""

    def now(self) -> datetime:
        return datetime.now(UTC)


@dataclass(frozen=True)
class FixedClock:
    """Clock that returns the same instant on every call (for tests)."""

    instant: datetime

    def now(self) -> datetime:
        return self.instant
