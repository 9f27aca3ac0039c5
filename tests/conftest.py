"""Shared test fixtures for wallclock."""

import time
from datetime import UTC, datetime, timedelta, tzinfo

import pytest

from wallclock.config import settings


class LabelledZone(tzinfo):
    """Fixed-offset tzinfo with an arbitrary name, for zone-encoding tests."""

    def __init__(self, name: str, hours: int):
        self._name = name
        self._offset = timedelta(hours=hours)

    def utcoffset(self, dt):
        return self._offset

    def dst(self, dt):
        return timedelta(0)

    def tzname(self, dt):
        return self._name


@pytest.fixture(autouse=True)
def no_local_timezone(monkeypatch):
    """Start every test with the OS local zone (no configured override)."""
    monkeypatch.setattr(settings, "local_timezone", None)


@pytest.fixture
def local_timezone(monkeypatch):
    """Return a setter that overrides settings.local_timezone for one test."""
    def _set(name: str | None):
        monkeypatch.setattr(settings, "local_timezone", name)
    return _set


@pytest.fixture
def fixed_instant():
    """A fixed instant used by clock tests."""
    return datetime(2006, 1, 2, 15, 4, 5, 123456, tzinfo=UTC)


@pytest.fixture
def labelled_zone():
    """Factory for LabelledZone instances."""
    return LabelledZone


@pytest.fixture
def system_tz(monkeypatch):
    """Return a setter that switches the process TZ for one test."""
    def _set(name: str):
        monkeypatch.setenv("TZ", name)
        time.tzset()
    yield _set
    monkeypatch.undo()
    time.tzset()
