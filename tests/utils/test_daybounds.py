"""Tests for daybounds module."""

from datetime import UTC, datetime, timedelta, timezone

from wallclock.utils import daybounds, isodatetime


class TestStartOfDay:
    """Tests for start_of_day function."""

    def test_snaps_to_midnight(self):
        """Should return 00:00:00 UTC on the same date."""
        utc_time = isodatetime.to_utc_datetime("2006-01-02T11:04:05Z")
        assert not daybounds.is_start_of_day(utc_time)
        assert not daybounds.is_end_of_day(utc_time)

        utc_time = daybounds.start_of_day(utc_time)
        assert isodatetime.to_timestamp(utc_time) == "2006-01-02T00:00:00Z"
        assert daybounds.is_start_of_day(utc_time)
        assert not daybounds.is_end_of_day(utc_time)

    def test_clears_microseconds(self):
        """Sub-second fields should be zeroed."""
        t = datetime(2006, 1, 2, 11, 4, 5, 999999, tzinfo=UTC)
        assert daybounds.start_of_day(t).microsecond == 0

    def test_uses_fields_as_given(self):
        """Non-UTC input keeps its own calendar date, labelled UTC."""
        t = datetime(2006, 1, 2, 3, 0, tzinfo=timezone(timedelta(hours=7)))
        assert isodatetime.to_timestamp(daybounds.start_of_day(t)) == "2006-01-02T00:00:00Z"


class TestEndOfDay:
    """Tests for end_of_day function."""

    def test_snaps_to_last_second(self):
        """Should return 23:59:59 UTC on the same date."""
        utc_time = isodatetime.to_utc_datetime("2006-01-02T11:04:05Z")
        assert not daybounds.is_start_of_day(utc_time)
        assert not daybounds.is_end_of_day(utc_time)

        utc_time = daybounds.end_of_day(utc_time)
        assert isodatetime.to_timestamp(utc_time) == "2006-01-02T23:59:59Z"
        assert not daybounds.is_start_of_day(utc_time)
        assert daybounds.is_end_of_day(utc_time)

    def test_sub_second_is_zero(self):
        """End of day is exactly 23:59:59.000000, not the last microsecond."""
        t = datetime(2006, 1, 2, 23, 59, 59, 999999, tzinfo=UTC)
        assert daybounds.end_of_day(t) == datetime(2006, 1, 2, 23, 59, 59, tzinfo=UTC)


class TestIsSameDate:
    """Tests for is_same_date function."""

    def test_same_and_different_dates(self):
        """Should compare calendar dates only."""
        utc_time1 = isodatetime.to_utc_datetime("2006-01-02")
        utc_time2 = isodatetime.to_utc_datetime("2006-01-02T22:04:05+07:00")
        utc_time3 = isodatetime.to_utc_datetime("2006-01-03")

        assert daybounds.is_same_date(utc_time1, utc_time2)
        assert not daybounds.is_same_date(utc_time1, utc_time3)

    def test_zones_are_not_normalized(self):
        """The same instant in different zones can fall on different dates."""
        utc_time = datetime(2006, 1, 2, 23, 0, tzinfo=UTC)
        shifted = utc_time.astimezone(timezone(timedelta(hours=7)))

        assert utc_time == shifted
        assert not daybounds.is_same_date(utc_time, shifted)


class TestBoundaryPredicates:
    """Tests for is_start_of_day and is_end_of_day."""

    def test_sub_seconds_ignored(self):
        """Only hour, minute and second are checked."""
        assert daybounds.is_start_of_day(datetime(2006, 1, 2, 0, 0, 0, 500, tzinfo=UTC))
        assert daybounds.is_end_of_day(datetime(2006, 1, 2, 23, 59, 59, 999999, tzinfo=UTC))

    def test_near_misses(self):
        """A second off either boundary is not a boundary."""
        assert not daybounds.is_start_of_day(datetime(2006, 1, 2, 0, 0, 1, tzinfo=UTC))
        assert not daybounds.is_end_of_day(datetime(2006, 1, 2, 23, 59, 58, tzinfo=UTC))
