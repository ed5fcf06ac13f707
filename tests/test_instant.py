"""Tests for the Instant class."""

from __future__ import annotations

import time

import pytest

from datef.core.instant import Instant
from datef.errors import ValidationError
from datef.units.timezone import Timezone


class TestInstantConstruction:
    """Tests for Instant factories."""

    def test_epoch(self):
        t = Instant.from_unix_seconds(0)
        assert (t.year, t.month, t.day) == (1970, 1, 1)
        assert (t.hour, t.minute, t.second, t.nanosecond) == (0, 0, 0, 0)
        assert t.timezone is Timezone.utc()

    def test_from_unix_seconds(self):
        t = Instant.from_unix_seconds(1234567890)
        assert (t.year, t.month, t.day) == (2009, 2, 13)
        assert (t.hour, t.minute, t.second) == (23, 31, 30)

    def test_from_unix_millis(self):
        t = Instant.from_unix_millis(1500)
        assert t.second == 1
        assert t.nanosecond == 500_000_000
        assert t.to_unix_nanos() == 1_500_000_000

    def test_from_unix_millis_negative(self):
        t = Instant.from_unix_millis(-1500)
        assert (t.year, t.month, t.day) == (1969, 12, 31)
        assert (t.hour, t.minute, t.second) == (23, 59, 58)
        assert t.nanosecond == 500_000_000

    def test_from_unix_nanos(self):
        assert Instant.from_unix_nanos(123).nanosecond == 123

    def test_from_components_utc(self):
        t = Instant.from_components(2024, 1, 1)
        assert t.to_unix_seconds() == 1704067200

    def test_from_components_with_offset(self):
        tz = Timezone.from_hours(5, 30)
        t = Instant.from_components(2024, 1, 15, 12, 0, 0, timezone=tz)
        assert t.hour == 12
        assert t.to_unix_seconds() == 1705300200
        utc = t.to_utc()
        assert (utc.hour, utc.minute) == (6, 30)

    def test_from_components_year_zero(self):
        t = Instant.from_components(0, 1, 1)
        assert (t.year, t.month, t.day) == (0, 1, 1)

    def test_now(self):
        before = time.time_ns()
        t = Instant.now()
        after = time.time_ns()
        assert before <= t.to_unix_nanos() <= after
        assert t.timezone.is_utc


class TestInstantValidation:
    """Tests for component validation."""

    def test_invalid_month(self):
        with pytest.raises(ValidationError, match="month must be 1-12"):
            Instant.from_components(2024, 13, 1)

    def test_invalid_day(self):
        with pytest.raises(ValidationError, match="day must be 1-28"):
            Instant.from_components(2023, 2, 29)

    def test_invalid_hour(self):
        with pytest.raises(ValidationError, match="hour must be 0-23"):
            Instant.from_components(2024, 1, 1, 24)

    def test_invalid_nanosecond(self):
        with pytest.raises(ValidationError):
            Instant.from_components(2024, 1, 1, nanosecond=1_000_000_000)


class TestInstantFields:
    """Tests for derived calendar fields."""

    def test_weekday(self):
        assert Instant.from_unix_seconds(0).weekday == 4  # Thursday
        assert Instant.from_unix_seconds(1234567890).weekday == 5  # Friday

    def test_year_day(self):
        assert Instant.from_components(2024, 12, 31).year_day == 366
        assert Instant.from_unix_seconds(0).year_day == 1

    def test_fields_follow_display_zone(self):
        t = Instant.from_unix_seconds(0, timezone=Timezone.from_hours(-1))
        assert (t.year, t.month, t.day, t.hour) == (1969, 12, 31, 23)


class TestInstantConversions:
    """Tests for epoch conversions and zone changes."""

    def test_to_unix_seconds_truncates_toward_epoch(self):
        assert Instant.from_unix_millis(1500).to_unix_seconds() == 1
        assert Instant.from_unix_millis(-1500).to_unix_seconds() == -1

    def test_to_unix_millis_truncates_toward_epoch(self):
        assert Instant.from_unix_nanos(1_999_999).to_unix_millis() == 1
        assert Instant.from_unix_nanos(-1_999_999).to_unix_millis() == -1

    def test_astimezone_keeps_point(self):
        t = Instant.from_unix_seconds(86400)
        moved = t.astimezone(Timezone.from_hours(9))
        assert moved == t
        assert moved.hour == 9
        assert moved.to_unix_seconds() == 86400

    def test_to_utc(self):
        t = Instant.from_components(2006, 1, 2, 15, 4, 5, timezone=Timezone.from_hours(-7))
        assert t.to_utc().timezone is Timezone.utc()
        assert t.to_utc().hour == 22


class TestInstantComparison:
    """Tests for equality, ordering and hashing."""

    def test_equal_across_zones(self):
        a = Instant.from_unix_seconds(0)
        b = a.astimezone(Timezone.from_hours(3))
        assert a == b
        assert hash(a) == hash(b)

    def test_ordering(self):
        a = Instant.from_unix_seconds(0)
        b = Instant.from_unix_seconds(1)
        assert a < b
        assert a <= b
        assert b > a
        assert b >= a
        assert a != b

    def test_not_equal_to_other_types(self):
        assert Instant.from_unix_seconds(0) != 0


class TestInstantDisplay:
    """Tests for str and repr."""

    def test_str_is_rfc3339(self):
        assert str(Instant.from_unix_millis(1500)) == "1970-01-01T00:00:01.5Z"

    def test_str_with_offset(self):
        t = Instant.from_unix_seconds(0, timezone=Timezone.from_hours(5, 30))
        assert str(t) == "1970-01-01T05:30:00+05:30"

    def test_repr(self):
        assert repr(Instant.from_unix_seconds(0)) == (
            "Instant(1970, 1, 1, 0, 0, 0, nanosecond=0, timezone=UTC)"
        )
