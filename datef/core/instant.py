"""Instant class: an absolute point in time.

This module provides the Instant class for representing points on the
timeline with nanosecond precision, displayed in a fixed-offset timezone.
"""

from __future__ import annotations

import time as _time

from datef._internal.calendar import (
    day_of_year,
    ordinal_to_weekday,
    ordinal_to_ymd,
    validate_date,
    ymd_to_ordinal,
)
from datef._internal.constants import (
    NANOS_PER_DAY,
    NANOS_PER_HOUR,
    NANOS_PER_MILLISECOND,
    NANOS_PER_MINUTE,
    NANOS_PER_SECOND,
    SECONDS_PER_DAY,
    UNIX_EPOCH_ORDINAL,
)
from datef.errors import ValidationError
from datef.units.timezone import Timezone


class Instant:
    """A point on the timeline with nanosecond precision.

    The internal representation is the number of nanoseconds since the
    Unix epoch (1970-01-01T00:00:00Z) plus the timezone the instant is
    displayed in. The timezone only affects the calendar fields; two
    instants at the same point on the timeline are equal whatever their
    zones.

    Instants are immutable.

    Attributes:
        year: The year in the display zone (can be 0 or negative).
        month: The month (1-12).
        day: The day of the month (1-31).
        hour: The hour (0-23).
        minute: The minute (0-59).
        second: The second (0-59).
        nanosecond: The nanosecond within the second (0-999999999).
        weekday: Day of week (Sunday=0).
        year_day: Day of year (1-366).
        timezone: The display timezone.

    Examples:
        >>> t = Instant.from_unix_seconds(0)
        >>> t.year, t.month, t.day
        (1970, 1, 1)

        >>> t = Instant.from_components(2024, 1, 15, 12, 0, 0,
        ...                             timezone=Timezone.from_hours(5, 30))
        >>> t.to_utc().hour
        6
    """

    __slots__ = ("_nanos", "_tz")

    def __init__(self, nanos: int = 0, *, timezone: Timezone | None = None) -> None:
        """Create an Instant from nanoseconds since the Unix epoch.

        Args:
            nanos: Nanoseconds since 1970-01-01T00:00:00Z.
            timezone: Display timezone; UTC when omitted.
        """
        self._nanos: int = nanos
        self._tz: Timezone = timezone if timezone is not None else Timezone.utc()

    @classmethod
    def now(cls) -> Instant:
        """Return the current time in UTC."""
        return cls(_time.time_ns())

    @classmethod
    def from_unix_seconds(cls, seconds: int, *, timezone: Timezone | None = None) -> Instant:
        """Create an Instant from whole seconds since the Unix epoch.

        Examples:
            >>> Instant.from_unix_seconds(60).minute
            1
        """
        return cls(seconds * NANOS_PER_SECOND, timezone=timezone)

    @classmethod
    def from_unix_millis(cls, millis: int, *, timezone: Timezone | None = None) -> Instant:
        """Create an Instant from milliseconds since the Unix epoch.

        Examples:
            >>> Instant.from_unix_millis(1500).nanosecond
            500000000
        """
        return cls(millis * NANOS_PER_MILLISECOND, timezone=timezone)

    @classmethod
    def from_unix_nanos(cls, nanos: int, *, timezone: Timezone | None = None) -> Instant:
        """Create an Instant from nanoseconds since the Unix epoch."""
        return cls(nanos, timezone=timezone)

    @classmethod
    def from_components(
        cls,
        year: int,
        month: int,
        day: int,
        hour: int = 0,
        minute: int = 0,
        second: int = 0,
        nanosecond: int = 0,
        *,
        timezone: Timezone | None = None,
    ) -> Instant:
        """Create an Instant from wall-clock fields in a timezone.

        Args:
            year: The year (can be 0 or negative).
            month: The month (1-12).
            day: The day of the month.
            hour: The hour (0-23).
            minute: The minute (0-59).
            second: The second (0-59).
            nanosecond: The nanosecond (0-999999999).
            timezone: Zone the fields are expressed in; UTC when omitted.

        Raises:
            ValidationError: If any component is out of range.

        Examples:
            >>> Instant.from_components(1970, 1, 1, 0, 1, 0).to_unix_seconds()
            60
        """
        try:
            validate_date(year, month, day)
        except ValueError as e:
            raise ValidationError(str(e)) from e
        if not 0 <= hour <= 23:
            raise ValidationError(f"hour must be 0-23, got {hour}")
        if not 0 <= minute <= 59:
            raise ValidationError(f"minute must be 0-59, got {minute}")
        if not 0 <= second <= 59:
            raise ValidationError(f"second must be 0-59, got {second}")
        if not 0 <= nanosecond < NANOS_PER_SECOND:
            raise ValidationError(f"nanosecond must be 0-999999999, got {nanosecond}")

        tz = timezone if timezone is not None else Timezone.utc()
        days = ymd_to_ordinal(year, month, day) - UNIX_EPOCH_ORDINAL
        seconds = (
            days * SECONDS_PER_DAY
            + hour * 3600
            + minute * 60
            + second
            - tz.offset_seconds
        )
        return cls(seconds * NANOS_PER_SECOND + nanosecond, timezone=tz)

    # Calendar fields in the display zone

    def _local(self) -> tuple[int, int]:
        """Return (ordinal, nanoseconds since local midnight)."""
        local = self._nanos + self._tz.offset_seconds * NANOS_PER_SECOND
        days, day_nanos = divmod(local, NANOS_PER_DAY)
        return UNIX_EPOCH_ORDINAL + days, day_nanos

    def _ymd(self) -> tuple[int, int, int]:
        return ordinal_to_ymd(self._local()[0])

    @property
    def year(self) -> int:
        return self._ymd()[0]

    @property
    def month(self) -> int:
        return self._ymd()[1]

    @property
    def day(self) -> int:
        return self._ymd()[2]

    @property
    def hour(self) -> int:
        return self._local()[1] // NANOS_PER_HOUR

    @property
    def minute(self) -> int:
        return (self._local()[1] % NANOS_PER_HOUR) // NANOS_PER_MINUTE

    @property
    def second(self) -> int:
        return (self._local()[1] % NANOS_PER_MINUTE) // NANOS_PER_SECOND

    @property
    def nanosecond(self) -> int:
        return self._local()[1] % NANOS_PER_SECOND

    @property
    def weekday(self) -> int:
        """Day of week in the display zone, Sunday=0 through Saturday=6."""
        return ordinal_to_weekday(self._local()[0])

    @property
    def year_day(self) -> int:
        """Day of year in the display zone, 1 for January 1st."""
        return day_of_year(*self._ymd())

    @property
    def timezone(self) -> Timezone:
        return self._tz

    # Conversions

    def astimezone(self, timezone: Timezone) -> Instant:
        """Return the same point on the timeline displayed in another zone."""
        return Instant(self._nanos, timezone=timezone)

    def to_utc(self) -> Instant:
        """Return the same point on the timeline displayed in UTC."""
        return self.astimezone(Timezone.utc())

    def to_unix_seconds(self) -> int:
        """Return whole seconds since the epoch, truncated toward the epoch.

        Examples:
            >>> Instant.from_unix_millis(-1500).to_unix_seconds()
            -1
        """
        return _truncating_div(self._nanos, NANOS_PER_SECOND)

    def to_unix_millis(self) -> int:
        """Return whole milliseconds since the epoch, truncated toward the epoch."""
        return _truncating_div(self._nanos, NANOS_PER_MILLISECOND)

    def to_unix_nanos(self) -> int:
        """Return nanoseconds since the epoch."""
        return self._nanos

    # Comparison operators

    def __eq__(self, other: object) -> bool:
        """Two instants are equal if they are the same point on the timeline."""
        if not isinstance(other, Instant):
            return NotImplemented
        return self._nanos == other._nanos

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Instant):
            return NotImplemented
        return self._nanos < other._nanos

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Instant):
            return NotImplemented
        return self._nanos <= other._nanos

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Instant):
            return NotImplemented
        return self._nanos > other._nanos

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Instant):
            return NotImplemented
        return self._nanos >= other._nanos

    def __hash__(self) -> int:
        return hash(self._nanos)

    def __repr__(self) -> str:
        year, month, day = self._ymd()
        return (
            f"Instant({year}, {month}, {day}, {self.hour}, {self.minute}, "
            f"{self.second}, nanosecond={self.nanosecond}, timezone={self._tz})"
        )

    def __str__(self) -> str:
        """Return the RFC 3339 representation with trimmed nanoseconds."""
        from datef.layout import RFC3339_NANO, format_layout

        return format_layout(RFC3339_NANO, self)


def _truncating_div(a: int, b: int) -> int:
    """Integer division rounding toward zero."""
    q = abs(a) // b
    return q if a >= 0 else -q


__all__ = ["Instant"]
