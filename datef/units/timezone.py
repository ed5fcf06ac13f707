"""Timezone representation using UTC offset model.

This module provides the Timezone class for representing timezones
as fixed UTC offsets, without IANA timezone database support.
"""

from __future__ import annotations

from typing import ClassVar

from datef._internal.constants import MAX_UTC_OFFSET_SECONDS
from datef.errors import TimezoneError


class Timezone:
    """A timezone represented as a UTC offset with an optional name.

    The offset is stored in seconds from UTC, with positive values being
    east of UTC (ahead in time) and negative values being west of UTC
    (behind in time).

    The name is the zone abbreviation rendered by the ``MST`` layout
    chunk. Zones read from numeric offsets have no name and render as
    ``+hhmm`` instead. Abbreviations read from a timestamp carry no known
    offset (for example ``PST`` or a bare ``+03``) and keep their name
    with a zero offset; only ``GMT+h`` style names carry their hours.

    Attributes:
        offset_seconds: The UTC offset in seconds.
        name: Optional abbreviation for the timezone.

    Examples:
        >>> tz = Timezone.utc()
        >>> tz.is_utc
        True

        >>> tz = Timezone.from_hours(5, 30)
        >>> tz.offset_seconds
        19800
    """

    __slots__ = ("_offset_seconds", "_name")

    # UTC singleton instance (lazily initialized)
    _utc_instance: ClassVar[Timezone | None] = None

    def __init__(self, offset_seconds: int, name: str | None = None) -> None:
        """Create a Timezone with the specified UTC offset.

        Args:
            offset_seconds: UTC offset in seconds. Positive values are
                east of UTC, negative values are west.
            name: Optional abbreviation (e.g., "EST", "GMT+3").

        Raises:
            TimezoneError: If offset_seconds is outside valid range.
        """
        if not isinstance(offset_seconds, int):
            raise TimezoneError(
                f"offset_seconds must be an integer, got {type(offset_seconds).__name__}"
            )

        if abs(offset_seconds) > MAX_UTC_OFFSET_SECONDS:
            raise TimezoneError(
                f"offset_seconds {offset_seconds} is outside valid range "
                f"[-{MAX_UTC_OFFSET_SECONDS}, {MAX_UTC_OFFSET_SECONDS}]"
            )

        self._offset_seconds: int = offset_seconds
        self._name: str | None = name or None

    @classmethod
    def utc(cls) -> Timezone:
        """Return the UTC timezone.

        All calls return the same instance, named "UTC".
        """
        if cls._utc_instance is None:
            cls._utc_instance = cls(0, "UTC")
        return cls._utc_instance

    @classmethod
    def from_hours(cls, hours: int, minutes: int = 0, name: str | None = None) -> Timezone:
        """Create a Timezone from hours and minutes offset.

        Args:
            hours: Hour component of offset. Sign determines direction
                (positive = east of UTC).
            minutes: Minute component of offset (0 to 59). The sign is
                taken from hours.
            name: Optional abbreviation.

        Raises:
            TimezoneError: If minutes are out of range or the total offset
                is too large.

        Examples:
            >>> Timezone.from_hours(5, 30).offset_seconds
            19800

            >>> Timezone.from_hours(-5).offset_seconds
            -18000
        """
        if minutes < 0 or minutes > 59:
            raise TimezoneError(f"minutes must be 0-59, got {minutes}")

        if hours >= 0:
            offset_seconds = hours * 3600 + minutes * 60
        else:
            offset_seconds = hours * 3600 - minutes * 60

        return cls(offset_seconds, name)

    @property
    def offset_seconds(self) -> int:
        """Return the UTC offset in seconds. Positive values are east of UTC."""
        return self._offset_seconds

    @property
    def name(self) -> str | None:
        """Return the zone abbreviation, or None for unnamed offsets."""
        return self._name

    @property
    def is_utc(self) -> bool:
        """Return True if this timezone has a zero offset."""
        return self._offset_seconds == 0

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Timezone):
            return NotImplemented
        return (
            self._offset_seconds == other._offset_seconds
            and self._name == other._name
        )

    def __hash__(self) -> int:
        return hash((self._offset_seconds, self._name))

    def __repr__(self) -> str:
        if self._name:
            return f"Timezone(offset_seconds={self._offset_seconds}, name={self._name!r})"
        return f"Timezone(offset_seconds={self._offset_seconds})"

    def __str__(self) -> str:
        """Return the name, or the offset as "+05:30" for unnamed zones."""
        if self._name:
            return self._name

        total_minutes = abs(self._offset_seconds) // 60
        hours = total_minutes // 60
        minutes = total_minutes % 60
        sign = "+" if self._offset_seconds >= 0 else "-"

        return f"{sign}{hours:02d}:{minutes:02d}"


__all__ = ["Timezone"]
