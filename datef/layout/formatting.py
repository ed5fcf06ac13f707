"""Rendering instants through reference-time layouts.

Functions:
    format_layout: Render an Instant using a layout.

Examples:
    >>> from datef.core.instant import Instant
    >>> format_layout("2006-01-02 15:04:05", Instant.from_unix_seconds(0))
    '1970-01-01 00:00:00'

    >>> format_layout("3:04PM", Instant.from_unix_seconds(13 * 3600))
    '1:00PM'
"""

from __future__ import annotations

from typing import TYPE_CHECKING, NamedTuple

from datef._internal.constants import (
    LONG_DAY_NAMES,
    LONG_MONTH_NAMES,
    SHORT_DAY_NAMES,
    SHORT_MONTH_NAMES,
)
from datef.layout._chunks import ISO8601_ZONES, NUMERIC_ZONES, Std, Token, tokenize

if TYPE_CHECKING:
    from datef.core.instant import Instant


class _Wall(NamedTuple):
    """Wall-clock fields of an instant in its display zone."""

    year: int
    month: int
    day: int
    hour: int
    minute: int
    second: int
    nanosecond: int
    weekday: int
    year_day: int
    offset: int
    zone_name: str | None


def _wall(instant: "Instant") -> _Wall:
    return _Wall(
        instant.year,
        instant.month,
        instant.day,
        instant.hour,
        instant.minute,
        instant.second,
        instant.nanosecond,
        instant.weekday,
        instant.year_day,
        instant.timezone.offset_seconds,
        instant.timezone.name,
    )


def _pad(n: int, width: int) -> str:
    """Zero-pad n to width digits, keeping a leading minus sign outside the padding."""
    if n < 0:
        return "-" + f"{-n:0{width}d}"
    return f"{n:0{width}d}"


def format_layout(layout: str, instant: "Instant") -> str:
    """Render an instant using a reference-time layout.

    The instant is rendered in its own display zone; callers wanting UTC
    output convert with ``Instant.to_utc()`` first.

    Args:
        layout: The layout, e.g. ``"2006-01-02T15:04:05Z07:00"``.
        instant: The instant to render.

    Returns:
        The formatted string. Rendering never fails; a layout with no
        recognizable chunks renders as itself.
    """
    wall = _wall(instant)
    return "".join(
        item if isinstance(item, str) else _format_token(item, wall)
        for item in tokenize(layout)
    )


def _format_token(token: Token, wall: _Wall) -> str:
    std = token.std

    if std is Std.YEAR:
        # The remainder keeps the year's sign: -1 renders "-01"
        rem = abs(wall.year) % 100
        return _pad(-rem if wall.year < 0 else rem, 2)
    elif std is Std.LONG_YEAR:
        return _pad(wall.year, 4)
    elif std is Std.MONTH:
        return SHORT_MONTH_NAMES[wall.month]
    elif std is Std.LONG_MONTH:
        return LONG_MONTH_NAMES[wall.month]
    elif std is Std.NUM_MONTH:
        return str(wall.month)
    elif std is Std.ZERO_MONTH:
        return f"{wall.month:02d}"
    elif std is Std.WEEKDAY:
        return SHORT_DAY_NAMES[wall.weekday]
    elif std is Std.LONG_WEEKDAY:
        return LONG_DAY_NAMES[wall.weekday]
    elif std is Std.DAY:
        return str(wall.day)
    elif std is Std.UNDER_DAY:
        return f"{wall.day:2d}"
    elif std is Std.ZERO_DAY:
        return f"{wall.day:02d}"
    elif std is Std.UNDER_YEAR_DAY:
        return f"{wall.year_day:3d}"
    elif std is Std.ZERO_YEAR_DAY:
        return f"{wall.year_day:03d}"
    elif std is Std.HOUR:
        return f"{wall.hour:02d}"
    elif std is Std.HOUR12:
        return str(wall.hour % 12 or 12)
    elif std is Std.ZERO_HOUR12:
        return f"{wall.hour % 12 or 12:02d}"
    elif std is Std.MINUTE:
        return str(wall.minute)
    elif std is Std.ZERO_MINUTE:
        return f"{wall.minute:02d}"
    elif std is Std.SECOND:
        return str(wall.second)
    elif std is Std.ZERO_SECOND:
        return f"{wall.second:02d}"
    elif std is Std.PM:
        return "PM" if wall.hour >= 12 else "AM"
    elif std is Std.LOWER_PM:
        return "pm" if wall.hour >= 12 else "am"
    elif std in ISO8601_ZONES or std in NUMERIC_ZONES:
        if wall.offset == 0 and std in ISO8601_ZONES:
            return "Z"
        return _format_offset(std, wall.offset)
    elif std is Std.TZ:
        if wall.zone_name:
            return wall.zone_name
        return _format_offset(Std.NUM_TZ, wall.offset)
    elif std is Std.FRAC_SECOND_0 or std is Std.FRAC_SECOND_9:
        return _format_fraction(token, wall.nanosecond)

    raise AssertionError(f"unhandled layout chunk: {std}")


def _format_offset(std: Std, offset: int) -> str:
    """Render a UTC offset in seconds as e.g. +05:30 for the given zone chunk."""
    sign = "-" if offset < 0 else "+"
    offset = abs(offset)
    minutes = offset // 60

    parts = [sign, f"{minutes // 60:02d}"]
    colon = std in (
        Std.ISO8601_COLON_TZ,
        Std.NUM_COLON_TZ,
        Std.ISO8601_COLON_SECONDS_TZ,
        Std.NUM_COLON_SECONDS_TZ,
    )
    if std not in (Std.ISO8601_SHORT_TZ, Std.NUM_SHORT_TZ):
        if colon:
            parts.append(":")
        parts.append(f"{minutes % 60:02d}")
    if std in (
        Std.ISO8601_SECONDS_TZ,
        Std.NUM_SECONDS_TZ,
        Std.ISO8601_COLON_SECONDS_TZ,
        Std.NUM_COLON_SECONDS_TZ,
    ):
        if colon:
            parts.append(":")
        parts.append(f"{offset % 60:02d}")
    return "".join(parts)


def _format_fraction(token: Token, nanosecond: int) -> str:
    """Render fractional seconds, truncated to the chunk's digit count."""
    digits = f"{nanosecond:09d}"[: min(token.digits, 9)]
    if token.std is Std.FRAC_SECOND_9:
        digits = digits.rstrip("0")
        if not digits:
            return ""
    return token.separator + digits


__all__ = ["format_layout"]
