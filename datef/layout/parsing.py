"""Parsing timestamps through reference-time layouts.

Functions:
    parse_layout: Parse a string into an Instant using a layout.

Fields missing from the layout take their reference defaults: year 0,
January, day 1, midnight. A layout without a zone chunk yields UTC.

Examples:
    >>> parse_layout("2006-01-02", "2024-01-15").to_unix_seconds()
    1705276800

    >>> parse_layout("2006-01-02", "2024-13-15")  # doctest: +IGNORE_EXCEPTION_DETAIL
    Traceback (most recent call last):
    ...
    ParseError: parsing time "2024-13-15": month out of range
"""

from __future__ import annotations

import logging
from typing import Sequence

from datef._internal.calendar import days_in_month, year_day_to_md
from datef._internal.constants import (
    LONG_DAY_NAMES,
    LONG_MONTH_NAMES,
    SECONDS_PER_HOUR,
    SHORT_DAY_NAMES,
    SHORT_MONTH_NAMES,
)
from datef.core.instant import Instant
from datef.errors import ParseError, quote
from datef.layout._chunks import (
    FRACTIONS,
    ISO8601_ZONES,
    NUMERIC_ZONES,
    Std,
    next_token,
    tokenize,
)
from datef.units.timezone import Timezone

L = logging.getLogger(__name__)


class _Bad(Exception):
    """The value does not match the current chunk."""


def _is_digit(s: str, i: int) -> bool:
    return i < len(s) and "0" <= s[i] <= "9"


def _is_digits(s: str) -> bool:
    return bool(s) and all("0" <= c <= "9" for c in s)


def _getnum(value: str, fixed: bool) -> tuple[int, str]:
    """Read one or two digits; fixed requires exactly two."""
    if not _is_digit(value, 0):
        raise _Bad
    if not _is_digit(value, 1):
        if fixed:
            raise _Bad
        return int(value[0]), value[1:]
    return int(value[:2]), value[2:]


def _getnum3(value: str, fixed: bool) -> tuple[int, str]:
    """Read one to three digits; fixed requires exactly three."""
    i = 0
    while i < 3 and _is_digit(value, i):
        i += 1
    if i == 0 or (fixed and i != 3):
        raise _Bad
    return int(value[:i]), value[i:]


def _lookup(names: Sequence[str], value: str) -> tuple[int, str]:
    """Match the start of value against names, ignoring case."""
    for index, name in enumerate(names):
        if name and value[: len(name)].lower() == name.lower():
            return index, value[len(name):]
    raise _Bad


def _skip(value: str, prefix: str) -> str:
    """Consume literal layout text; a run of spaces matches a run of spaces."""
    while prefix:
        if prefix[0] == " ":
            if value and value[0] != " ":
                raise _Bad
            prefix = prefix.lstrip(" ")
            value = value.lstrip(" ")
            continue
        if not value or value[0] != prefix[0]:
            raise _Bad
        prefix = prefix[1:]
        value = value[1:]
    return value


def _parse_nanoseconds(value: str, nbytes: int) -> int:
    """Read a separator and the digits after it as nanoseconds.

    Digits past the ninth are ignored.
    """
    if value[:1] not in (".", ","):
        raise _Bad
    digits = value[1:nbytes][:9]
    if not _is_digits(digits):
        raise _Bad
    return int(digits.ljust(9, "0"))


def _signed_offset_length(value: str) -> int:
    """Length of a leading "+h"/"-hh" hour offset, or 0 if there is none."""
    if value[:1] not in ("+", "-"):
        return 0
    n = 1
    while _is_digit(value, n):
        n += 1
    if n == 1 or int(value[1:n]) > 23:
        return 0
    return n


def _zone_name_length(value: str) -> int:
    """Length of a zone abbreviation at the start of value, or 0.

    Accepted: ChST and MeST, GMT with an optional signed hour offset,
    a bare signed hour offset, three upper-case letters, four
    upper-case letters ending in T (or WITA), five ending in T.
    """
    if len(value) < 3:
        return 0
    if value[:4] in ("ChST", "MeST"):
        return 4
    if value[:3] == "GMT":
        return 3 + _signed_offset_length(value[3:])
    if value[0] in "+-":
        return _signed_offset_length(value)

    upper = 0
    while upper < 6 and upper < len(value) and "A" <= value[upper] <= "Z":
        upper += 1
    if upper == 3:
        return 3
    if upper == 4 and (value[3] == "T" or value[:4] == "WITA"):
        return 4
    if upper == 5 and value[4] == "T":
        return 5
    return 0


def _parse_offset(std: Std, value: str) -> tuple[int, str, str]:
    """Read a numeric UTC offset.

    Returns:
        (offset in seconds, rest of value, range error or "").
    """
    seconds = "00"
    if std in (Std.ISO8601_COLON_TZ, Std.NUM_COLON_TZ):
        if len(value) < 6 or value[3] != ":":
            raise _Bad
        sign, hours, minutes, value = value[0], value[1:3], value[4:6], value[6:]
    elif std in (Std.ISO8601_SHORT_TZ, Std.NUM_SHORT_TZ):
        if len(value) < 3:
            raise _Bad
        sign, hours, minutes, value = value[0], value[1:3], "00", value[3:]
    elif std in (Std.ISO8601_COLON_SECONDS_TZ, Std.NUM_COLON_SECONDS_TZ):
        if len(value) < 9 or value[3] != ":" or value[6] != ":":
            raise _Bad
        sign, hours, minutes, seconds, value = (
            value[0], value[1:3], value[4:6], value[7:9], value[9:]
        )
    elif std in (Std.ISO8601_SECONDS_TZ, Std.NUM_SECONDS_TZ):
        if len(value) < 7:
            raise _Bad
        sign, hours, minutes, seconds, value = (
            value[0], value[1:3], value[3:5], value[5:7], value[7:]
        )
    else:
        if len(value) < 5:
            raise _Bad
        sign, hours, minutes, value = value[0], value[1:3], value[3:5], value[5:]

    if sign not in ("+", "-") or not all(map(_is_digits, (hours, minutes, seconds))):
        raise _Bad

    hr, mm, ss = int(hours), int(minutes), int(seconds)
    # Offsets of 24 hours or 60 minutes/seconds do turn up in the wild
    range_err = ""
    if hr > 24:
        range_err = "time zone offset hour"
    elif mm > 60:
        range_err = "time zone offset minute"
    elif ss > 60:
        range_err = "time zone offset second"

    offset = (hr * 60 + mm) * 60 + ss
    return (-offset if sign == "-" else offset), value, range_err


def _named_zone(name: str) -> Timezone:
    """Build the zone for an abbreviation read from a timestamp.

    Only GMT+h style names carry an offset; any other abbreviation,
    including a bare "+03", keeps its name with a zero offset.
    """
    if name.startswith("GMT") and len(name) > 3:
        return Timezone(int(name[3:]) * SECONDS_PER_HOUR, name)
    return Timezone(0, name)


def parse_layout(layout: str, value: str) -> Instant:
    """Parse a string using a reference-time layout.

    Args:
        layout: The layout, e.g. ``"2006-01-02T15:04:05Z07:00"``.
        value: The string to parse.

    Returns:
        The Instant described by value, displayed in the zone read from it
        (UTC when the layout has no zone chunk).

    Raises:
        ParseError: If value does not match layout or a field is out of range.

    Examples:
        >>> t = parse_layout("Jan _2 15:04:05", "Feb  3 04:05:06")
        >>> (t.year, t.month, t.day, t.hour)
        (0, 2, 3, 4)
    """
    original = value
    year = 0
    month = day = yday = -1
    hour = minute = second = nanosecond = 0
    pm_set = am_set = False
    utc_seen = False
    zone_offset: int | None = None
    zone_name = ""

    items = tokenize(layout)
    for index, item in enumerate(items):
        if isinstance(item, str):
            try:
                value = _skip(value, item)
            except _Bad:
                raise ParseError(layout, original, item, value) from None
            continue

        std = item.std
        hold = value
        range_err = ""
        try:
            if std is Std.YEAR:
                if len(value) < 2 or not _is_digits(value[:2]):
                    raise _Bad
                year, value = int(value[:2]), value[2:]
                year += 1900 if year >= 69 else 2000
            elif std is Std.LONG_YEAR:
                if len(value) < 4 or not _is_digits(value[:4]):
                    raise _Bad
                year, value = int(value[:4]), value[4:]
            elif std is Std.MONTH:
                month, value = _lookup(SHORT_MONTH_NAMES, value)
            elif std is Std.LONG_MONTH:
                month, value = _lookup(LONG_MONTH_NAMES, value)
            elif std in (Std.NUM_MONTH, Std.ZERO_MONTH):
                month, value = _getnum(value, std is Std.ZERO_MONTH)
                if not 1 <= month <= 12:
                    range_err = "month"
            elif std is Std.WEEKDAY:
                _, value = _lookup(SHORT_DAY_NAMES, value)
            elif std is Std.LONG_WEEKDAY:
                _, value = _lookup(LONG_DAY_NAMES, value)
            elif std in (Std.DAY, Std.UNDER_DAY, Std.ZERO_DAY):
                if std is Std.UNDER_DAY and value[:1] == " ":
                    value = value[1:]
                # Checked against the month once parsing is complete
                day, value = _getnum(value, std is Std.ZERO_DAY)
            elif std in (Std.UNDER_YEAR_DAY, Std.ZERO_YEAR_DAY):
                for _ in range(2):
                    if std is Std.UNDER_YEAR_DAY and value[:1] == " ":
                        value = value[1:]
                yday, value = _getnum3(value, std is Std.ZERO_YEAR_DAY)
                if not 1 <= yday <= 366:
                    range_err = "day-of-year"
            elif std is Std.HOUR:
                hour, value = _getnum(value, False)
                if hour >= 24:
                    range_err = "hour"
            elif std in (Std.HOUR12, Std.ZERO_HOUR12):
                hour, value = _getnum(value, std is Std.ZERO_HOUR12)
                if hour > 12:
                    range_err = "hour"
            elif std in (Std.MINUTE, Std.ZERO_MINUTE):
                minute, value = _getnum(value, std is Std.ZERO_MINUTE)
                if minute >= 60:
                    range_err = "minute"
            elif std in (Std.SECOND, Std.ZERO_SECOND):
                second, value = _getnum(value, std is Std.ZERO_SECOND)
                if second >= 60:
                    range_err = "second"
                elif len(value) >= 2 and value[0] in ".," and _is_digit(value, 1):
                    # Fractional seconds the layout did not ask for
                    following = next_token(items, index)
                    if following is None or following.std not in FRACTIONS:
                        n = 2
                        while _is_digit(value, n):
                            n += 1
                        nanosecond = _parse_nanoseconds(value, n)
                        value = value[n:]
            elif std is Std.PM:
                if value[:2] == "PM":
                    pm_set = True
                elif value[:2] == "AM":
                    am_set = True
                else:
                    raise _Bad
                value = value[2:]
            elif std is Std.LOWER_PM:
                if value[:2] == "pm":
                    pm_set = True
                elif value[:2] == "am":
                    am_set = True
                else:
                    raise _Bad
                value = value[2:]
            elif std in ISO8601_ZONES and value[:1] == "Z":
                value = value[1:]
                utc_seen = True
            elif std in ISO8601_ZONES or std in NUMERIC_ZONES:
                zone_offset, value, range_err = _parse_offset(std, value)
            elif std is Std.TZ:
                if value[:3] == "UTC":
                    value = value[3:]
                    utc_seen = True
                else:
                    n = _zone_name_length(value)
                    if n == 0:
                        raise _Bad
                    zone_name, value = value[:n], value[n:]
            elif std is Std.FRAC_SECOND_0:
                ndigit = 1 + item.digits
                if len(value) < ndigit:
                    raise _Bad
                nanosecond = _parse_nanoseconds(value, ndigit)
                value = value[ndigit:]
            elif std is Std.FRAC_SECOND_9:
                # Optional on input, and takes as many digits as are present
                if len(value) >= 2 and value[0] in ".," and _is_digit(value, 1):
                    i = 0
                    while _is_digit(value, i + 1):
                        i += 1
                    nanosecond = _parse_nanoseconds(value, 1 + i)
                    value = value[1 + i:]
        except _Bad:
            raise ParseError(layout, original, item.text, hold) from None

        if range_err:
            raise ParseError(
                layout, original, item.text, value, f": {range_err} out of range"
            )

    if value:
        raise ParseError(layout, original, "", value, f": extra text: {quote(value)}")

    if pm_set and hour < 12:
        hour += 12
    elif am_set and hour == 12:
        hour = 0

    if yday >= 0:
        try:
            m, d = year_day_to_md(year, yday)
        except ValueError:
            raise ParseError(layout, original, "", value, ": day-of-year out of range") from None
        if month >= 0 and month != m:
            raise ParseError(layout, original, "", value, ": day-of-year does not match month")
        if day >= 0 and day != d:
            raise ParseError(layout, original, "", value, ": day-of-year does not match day")
        month, day = m, d
    else:
        if month < 0:
            month = 1
        if day < 0:
            day = 1

    if day < 1 or day > days_in_month(year, month):
        raise ParseError(layout, original, "", value, ": day out of range")

    if utc_seen:
        tz = Timezone.utc()
    elif zone_offset is not None:
        tz = Timezone(zone_offset)
    elif zone_name:
        tz = _named_zone(zone_name)
    else:
        tz = Timezone.utc()

    L.debug("parsed %r with layout %r in zone %s", original, layout, tz)
    return Instant.from_components(
        year, month, day, hour, minute, second, nanosecond, timezone=tz
    )


__all__ = ["parse_layout"]
