"""Splitting layouts into literal text and reference-time chunks.

A layout is the reference time ``Mon Jan 2 15:04:05 MST 2006`` written
the way the timestamp should look. Each recognizable piece of the
reference time is a chunk; everything else is literal text.

This module is not part of the public API.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Sequence, Union

from datef._internal.decorators import memoize


class Std(Enum):
    """Reference-time chunks, valued by their canonical spelling."""

    LONG_MONTH = "January"
    MONTH = "Jan"
    NUM_MONTH = "1"
    ZERO_MONTH = "01"
    LONG_WEEKDAY = "Monday"
    WEEKDAY = "Mon"
    DAY = "2"
    UNDER_DAY = "_2"
    ZERO_DAY = "02"
    UNDER_YEAR_DAY = "__2"
    ZERO_YEAR_DAY = "002"
    HOUR = "15"
    HOUR12 = "3"
    ZERO_HOUR12 = "03"
    MINUTE = "4"
    ZERO_MINUTE = "04"
    SECOND = "5"
    ZERO_SECOND = "05"
    LONG_YEAR = "2006"
    YEAR = "06"
    PM = "PM"
    LOWER_PM = "pm"
    TZ = "MST"
    ISO8601_TZ = "Z0700"
    ISO8601_SECONDS_TZ = "Z070000"
    ISO8601_SHORT_TZ = "Z07"
    ISO8601_COLON_TZ = "Z07:00"
    ISO8601_COLON_SECONDS_TZ = "Z07:00:00"
    NUM_TZ = "-0700"
    NUM_SECONDS_TZ = "-070000"
    NUM_SHORT_TZ = "-07"
    NUM_COLON_TZ = "-07:00"
    NUM_COLON_SECONDS_TZ = "-07:00:00"
    FRAC_SECOND_0 = ".0"
    FRAC_SECOND_9 = ".9"


ISO8601_ZONES = frozenset(
    {
        Std.ISO8601_TZ,
        Std.ISO8601_SECONDS_TZ,
        Std.ISO8601_SHORT_TZ,
        Std.ISO8601_COLON_TZ,
        Std.ISO8601_COLON_SECONDS_TZ,
    }
)
NUMERIC_ZONES = frozenset(
    {
        Std.NUM_TZ,
        Std.NUM_SECONDS_TZ,
        Std.NUM_SHORT_TZ,
        Std.NUM_COLON_TZ,
        Std.NUM_COLON_SECONDS_TZ,
    }
)
FRACTIONS = frozenset({Std.FRAC_SECOND_0, Std.FRAC_SECOND_9})


@dataclass(frozen=True)
class Token:
    """A chunk found in a layout.

    Attributes:
        std: Which chunk this is.
        text: The exact layout text, e.g. ``".000"`` or ``",999"``.
    """

    std: Std

    text: str

    @property
    def separator(self) -> str:
        """Decimal separator of a fraction chunk."""
        return self.text[0]

    @property
    def digits(self) -> int:
        """Digit count of a fraction chunk."""
        return len(self.text) - 1


Item = Union[str, Token]

# Zero-padded chunks keyed by the digit after the leading "0"
_ZERO_PADDED: dict[str, Std] = {
    "1": Std.ZERO_MONTH,
    "2": Std.ZERO_DAY,
    "3": Std.ZERO_HOUR12,
    "4": Std.ZERO_MINUTE,
    "5": Std.ZERO_SECOND,
    "6": Std.YEAR,
}

_SINGLE_DIGIT: dict[str, Std] = {
    "3": Std.HOUR12,
    "4": Std.MINUTE,
    "5": Std.SECOND,
}

# Longest spellings first so "-07" does not shadow "-07:00"
_ZONE_SPELLINGS: tuple[Std, ...] = (
    Std.ISO8601_COLON_SECONDS_TZ,
    Std.ISO8601_SECONDS_TZ,
    Std.ISO8601_COLON_TZ,
    Std.ISO8601_TZ,
    Std.ISO8601_SHORT_TZ,
    Std.NUM_COLON_SECONDS_TZ,
    Std.NUM_SECONDS_TZ,
    Std.NUM_COLON_TZ,
    Std.NUM_TZ,
    Std.NUM_SHORT_TZ,
)


def _is_digit(s: str, i: int) -> bool:
    return i < len(s) and "0" <= s[i] <= "9"


def _starts_with_lower(s: str, i: int) -> bool:
    return i < len(s) and "a" <= s[i] <= "z"


def _chunk_at(layout: str, i: int) -> tuple[Std, int] | None:
    """Return the chunk starting at layout[i] and the index just past it."""
    c = layout[i]
    rest = layout[i:]

    if c == "J":
        if rest.startswith("January"):
            return Std.LONG_MONTH, i + 7
        if rest.startswith("Jan") and not _starts_with_lower(layout, i + 3):
            return Std.MONTH, i + 3
    elif c == "M":
        if rest.startswith("Monday"):
            return Std.LONG_WEEKDAY, i + 6
        if rest.startswith("Mon") and not _starts_with_lower(layout, i + 3):
            return Std.WEEKDAY, i + 3
        if rest.startswith("MST"):
            return Std.TZ, i + 3
    elif c == "0":
        if rest.startswith("002"):
            return Std.ZERO_YEAR_DAY, i + 3
        if len(rest) >= 2 and rest[1] in _ZERO_PADDED:
            return _ZERO_PADDED[rest[1]], i + 2
    elif c == "1":
        if rest.startswith("15"):
            return Std.HOUR, i + 2
        return Std.NUM_MONTH, i + 1
    elif c == "2":
        if rest.startswith("2006"):
            return Std.LONG_YEAR, i + 4
        return Std.DAY, i + 1
    elif c == "_":
        # "_2006" is a literal underscore followed by the year
        if rest.startswith("_2") and not rest.startswith("_2006"):
            return Std.UNDER_DAY, i + 2
        if rest.startswith("__2"):
            return Std.UNDER_YEAR_DAY, i + 3
    elif c in _SINGLE_DIGIT:
        return _SINGLE_DIGIT[c], i + 1
    elif c == "P":
        if rest.startswith("PM"):
            return Std.PM, i + 2
    elif c == "p":
        if rest.startswith("pm"):
            return Std.LOWER_PM, i + 2
    elif c in "-Z":
        for std in _ZONE_SPELLINGS:
            if rest.startswith(std.value):
                return std, i + len(std.value)
    elif c in ".,":
        if len(rest) >= 2 and rest[1] in "09":
            ch = rest[1]
            j = i + 1
            while j < len(layout) and layout[j] == ch:
                j += 1
            # ".0000" followed by another digit is not a fraction
            if not _is_digit(layout, j):
                return (Std.FRAC_SECOND_0 if ch == "0" else Std.FRAC_SECOND_9), j

    return None


@memoize
def tokenize(layout: str) -> tuple[Item, ...]:
    """Split a layout into literal strings and chunk tokens.

    Examples:
        >>> [getattr(item, "std", item) for item in tokenize("2006-01-02")]
        [<Std.LONG_YEAR: '2006'>, '-', <Std.ZERO_MONTH: '01'>, '-', <Std.ZERO_DAY: '02'>]
    """
    items: list[Item] = []
    literal_start = 0
    i = 0
    while i < len(layout):
        found = _chunk_at(layout, i)
        if found is None:
            i += 1
            continue
        std, end = found
        if literal_start < i:
            items.append(layout[literal_start:i])
        items.append(Token(std, layout[i:end]))
        i = literal_start = end

    if literal_start < len(layout):
        items.append(layout[literal_start:])
    return tuple(items)


def next_token(items: Sequence[Item], index: int) -> Token | None:
    """Return the first chunk token after items[index], skipping literals."""
    for item in items[index + 1 :]:
        if isinstance(item, Token):
            return item
    return None


__all__ = [
    "Std",
    "Token",
    "Item",
    "ISO8601_ZONES",
    "NUMERIC_ZONES",
    "FRACTIONS",
    "tokenize",
    "next_token",
]
