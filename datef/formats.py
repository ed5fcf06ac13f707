"""Timestamp formats: epoch integers, named layouts and custom layouts.

A Format is one of four kinds:

    UNIX      whole seconds since the Unix epoch ("unix")
    UNIX_MS   whole milliseconds since the Unix epoch ("unixms")
    NAMED     an alias from NAMED_FORMATS, e.g. "RFC3339"
    LAYOUT    any other string, used verbatim as a reference-time layout

The same Format value parses input and renders output.

Examples:
    >>> from datef.formats import new_format
    >>> t = new_format("unix").parse("0")
    >>> new_format("RFC3339").render(t)
    '1970-01-01T00:00:00Z'

    >>> new_format("unix").render(new_format("unixms").parse("1500"))
    '1'
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Mapping

from datef import layout
from datef._internal.constants import INT64_MAX, INT64_MIN
from datef.core.instant import Instant
from datef.errors import FormatError, ParseError

L = logging.getLogger(__name__)

_INTEGER = re.compile(r"[+-]?[0-9]+")


class FormatKind(Enum):
    """The kinds of timestamp format."""

    UNIX = "unix"
    UNIX_MS = "unixms"
    NAMED = "named"
    LAYOUT = "layout"


@dataclass(frozen=True)
class NamedFormat:
    """A layout published under an alias.

    Attributes:
        layout: The reference-time layout.
        description: One line for the usage text.
    """

    layout: str
    description: str


NAMED_FORMATS: Mapping[str, NamedFormat] = MappingProxyType(
    {
        "ANSIC": NamedFormat(layout.ANSIC, "ANSI C asctime() timestamp"),
        "UnixDate": NamedFormat(layout.UNIX_DATE, "Unix date(1) timestamp"),
        "RubyDate": NamedFormat(layout.RUBY_DATE, "Ruby Time#to_s timestamp"),
        "RFC822": NamedFormat(layout.RFC822, "RFC822 timestamp"),
        "RFC822Z": NamedFormat(layout.RFC822Z, "RFC822 timestamp with numeric zone"),
        "RFC850": NamedFormat(layout.RFC850, "RFC850 timestamp"),
        "RFC1123": NamedFormat(layout.RFC1123, "RFC1123 timestamp"),
        "RFC1123Z": NamedFormat(layout.RFC1123Z, "RFC1123 timestamp with numeric zone"),
        "RFC3339": NamedFormat(layout.RFC3339, "RFC3339 timestamp"),
        "RFC3339Nano": NamedFormat(
            layout.RFC3339_NANO, "RFC3339 timestamp with nanoseconds"
        ),
        "Kitchen": NamedFormat(layout.KITCHEN, "wall clock time, e.g. 3:04PM"),
        "Stamp": NamedFormat(layout.STAMP, "syslog-style timestamp"),
        "StampMilli": NamedFormat(
            layout.STAMP_MILLI, "syslog-style timestamp with milliseconds"
        ),
        "StampMicro": NamedFormat(
            layout.STAMP_MICRO, "syslog-style timestamp with microseconds"
        ),
        "StampNano": NamedFormat(
            layout.STAMP_NANO, "syslog-style timestamp with nanoseconds"
        ),
        "DateTime": NamedFormat(layout.DATE_TIME, "date and time, e.g. 2006-01-02 15:04:05"),
        "DateOnly": NamedFormat(layout.DATE_ONLY, "date, e.g. 2006-01-02"),
        "TimeOnly": NamedFormat(layout.TIME_ONLY, "time of day, e.g. 15:04:05"),
    }
)


class Format:
    """A timestamp format used to parse input and render output.

    Construction never fails: strings that are neither "unix", "unixms"
    nor a key of NAMED_FORMATS are kept as custom layouts and only
    checked when used.

    Attributes:
        kind: The FormatKind.
        layout: The reference-time layout, or None for epoch formats.

    Examples:
        >>> Format("unixms").kind
        <FormatKind.UNIX_MS: 'unixms'>

        >>> Format("RFC3339").layout
        '2006-01-02T15:04:05Z07:00'

        >>> str(Format("2006/01/02"))
        '2006/01/02'
    """

    __slots__ = ("_kind", "_text")

    def __init__(self, spec: str) -> None:
        if spec == FormatKind.UNIX.value:
            self._kind = FormatKind.UNIX
            self._text = ""
        elif spec == FormatKind.UNIX_MS.value:
            self._kind = FormatKind.UNIX_MS
            self._text = ""
        elif spec in NAMED_FORMATS:
            self._kind = FormatKind.NAMED
            self._text = spec
        else:
            self._kind = FormatKind.LAYOUT
            self._text = spec

    @property
    def kind(self) -> FormatKind:
        return self._kind

    @property
    def layout(self) -> str | None:
        if self._kind is FormatKind.NAMED:
            return NAMED_FORMATS[self._text].layout
        if self._kind is FormatKind.LAYOUT:
            return self._text
        return None

    def parse(self, value: str) -> Instant:
        """Parse a timestamp string in this format.

        Args:
            value: The string to parse.

        Returns:
            The Instant it describes.

        Raises:
            FormatError: If value does not conform to this format.

        Examples:
            >>> Format("unix").parse("abc")  # doctest: +IGNORE_EXCEPTION_DETAIL
            Traceback (most recent call last):
            ...
            FormatError: "abc" is an invalid value for format unix
        """
        if self._kind is FormatKind.UNIX or self._kind is FormatKind.UNIX_MS:
            n = _parse_int64(value)
            if n is None:
                raise FormatError(value, str(self))
            if self._kind is FormatKind.UNIX:
                return Instant.from_unix_seconds(n)
            return Instant.from_unix_millis(n)
        elif self._kind is FormatKind.NAMED or self._kind is FormatKind.LAYOUT:
            try:
                return layout.parse_layout(self.layout, value)
            except ParseError as e:
                L.debug("%s", e)
                raise FormatError(value, str(self)) from e

        raise AssertionError(f"unhandled format kind: {self._kind}")

    def render(self, instant: Instant) -> str:
        """Render an instant in this format.

        The instant is rendered in its own display zone. Rendering never
        fails.
        """
        if self._kind is FormatKind.UNIX:
            return str(instant.to_unix_seconds())
        elif self._kind is FormatKind.UNIX_MS:
            return str(instant.to_unix_millis())
        elif self._kind is FormatKind.NAMED or self._kind is FormatKind.LAYOUT:
            return layout.format_layout(self.layout, instant)

        raise AssertionError(f"unhandled format kind: {self._kind}")

    def display(self) -> str:
        """Return the name this format was given on the command line."""
        if self._kind is FormatKind.UNIX or self._kind is FormatKind.UNIX_MS:
            return self._kind.value
        return self._text

    def __str__(self) -> str:
        return self.display()

    def __repr__(self) -> str:
        return f"Format({self.display()!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Format):
            return NotImplemented
        return self._kind is other._kind and self._text == other._text

    def __hash__(self) -> int:
        return hash((self._kind, self._text))


def _parse_int64(value: str) -> int | None:
    """Read a signed base-10 integer within the int64 range, or None."""
    if not _INTEGER.fullmatch(value):
        return None
    n = int(value)
    if n < INT64_MIN or n > INT64_MAX:
        return None
    return n


def new_format(spec: str) -> Format:
    """Build a Format from a command-line specifier. Never fails."""
    return Format(spec)


__all__ = [
    "Format",
    "FormatKind",
    "NamedFormat",
    "NAMED_FORMATS",
    "new_format",
]
