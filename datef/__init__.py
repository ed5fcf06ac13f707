"""Datef: convert timestamps between formats.

Datef reads timestamps as Unix seconds, Unix milliseconds, or text in a
reference-time layout, and writes them back out in any of those forms.

Core Types:
    Instant: Point in time with nanosecond precision
    Timezone: UTC offset-based timezone
    Format: A timestamp format (epoch integer, named layout, custom layout)

Format Functions:
    new_format: Build a Format from a specifier such as "unix" or "RFC3339"
    format_layout: Render an Instant with a layout
    parse_layout: Parse a string with a layout

Exceptions:
    DatefError: Base exception
    FormatError: String does not conform to a format
    ParseError: String does not match a layout
    ValidationError: Invalid component values
    TimezoneError: Invalid UTC offset

Example:
    >>> from datef import new_format
    >>> t = new_format("unix").parse("1700000000")
    >>> new_format("RFC3339").render(t)
    '2023-11-14T22:13:20Z'
"""

from __future__ import annotations

__version__ = "0.1.0"

# Core types
from datef.core.instant import Instant
from datef.units.timezone import Timezone

# Exceptions
from datef.errors import (
    DatefError,
    FormatError,
    ParseError,
    TimezoneError,
    ValidationError,
)

# Formats
from datef.formats import NAMED_FORMATS, Format, FormatKind, new_format
from datef.layout import format_layout, parse_layout

__all__: list[str] = [
    "__version__",
    # Core types
    "Instant",
    "Timezone",
    # Exceptions
    "DatefError",
    "FormatError",
    "ParseError",
    "TimezoneError",
    "ValidationError",
    # Formats
    "Format",
    "FormatKind",
    "NAMED_FORMATS",
    "new_format",
    "format_layout",
    "parse_layout",
]
