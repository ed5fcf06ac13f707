"""Reference-time layouts.

A layout describes a timestamp style by showing how the reference time

    Mon Jan 2 15:04:05 MST 2006

(Unix time 1136239445, in a zone seven hours west of UTC) would look in
that style. Recognized chunks of the reference time:

    2006  06            four-digit / two-digit year
    January  Jan        month name / abbreviation
    1  01               month number / zero-padded
    Monday  Mon         weekday name / abbreviation
    2  _2  02           day / space-padded / zero-padded
    __2  002            day of year, space-padded / zero-padded
    15  3  03           hour (24h) / hour (12h) / zero-padded 12h
    4  04               minute / zero-padded
    5  05               second / zero-padded
    PM  pm              AM/PM marker
    MST                 zone abbreviation
    Z07:00  Z0700  Z07  ISO 8601 offset, "Z" for UTC (also Z070000, Z07:00:00)
    -07:00  -0700  -07  numeric offset (also -070000, -07:00:00)
    .000  ,000          fractional seconds, fixed width
    .999  ,999          fractional seconds, trailing zeros trimmed

Everything else is copied literally.

Functions:
    format_layout: Render an Instant using a layout.
    parse_layout: Parse a string into an Instant using a layout.
    tokenize: Split a layout into literal text and chunk tokens.

Examples:
    >>> from datef.core.instant import Instant
    >>> from datef.layout import RFC3339, format_layout, parse_layout

    >>> format_layout(RFC3339, Instant.from_unix_seconds(0))
    '1970-01-01T00:00:00Z'

    >>> parse_layout(RFC3339, "1970-01-01T00:01:00Z").to_unix_seconds()
    60
"""

from __future__ import annotations

from datef.layout._chunks import Std, Token, tokenize
from datef.layout.formatting import format_layout
from datef.layout.parsing import parse_layout
from datef.layout.standard import (
    ANSIC,
    DATE_ONLY,
    DATE_TIME,
    KITCHEN,
    RFC822,
    RFC822Z,
    RFC850,
    RFC1123,
    RFC1123Z,
    RFC3339,
    RFC3339_NANO,
    RUBY_DATE,
    STAMP,
    STAMP_MICRO,
    STAMP_MILLI,
    STAMP_NANO,
    TIME_ONLY,
    UNIX_DATE,
)

__all__: list[str] = [
    "format_layout",
    "parse_layout",
    "tokenize",
    "Std",
    "Token",
    # Standard layouts
    "ANSIC",
    "UNIX_DATE",
    "RUBY_DATE",
    "RFC822",
    "RFC822Z",
    "RFC850",
    "RFC1123",
    "RFC1123Z",
    "RFC3339",
    "RFC3339_NANO",
    "KITCHEN",
    "STAMP",
    "STAMP_MILLI",
    "STAMP_MICRO",
    "STAMP_NANO",
    "DATE_TIME",
    "DATE_ONLY",
    "TIME_ONLY",
]
