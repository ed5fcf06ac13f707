"""Datef exception hierarchy.

All datef-specific exceptions inherit from DatefError.
"""

from __future__ import annotations

_ESCAPES = {
    "\a": "\\a",
    "\b": "\\b",
    "\f": "\\f",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
    "\v": "\\v",
    "\\": "\\\\",
    '"': '\\"',
}


def _escape(c: str) -> str:
    if c in _ESCAPES:
        return _ESCAPES[c]
    n = ord(c)
    if 0xDC80 <= n <= 0xDCFF:
        # An undecodable input byte smuggled through surrogateescape
        return f"\\x{n - 0xDC00:02x}"
    if n < 0x20 or n == 0x7F:
        return f"\\x{n:02x}"
    if c.isprintable():
        return c
    if n < 0x10000:
        return f"\\u{n:04x}"
    return f"\\U{n:08x}"


def quote(s: str) -> str:
    """Return s double-quoted, escaping quotes and non-printable characters.

    Control characters and undecodable bytes appear as ``\\xNN``, other
    non-printable characters as ``\\uNNNN``.

    Examples:
        >>> print(quote('a"b\\x00'))
        "a\\"b\\x00"
    """
    return '"' + "".join(map(_escape, s)) + '"'


class DatefError(Exception):
    """Base exception for all datef errors."""

    pass


class ValidationError(DatefError):
    """Invalid input values.

    Raised when a calendar or clock component is out of range.

    Examples:
        - Month value outside 1-12
        - Day value outside valid range for month
        - Hour value outside 0-23
    """

    pass


class TimezoneError(DatefError):
    """Invalid timezone.

    Raised when a UTC offset is outside the representable range.
    """

    pass


class ParseError(DatefError):
    """A value does not match a layout.

    Attributes:
        layout: The layout being matched against.
        value: The complete value being parsed.
        layout_elem: The layout chunk that failed to match ("" for
            range and trailing text errors).
        value_elem: The remainder of the value at the point of failure.
        message: Optional detail, already prefixed with ": ".
    """

    def __init__(
        self,
        layout: str,
        value: str,
        layout_elem: str,
        value_elem: str,
        message: str = "",
    ) -> None:
        self.layout = layout
        self.value = value
        self.layout_elem = layout_elem
        self.value_elem = value_elem
        self.message = message
        super().__init__(str(self))

    def __str__(self) -> str:
        if self.message:
            return f"parsing time {quote(self.value)}{self.message}"
        return (
            f"parsing time {quote(self.value)} as {quote(self.layout)}: "
            f"cannot parse {quote(self.value_elem)} as {quote(self.layout_elem)}"
        )


class FormatError(DatefError, ValueError):
    """A string does not conform to a format's grammar.

    This is the only error surfaced to command-line users. It is
    non-fatal: the driver reports it and moves on to the next input.

    Attributes:
        value: The offending input string.
        format: Display string of the format it was parsed against.
    """

    def __init__(self, value: str, format: str) -> None:  # noqa: A002
        self.value = value
        self.format = format
        super().__init__(f"{quote(value)} is an invalid value for format {format}")


__all__ = [
    "DatefError",
    "ValidationError",
    "TimezoneError",
    "ParseError",
    "FormatError",
    "quote",
]
