"""Standard reference-time layouts.

Each constant is the reference time ``Mon Jan 2 15:04:05 MST 2006``
written in a well-known timestamp style.
"""

from __future__ import annotations

ANSIC: str = "Mon Jan _2 15:04:05 2006"
UNIX_DATE: str = "Mon Jan _2 15:04:05 MST 2006"
RUBY_DATE: str = "Mon Jan 02 15:04:05 -0700 2006"
RFC822: str = "02 Jan 06 15:04 MST"
RFC822Z: str = "02 Jan 06 15:04 -0700"  # RFC822 with numeric zone
RFC850: str = "Monday, 02-Jan-06 15:04:05 MST"
RFC1123: str = "Mon, 02 Jan 2006 15:04:05 MST"
RFC1123Z: str = "Mon, 02 Jan 2006 15:04:05 -0700"  # RFC1123 with numeric zone
RFC3339: str = "2006-01-02T15:04:05Z07:00"
RFC3339_NANO: str = "2006-01-02T15:04:05.999999999Z07:00"
KITCHEN: str = "3:04PM"

# Handy time stamps.
STAMP: str = "Jan _2 15:04:05"
STAMP_MILLI: str = "Jan _2 15:04:05.000"
STAMP_MICRO: str = "Jan _2 15:04:05.000000"
STAMP_NANO: str = "Jan _2 15:04:05.000000000"

DATE_TIME: str = "2006-01-02 15:04:05"
DATE_ONLY: str = "2006-01-02"
TIME_ONLY: str = "15:04:05"


__all__ = [
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
