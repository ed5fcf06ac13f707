"""Internal constants for datef.

These constants define the limits and magic numbers used throughout
the library. This module is not part of the public API.
"""

from __future__ import annotations

# Time unit conversions
NANOS_PER_MICROSECOND: int = 1_000
NANOS_PER_MILLISECOND: int = 1_000_000
NANOS_PER_SECOND: int = 1_000_000_000
NANOS_PER_MINUTE: int = 60 * NANOS_PER_SECOND
NANOS_PER_HOUR: int = 60 * NANOS_PER_MINUTE
NANOS_PER_DAY: int = 24 * NANOS_PER_HOUR  # 86_400_000_000_000

SECONDS_PER_MINUTE: int = 60
SECONDS_PER_HOUR: int = 60 * SECONDS_PER_MINUTE
SECONDS_PER_DAY: int = 24 * SECONDS_PER_HOUR  # 86_400

# Signed 64-bit bounds for epoch integers read from input
INT64_MIN: int = -(2**63)
INT64_MAX: int = 2**63 - 1

# Days in each month (non-leap year)
DAYS_IN_MONTH: tuple[int, ...] = (
    0,   # Placeholder for 1-indexed access
    31,  # January
    28,  # February (non-leap)
    31,  # March
    30,  # April
    31,  # May
    30,  # June
    31,  # July
    31,  # August
    30,  # September
    31,  # October
    30,  # November
    31,  # December
)

# Days in a full 400-year Gregorian cycle
DAYS_PER_400_YEARS: int = 146_097

# Ordinal of 1970-01-01, where 0001-01-01 is ordinal 1
UNIX_EPOCH_ORDINAL: int = 719_163

# Largest UTC offset a parsed zone may carry: 24:60:60
MAX_UTC_OFFSET_SECONDS: int = 24 * SECONDS_PER_HOUR + SECONDS_PER_HOUR + SECONDS_PER_MINUTE

# English names, never localized. Months are 1-indexed, weekdays start on Sunday.
LONG_MONTH_NAMES: tuple[str, ...] = (
    "",
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)
SHORT_MONTH_NAMES: tuple[str, ...] = tuple(name[:3] for name in LONG_MONTH_NAMES)

LONG_DAY_NAMES: tuple[str, ...] = (
    "Sunday",
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
)
SHORT_DAY_NAMES: tuple[str, ...] = tuple(name[:3] for name in LONG_DAY_NAMES)


__all__ = [
    "NANOS_PER_MICROSECOND",
    "NANOS_PER_MILLISECOND",
    "NANOS_PER_SECOND",
    "NANOS_PER_MINUTE",
    "NANOS_PER_HOUR",
    "NANOS_PER_DAY",
    "SECONDS_PER_MINUTE",
    "SECONDS_PER_HOUR",
    "SECONDS_PER_DAY",
    "INT64_MIN",
    "INT64_MAX",
    "DAYS_IN_MONTH",
    "DAYS_PER_400_YEARS",
    "UNIX_EPOCH_ORDINAL",
    "MAX_UTC_OFFSET_SECONDS",
    "LONG_MONTH_NAMES",
    "SHORT_MONTH_NAMES",
    "LONG_DAY_NAMES",
    "SHORT_DAY_NAMES",
]
