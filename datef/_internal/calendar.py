"""Calendar utilities for datef.

This module provides internal functions for proleptic Gregorian calendar
calculations: leap years, ordinal day numbers and day-of-year lookups.

Ordinal 1 is 0001-01-01. Ordinals are unbounded in both directions, so
year 0 and negative years are handled with the same arithmetic.

This module is not part of the public API.
"""

from __future__ import annotations

from datef._internal.constants import DAYS_IN_MONTH, DAYS_PER_400_YEARS


def is_leap_year(year: int) -> bool:
    """Check if a year is a leap year in the proleptic Gregorian calendar.

    A year is a leap year if:
    - Divisible by 4, AND
    - NOT divisible by 100, unless also divisible by 400

    Examples:
        >>> is_leap_year(2000)  # Divisible by 400
        True
        >>> is_leap_year(1900)  # Divisible by 100 but not 400
        False
        >>> is_leap_year(2024)
        True
    """
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_in_month(year: int, month: int) -> int:
    """Return the number of days in a given month.

    Raises:
        ValueError: If month is not in 1-12.
    """
    if month < 1 or month > 12:
        raise ValueError(f"month must be 1-12, got {month}")

    if month == 2 and is_leap_year(year):
        return 29
    return DAYS_IN_MONTH[month]


def days_in_year(year: int) -> int:
    """Return 366 for leap years, 365 otherwise."""
    return 366 if is_leap_year(year) else 365


# Days before each month (cumulative), for non-leap years
# Index 0 is unused, months are 1-indexed
_DAYS_BEFORE_MONTH = (0, 0, 31, 59, 90, 120, 151, 181, 212, 243, 273, 304, 334)


def _days_before_month(year: int, month: int) -> int:
    result = _DAYS_BEFORE_MONTH[month]
    if month > 2 and is_leap_year(year):
        result += 1
    return result


def ymd_to_ordinal(year: int, month: int, day: int) -> int:
    """Convert year, month, day to ordinal (days since year 1).

    The ordinal for 0001-01-01 is 1.
    The ordinal for 0000-12-31 (last day of year 0 / 1 BCE) is 0.

    Args:
        year: The year (astronomical, can be 0 or negative).
        month: The month (1-12).
        day: The day (1-31).

    Returns:
        The ordinal day number.
    """
    # Floor division keeps the leap day count right for years <= 0
    y = year - 1
    days_before_year = y * 365 + y // 4 - y // 100 + y // 400
    return days_before_year + _days_before_month(year, month) + day


def ordinal_to_ymd(ordinal: int) -> tuple[int, int, int]:
    """Convert ordinal (days since year 1) to year, month, day.

    Ordinals at or before 0 are shifted forward by whole 400-year cycles,
    which repeat exactly, and the year is shifted back afterwards.

    Examples:
        >>> ordinal_to_ymd(1)
        (1, 1, 1)
        >>> ordinal_to_ymd(0)
        (0, 12, 31)
    """
    cycles = 0
    if ordinal <= 0:
        cycles = -ordinal // DAYS_PER_400_YEARS + 1
        ordinal += cycles * DAYS_PER_400_YEARS

    # n is 0-indexed (n=0 means ordinal=1)
    n = ordinal - 1
    n400, n = divmod(n, DAYS_PER_400_YEARS)
    n100, n = divmod(n, 36524)
    n4, n = divmod(n, 1461)
    n1, n = divmod(n, 365)

    year = n400 * 400 + n100 * 100 + n4 * 4 + n1 + 1 - cycles * 400

    # Last day of a leap year closing a 4-year or 400-year cycle
    if n1 == 4 or n100 == 4:
        return (year - 1, 12, 31)

    month, day = year_day_to_md(year, n + 1)
    return (year, month, day)


def year_day_to_md(year: int, yday: int) -> tuple[int, int]:
    """Convert a 1-based day of year to month and day.

    Raises:
        ValueError: If yday is outside the year.
    """
    if yday < 1 or yday > days_in_year(year):
        raise ValueError(f"day of year must be 1-{days_in_year(year)}, got {yday}")

    for month in range(1, 13):
        dim = days_in_month(year, month)
        if yday <= dim:
            return (month, yday)
        yday -= dim

    raise ValueError(f"Invalid day of year: {yday} for year {year}")


def day_of_year(year: int, month: int, day: int) -> int:
    """Return the 1-based day of the year."""
    return _days_before_month(year, month) + day


def ordinal_to_weekday(ordinal: int) -> int:
    """Return the day of week for an ordinal (Sunday=0, Saturday=6).

    0001-01-01 (ordinal 1) was a Monday.
    """
    return ordinal % 7


def validate_date(year: int, month: int, day: int) -> None:
    """Validate that year, month, day form a valid date.

    Raises:
        ValueError: If the date is invalid.
    """
    if month < 1 or month > 12:
        raise ValueError(f"month must be 1-12, got {month}")

    max_day = days_in_month(year, month)
    if day < 1 or day > max_day:
        raise ValueError(
            f"day must be 1-{max_day} for {year}-{month:02d}, got {day}"
        )


__all__ = [
    "is_leap_year",
    "days_in_month",
    "days_in_year",
    "ymd_to_ordinal",
    "ordinal_to_ymd",
    "year_day_to_md",
    "day_of_year",
    "ordinal_to_weekday",
    "validate_date",
]
