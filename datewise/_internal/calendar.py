"""Calendar utilities for Datewise.

This module provides internal functions for calendar calculations:
leap year logic, ordinal day-of-year, Sunday-based weekdays, and the
month rollover used to normalize out-of-range months.

This module is not part of the public API.
"""

from __future__ import annotations

import datetime as _dt

from datewise._internal.constants import DAYS_IN_MONTH, MAX_YEAR, MIN_YEAR, MONTHS_PER_YEAR
from datewise.errors import OverflowError


def is_leap_year(year: int) -> bool:
    """Check if a year is a leap year in the proleptic Gregorian calendar.

    A year is a leap year if:
    - Divisible by 4, AND
    - NOT divisible by 100, unless also divisible by 400

    Args:
        year: The year to check.

    Returns:
        True if the year is a leap year.

    Examples:
        >>> is_leap_year(2000)  # Divisible by 400
        True
        >>> is_leap_year(1900)  # Divisible by 100 but not 400
        False
        >>> is_leap_year(2024)  # Divisible by 4 but not 100
        True
        >>> is_leap_year(2023)  # Not divisible by 4
        False
    """
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_in_month(year: int, month: int) -> int:
    """Return the number of days in a given month.

    Args:
        year: The year (needed for February in leap years).
        month: The month (1-12).

    Returns:
        Number of days in the month.

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
    """Return the number of days in the year before the first of the month."""
    result = _DAYS_BEFORE_MONTH[month]
    if month > 2 and is_leap_year(year):
        result += 1
    return result


def ordinal_in_year(year: int, month: int, day: int) -> int:
    """Return the 1-based day of the year for a valid date.

    Examples:
        >>> ordinal_in_year(2024, 1, 1)
        1
        >>> ordinal_in_year(2024, 12, 31)
        366
    """
    return _days_before_month(year, month) + day


def sunday_weekday(year: int, month: int, day: int) -> int:
    """Return the day of week with Sunday=0 through Saturday=6."""
    # date.weekday() is Monday=0; isoweekday() is Monday=1..Sunday=7
    return _dt.date(year, month, day).isoweekday() % 7


def roll_month(year: int, month: int) -> tuple[int, int]:
    """Normalize a possibly out-of-range month into (year, month).

    Month 13 of a year is January of the next; month 0 is December of
    the previous.

    Examples:
        >>> roll_month(2024, 13)
        (2025, 1)
        >>> roll_month(2024, 0)
        (2023, 12)
    """
    carry, index = divmod(month - 1, MONTHS_PER_YEAR)
    return (year + carry, index + 1)


def first_of_month(year: int, month: int) -> _dt.datetime:
    """Return local midnight on the first of a month, rolling the month over.

    Raises:
        OverflowError: If the rolled-over year is outside MIN_YEAR..MAX_YEAR.
    """
    year, month = roll_month(year, month)
    if year < MIN_YEAR or year > MAX_YEAR:
        raise OverflowError(
            f"year must be between {MIN_YEAR} and {MAX_YEAR}, got {year}"
        )
    return _dt.datetime(year, month, 1)


def roll_date(year: int, month: int, day: int) -> _dt.datetime:
    """Build local midnight for (year, month, day), rolling fields over.

    Month and day behave like offsets: day 0 is the last day of the
    previous month, day 32 of January is February 1.

    Raises:
        OverflowError: If the result leaves the representable range.
    """
    start = first_of_month(year, month)
    try:
        return start + _dt.timedelta(days=day - 1)
    except (ArithmeticError, ValueError) as e:
        raise OverflowError(
            f"{year}-{month}-{day} is outside the representable range"
        ) from e


__all__ = [
    "is_leap_year",
    "days_in_month",
    "days_in_year",
    "ordinal_in_year",
    "sunday_weekday",
    "roll_month",
    "first_of_month",
    "roll_date",
]
