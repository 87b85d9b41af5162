"""Derived calendar fields.

This module computes values derived from a calendar date: its position in
the year, an approximate week number, and month and year lengths.
"""

from __future__ import annotations

import datetime as _dt
import math

from datewise._internal import calendar as _calendar
from datewise._internal.constants import MAX_YEAR, MIN_YEAR
from datewise._internal.types import DayLike
from datewise.errors import OverflowError


def is_leap_year(year: int) -> bool:
    """Return True if ``year`` is a leap year (proleptic Gregorian).

    Examples:
        >>> is_leap_year(2024)
        True
        >>> is_leap_year(1900)
        False
    """
    return _calendar.is_leap_year(year)


def get_days_in_year(year: int) -> int:
    """Return 366 for leap years, 365 otherwise."""
    return _calendar.days_in_year(year)


def get_day_of_year(instant: DayLike) -> int:
    """Return the 1-based day of the year of ``instant``.

    This is the number of whole days between midnight of December 31 of
    the previous year and midnight of the instant's day, so January 1 is
    1 and December 31 is 365 (366 in leap years). Time of day is ignored.

    Args:
        instant: A datetime or date.

    Returns:
        Day of year, 1-366.

    Examples:
        >>> get_day_of_year(_dt.datetime(2024, 1, 1))
        1
        >>> get_day_of_year(_dt.datetime(2024, 3, 1, 23, 59))
        61
        >>> get_day_of_year(_dt.datetime(2023, 3, 1))
        60
    """
    return _calendar.ordinal_in_year(instant.year, instant.month, instant.day)


def get_week_number(instant: DayLike) -> int:
    """Return the week number of ``instant`` within its year.

    Computed as ``ceil((day_of_year + weekday_of_jan1 + 1) / 7)`` where
    ``weekday_of_jan1`` counts from Sunday=0. This approximates ISO week
    numbering but does not follow ISO 8601: weeks are not Monday-based and
    there is no carry-over of week 1 or week 53 across years. Use
    ``date.isocalendar()`` when ISO weeks are required.

    Args:
        instant: A datetime or date.

    Returns:
        Week number, 1-54.

    Examples:
        >>> get_week_number(_dt.datetime(2024, 1, 1))  # Jan 1 2024 is a Monday
        1
        >>> get_week_number(_dt.datetime(2023, 1, 1))  # Jan 1 2023 is a Sunday
        1
        >>> get_week_number(_dt.datetime(2023, 1, 7))
        2
    """
    day_of_year = get_day_of_year(instant)
    jan1_weekday = _calendar.sunday_weekday(instant.year, 1, 1)
    return math.ceil((day_of_year + jan1_weekday + 1) / 7)


def get_days_in_month(month: int, year: int) -> int:
    """Return the number of days in ``month`` of ``year``.

    Computed as day 0 of the following month, i.e. the day before the
    first of the next month. Months outside 1-12 roll over into the
    neighbouring years, so month 13 of 2024 is January 2025.

    Args:
        month: The month, normally 1-12.
        year: The year.

    Returns:
        Number of days in the month.

    Raises:
        OverflowError: If the rolled-over month is outside the
            representable range.

    Examples:
        >>> get_days_in_month(2, 2024)
        29
        >>> get_days_in_month(2, 2023)
        28
        >>> get_days_in_month(13, 2024)
        31
    """
    year, month = _calendar.roll_month(year, month)
    if year < MIN_YEAR or year > MAX_YEAR:
        raise OverflowError(
            f"year must be between {MIN_YEAR} and {MAX_YEAR}, got {year}"
        )
    if (year, month) == (MAX_YEAR, 12):
        return _calendar.days_in_month(year, month)
    next_month = _calendar.first_of_month(year, month + 1)
    return (next_month - _dt.timedelta(days=1)).day


__all__ = [
    "is_leap_year",
    "get_days_in_year",
    "get_day_of_year",
    "get_week_number",
    "get_days_in_month",
]
