"""Derived calendar fields.

This module provides values computed from a calendar date:
    - get_day_of_year: Position of a day within its year (1-366)
    - get_week_number: Sunday-based approximate week number
    - get_days_in_month: Length of a month, with month rollover
    - get_days_in_year: 365 or 366
    - is_leap_year: Proleptic Gregorian leap year rule
"""

from __future__ import annotations

from datewise.core.fields import (
    get_day_of_year,
    get_days_in_month,
    get_days_in_year,
    get_week_number,
    is_leap_year,
)

__all__: list[str] = [
    "get_day_of_year",
    "get_days_in_month",
    "get_days_in_year",
    "get_week_number",
    "is_leap_year",
]
