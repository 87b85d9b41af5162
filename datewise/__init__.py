"""Datewise: small calendar utilities over the standard datetime.

Datewise works on plain naive ``datetime.datetime`` values read as local
wall-clock time. Every function is pure; the two that depend on "now"
take an optional reference instant.

Format Functions:
    format_date: Substitute YYYY, MM, DD, HH, mm, ss in a template
    parse_date: Parse ``Y-M-D`` into local midnight, None on bad input
    parse_date_strict: Parse ``Y-M-D``, raising on bad input

Arithmetic:
    add_days: Shift by whole days
    is_same_day: Same calendar day
    is_today: Same calendar day as now

Calendar Fields:
    get_day_of_year: 1-366
    get_week_number: Sunday-based approximate week number
    get_days_in_month: Month length
    get_days_in_year: 365 or 366
    is_leap_year: Gregorian leap year rule

Humanize:
    time_ago: "3 hours ago", "Yesterday", ...

Exceptions:
    DatewiseError: Base exception
    ValidationError: Calendar field out of range
    ParseError: Failed to parse string
    OverflowError: Arithmetic overflow

Example:
    >>> from datewise import add_days, format_date, parse_date
    >>> format_date(add_days(parse_date("2024-02-28"), 1), "YYYY-MM-DD")
    '2024-02-29'
"""

from __future__ import annotations

import logging

__version__ = "0.1.0"

# Format functions
from datewise.format import format_date, parse_date, parse_date_strict

# Arithmetic
from datewise.arithmetic import add_days, is_same_day, is_today

# Calendar fields
from datewise.core import (
    get_day_of_year,
    get_days_in_month,
    get_days_in_year,
    get_week_number,
    is_leap_year,
)

# Humanize
from datewise.humanize import time_ago

# Clock
from datewise.clock import local_now

# Exceptions
from datewise.errors import (
    DatewiseError,
    OverflowError,
    ParseError,
    ValidationError,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__: list[str] = [
    "__version__",
    # Format functions
    "format_date",
    "parse_date",
    "parse_date_strict",
    # Arithmetic
    "add_days",
    "is_same_day",
    "is_today",
    # Calendar fields
    "get_day_of_year",
    "get_days_in_month",
    "get_days_in_year",
    "get_week_number",
    "is_leap_year",
    # Humanize
    "time_ago",
    # Clock
    "local_now",
    # Exceptions
    "DatewiseError",
    "ValidationError",
    "ParseError",
    "OverflowError",
]
