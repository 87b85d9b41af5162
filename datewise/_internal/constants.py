"""Internal constants for Datewise.

These constants define the limits and unit lengths used throughout
the library. This module is not part of the public API.
"""

from __future__ import annotations

import datetime as _dt

# Time unit conversions
SECONDS_PER_MINUTE: int = 60
SECONDS_PER_HOUR: int = 60 * SECONDS_PER_MINUTE
SECONDS_PER_DAY: int = 24 * SECONDS_PER_HOUR  # 86_400

# Calendar-naive units used for relative phrasing
SECONDS_PER_MONTH: int = 30 * SECONDS_PER_DAY  # 2_592_000
SECONDS_PER_YEAR: int = 365 * SECONDS_PER_DAY  # 31_536_000

# Year limits (whatever the stdlib datetime can hold)
MIN_YEAR: int = _dt.MINYEAR
MAX_YEAR: int = _dt.MAXYEAR

MONTHS_PER_YEAR: int = 12

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

# Template tokens, in substitution order
TOKEN_YEAR: str = "YYYY"
TOKEN_MONTH: str = "MM"
TOKEN_DAY: str = "DD"
TOKEN_HOUR: str = "HH"
TOKEN_MINUTE: str = "mm"
TOKEN_SECOND: str = "ss"

TEMPLATE_TOKENS: tuple[str, ...] = (
    TOKEN_YEAR,
    TOKEN_MONTH,
    TOKEN_DAY,
    TOKEN_HOUR,
    TOKEN_MINUTE,
    TOKEN_SECOND,
)

DATE_SEPARATOR: str = "-"


__all__ = [
    "SECONDS_PER_MINUTE",
    "SECONDS_PER_HOUR",
    "SECONDS_PER_DAY",
    "SECONDS_PER_MONTH",
    "SECONDS_PER_YEAR",
    "MIN_YEAR",
    "MAX_YEAR",
    "MONTHS_PER_YEAR",
    "DAYS_IN_MONTH",
    "TOKEN_YEAR",
    "TOKEN_MONTH",
    "TOKEN_DAY",
    "TOKEN_HOUR",
    "TOKEN_MINUTE",
    "TOKEN_SECOND",
    "TEMPLATE_TOKENS",
    "DATE_SEPARATOR",
]
