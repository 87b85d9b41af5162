"""Calendar-day comparisons.

Comparison Rules:
    - Only year, month and day are compared; time of day is ignored.
    - A date and a datetime on the same calendar day compare equal.
    - "Today" is taken from the reference instant, defaulting to the
      local wall clock.

Supported Operations:
    - is_same_day: Test whether two instants fall on the same day
    - is_today: Test whether an instant falls on the reference day
"""

from __future__ import annotations

import datetime as _dt

from datewise._internal.types import DayLike
from datewise.clock import resolve_reference


def is_same_day(left: DayLike, right: DayLike) -> bool:
    """Test whether two instants share year, month and day.

    Examples:
        >>> is_same_day(_dt.datetime(2024, 3, 5, 0, 0), _dt.datetime(2024, 3, 5, 23, 59))
        True
        >>> is_same_day(_dt.datetime(2024, 3, 5), _dt.datetime(2025, 3, 5))
        False
    """
    return (
        left.day == right.day
        and left.month == right.month
        and left.year == right.year
    )


def is_today(instant: DayLike, now: _dt.datetime | None = None) -> bool:
    """Test whether an instant falls on the current local day.

    Args:
        instant: The datetime (or date) to check.
        now: Reference point. If None, uses the local wall clock.

    Returns:
        True if instant has the same year, month and day as now.

    Examples:
        >>> ref = _dt.datetime(2024, 3, 5, 12, 0, 0)
        >>> is_today(_dt.datetime(2024, 3, 5, 8, 30), now=ref)
        True
        >>> is_today(_dt.datetime(2024, 3, 3, 12, 0), now=ref)
        False
    """
    return is_same_day(instant, resolve_reference(now))


__all__ = ["is_same_day", "is_today"]
