"""Day arithmetic on instants.

Supported operations:
    - add_days: Shift an instant by whole days

Type Combinations:
    - datetime + days -> datetime (time of day preserved)
    - date + days -> date
"""

from __future__ import annotations

import datetime as _dt
from typing import TypeVar

from datewise.errors import OverflowError

# datetime is a subclass of date, so this covers both
Shiftable = TypeVar("Shiftable", bound=_dt.date)


def add_days(instant: Shiftable, days: int) -> Shiftable:
    """Return a new instant ``days`` whole days after ``instant``.

    Negative ``days`` moves backwards. Month and year boundaries roll
    over; hour, minute and second are kept.

    Args:
        instant: A datetime (or date) to shift.
        days: Number of days to add; may be negative.

    Returns:
        A new object of the same type as instant.

    Raises:
        OverflowError: If the result is before year 1 or after year 9999.

    Examples:
        >>> add_days(_dt.datetime(2024, 2, 28, 9, 15), 1)
        datetime.datetime(2024, 2, 29, 9, 15)

        >>> add_days(_dt.datetime(2023, 2, 28), 1)
        datetime.datetime(2023, 3, 1, 0, 0)

        >>> add_days(_dt.datetime(2024, 1, 1), -1)
        datetime.datetime(2023, 12, 31, 0, 0)
    """
    try:
        return instant + _dt.timedelta(days=days)
    except ArithmeticError as e:
        raise OverflowError(
            f"adding {days} day(s) to {instant.isoformat()} is out of range"
        ) from e


__all__ = ["add_days"]
