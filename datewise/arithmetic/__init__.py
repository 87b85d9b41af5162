"""Day arithmetic and calendar-day comparisons.

Arithmetic Operations (from datewise.arithmetic.ops):
    - add_days: Shift an instant by whole days

Comparison Operations (from datewise.arithmetic.comparisons):
    - is_same_day: Same year, month and day
    - is_today: Same day as the reference (default: local now)
"""

from __future__ import annotations

from datewise.arithmetic.comparisons import is_same_day, is_today
from datewise.arithmetic.ops import add_days

__all__ = [
    # Arithmetic operations
    "add_days",
    # Comparison operations
    "is_same_day",
    "is_today",
]
