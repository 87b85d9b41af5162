"""Relative "time ago" phrasing.

Internal module - use time_ago() from datewise.humanize instead.
"""

from __future__ import annotations

import datetime as _dt
import logging
import math

from datewise._internal.constants import (
    SECONDS_PER_DAY,
    SECONDS_PER_HOUR,
    SECONDS_PER_MINUTE,
    SECONDS_PER_MONTH,
    SECONDS_PER_YEAR,
)
from datewise.clock import resolve_reference

logger = logging.getLogger(__name__)

YESTERDAY = "Yesterday"

# (unit length in seconds, label), largest first
_BUCKETS: tuple[tuple[int, str], ...] = (
    (SECONDS_PER_YEAR, "years"),
    (SECONDS_PER_MONTH, "months"),
    (SECONDS_PER_DAY, "days"),
    (SECONDS_PER_HOUR, "hours"),
    (SECONDS_PER_MINUTE, "minutes"),
)


def elapsed_seconds(instant: _dt.datetime, now: _dt.datetime) -> int:
    """Return whole seconds from instant to now, floored.

    Examples:
        >>> ref = _dt.datetime(2024, 3, 5, 12, 0, 0)
        >>> elapsed_seconds(ref - _dt.timedelta(seconds=90.5), ref)
        90
    """
    return math.floor((now - instant).total_seconds())


def time_ago(instant: _dt.datetime, now: _dt.datetime | None = None) -> str:
    """Describe how long ago ``instant`` was, in a short English phrase.

    Buckets are checked from largest to smallest and the first that fits
    wins. Years are 365 days and months are 30 days; counts are floored.

    Args:
        instant: A moment in the past.
        now: Reference point. If None, uses the local wall clock.

    Returns:
        One of "N years ago", "N months ago", "Yesterday", "N days ago",
        "N hours ago", "N minutes ago" or "N seconds ago". An instant
        after ``now`` gives a negative count of seconds.

    Examples:
        >>> ref = _dt.datetime(2024, 3, 5, 12, 0, 0)
        >>> time_ago(ref - _dt.timedelta(seconds=90), now=ref)
        '1 minutes ago'
        >>> time_ago(ref - _dt.timedelta(days=1), now=ref)
        'Yesterday'
        >>> time_ago(ref - _dt.timedelta(days=2), now=ref)
        '2 days ago'
    """
    seconds = elapsed_seconds(instant, resolve_reference(now))
    if seconds < 0:
        logger.debug("time_ago called with an instant %ds in the future", -seconds)

    for unit, label in _BUCKETS:
        count = seconds // unit
        if count < 1:
            continue
        if unit == SECONDS_PER_DAY and count == 1:
            return YESTERDAY
        return f"{count} {label} ago"

    return f"{seconds} seconds ago"


__all__ = ["elapsed_seconds", "time_ago"]
