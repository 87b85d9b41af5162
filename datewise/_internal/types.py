"""Shared type aliases for Datewise.

This module is not part of the public API.
"""

from __future__ import annotations

import datetime as _dt
from typing import Union

# Anything with year, month and day fields; datetime is a subclass of date
DayLike = Union[_dt.date, _dt.datetime]

__all__ = ["DayLike"]
