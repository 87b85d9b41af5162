"""Internal utilities for Datewise.

This module contains private implementation details:
    - Constants and unit lengths
    - Calendar helpers (leap years, ordinals, month rollover)
    - Field validation

Note: This module is not part of the public API.
"""

from __future__ import annotations

from datewise._internal.validation import (
    validate_date,
    validate_day,
    validate_month,
    validate_year,
)

__all__: list[str] = [
    "validate_date",
    "validate_day",
    "validate_month",
    "validate_year",
]
