"""Datewise exception hierarchy.

All Datewise-specific exceptions inherit from DatewiseError.
"""

from __future__ import annotations


class DatewiseError(Exception):
    """Base exception for all Datewise errors."""

    pass


class ValidationError(DatewiseError):
    """Invalid calendar field.

    Raised when a year, month, or day is out of range.

    Examples:
        - Month value outside 1-12
        - Day value outside valid range for month
        - Year outside the range a datetime can hold
    """

    pass


class ParseError(DatewiseError):
    """Failed to parse string representation.

    Raised by the strict parser when a string is not a ``Y-M-D`` triple
    of integers.

    Examples:
        - Fewer or more than three hyphen-separated parts
        - A part that is not an integer
    """

    pass


class OverflowError(DatewiseError):
    """Date arithmetic exceeded the representable range.

    Examples:
        - Adding days past 9999-12-31
        - Subtracting days before 0001-01-01
    """

    pass


__all__ = [
    "DatewiseError",
    "ValidationError",
    "ParseError",
    "OverflowError",
]
