"""Parsing of hyphen-separated ``Y-M-D`` strings.

Two entry points share one tokenizer:

    parse_date: Lenient. Rolls out-of-range months and days over and
        returns None for anything it cannot read. Never raises on str input.
    parse_date_strict: Raises ParseError for malformed text and
        ValidationError for out-of-range fields.

Both return local midnight of the parsed day.
"""

from __future__ import annotations

import datetime as _dt
import logging

from datewise._internal.calendar import roll_date
from datewise._internal.constants import DATE_SEPARATOR
from datewise._internal.validation import validate_date
from datewise.errors import OverflowError, ParseError

logger = logging.getLogger(__name__)


def _split_fields(text: str) -> tuple[int, int, int]:
    """Split text into (year, month, day) integers.

    Raises:
        ParseError: If text is not exactly three integer parts.
    """
    parts = text.split(DATE_SEPARATOR)
    if len(parts) != 3:
        raise ParseError(
            f"expected YEAR{DATE_SEPARATOR}MONTH{DATE_SEPARATOR}DAY, "
            f"got {len(parts)} part(s) in {text!r}"
        )

    try:
        year, month, day = (int(part, 10) for part in parts)
    except ValueError as e:
        raise ParseError(f"non-integer date component in {text!r}") from e

    return (year, month, day)


def parse_date(text: str) -> _dt.datetime | None:
    """Parse ``YEAR-MONTH-DAY`` into local midnight, or None.

    Month and day roll over like calendar arithmetic, so "2024-13-01" is
    2025-01-01 and "2024-03-00" is 2024-02-29. Each part is read with
    ``int(part, 10)``, so surrounding whitespace and underscore digit
    grouping ("2_024") are accepted.

    Args:
        text: The string to parse.

    Returns:
        A naive datetime at midnight, or None if text does not hold three
        hyphen-separated integers or the result is out of range.

    Examples:
        >>> parse_date("2024-03-05")
        datetime.datetime(2024, 3, 5, 0, 0)

        >>> parse_date("2024-02-30")
        datetime.datetime(2024, 3, 1, 0, 0)

        >>> parse_date("yesterday") is None
        True
    """
    try:
        year, month, day = _split_fields(text)
        return roll_date(year, month, day)
    except (ParseError, OverflowError) as e:
        logger.debug("Rejected date string %r: %s", text, e)
        return None


def parse_date_strict(text: str) -> _dt.datetime:
    """Parse ``YEAR-MONTH-DAY`` into local midnight, raising on bad input.

    Args:
        text: The string to parse.

    Returns:
        A naive datetime at midnight.

    Raises:
        ParseError: If text is not three hyphen-separated integers.
        ValidationError: If year, month or day is out of range.

    Examples:
        >>> parse_date_strict("2024-02-29")
        datetime.datetime(2024, 2, 29, 0, 0)

        >>> parse_date_strict("2023-02-29")
        Traceback (most recent call last):
        ...
        datewise.errors.ValidationError: day must be between 1 and 28 for 2023-02, got 29
    """
    year, month, day = _split_fields(text)
    validate_date(year, month, day)
    return _dt.datetime(year, month, day)


__all__ = ["parse_date", "parse_date_strict"]
