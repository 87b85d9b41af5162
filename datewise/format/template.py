"""Token-template formatting.

Templates use bare tokens rather than %-directives:

Supported Tokens:
    YYYY - 4-digit year (e.g., 2024)
    MM   - 2-digit month (01-12)
    DD   - 2-digit day (01-31)
    HH   - 2-digit hour, 24-hour (00-23)
    mm   - 2-digit minute (00-59)
    ss   - 2-digit second (00-59)

Only the first occurrence of each token is replaced. Substitution runs in
the order listed above against the progressively rewritten string, so a
second ``MM`` in a template stays literal.

Examples:
    >>> import datetime
    >>> format_date(datetime.datetime(2024, 3, 5, 14, 30, 45), "YYYY-MM-DD HH:mm:ss")
    '2024-03-05 14:30:45'

    >>> format_date(datetime.datetime(2024, 3, 5), "MM/MM")
    '03/MM'
"""

from __future__ import annotations

import datetime as _dt

from datewise._internal.constants import TEMPLATE_TOKENS


def _token_values(instant: _dt.datetime) -> tuple[tuple[str, str], ...]:
    """Return (token, replacement) pairs in substitution order."""
    values = (
        f"{instant.year:04d}",
        f"{instant.month:02d}",
        f"{instant.day:02d}",
        f"{instant.hour:02d}",
        f"{instant.minute:02d}",
        f"{instant.second:02d}",
    )
    return tuple(zip(TEMPLATE_TOKENS, values))


def format_date(instant: _dt.datetime, template: str) -> str:
    """Format an instant by substituting template tokens.

    Args:
        instant: The datetime to format.
        template: Text containing any of YYYY, MM, DD, HH, mm, ss.

    Returns:
        The template with the first occurrence of each token replaced by
        the zero-padded field. Text that is not a token is returned as is;
        a template with no tokens comes back unchanged.

    Examples:
        >>> import datetime
        >>> format_date(datetime.datetime(2024, 3, 5), "YYYY-MM-DD")
        '2024-03-05'

        >>> format_date(datetime.datetime(2024, 3, 5), "no tokens here")
        'no tokens here'
    """
    result = template
    for token, value in _token_values(instant):
        result = result.replace(token, value, 1)
    return result


__all__ = ["format_date"]
