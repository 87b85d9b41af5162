"""Formatting and parsing of Datewise instants.

This module provides functions for converting instants to and from
string representations:
    - Token-template formatting (YYYY, MM, DD, HH, mm, ss)
    - Lenient and strict ``Y-M-D`` parsing

Functions:
    format_date: Format an instant using a token template.
    parse_date: Parse ``Y-M-D`` into local midnight, or None.
    parse_date_strict: Parse ``Y-M-D``, raising on bad input.

Examples:
    >>> from datewise.format import format_date, parse_date

    >>> d = parse_date("2024-03-05")
    >>> d.year
    2024

    >>> format_date(d, "DD/MM/YYYY")
    '05/03/2024'
"""

from __future__ import annotations

from datewise.format.parse import parse_date, parse_date_strict
from datewise.format.template import format_date

__all__: list[str] = [
    "format_date",
    "parse_date",
    "parse_date_strict",
]
