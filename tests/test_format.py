"""Tests for token-template formatting."""

from __future__ import annotations

import datetime

import pytest

from datewise import format_date, parse_date


class TestFormatDate:
    """Tests for format_date."""

    def test_format_iso_date(self) -> None:
        """Format a date as YYYY-MM-DD."""
        d = datetime.datetime(2024, 3, 5)
        assert format_date(d, "YYYY-MM-DD") == "2024-03-05"

    def test_format_all_tokens(self) -> None:
        """Every token is substituted with zero padding."""
        d = datetime.datetime(2024, 1, 2, 3, 4, 5)
        assert format_date(d, "YYYY-MM-DD HH:mm:ss") == "2024-01-02 03:04:05"

    def test_format_reordered_tokens(self) -> None:
        """Tokens may appear in any order in the template."""
        d = datetime.datetime(2024, 12, 25, 18, 45, 9)
        assert format_date(d, "ss/mm/HH DD.MM.YYYY") == "09/45/18 25.12.2024"

    def test_format_year_padded_to_four_digits(self) -> None:
        """Years below 1000 are zero padded."""
        d = datetime.datetime(33, 4, 3)
        assert format_date(d, "YYYY") == "0033"

    def test_template_without_tokens_unchanged(self) -> None:
        """A template with no tokens is returned verbatim."""
        d = datetime.datetime(2024, 3, 5)
        assert format_date(d, "hello, world") == "hello, world"

    def test_empty_template(self) -> None:
        """An empty template formats to an empty string."""
        assert format_date(datetime.datetime(2024, 3, 5), "") == ""

    def test_only_first_occurrence_replaced(self) -> None:
        """A repeated token keeps its second occurrence literal."""
        d = datetime.datetime(2024, 3, 5)
        assert format_date(d, "DD DD") == "05 DD"
        assert format_date(d, "YYYY/YYYY") == "2024/YYYY"

    def test_tokens_are_case_sensitive(self) -> None:
        """MM is month and mm is minute."""
        d = datetime.datetime(2024, 3, 5, 10, 7)
        assert format_date(d, "MM mm") == "03 07"

    def test_literal_text_passes_through(self) -> None:
        """Surrounding text is kept as is."""
        d = datetime.datetime(2024, 3, 5, 14, 30)
        assert format_date(d, "Due: DD/MM at HHh") == "Due: 05/03 at 14h"

    def test_partial_token_left_alone(self) -> None:
        """A lone Y or D is not a token."""
        d = datetime.datetime(2024, 3, 5)
        assert format_date(d, "Y-D") == "Y-D"

    def test_format_accepts_midnight(self) -> None:
        """Midnight formats as zeros."""
        d = datetime.datetime(2024, 3, 5)
        assert format_date(d, "HH:mm:ss") == "00:00:00"


class TestFormatParseIdempotence:
    """format -> parse -> format reproduces the same text."""

    @pytest.mark.parametrize(
        "value",
        [
            datetime.datetime(2024, 3, 5),
            datetime.datetime(2024, 2, 29),
            datetime.datetime(1999, 12, 31),
            datetime.datetime(1, 1, 1),
            datetime.datetime(9999, 12, 31),
        ],
    )
    def test_round_trip_midnight(self, value: datetime.datetime) -> None:
        """Midnight instants survive a YYYY-MM-DD round trip."""
        text = format_date(value, "YYYY-MM-DD")
        assert format_date(parse_date(text), "YYYY-MM-DD") == text


class TestTemplateTokens:
    """Tests for the shared token table."""

    def test_tokens_in_substitution_order(self) -> None:
        """The token table drives substitution order."""
        from datewise._internal.constants import TEMPLATE_TOKENS
        from datewise.format.template import _token_values

        pairs = _token_values(datetime.datetime(2024, 1, 2, 3, 4, 5))
        assert tuple(token for token, _ in pairs) == TEMPLATE_TOKENS
        assert pairs == (
            ("YYYY", "2024"),
            ("MM", "01"),
            ("DD", "02"),
            ("HH", "03"),
            ("mm", "04"),
            ("ss", "05"),
        )
