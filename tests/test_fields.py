"""Tests for derived calendar fields."""

from __future__ import annotations

import datetime

import pytest

from datewise import (
    OverflowError,
    get_day_of_year,
    get_days_in_month,
    get_days_in_year,
    get_week_number,
    is_leap_year,
    parse_date,
)
from datewise._internal.calendar import days_in_month


class TestLeapYears:
    """Tests for is_leap_year and get_days_in_year."""

    @pytest.mark.parametrize(
        ("year", "expected"),
        [(2000, True), (1900, False), (2024, True), (2023, False), (2100, False)],
    )
    def test_is_leap_year(self, year: int, expected: bool) -> None:
        """Gregorian leap-year rule."""
        assert is_leap_year(year) is expected

    def test_days_in_year(self) -> None:
        """Leap years have 366 days."""
        assert get_days_in_year(2024) == 366
        assert get_days_in_year(2023) == 365


class TestDayOfYear:
    """Tests for get_day_of_year."""

    def test_first_day(self) -> None:
        """January 1 is day 1."""
        assert get_day_of_year(parse_date("2024-01-01")) == 1

    def test_first_of_february(self) -> None:
        """February 1 is day 32."""
        assert get_day_of_year(datetime.datetime(2023, 2, 1)) == 32

    def test_march_first_leap_and_non_leap(self) -> None:
        """March 1 shifts by one in leap years."""
        assert get_day_of_year(datetime.datetime(2024, 3, 1)) == 61
        assert get_day_of_year(datetime.datetime(2023, 3, 1)) == 60

    def test_last_day(self) -> None:
        """December 31 is 366 in leap years and 365 otherwise."""
        assert get_day_of_year(datetime.datetime(2024, 12, 31)) == 366
        assert get_day_of_year(datetime.datetime(2023, 12, 31)) == 365

    def test_time_of_day_ignored(self) -> None:
        """Late in the day still counts as the same day."""
        assert get_day_of_year(datetime.datetime(2024, 1, 1, 23, 59, 59)) == 1

    def test_matches_stdlib_ordinal(self) -> None:
        """Agrees with timetuple().tm_yday for every day of a leap year."""
        day = datetime.date(2024, 1, 1)
        while day.year == 2024:
            assert get_day_of_year(day) == day.timetuple().tm_yday
            day += datetime.timedelta(days=1)


class TestWeekNumber:
    """Tests for get_week_number."""

    def test_jan1_on_sunday(self) -> None:
        """2023 starts on a Sunday: ceil((1 + 0 + 1) / 7) == 1."""
        assert get_week_number(datetime.datetime(2023, 1, 1)) == 1

    def test_jan1_on_monday(self) -> None:
        """2024 starts on a Monday: ceil((1 + 1 + 1) / 7) == 1."""
        assert get_week_number(datetime.datetime(2024, 1, 1)) == 1

    def test_jan1_on_saturday(self) -> None:
        """2022 starts on a Saturday: ceil((1 + 6 + 1) / 7) == 2."""
        assert get_week_number(datetime.datetime(2022, 1, 1)) == 2

    def test_week_boundary(self) -> None:
        """In 2023, Jan 6 is week 1 and Jan 7 is week 2."""
        assert get_week_number(datetime.datetime(2023, 1, 6)) == 1
        assert get_week_number(datetime.datetime(2023, 1, 7)) == 2

    def test_end_of_leap_year(self) -> None:
        """Dec 31 2024: ceil((366 + 1 + 1) / 7) == 53."""
        assert get_week_number(datetime.datetime(2024, 12, 31)) == 53

    def test_not_iso_week(self) -> None:
        """Dec 30 2024 is ISO week 1 of 2025 but week 53 here."""
        d = datetime.datetime(2024, 12, 30)
        assert d.isocalendar()[1] == 1
        assert get_week_number(d) == 53


class TestDaysInMonth:
    """Tests for get_days_in_month."""

    def test_february(self) -> None:
        """February has 29 days in leap years and 28 otherwise."""
        assert get_days_in_month(2, 2024) == 29
        assert get_days_in_month(2, 2023) == 28

    def test_century_february(self) -> None:
        """1900 is not a leap year, 2000 is."""
        assert get_days_in_month(2, 1900) == 28
        assert get_days_in_month(2, 2000) == 29

    @pytest.mark.parametrize("month", range(1, 13))
    def test_agrees_with_table(self, month: int) -> None:
        """Rollover arithmetic agrees with the month-length table."""
        assert get_days_in_month(month, 2024) == days_in_month(2024, month)
        assert get_days_in_month(month, 2023) == days_in_month(2023, month)

    def test_month_rollover(self) -> None:
        """Month 13 is January of the next year; month 0 is December."""
        assert get_days_in_month(13, 2023) == 31
        assert get_days_in_month(14, 2023) == 29
        assert get_days_in_month(0, 2024) == 31

    def test_last_representable_month(self) -> None:
        """December 9999 has 31 days."""
        assert get_days_in_month(12, 9999) == 31

    def test_out_of_range_raises(self) -> None:
        """Months rolling past year 9999 raise OverflowError."""
        with pytest.raises(OverflowError):
            get_days_in_month(13, 9999)

    def test_before_first_representable_month_raises(self) -> None:
        """Months rolling before year 1 raise the library OverflowError."""
        with pytest.raises(OverflowError, match="year must be between"):
            get_days_in_month(0, 1)

    def test_first_representable_month(self) -> None:
        """January of year 1 has 31 days."""
        assert get_days_in_month(1, 1) == 31
