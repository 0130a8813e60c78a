"""Tests for grootboek.dates pure functions."""

import pytest

from grootboek.dates import DateRange, PartialDate
from grootboek.domain.calendar import Date, Month, Year, YearMonth
from grootboek.domain.errors import InvalidDateSyntax, InvalidDayForMonth, InvalidMonthNumber


class TestPartialDateFromText:
    """Tests for PartialDate.from_text."""

    def test_year(self) -> None:
        """Should parse a bare year."""
        assert PartialDate.from_text("2025") == PartialDate(Year(2025))

    def test_year_month(self) -> None:
        """Should parse a year and month."""
        assert PartialDate.from_text("2025-01") == PartialDate(YearMonth(Year(2025), Month.JANUARY))

    def test_full_date(self) -> None:
        """Should parse a full date."""
        assert PartialDate.from_text("2025-01-15") == PartialDate(Date.new(2025, 1, 15))

    def test_strips_whitespace(self) -> None:
        """Should ignore surrounding whitespace."""
        assert PartialDate.from_text(" 2025 ") == PartialDate(Year(2025))

    @pytest.mark.parametrize("text", ["invalid", "2025-01-02-03", "2025-", "", "2025-x"])
    def test_invalid_syntax_raises(self, text: str) -> None:
        """Should raise InvalidDateSyntax for malformed text."""
        with pytest.raises(InvalidDateSyntax):
            PartialDate.from_text(text)

    def test_invalid_month_number_raises_valueerror(self) -> None:
        """Should raise ValueError for invalid month number."""
        with pytest.raises(InvalidMonthNumber):
            PartialDate.from_text("2025-13")
        with pytest.raises(ValueError):
            PartialDate.from_text("2025-00")

    def test_invalid_day_raises(self) -> None:
        """Should raise InvalidDayForMonth for impossible days."""
        with pytest.raises(InvalidDayForMonth):
            PartialDate.from_text("2025-02-29")


class TestAsRange:
    """Tests for PartialDate.as_range."""

    def test_january_range(self) -> None:
        """Should calculate range for January."""
        start, end = PartialDate.from_text("2025-01").as_range()

        assert str(start) == "2025-01-01"
        assert str(end) == "2025-02-01"

    def test_december_range_crosses_year(self) -> None:
        """Should handle December (crosses year boundary)."""
        start, end = PartialDate.from_text("2025-12").as_range()

        assert str(start) == "2025-12-01"
        assert str(end) == "2026-01-01"

    def test_february_leap_year(self) -> None:
        """Should include the leap day in February 2024."""
        date_range = PartialDate.from_text("2024-02").as_range()

        assert Date.new(2024, 2, 29) in date_range
        assert Date.new(2024, 3, 1) not in date_range

    def test_year_range(self) -> None:
        """Should cover a whole year."""
        assert PartialDate.from_text("2025").as_range() == DateRange(Date.new(2025, 1, 1), Date.new(2026, 1, 1))

    def test_day_range(self) -> None:
        """Should cover a single day."""
        date_range = PartialDate.from_text("2025-12-31").as_range()

        assert date_range == DateRange(Date.new(2025, 12, 31), Date.new(2026, 1, 1))
        assert Date.new(2025, 12, 31) in date_range
        assert Date.new(2026, 1, 1) not in date_range

    def test_all_months_of_year(self) -> None:
        """Should correctly handle all 12 months."""
        for month_num in range(1, 13):
            start, end = PartialDate.from_text(f"2025-{month_num:02d}").as_range()
            assert start == Date.new(2025, month_num, 1)
            assert end.prev() == YearMonth(Year(2025), Month(month_num)).last_day()


class TestInclusiveBounds:
    """Tests for as_start_date and as_end_date."""

    def test_month_bounds(self) -> None:
        """Should give the first and last day of the month."""
        partial = PartialDate.from_text("2025-04")

        assert partial.as_start_date() == Date.new(2025, 4, 1)
        assert partial.as_end_date() == Date.new(2025, 4, 30)

    def test_year_bounds(self) -> None:
        """Should give January 1 and December 31."""
        partial = PartialDate.from_text("2025")

        assert partial.as_start_date() == Date.new(2025, 1, 1)
        assert partial.as_end_date() == Date.new(2025, 12, 31)

    def test_day_bounds(self) -> None:
        """Should give the day itself twice."""
        partial = PartialDate.from_text("2025-04-10")

        assert partial.as_start_date() == partial.as_end_date() == Date.new(2025, 4, 10)


class TestPeriodLabel:
    """Tests for PartialDate.period_label."""

    def test_labels(self) -> None:
        """Should render human-readable periods."""
        assert PartialDate.from_text("2025-01").period_label() == "January 2025"
        assert PartialDate.from_text("2025").period_label() == "2025"
        assert PartialDate.from_text("2025-01-15").period_label() == "2025-01-15"
