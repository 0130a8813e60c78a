"""Date utilities for grootboek.

Pure functions and types for period filtering: a partial date such as
'2025', '2025-01' or '2025-01-15' covers a whole year, month or day.
"""

from dataclasses import dataclass
from typing import NamedTuple

from grootboek.domain.calendar import Date, Month, Year, YearMonth, split_date_fields


class DateRange(NamedTuple):
    """Half-open range of dates: start <= date < end."""

    start: Date
    end: Date

    def __contains__(self, date: object) -> bool:
        return isinstance(date, Date) and self.start <= date < self.end


@dataclass(frozen=True)
class PartialDate:
    """A year, a month of a year or a single day."""

    value: Year | YearMonth | Date

    @classmethod
    def from_text(cls, text: str) -> "PartialDate":
        """Parse YEAR[-MONTH[-DAY]].

        Raises:
            InvalidDateSyntax: If the text has too many or non-numeric fields.
            InvalidMonthNumber: If the month is outside 1-12.
            InvalidDayForMonth: If the day does not exist in that month.
        """
        fields = split_date_fields(text.strip(), 1, 3)
        year = Year(fields[0])
        if len(fields) == 1:
            return cls(year)
        year_month = year.with_month(Month.new(fields[1]))
        if len(fields) == 2:
            return cls(year_month)
        return cls(year_month.with_day(fields[2]))

    def as_range(self) -> DateRange:
        """The dates covered, as a half-open range."""
        value = self.value
        if isinstance(value, Date):
            return DateRange(value, value.next())
        return DateRange(value.first_day(), value.next().first_day())

    def as_start_date(self) -> Date:
        """First day covered."""
        if isinstance(self.value, Date):
            return self.value
        return self.value.first_day()

    def as_end_date(self) -> Date:
        """Last day covered (inclusive)."""
        if isinstance(self.value, Date):
            return self.value
        return self.value.last_day()

    def period_label(self) -> str:
        """Human-readable period (e.g., "January 2025")."""
        value = self.value
        if isinstance(value, YearMonth):
            return f"{value.month.label} {value.year}"
        return str(value)
