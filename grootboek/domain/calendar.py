"""Gregorian calendar values for the ledger.

All types are immutable. Construction validates, so a Date always refers to
a real day: invalid input raises a CalendarError instead of producing an
out-of-range value.
"""

import datetime
import re
from dataclasses import dataclass
from enum import IntEnum

from grootboek.domain.errors import InvalidDateSyntax, InvalidDayForMonth, InvalidMonthNumber

_DIGITS = re.compile(r"[0-9]+")


def is_leap_year(year: int) -> bool:
    """Check the Gregorian leap-year rule."""
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


class Month(IntEnum):
    """Month of the year, numbered 1-12."""

    JANUARY = 1
    FEBRUARY = 2
    MARCH = 3
    APRIL = 4
    MAY = 5
    JUNE = 6
    JULY = 7
    AUGUST = 8
    SEPTEMBER = 9
    OCTOBER = 10
    NOVEMBER = 11
    DECEMBER = 12

    @classmethod
    def new(cls, number: int) -> "Month":
        """Get the month for a number.

        Raises:
            InvalidMonthNumber: If number is outside 1-12.
        """
        if not 1 <= number <= 12:
            raise InvalidMonthNumber(number)
        return cls(number)

    def to_number(self) -> int:
        return int(self)

    def total_days(self, leap_year: bool) -> int:
        """Number of days in this month."""
        if self is Month.FEBRUARY:
            return 29 if leap_year else 28
        if self in (Month.APRIL, Month.JUNE, Month.SEPTEMBER, Month.NOVEMBER):
            return 30
        return 31

    def next(self) -> "Month":
        """Following month, wrapping December to January."""
        return Month(self % 12 + 1)

    def prev(self) -> "Month":
        """Preceding month, wrapping January to December."""
        return Month((self - 2) % 12 + 1)

    @property
    def label(self) -> str:
        return self.name.capitalize()


@dataclass(frozen=True, order=True)
class Year:
    """A year number. May be zero or negative."""

    value: int

    def has_leap_day(self) -> bool:
        return is_leap_year(self.value)

    def total_days(self) -> int:
        return 366 if self.has_leap_day() else 365

    def with_month(self, month: Month | int) -> "YearMonth":
        if not isinstance(month, Month):
            month = Month.new(month)
        return YearMonth(self, month)

    def first_day(self) -> "Date":
        return Date(self, Month.JANUARY, 1)

    def last_day(self) -> "Date":
        return Date(self, Month.DECEMBER, 31)

    def next(self) -> "Year":
        return Year(self.value + 1)

    def prev(self) -> "Year":
        return Year(self.value - 1)

    def __str__(self) -> str:
        return f"{self.value:04d}"


@dataclass(frozen=True, order=True)
class YearMonth:
    """A specific month of a specific year."""

    year: Year
    month: Month

    def total_days(self) -> int:
        """Days in this month, applying the leap rule for February."""
        return self.month.total_days(self.year.has_leap_day())

    def with_day(self, day: int) -> "Date":
        """Get a date in this month.

        Raises:
            InvalidDayForMonth: If day is outside [1, total_days()].
        """
        return Date(self.year, self.month, day)

    def first_day(self) -> "Date":
        return Date(self.year, self.month, 1)

    def last_day(self) -> "Date":
        return Date(self.year, self.month, self.total_days())

    def next(self) -> "YearMonth":
        if self.month is Month.DECEMBER:
            return YearMonth(self.year.next(), Month.JANUARY)
        return YearMonth(self.year, self.month.next())

    def prev(self) -> "YearMonth":
        if self.month is Month.JANUARY:
            return YearMonth(self.year.prev(), Month.DECEMBER)
        return YearMonth(self.year, self.month.prev())

    def __str__(self) -> str:
        return f"{self.year}-{self.month.to_number():02d}"


@dataclass(frozen=True, order=True)
class Date:
    """A valid day in the Gregorian calendar.

    Dates order lexicographically by (year, month, day).
    """

    year: Year
    month: Month
    day: int

    def __post_init__(self) -> None:
        if not isinstance(self.month, Month):
            object.__setattr__(self, "month", Month.new(self.month))
        leap = is_leap_year(self.year.value)
        if not 1 <= self.day <= self.month.total_days(leap):
            raise InvalidDayForMonth(self.year.value, int(self.month), self.day)

    @classmethod
    def new(cls, year: int, month: int, day: int) -> "Date":
        """Build a date from plain numbers.

        Raises:
            InvalidMonthNumber: If month is outside 1-12.
            InvalidDayForMonth: If day does not exist in that month.
        """
        return cls(Year(year), Month.new(month), day)

    @classmethod
    def from_text(cls, text: str) -> "Date":
        """Parse a YYYY-MM-DD date.

        A single leading '-' marks a negative year.

        Raises:
            InvalidDateSyntax: If the text does not have three numeric fields.
            InvalidMonthNumber: If the month is outside 1-12.
            InvalidDayForMonth: If the day does not exist in that month.
        """
        year, month, day = split_date_fields(text, 3, 3)
        return cls.new(year, month, day)

    @classmethod
    def today(cls) -> "Date":
        today = datetime.date.today()
        return cls.new(today.year, today.month, today.day)

    def year_month(self) -> YearMonth:
        return YearMonth(self.year, self.month)

    def next(self) -> "Date":
        """The following day, rolling over month and year boundaries."""
        if self.day < self.year_month().total_days():
            return Date(self.year, self.month, self.day + 1)
        return self.year_month().next().first_day()

    def prev(self) -> "Date":
        """The preceding day, rolling over month and year boundaries."""
        if self.day > 1:
            return Date(self.year, self.month, self.day - 1)
        return self.year_month().prev().last_day()

    def __str__(self) -> str:
        return f"{self.year}-{self.month.to_number():02d}-{self.day:02d}"


def split_date_fields(text: str, min_fields: int, max_fields: int) -> list[int]:
    """Split a dash separated date into integer fields.

    Args:
        text: Text like '2020', '2020-01' or '2020-01-02'.
        min_fields: Minimum number of fields required.
        max_fields: Maximum number of fields allowed.

    Returns:
        The numeric fields, year first.

    Raises:
        InvalidDateSyntax: If the field count is wrong or a field is not numeric.
    """
    negative = text.startswith("-")
    fields = (text[1:] if negative else text).split("-")
    if not min_fields <= len(fields) <= max_fields:
        raise InvalidDateSyntax(text)
    if not all(_DIGITS.fullmatch(field) for field in fields):
        raise InvalidDateSyntax(text)

    numbers = [int(field) for field in fields]
    if negative:
        numbers[0] = -numbers[0]
    return numbers
