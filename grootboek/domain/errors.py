"""Exception types for grootboek.

Calendar errors are split into syntax errors (the text is not shaped like a
date) and range errors (the numbers do not form a valid date), so callers can
treat a malformed token differently from an out-of-range day.

Parse errors carry the offending token and its position for diagnostics.
"""

from enum import Enum
from pathlib import Path


class GrootboekError(Exception):
    """Base class for all grootboek errors."""


class CalendarError(GrootboekError, ValueError):
    """Base class for invalid calendar values."""


class InvalidMonthNumber(CalendarError):
    """Month number outside 1-12."""

    def __init__(self, number: int) -> None:
        self.number = number
        super().__init__(f"invalid month number: {number}")


class InvalidDayForMonth(CalendarError):
    """Day number outside the days of its month."""

    def __init__(self, year: int, month: int, day: int) -> None:
        self.year = year
        self.month = month
        self.day = day
        super().__init__(f"invalid day for month: {year:04d}-{month:02d}-{day:02d}")


class InvalidDateSyntax(CalendarError):
    """Text that is not shaped like a (partial) date."""

    def __init__(self, text: str) -> None:
        self.text = text
        super().__init__(f"invalid date syntax: {text!r}")


class HeaderError(Enum):
    """Problems with a transaction header line."""

    MISSING_DESCRIPTION = "missing transaction description"
    INVALID_DATE = "invalid date"


class TagError(Enum):
    """Problems with a tag line."""

    INVALID_LABEL = "invalid tag label"
    TAG_AFTER_MUTATION = "tags are only allowed before the first mutation"


class MutationError(Enum):
    """Problems with a mutation line."""

    MISSING_SIGN = "missing sign (+/-)"
    MISSING_ACCOUNT = "missing account for mutation"
    INVALID_AMOUNT = "invalid mutation amount"


ParseErrorDetails = HeaderError | TagError | MutationError


class ParseError(GrootboekError):
    """A ledger line that could not be parsed.

    Attributes:
        details: What went wrong.
        token: The exact offending substring.
        line: 1-based line number of the token.
        column: 1-based column of the token within its line.
    """

    def __init__(self, details: ParseErrorDetails, token: str, line: int = 0, column: int = 0) -> None:
        self.details = details
        self.token = token
        self.line = line
        self.column = column
        super().__init__(str(self))

    @property
    def kind(self) -> str:
        """Return 'header', 'tag' or 'mutation'."""
        if isinstance(self.details, HeaderError):
            return "header"
        if isinstance(self.details, TagError):
            return "tag"
        return "mutation"

    def __str__(self) -> str:
        location = f"line {self.line}, column {self.column}: " if self.line else ""
        return f"{location}{self.details.value}: {self.token!r}"


class LedgerReadError(GrootboekError):
    """The ledger file could not be read or decoded."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        super().__init__(f"failed to read {path}: {reason}")


class ConfigError(GrootboekError):
    """The configuration could not be loaded or applied."""
