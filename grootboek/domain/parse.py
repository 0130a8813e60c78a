"""Parser for the plain-text ledger format.

    # comments and blank lines are ignored anywhere
    2020-01-02: buy coffee
    receipt: 0042
    +1.50 assets/cash
    -1.50 expenses/coffee

A blank line ends a transaction. Tags must come before the first mutation.
The first error aborts the parse; there is no recovery.
"""

import logging
import re
from collections.abc import Iterator
from dataclasses import dataclass

from grootboek.domain.calendar import Date
from grootboek.domain.errors import (
    CalendarError,
    HeaderError,
    MutationError,
    ParseError,
    ParseErrorDetails,
    TagError,
)
from grootboek.domain.models import Account, Cents, Mutation, Tag, Transaction

logger = logging.getLogger(__name__)

_LABEL = re.compile(r"[A-Za-z0-9-]+")
_AMOUNT = re.compile(r"([0-9]+)(?:\.([0-9]{2}))?")


@dataclass(frozen=True)
class Line:
    """One source line with its 1-based number."""

    number: int
    raw: str

    @property
    def text(self) -> str:
        return self.raw.strip()

    def is_blank(self) -> bool:
        return not self.text

    def is_comment(self) -> bool:
        return self.text.startswith("#")

    def error(self, details: ParseErrorDetails, token: str) -> ParseError:
        """Build an error keyed to a token on this line."""
        return ParseError(details, token, self.number, self.raw.find(token) + 1)


def parse_amount(text: str) -> Cents | None:
    """Parse an unsigned amount: WHOLE or WHOLE.DD.

    Returns:
        The amount, or None if the text is not a valid amount.
    """
    match = _AMOUNT.fullmatch(text)
    if match is None:
        return None
    whole, decimals = match.groups()
    return Cents(int(whole) * 100 + int(decimals or 0))


def parse_tag(text: str) -> Tag | None:
    """Parse a LABEL: VALUE line.

    Returns:
        The tag, or None if the line is not tag-shaped.
    """
    label, sep, value = text.partition(":")
    label = label.strip()
    if not sep or not _LABEL.fullmatch(label):
        return None
    return Tag(label, value.strip())


def parse_mutation(line: Line) -> Mutation:
    """Parse a SIGN AMOUNT ACCOUNT line.

    Raises:
        ParseError: With MISSING_ACCOUNT, MISSING_SIGN or INVALID_AMOUNT details.
    """
    text = line.text
    amount, sep, account = text.partition(" ")
    account = account.strip()
    if not sep or not account:
        raise line.error(MutationError.MISSING_ACCOUNT, text)

    if amount[0] == "+":
        sign = 1
    elif amount[0] == "-":
        sign = -1
    else:
        raise line.error(MutationError.MISSING_SIGN, amount)

    value = parse_amount(amount[1:])
    if value is None:
        raise line.error(MutationError.INVALID_AMOUNT, amount)

    return Mutation(Cents(sign * value.value), Account(account))


def parse_header(line: Line) -> tuple[Date, str]:
    """Parse a DATE: DESCRIPTION header line.

    Raises:
        ParseError: With MISSING_DESCRIPTION or INVALID_DATE details. For an
            invalid date the calendar error is chained as __cause__.
    """
    text = line.text
    date_text, sep, description = text.partition(":")
    date_text = date_text.strip()
    description = description.strip()

    if not sep or not description:
        raise line.error(HeaderError.MISSING_DESCRIPTION, text)

    try:
        date = Date.from_text(date_text)
    except CalendarError as e:
        raise line.error(HeaderError.INVALID_DATE, date_text) from e

    return date, description


def parse_transaction(lines: Iterator[Line]) -> Transaction | None:
    """Parse the next transaction block.

    Args:
        lines: Source lines; consumed up to and including the blank line that
            ends the block.

    Returns:
        The transaction, or None when only blank lines and comments remain.

    Raises:
        ParseError: If the block is malformed.
    """
    for line in lines:
        if not line.is_blank() and not line.is_comment():
            header = line
            break
    else:
        return None

    date, description = parse_header(header)
    tags: list[Tag] = []
    mutations: list[Mutation] = []

    for line in lines:
        if line.is_blank():
            break
        if line.is_comment():
            continue

        tag = parse_tag(line.text)
        if tag is not None:
            if mutations:
                raise line.error(TagError.TAG_AFTER_MUTATION, line.text)
            tags.append(tag)
        else:
            mutations.append(parse_mutation(line))

    return Transaction(date, description, tuple(tags), tuple(mutations))


def split_lines(text: str) -> list[str]:
    """Split ledger text on '\\n', dropping a trailing '\\r' from each line.

    Other Unicode line separators stay part of the line they appear in.
    """
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line.removesuffix("\r") for line in lines]


def iter_transactions(text: str) -> Iterator[Transaction]:
    """Lazily parse transactions in file order.

    Raises:
        ParseError: On the first malformed line.
    """
    lines = (Line(number, raw) for number, raw in enumerate(split_lines(text), 1))
    while (transaction := parse_transaction(lines)) is not None:
        yield transaction


def parse_transactions(text: str) -> list[Transaction]:
    """Parse a whole ledger.

    Args:
        text: Ledger file contents.

    Returns:
        All transactions in file order.

    Raises:
        ParseError: On the first malformed line.
    """
    transactions = list(iter_transactions(text))
    logger.debug("Parsed %d transactions", len(transactions))
    return transactions
