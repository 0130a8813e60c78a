"""Pure functions for selecting, building and formatting transactions.

This module contains the functional core for transaction operations:
- No I/O operations (no files, no console)
- No side effects
- Pure data transformations
"""

from collections.abc import Iterable

from grootboek.domain.calendar import Date
from grootboek.domain.errors import ParseError, TagError
from grootboek.domain.models import Mutation, Tag, Transaction
from grootboek.domain.parse import Line, parse_mutation, parse_tag


def filter_transactions(
    transactions: Iterable[Transaction],
    start: Date | None = None,
    end: Date | None = None,
    account: str | None = None,
) -> list[Transaction]:
    """Select transactions by date and account.

    Args:
        transactions: Transactions in file order.
        start: Earliest date to keep (inclusive).
        end: Latest date to keep (inclusive).
        account: Keep only transactions touching this account or a sub-account.

    Returns:
        Matching transactions, order preserved.
    """
    selected = []
    for transaction in transactions:
        if start is not None and transaction.date < start:
            continue
        if end is not None and transaction.date > end:
            continue
        if account is not None and not transaction.mutates_account(account):
            continue
        selected.append(transaction)
    return selected


def format_transaction(transaction: Transaction) -> str:
    """Render a transaction in ledger text form.

    The result parses back to an equal transaction.

    Args:
        transaction: Transaction to render.

    Returns:
        Header, tag and mutation lines, newline terminated.
    """
    lines = [f"{transaction.date}: {transaction.description}"]
    lines.extend(f"{tag.label}: {tag.value}" for tag in transaction.tags)
    lines.extend(f"{mutation.amount} {mutation.account}" for mutation in transaction.mutations)
    return "\n".join(lines) + "\n"


def _single_line(text: str, what: str) -> str:
    """Reject text that would not stay on one ledger line."""
    if "\n" in text or "\r" in text:
        raise ValueError(f"{what} must not contain line breaks: {text!r}")
    return text


def build_transaction(
    date: Date,
    description: str,
    tags: Iterable[str] = (),
    mutations: Iterable[str] = (),
) -> Transaction:
    """Build a transaction from command line style strings.

    Args:
        date: Transaction date.
        description: Transaction description.
        tags: Tags as 'label: value' or 'label=value'.
        mutations: Mutations as '+1.00 account'.

    Returns:
        The transaction. It is not required to balance.

    Raises:
        ValueError: If the description is empty, or any part contains a line break.
        ParseError: If a tag or mutation is malformed.
    """
    description = _single_line(description, "Description").strip()
    if not description:
        raise ValueError("Description must not be empty")

    parsed_tags: list[Tag] = []
    for number, raw in enumerate(tags, 1):
        raw = _single_line(raw, "Tag")
        tag = parse_tag(raw.replace("=", ":", 1) if ":" not in raw else raw)
        if tag is None:
            raise ParseError(TagError.INVALID_LABEL, raw.strip(), number, 1)
        parsed_tags.append(tag)

    parsed_mutations: list[Mutation] = [
        parse_mutation(Line(number, _single_line(raw, "Mutation"))) for number, raw in enumerate(mutations, 1)
    ]

    return Transaction(date, description, tuple(parsed_tags), tuple(parsed_mutations))
