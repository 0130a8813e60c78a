"""Ledger file access: read and parse a whole file, append transactions."""

import logging
from pathlib import Path

from grootboek.domain.errors import LedgerReadError
from grootboek.domain.models import Transaction
from grootboek.domain.parse import parse_transactions
from grootboek.domain.transactions import format_transaction

logger = logging.getLogger(__name__)


def read_ledger(path: Path) -> str:
    """Read a ledger file as UTF-8 text.

    Args:
        path: Path to the ledger file.

    Returns:
        File contents.

    Raises:
        LedgerReadError: If the file cannot be read or is not valid UTF-8.
    """
    try:
        data = path.read_bytes()
    except OSError as e:
        raise LedgerReadError(path, e.strerror or str(e)) from e

    try:
        return data.decode("utf-8")
    except UnicodeDecodeError as e:
        raise LedgerReadError(path, f"invalid UTF-8 at byte {e.start}") from e


def load_transactions(path: Path) -> list[Transaction]:
    """Read and parse a ledger file.

    Args:
        path: Path to the ledger file.

    Returns:
        Transactions in file order.

    Raises:
        LedgerReadError: If the file cannot be read.
        ParseError: If the file contents are malformed.
    """
    text = read_ledger(path)
    transactions = parse_transactions(text)
    logger.info("Loaded %d transactions from %s", len(transactions), path)
    return transactions


def append_transaction(transaction: Transaction, path: Path) -> None:
    """Append a transaction to a ledger file, creating it if needed.

    A blank line is written first when the file does not already end with one,
    so the new block never merges into the previous transaction.

    Args:
        transaction: Transaction to write.
        path: Path to the ledger file.

    Raises:
        LedgerReadError: If the existing file cannot be read.
        OSError: If the file cannot be written.
    """
    separator = ""
    if path.exists():
        existing = read_ledger(path)
        if existing and not existing.endswith("\n\n"):
            separator = "\n" if existing.endswith("\n") else "\n\n"
    else:
        path.parent.mkdir(parents=True, exist_ok=True)

    with open(path, "a", encoding="utf-8") as f:
        f.write(separator + format_transaction(transaction))

    logger.info("Appended transaction dated %s to %s", transaction.date, path)
