"""Transaction commands (print, add)."""

import sys
from pathlib import Path

from rich.console import Console
from rich.markup import escape

from grootboek.commands.report import print_transaction, select_transactions
from grootboek.config import find_config, ledger_path, load_config
from grootboek.domain.calendar import Date
from grootboek.domain.errors import GrootboekError
from grootboek.domain.transactions import build_transaction
from grootboek.store import append_transaction

console = Console()


def print_command(
    file: Path,
    account: str | None = None,
    period: str | None = None,
    start_date: str | None = None,
    end_date: str | None = None,
) -> None:
    """Print transactions in ledger format."""
    transactions = select_transactions(file, account, period, start_date, end_date)

    for i, transaction in enumerate(transactions):
        if i > 0:
            console.print()
        print_transaction(transaction)


def resolve_ledger_file(file: Path | None, date: Date) -> Path:
    """Find the ledger file to write to.

    Args:
        file: Explicit ledger file, used as-is when given.
        date: Transaction date, used to expand the configured path template.

    Returns:
        Path to the ledger file.

    Raises:
        GrootboekError: If no file was given and no usable config was found.
    """
    if file is not None:
        return file

    config_path = find_config(Path.cwd())
    if config_path is None:
        raise GrootboekError("No ledger file given and no grootboek.toml found")

    config = load_config(config_path)
    return ledger_path(config, date, config_path.parent)


def add_command(
    description: str,
    mutations: list[str],
    tags: list[str] | None = None,
    date: str | None = None,
    file: Path | None = None,
) -> None:
    """Append a transaction to the ledger.

    Args:
        description: Transaction description.
        mutations: Mutations like '+12.50 assets/bank'.
        tags: Optional tags like 'invoice=2025-001'.
        date: Transaction date (YYYY-MM-DD). If None, today.
        file: Ledger file. If None, taken from grootboek.toml.
    """
    try:
        transaction_date = Date.from_text(date.strip()) if date else Date.today()
        transaction = build_transaction(transaction_date, description, tags or [], mutations)
        path = resolve_ledger_file(file, transaction_date)
        append_transaction(transaction, path)
    except (GrootboekError, ValueError, OSError) as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]", style="bold")
        sys.exit(1)

    print_transaction(transaction)

    if not transaction.is_balanced():
        console.print(f"[yellow]Warning: transaction is unbalanced by {transaction.balance()}[/yellow]")

    console.print(f"\n[green]✓[/green] Transaction added to {escape(str(path))}")
