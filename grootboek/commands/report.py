"""Report and check commands for viewing ledger balances."""

import sys
from pathlib import Path

from rich.console import Console
from rich.markup import escape

from grootboek.config import find_config, get_report_option, load_config
from grootboek.dates import PartialDate
from grootboek.domain.calendar import Date
from grootboek.domain.errors import GrootboekError
from grootboek.domain.models import Cents, Transaction
from grootboek.domain.report import compute_totals, find_unbalanced, flatten, render_tree
from grootboek.domain.transactions import filter_transactions
from grootboek.store import load_transactions

console = Console()


def color_cents(cents: Cents, width: int = 0) -> str:
    """Format an amount with color: green for positive, red for negative.

    Args:
        cents: Amount to format.
        width: Right-align the amount in this many characters.

    Returns:
        Rich markup string.
    """
    text = f"{str(cents):>{width}}"
    if cents.value > 0:
        return f"[green]{text}[/green]"
    elif cents.value < 0:
        return f"[red]{text}[/red]"
    else:
        return f"[grey50]{text}[/grey50]"


def compute_date_bounds(
    period: str | None,
    start_date: str | None,
    end_date: str | None,
) -> tuple[Date | None, Date | None]:
    """Compute inclusive date bounds from period options.

    Args:
        period: Optional YEAR[-MONTH[-DAY]] covering the whole report.
        start_date: Optional YEAR[-MONTH[-DAY]] lower bound.
        end_date: Optional YEAR[-MONTH[-DAY]] upper bound.

    Returns:
        Tuple of (start, end), either may be None.

    Raises:
        ValueError: If period is combined with start_date or end_date.
        CalendarError: If a date option is malformed.
    """
    if period is not None:
        if start_date is not None or end_date is not None:
            raise ValueError("--period cannot be combined with --start-date or --end-date")
        partial = PartialDate.from_text(period)
        return partial.as_start_date(), partial.as_end_date()

    start = PartialDate.from_text(start_date).as_start_date() if start_date else None
    end = PartialDate.from_text(end_date).as_end_date() if end_date else None
    return start, end


def select_transactions(
    file: Path,
    account: str | None = None,
    period: str | None = None,
    start_date: str | None = None,
    end_date: str | None = None,
) -> list[Transaction]:
    """Load a ledger and apply the command line filters.

    Prints an error and exits on invalid options or an unreadable ledger.
    """
    try:
        start, end = compute_date_bounds(period, start_date, end_date)
        transactions = load_transactions(file)
    except (GrootboekError, ValueError) as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]", style="bold")
        sys.exit(1)

    return filter_transactions(transactions, start, end, account)


def resolve_report_options(file: Path, flat: bool | None, hide_zero: bool | None) -> tuple[bool, bool]:
    """Fill in unset report options from the configuration.

    Returns:
        Tuple of (flat, hide_zero).
    """
    if flat is not None and hide_zero is not None:
        return flat, hide_zero

    config_path = find_config(file.resolve().parent)
    try:
        config = load_config(config_path) if config_path else {}
        if flat is None:
            flat = get_report_option(config, "flat")
        if hide_zero is None:
            hide_zero = get_report_option(config, "hide_zero")
    except GrootboekError as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]", style="bold")
        sys.exit(1)

    return flat, hide_zero


def print_transaction(transaction: Transaction) -> None:
    """Print a transaction in ledger format with colors."""
    console.print(f"[cyan]{transaction.date}[/cyan]: [magenta]{escape(transaction.description)}[/magenta]")
    for tag in transaction.tags:
        console.print(f"[cyan]{escape(tag.label)}: {escape(tag.value)}[/cyan]")
    for mutation in transaction.mutations:
        console.print(f"{color_cents(mutation.amount)} {escape(str(mutation.account))}")


def report_command(
    file: Path,
    account: str | None = None,
    period: str | None = None,
    start_date: str | None = None,
    end_date: str | None = None,
    flat: bool | None = None,
    hide_zero: bool | None = None,
) -> None:
    """Show balances per account.

    Unset display options fall back to the [report] table of the nearest
    grootboek.toml above the ledger file.
    """
    transactions = select_transactions(file, account, period, start_date, end_date)
    flat, hide_zero = resolve_report_options(file, flat, hide_zero)

    if not transactions:
        console.print("[dim]No transactions found[/dim]")
        return

    totals = compute_totals(transactions)

    if period:
        console.print(f"[bold cyan]{PartialDate.from_text(period).period_label()}[/bold cyan]\n")

    if flat:
        pairs = flatten(totals, hide_zero)
        width = max((len(str(balance)) for balance, _ in pairs), default=0)
        for balance, node_account in pairs:
            console.print(f"{color_cents(balance, width)} {escape(str(node_account))}")
        return

    console.print(f"[bold]Total:[/bold] {color_cents(totals.total)}")
    for line in render_tree(totals, hide_zero):
        console.print(f"{line.indent}{line.connector} {escape(line.name)}: {color_cents(line.total)}")


def check_command(
    file: Path,
    account: str | None = None,
    period: str | None = None,
    start_date: str | None = None,
    end_date: str | None = None,
) -> None:
    """Check for unbalanced transactions."""
    transactions = select_transactions(file, account, period, start_date, end_date)

    unbalanced = find_unbalanced(transactions)
    for entry in unbalanced:
        print_transaction(entry.transaction)
        console.print(f"[bold red]Unbalanced amount:[/bold red] {color_cents(entry.residual)}\n")

    if unbalanced:
        console.print(f"[red]Found {len(unbalanced)} unbalanced transactions.[/red]", style="bold")
        sys.exit(1)

    console.print(f"[green]✓[/green] All {len(transactions)} transactions are balanced")
