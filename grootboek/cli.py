"""CLI entry point for grootboek."""

import logging
from pathlib import Path

import typer
from rich.logging import RichHandler

from grootboek.commands.admin import init_command
from grootboek.commands.report import check_command, report_command
from grootboek.commands.transactions import add_command, print_command

app = typer.Typer(
    name="grootboek",
    help="Grootboek - A plain-text double-entry general ledger",
    add_completion=False,
)

FILE_ARGUMENT = typer.Argument(..., help="The ledger file to read")
ACCOUNT_OPTION = typer.Option(
    None, "--account", "-a", help="Only transactions that mutate this account or a sub-account"
)
PERIOD_OPTION = typer.Option(None, "--period", help="Limit records to this period (YEAR[-MONTH[-DAY]])")
START_OPTION = typer.Option(None, "--start-date", help="Only records from this date or later (YEAR[-MONTH[-DAY]])")
END_OPTION = typer.Option(None, "--end-date", help="Only records from this date or earlier (YEAR[-MONTH[-DAY]])")


def setup_logging(verbose: bool) -> None:
    """Send grootboek log records to stderr through rich."""
    logger = logging.getLogger("grootboek")
    logger.handlers.clear()
    logger.addHandler(RichHandler(show_path=False))
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logging"),
) -> None:
    """Grootboek - A plain-text double-entry general ledger."""
    setup_logging(verbose)


@app.command()
def report(
    file: Path = FILE_ARGUMENT,
    account: str = ACCOUNT_OPTION,
    period: str = PERIOD_OPTION,
    start_date: str = START_OPTION,
    end_date: str = END_OPTION,
    flat: bool | None = typer.Option(None, "--flat/--tree", help="List own balances per account instead of a tree"),
    hide_zero: bool | None = typer.Option(None, "--hide-zero/--show-zero", help="Omit accounts with a zero balance"),
) -> None:
    """Show balances per account."""
    report_command(file, account, period, start_date, end_date, flat, hide_zero)


@app.command()
def check(
    file: Path = FILE_ARGUMENT,
    account: str = ACCOUNT_OPTION,
    period: str = PERIOD_OPTION,
    start_date: str = START_OPTION,
    end_date: str = END_OPTION,
) -> None:
    """Check for unbalanced transactions."""
    check_command(file, account, period, start_date, end_date)


@app.command(name="print")
def print_transactions(
    file: Path = FILE_ARGUMENT,
    account: str = ACCOUNT_OPTION,
    period: str = PERIOD_OPTION,
    start_date: str = START_OPTION,
    end_date: str = END_OPTION,
) -> None:
    """Print transactions in ledger format."""
    print_command(file, account, period, start_date, end_date)


@app.command()
def add(
    description: str,
    mutation: list[str] = typer.Option(..., "--mutation", "-m", help="Mutation like '+12.50 assets/bank'"),
    tag: list[str] = typer.Option(None, "--tag", "-t", help="Tag like 'invoice=2025-001'"),
    date: str = typer.Option(None, "--date", "-d", help="Transaction date YYYY-MM-DD (default: today)"),
    file: Path = typer.Option(None, "--file", "-f", help="Ledger file (default: from grootboek.toml)"),
) -> None:
    """Append a transaction to the ledger."""
    add_command(description, mutation, tag, date, file)


@app.command(name="init")
def init(
    directory: Path = typer.Option(None, "--dir", "-d", help="Directory for grootboek.toml (default: current)"),
    force: bool = typer.Option(False, "--force", "-f", help="Overwrite existing config"),
) -> None:
    """Initialize grootboek configuration."""
    init_command(directory, force)


if __name__ == "__main__":
    app()
