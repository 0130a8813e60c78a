"""Admin commands for setting up a ledger directory."""

import sys
from pathlib import Path

from rich.console import Console
from rich.markup import escape

from grootboek.config import CONFIG_FILE_NAME, create_default_config, default_config

console = Console()


def init_command(directory: Path | None = None, force: bool = False) -> None:
    """Write a default grootboek.toml into a ledger directory.

    Args:
        directory: Target directory. If None, the current directory.
        force: Overwrite an existing grootboek.toml.
    """
    config_path = (directory or Path.cwd()) / CONFIG_FILE_NAME

    if config_path.exists() and not force:
        console.print(f"[red]Error: {escape(str(config_path))} already exists[/red]", style="bold")
        console.print("[yellow]Use 'grootboek init --force' to overwrite[/yellow]")
        sys.exit(1)

    try:
        create_default_config(config_path)
    except OSError as e:
        console.print(f"[red]Error: cannot write {escape(str(config_path))}: {escape(str(e))}[/red]", style="bold")
        sys.exit(1)

    ledger_template = default_config()["ledger"]["path"]
    console.print(f"[green]✓[/green] Wrote {escape(str(config_path))}")
    console.print(f"[dim]Ledger files: {escape(ledger_template)} (relative to this directory)[/dim]")
