"""Configuration file management for grootboek."""

import logging
import os
import tomllib
from collections.abc import Callable
from pathlib import Path
from typing import Any

import tomli_w

from grootboek.domain.calendar import Date
from grootboek.domain.errors import ConfigError

logger = logging.getLogger(__name__)

CONFIG_FILE_NAME = "grootboek.toml"


def find_config(
    start_dir: Path,
    root_dir: Path = Path("/"),
    is_file: Callable[[Path], bool] = Path.is_file,
) -> Path | None:
    """Search for a grootboek.toml in start_dir and each parent directory.

    The search stops once it leaves root_dir.

    Args:
        start_dir: Directory to start searching in.
        root_dir: Directory the search may not leave.
        is_file: Check used to test candidate paths.

    Returns:
        Path of the first config file found, or None.
    """
    for directory in (start_dir, *start_dir.parents):
        if not directory.is_relative_to(root_dir):
            return None
        candidate = directory / CONFIG_FILE_NAME
        if is_file(candidate):
            logger.debug("Found config file %s", candidate)
            return candidate
    return None


def default_config() -> dict[str, Any]:
    """Configuration written by 'grootboek init'."""
    return {
        "ledger": {"path": "grootboek-{year}.txt"},
        "report": {"hide_zero": False, "flat": False},
    }


def create_default_config(config_path: Path) -> None:
    """Create default config file with secure permissions.

    Args:
        config_path: Path to config file.
    """
    config_path.parent.mkdir(parents=True, exist_ok=True)
    save_config(default_config(), config_path)


def load_config(config_path: Path) -> dict[str, Any]:
    """Load configuration from TOML file.

    Args:
        config_path: Path to config file.

    Returns:
        Configuration dictionary.

    Raises:
        FileNotFoundError: If config file doesn't exist.
        ConfigError: If the file is not valid TOML.
    """
    with open(config_path, "rb") as f:
        try:
            return tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            raise ConfigError(f"failed to parse {config_path}: {e}") from e


def save_config(config: dict[str, Any], config_path: Path) -> None:
    """Save configuration to TOML file.

    Args:
        config: Configuration dictionary.
        config_path: Path to config file.
    """
    with open(config_path, "wb") as f:
        tomli_w.dump(config, f)

    os.chmod(config_path, 0o600)


def expand_template(template: str, **values: Any) -> str:
    """Fill in a '{name}' style template.

    Raises:
        ConfigError: If the template refers to an unknown field.
    """
    try:
        return template.format(**values)
    except (KeyError, IndexError, ValueError) as e:
        raise ConfigError(f"failed to expand template {template!r}: {e}") from e


def date_fields(date: Date) -> dict[str, str]:
    """Template fields for a date."""
    return {
        "year": str(date.year),
        "month": f"{date.month.to_number():02d}",
        "day": f"{date.day:02d}",
        "quarter": str((date.month.to_number() - 1) // 3 + 1),
    }


def _table(config: dict[str, Any], name: str) -> dict[str, Any]:
    """Get a [name] table, empty when absent.

    Raises:
        ConfigError: If the key holds something other than a table.
    """
    table = config.get(name, {})
    if not isinstance(table, dict):
        raise ConfigError(f"[{name}] must be a table, not {type(table).__name__}")
    return table


def get_report_option(config: dict[str, Any], name: str, default: bool = False) -> bool:
    """Get a boolean from the [report] table."""
    return bool(_table(config, "report").get(name, default))


def ledger_path(config: dict[str, Any], date: Date, base_dir: Path) -> Path:
    """Resolve the ledger file for a date.

    Args:
        config: Configuration dictionary.
        date: Date used to fill in the path template.
        base_dir: Directory relative paths are resolved against.

    Returns:
        Path to the ledger file.

    Raises:
        ConfigError: If no ledger path is configured, or it is not a string.
    """
    template = _table(config, "ledger").get("path")
    if not isinstance(template, str) or not template:
        raise ConfigError("no [ledger] path configured")
    return base_dir / expand_template(template, **date_fields(date))
