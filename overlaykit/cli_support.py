"""Shared utilities for overlaykit CLI modules."""
from __future__ import annotations

import os
from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from overlaykit.core.config import ScaffoldConfig
from overlaykit.core.results import ItemStatus, RunReport
from overlaykit.models.profile import Architecture, InitSystem

# Default config search paths (ordered by proximity to current run)
CONFIG_PATHS = [
    "./overlaykit.yml",
    str(Path.home() / ".config" / "overlaykit" / "overlaykit.yml"),
    "/etc/overlaykit/overlaykit.yml",
]

STATUS_STYLES = {
    ItemStatus.CREATED: "green",
    ItemStatus.APPENDED: "green",
    ItemStatus.PRESENT: "dim",
    ItemStatus.FAILED: "red",
}


def find_config(config_path: Optional[str] = None) -> Optional[str]:
    """Locate the active overlaykit configuration file.

    Returns None when no file is configured; defaults then apply.
    """
    if config_path:
        return config_path

    if env_config := os.environ.get("OVK_CONFIG"):
        return env_config

    for path in CONFIG_PATHS:
        if Path(path).exists():
            return path

    return None


def is_mock() -> bool:
    """Return True when CLI runs in mock mode."""
    return os.environ.get("OVK_MOCK") == "1"


def setup_file_logging(log_file: Optional[str] = None, verbose: bool = False) -> None:
    """Set up file logging for CLI commands."""
    from overlaykit.core.logger import setup_file_logging as _setup_file_logging
    _setup_file_logging(log_file=log_file, verbose=verbose)


def load_config(
    config_path: Optional[str] = None,
    architectures: Optional[List[Architecture]] = None,
    init_systems: Optional[List[InitSystem]] = None,
) -> ScaffoldConfig:
    """Build the run configuration: environment, then file, then CLI flags.

    Raises:
        FileNotFoundError: If an explicit config file does not exist
        ConfigError: If the config file is invalid
    """
    from overlaykit.config.loader import ConfigLoader

    config = ScaffoldConfig.from_env()

    config_file = find_config(config_path)
    if config_file:
        config = ConfigLoader(config_file).load(config)

    if architectures:
        config.architectures = list(architectures)
    if init_systems:
        config.init_systems = list(init_systems)

    return config


def handle_cli_error(
    e: Exception,
    console: Console,
    verbose: bool = False,
    exit_code: int = 1
) -> None:
    """Handle CLI errors with consistent formatting.

    Raises:
        typer.Exit: Always, with ``exit_code``
    """
    console.print(f"[red]Error:[/red] {e}")
    if verbose:
        console.print_exception()
    raise typer.Exit(exit_code)


def print_report(console: Console, report: RunReport, title: str, item_label: str) -> None:
    """Render a RunReport as a table."""
    table = Table(title=title, show_header=True)
    table.add_column(item_label, style="cyan")
    table.add_column("Status", style="bold")
    table.add_column("Error", style="red")

    for item in report.items:
        style = STATUS_STYLES[item.status]
        table.add_row(escape(item.name), f"[{style}]{item.status.value}[/{style}]", escape(item.error or ""))

    console.print(table)


def print_success(console: Console, message: str, prefix: str = "✓") -> None:
    """Print success message with consistent formatting."""
    console.print(f"[green]{prefix}[/green] {message}")


def print_error(console: Console, message: str, prefix: str = "✗") -> None:
    """Print error message with consistent formatting."""
    console.print(f"[red]{prefix}[/red] {message}")


def print_warning(console: Console, message: str, prefix: str = "⚠") -> None:
    """Print warning message with consistent formatting."""
    console.print(f"[yellow]{prefix}[/yellow] {message}")


def print_info(console: Console, message: str, prefix: str = "ℹ") -> None:
    """Print info message with consistent formatting."""
    console.print(f"[cyan]{prefix}[/cyan] {message}")
