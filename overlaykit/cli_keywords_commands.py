"""Keyword CLI commands - keywords."""
from typing import List, Optional

import typer
from rich.console import Console

from overlaykit.cli_support import (
    handle_cli_error,
    is_mock,
    load_config,
    print_error,
    print_report,
    print_success,
    setup_file_logging,
)
from overlaykit.core.keywords import KeywordAppender
from overlaykit.discovery.repositories import RepositoryLister
from overlaykit.models.errors import ConfigError, RepositoryDiscoveryError

# Module-level console instance (will be set by register function)
console: Console = Console()


def keywords(
    config: Optional[str] = typer.Option(None, "--config", "-c", help="Config file path"),
    repo: Optional[List[str]] = typer.Option(
        None, "--repo", "-r", help="Repository to configure (repeatable, skips eselect discovery)"
    ),
    no_create_dirs: bool = typer.Option(
        False, "--no-create-dirs", help="Fail instead of creating a missing keywords directory"
    ),
    log_file: Optional[str] = typer.Option(None, "--log-file", help="Write a log file"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose output"),
):
    """Accept all keywords for every installed repository.

    The configured specific repository is handled first, then every
    repository reported by 'eselect repository list'. Lines already present
    are left alone, so this is safe to run after each sync.

    Examples:
        ovk keywords                    # Discover repositories with eselect
        ovk keywords -r guru -r steam   # Configure the given repositories
    """
    if log_file or verbose:
        setup_file_logging(log_file=log_file, verbose=verbose)

    try:
        cfg = load_config(config)
        discovered = list(repo) if repo else RepositoryLister(mock=is_mock()).list_repositories()
    except (ConfigError, RepositoryDiscoveryError, FileNotFoundError) as e:
        handle_cli_error(e, console, verbose)
        return

    appender = KeywordAppender(cfg, create_dirs=not no_create_dirs)
    report = appender.apply(discovered)

    print_report(console, report, title=f"Keywords ({cfg.keywords})", item_label="Repository")

    if not report.ok:
        print_error(console, f"{len(report.failures)} repository(ies) failed")
        raise typer.Exit(1)

    print_success(console, "Repository keywords configuration completed.")


def register_keywords_commands(app: typer.Typer, shared_console: Console):
    """Register keyword commands with the main Typer app."""
    global console
    console = shared_console

    app.command()(keywords)
