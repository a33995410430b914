"""Scaffold CLI commands - scaffold, profiles."""
from typing import List, Optional

import typer
from rich.console import Console
from rich.table import Table

from overlaykit.cli_support import (
    handle_cli_error,
    load_config,
    print_error,
    print_report,
    print_success,
    setup_file_logging,
)
from overlaykit.models.errors import ConfigError, ScaffoldError
from overlaykit.models.profile import Architecture, InitSystem
from overlaykit.scaffold.core import OverlayScaffolder

# Module-level console instance (will be set by register function)
console: Console = Console()


def scaffold(
    config: Optional[str] = typer.Option(None, "--config", "-c", help="Config file path"),
    arch: Optional[List[Architecture]] = typer.Option(
        None, "--arch", "-a", help="Architecture to generate (repeatable, default: all)"
    ),
    init: Optional[List[InitSystem]] = typer.Option(
        None, "--init", "-i", help="Init system to generate (repeatable, default: all)"
    ),
    keep_registry: bool = typer.Option(
        False, "--keep-registry", help="Append to profiles.desc instead of rebuilding it"
    ),
    skip_repos_conf: bool = typer.Option(
        False, "--skip-repos-conf", help="Do not write the repos.conf entry"
    ),
    log_file: Optional[str] = typer.Option(None, "--log-file", help="Write a log file"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose output"),
):
    """Create the local overlay and its custom LLVM desktop profiles.

    One profile is generated per architecture and init system, each with
    its parent chain and a profiles.desc entry.

    Examples:
        ovk scaffold                          # All architectures and init systems
        ovk scaffold -a amd64 -i systemd      # Just one profile
        ovk scaffold --skip-repos-conf        # Without root, skip /etc/portage
    """
    if log_file or verbose:
        setup_file_logging(log_file=log_file, verbose=verbose)

    try:
        cfg = load_config(config, arch, init)
        scaffolder = OverlayScaffolder(cfg)
        report = scaffolder.scaffold(
            clear_registry=not keep_registry,
            write_repos_conf=not skip_repos_conf,
        )
    except (ConfigError, ScaffoldError, FileNotFoundError) as e:
        handle_cli_error(e, console, verbose)
        return

    print_report(console, report, title=f"Overlay {cfg.overlay_name}", item_label="Item")

    if not report.ok:
        print_error(console, f"{len(report.failures)} item(s) failed")
        raise typer.Exit(1)

    print_success(console, f"Local overlay and custom profiles are set up at {cfg.overlay_root}")
    _print_next_steps(cfg.overlay_name)


def profiles(
    config: Optional[str] = typer.Option(None, "--config", "-c", help="Config file path"),
    arch: Optional[List[Architecture]] = typer.Option(None, "--arch", "-a", help="Architecture filter"),
    init: Optional[List[InitSystem]] = typer.Option(None, "--init", "-i", help="Init system filter"),
    show_parents: bool = typer.Option(False, "--parents", "-p", help="Show parent profile chains"),
):
    """Show the profiles that 'scaffold' would generate, without writing anything."""
    try:
        cfg = load_config(config, arch, init)
    except (ConfigError, FileNotFoundError) as e:
        handle_cli_error(e, console)
        return

    planned = OverlayScaffolder(cfg).plan_profiles()

    table = Table(title=f"Profiles in {cfg.overlay_name}", show_header=True)
    table.add_column("Arch", style="cyan")
    table.add_column("Path", style="blue")
    table.add_column("Status", style="yellow")
    table.add_column("Alias", style="green")
    for profile in planned:
        table.add_row(profile.arch.value, profile.relative_path, cfg.status, profile.alias)
    console.print(table)

    if show_parents:
        for profile in planned:
            console.print(f"\n[bold]{profile.relative_path}[/bold]")
            for parent in profile.parents:
                console.print(f"  {parent}")


def _print_next_steps(overlay_name: str) -> None:
    console.print("\nYou can now select a profile, e.g.:")
    console.print("  [cyan]sudo emerge --sync[/cyan]")
    console.print("  [cyan]eselect profile list[/cyan]")
    console.print(f"  [cyan]eselect profile set {overlay_name}:default/linux/amd64/systemd-llvm-desktop[/cyan]")
    console.print(f"  [cyan]eselect profile set {overlay_name}:hardened/linux/riscv64/openrc-llvm-desktop[/cyan]")
    console.print("\n[dim]Remember to adjust ACCEPT_KEYWORDS in /etc/portage/make.conf "
                  "(see 'ovk keywords').[/dim]")


def register_scaffold_commands(app: typer.Typer, shared_console: Console):
    """Register scaffold commands with the main Typer app.

    Args:
        app: Main Typer application
        shared_console: Shared Rich console instance
    """
    global console
    console = shared_console

    app.command()(scaffold)
    app.command()(profiles)
