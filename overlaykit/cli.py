#!/usr/bin/env python3
"""overlaykit CLI - Local Gentoo overlay and profile scaffolding."""

import typer
from rich.console import Console

from overlaykit.cli_keywords_commands import register_keywords_commands
from overlaykit.cli_scaffold_commands import register_scaffold_commands

__version__ = "0.1.0"

app = typer.Typer(
    name="overlaykit",
    help="""overlaykit - Local Gentoo overlay and profile scaffolding

Custom LLVM desktop profiles for amd64, arm64 and riscv64.

Quick start:
  ovk profiles --parents   # Preview generated profiles
  ovk scaffold             # Create overlay, profiles and repos.conf
  ovk keywords             # Accept keywords for installed repositories

More commands: ovk --help
""",
    add_completion=False,
)

console = Console()

register_scaffold_commands(app, console)
register_keywords_commands(app, console)


@app.command()
def version():
    """Show overlaykit version."""
    console.print(f"overlaykit v{__version__}")


if __name__ == "__main__":
    app()
