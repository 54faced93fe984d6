#!/usr/bin/env python3
"""
eventbank CLI entrypoint.
"""

import sys

import typer
from rich.console import Console
from rich.table import Table

from eventbank import __version__
from eventbank.cli.commands import run
from eventbank.config import Settings
from eventbank.core.errors import ConfigError
from eventbank.logging_config import setup_logging

app = typer.Typer(
    name="eventbank",
    help="Event-sourced account engine CLI",
    add_completion=False,
)

console = Console()

app.command(name="run")(run.run_command)


@app.command()
def version():
    """Show version information."""
    table = Table(show_header=False, box=None)
    table.add_row("[bold]eventbank[/bold]", f"v{__version__}")
    table.add_row("Events", "AccountCreated, FundsDeposited, FundsWithdrawn")
    console.print(table)


def main():
    """Main entrypoint: logging goes to stderr so --json output stays clean."""
    try:
        setup_logging(Settings.from_env(), stream=sys.stderr)
    except ConfigError as e:
        Console(stderr=True).print(f"[red]Config error:[/red] {e}")
        sys.exit(run.EXIT_USAGE)
    app()


if __name__ == "__main__":
    main()
