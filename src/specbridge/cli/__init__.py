"""
specbridge CLI - Main application entry point.

This module sets up the Typer CLI application with all subcommands.
"""

import logging

import typer
from rich.console import Console

from specbridge import __version__
from specbridge.cli import index, transition

app = typer.Typer(
    name="specbridge",
    help="Bridge finished planning documents into an implementation loop",
    no_args_is_help=True,
    add_completion=True,
    context_settings={"help_option_names": ["--help", "-h"]},
)

console = Console()


@app.callback()
def main(
    ctx: typer.Context,
    debug: bool = typer.Option(
        False,
        "--debug",
        help="Enable debug output with detailed logging",
    ),
) -> None:
    """
    specbridge - planning-to-implementation transition.

    Reads PRD, architecture and epics/stories documents and writes the
    checklist, spec snapshot and briefing an implementation loop works from.
    """
    if debug:
        logging.basicConfig(level=logging.DEBUG)

    ctx.obj = {"debug": debug}


app.command(name="transition")(transition.transition)
app.command(name="index")(index.index)


@app.command()
def version() -> None:
    """Show specbridge version and exit."""
    console.print(f"specbridge version {__version__}")
    raise typer.Exit(0)


def cli_main() -> None:
    """Main CLI entry point."""
    app()


__all__ = ["app", "cli_main"]
