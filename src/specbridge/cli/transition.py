"""
specbridge CLI - Transition command.

The transition command turns finished planning documents into the inputs of
the implementation loop: checklist, spec snapshot, index, briefing and
instructions.
"""

from __future__ import annotations

import traceback
from pathlib import Path

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape

from specbridge.cli.errors import (
    ExitCode,
    print_error,
    print_not_project_root_error,
    print_transition_error,
)
from specbridge.core.config import SpecbridgeConfig, load_config, load_layered_env
from specbridge.core.transition import TransitionError, run_transition
from specbridge.utils.project import find_project_root

console = Console()


def resolve_project_root(project_root: Path | None) -> Path:
    """Explicit --project-root, else the nearest directory with a project marker."""
    if project_root is not None:
        return project_root.resolve()
    found = find_project_root()
    if found is None:
        print_not_project_root_error()
        raise typer.Exit(ExitCode.GENERAL_ERROR)
    return found


def load_project_config(root: Path) -> SpecbridgeConfig:
    """Load the layered config, exiting with a readable error when it is invalid."""
    load_layered_env(root)
    try:
        return load_config(root)
    except ValidationError as e:
        config_path = escape(str(root / ".specbridge.json"))
        print_error(
            "Invalid configuration",
            reason=escape(str(e)),
            solution=f"Fix {config_path} or the SPECBRIDGE_* variables",
        )
        raise typer.Exit(ExitCode.USER_ERROR)


def transition(
    ctx: typer.Context,
    project_root: Path | None = typer.Option(
        None,
        "--project-root",
        "-p",
        help="Project root directory (default: detected from the current directory)",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Show detailed output",
    ),
) -> None:
    """
    Convert planning documents into implementation-loop inputs.

    Progress in an existing checklist is carried over for every story whose
    id is unchanged. Running it twice on the same documents changes nothing.

    Examples:
        specbridge transition
        specbridge transition --project-root ../my-app --verbose
    """
    debug = ctx.obj.get("debug", False) if ctx.obj else False
    root = resolve_project_root(project_root)

    if verbose or debug:
        console.print(f"[dim]Project root: {escape(str(root))}[/dim]")

    config = load_project_config(root)
    try:
        result = run_transition(root, config)
    except TransitionError as e:
        print_transition_error(e)
        raise typer.Exit(ExitCode.GENERAL_ERROR)
    except OSError as e:
        console.print(f"[red]Transition failed: {escape(str(e))}[/red]")
        if debug:
            console.print(traceback.format_exc())
        raise typer.Exit(ExitCode.GENERAL_ERROR)

    console.print()
    console.print("[green]Transition complete![/green]")
    console.print(f"[bold]Stories:[/bold] {result.stories_count}")
    if result.checklist_preserved:
        console.print("[cyan]Preserved:[/cyan] completed stories from the existing checklist")

    if verbose:
        for path in result.written:
            console.print(f"[dim]  Wrote: {escape(str(path.relative_to(root)))}[/dim]")

    if result.warnings:
        console.print()
        console.print(f"[yellow]Warnings ({len(result.warnings)}):[/yellow]")
        for warning in result.warnings:
            console.print(f"[yellow]  - {escape(warning)}[/yellow]")
