"""
Standardized error handling and exit codes for the specbridge CLI.

This module provides consistent error messaging with actionable guidance
and standardized exit codes across all CLI commands.
"""

from enum import IntEnum

from rich.console import Console
from rich.markup import escape

from specbridge.core.transition import (
    ArtifactsNotFoundError,
    NoStoriesFoundError,
    StoriesFileNotFoundError,
    TransitionError,
)

console = Console()


class ExitCode(IntEnum):
    """Standard exit codes for specbridge CLI operations."""

    SUCCESS = 0
    """Operation completed successfully."""

    GENERAL_ERROR = 1
    """Generic error, including every failed transition."""

    USER_ERROR = 2
    """User configuration or input error (actionable by user)."""


def print_error(
    problem: str,
    *,
    reason: str | None = None,
    solution: str | None = None,
    doc_url: str | None = None,
) -> None:
    """
    Print a standardized error message with actionable guidance.

    Args:
        problem: Brief description of what went wrong
        reason: Optional explanation of why it happened
        solution: Optional command or action to fix it
        doc_url: Optional documentation URL for more help

    Example:
        >>> print_error(
        ...     "No planning artifacts found",
        ...     reason="Checked _bmad-output/planning-artifacts, docs/planning",
        ...     solution="Run the planning workflow first",
        ... )
    """
    console.print(f"[red]Error:[/red] {problem}")

    if reason:
        console.print(f"[dim]{reason}[/dim]")

    if solution:
        console.print(f"[cyan]→ Try:[/cyan] {solution}")

    if doc_url:
        console.print(f"[dim]Docs: {doc_url}[/dim]")


def print_transition_error(error: TransitionError) -> None:
    """Print a fatal transition error with a suggested next step."""
    if isinstance(error, ArtifactsNotFoundError):
        print_error(
            "No planning artifacts found",
            reason=escape(f"Checked: {', '.join(error.candidates)}"),
            solution="Create PRD, Create Architecture, Create Epics and Stories",
        )
    elif isinstance(error, StoriesFileNotFoundError):
        available = escape(", ".join(error.available)) or "(empty)"
        print_error(
            f"No epics/stories file found in {escape(str(error.artifacts_dir))}",
            reason=f"Available files: {available}",
            solution="Run 'CE' (Create Epics and Stories) first",
        )
    elif isinstance(error, NoStoriesFoundError):
        print_error(
            f"No stories parsed from {escape(str(error.stories_file))}",
            reason="Story headings must look like: ### Story N.M: Title",
        )
    else:
        print_error(escape(str(error)))


def print_not_project_root_error() -> None:
    """Print error when not in a specbridge project directory."""
    print_error(
        "Not in a project directory",
        reason="Could not find .specbridge.json, _bmad-output/, .ralph/, or .git/",
        solution="cd to your project root  # or pass --project-root",
    )
