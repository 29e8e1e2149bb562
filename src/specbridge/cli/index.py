"""
specbridge CLI - Index command.

Regenerates the spec index from the current snapshot without running a full
transition, e.g. after editing files in the snapshot by hand.
"""

from __future__ import annotations

from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from specbridge.cli.errors import ExitCode, print_error
from specbridge.cli.transition import load_project_config, resolve_project_root
from specbridge.core.specs import build_specs_index, render_specs_index
from specbridge.utils.fs import atomic_write_text

console = Console()


def index(
    project_root: Path | None = typer.Option(
        None,
        "--project-root",
        "-p",
        help="Project root directory (default: detected from the current directory)",
    ),
) -> None:
    """
    Regenerate the spec index from the current snapshot.
    """
    root = resolve_project_root(project_root)
    config = load_project_config(root)
    loop_dir = root / config.paths.loop_dir
    specs_dir = loop_dir / config.paths.specs_dir

    if not specs_dir.is_dir():
        print_error(
            f"No spec snapshot at {escape(str(specs_dir))}",
            solution="specbridge transition",
        )
        raise typer.Exit(ExitCode.GENERAL_ERROR)

    specs_index = build_specs_index(specs_dir, config.limits.description_max_length)
    if specs_index.total_files == 0:
        console.print(f"[yellow]No markdown files in {escape(str(specs_dir))}[/yellow]")
        return

    index_path = loop_dir / config.paths.index_file
    atomic_write_text(
        index_path, render_specs_index(specs_index, config.limits.large_file_threshold)
    )

    table = Table(show_header=True, header_style="bold")
    table.add_column("File")
    table.add_column("Type")
    table.add_column("Priority")
    for spec in specs_index.files:
        table.add_row(escape(spec.path), spec.type.value, spec.priority.value)
    console.print(table)
    console.print(f"[cyan]Generated:[/cyan] {escape(str(index_path.relative_to(root)))}")
