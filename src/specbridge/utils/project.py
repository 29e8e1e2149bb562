"""
Project root discovery utilities for specbridge.

This module provides functions for discovering project boundaries
by searching for marker files like .specbridge.json, _bmad-output/ or .git/.
"""

from pathlib import Path

# Markers that indicate a project root, in order of priority
PROJECT_ROOT_MARKERS = [
    ".specbridge.json",  # Project configuration file
    ".specbridge",  # Phase state directory
    "_bmad-output",  # Planning output tree
    ".ralph",  # Implementation loop directory
    ".git",  # Git repository
]


def find_project_root(start: Path | None = None) -> Path | None:
    """
    Find the project root directory by searching upward for marker files.

    Args:
        start: Directory to start searching from. Defaults to current working directory.

    Returns:
        Path to the project root directory, or None if not found.

    Example:
        >>> find_project_root(Path("/project/docs/planning"))
        PosixPath('/project')
    """
    if start is None:
        start = Path.cwd()

    current = start.resolve()
    for candidate in (current, *current.parents):
        for marker in PROJECT_ROOT_MARKERS:
            if (candidate / marker).exists():
                return candidate

    return None

