"""
Filesystem helpers shared by the transition pipeline.

Every document specbridge produces goes through atomic_write_text so an
interrupted run never leaves a truncated file behind.
"""

from __future__ import annotations

import os
import tempfile
from pathlib import Path


def atomic_write_text(path: Path, content: str) -> None:
    """
    Write text to a file atomically.

    The content is written to a temporary file in the target directory and
    then moved over the destination with os.replace(). The parent directory
    is created if needed.

    Args:
        path: Destination file path
        content: Text to write (UTF-8)

    Example:
        >>> atomic_write_text(Path(".ralph/@fix_plan.md"), "# Plan\\n")
    """
    path.parent.mkdir(parents=True, exist_ok=True)

    fd, temp_path = tempfile.mkstemp(dir=path.parent, prefix=f".{path.name}.", suffix=".tmp")
    try:
        with os.fdopen(fd, "w", encoding="utf-8", newline="") as f:
            f.write(content)
            f.flush()
            os.fsync(f.fileno())
        os.replace(temp_path, path)
    except Exception:
        # Clean up temp file on failure
        if os.path.exists(temp_path):
            os.unlink(temp_path)
        raise


def list_files_recursive(root: Path) -> list[str]:
    """
    List every file below a directory.

    Args:
        root: Directory to walk

    Returns:
        Sorted relative paths using forward slashes. Empty if the
        directory does not exist.
    """
    if not root.is_dir():
        return []

    return sorted(
        path.relative_to(root).as_posix() for path in root.rglob("*") if path.is_file()
    )
