"""Utility modules for specbridge."""

from .fs import atomic_write_text, list_files_recursive
from .project import find_project_root

__all__ = [
    "atomic_write_text",
    "find_project_root",
    "list_files_recursive",
]
