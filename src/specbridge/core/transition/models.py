"""
Transition result model.
"""

from dataclasses import dataclass, field
from pathlib import Path


@dataclass
class TransitionResult:
    """Outcome of a completed transition."""

    stories_count: int
    warnings: list[str] = field(default_factory=list)
    checklist_preserved: bool = False
    """True when completion marks from a previous checklist were carried over."""

    written: list[Path] = field(default_factory=list)
    """Generated files, in the order they were written."""
