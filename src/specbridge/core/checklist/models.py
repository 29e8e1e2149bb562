"""
Data models for checklist reconciliation.
"""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class ChecklistItem:
    """A story line read back from a previously generated checklist."""

    id: str
    completed: bool
    title: str = ""


@dataclass
class ChecklistMerge:
    """
    Result of reconciling freshly extracted stories with a prior checklist.
    """

    content: str
    """The rendered checklist with prior completion marks applied."""

    completed_ids: set[str] = field(default_factory=set)
    """Story ids that were checked in the prior checklist."""

    warnings: list[str] = field(default_factory=list)
    """Orphan and renumbering warnings."""

    @property
    def preserved(self) -> bool:
        """Whether any prior completion state was carried over."""
        return bool(self.completed_ids)
