"""
Spec file data models.

Spec files are the planning documents copied into the snapshot. Each is
classified by topic, and the topic alone decides how urgently an agent should
read it.
"""

from dataclasses import dataclass, field
from enum import Enum


class SpecFileType(str, Enum):
    """Topic of a planning document, derived from its file name."""

    PRD = "prd"
    ARCHITECTURE = "architecture"
    STORIES = "stories"
    UX = "ux"
    TEST_DESIGN = "test-design"
    READINESS = "readiness"
    SPRINT = "sprint"
    BRAINSTORM = "brainstorm"
    OTHER = "other"


class SpecPriority(str, Enum):
    """Reading priority, from must-read to optional background."""

    CRITICAL = "critical"
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"

    @property
    def rank(self) -> int:
        """Sort key: 0 for critical through 3 for low."""
        return list(SpecPriority).index(self)


@dataclass(frozen=True)
class SpecFileMetadata:
    """One classified spec file."""

    path: str
    """Path relative to the indexed directory, forward slashes."""

    size: int
    """Size in bytes."""

    type: SpecFileType
    priority: SpecPriority
    description: str = ""


@dataclass
class SpecsIndex:
    """Classified spec files sorted into reading order."""

    generated_at: str
    total_files: int
    total_size_kb: int
    files: list[SpecFileMetadata] = field(default_factory=list)

    def files_with_priority(self, priority: SpecPriority) -> list[SpecFileMetadata]:
        """Files of one priority tier, in index order."""
        return [f for f in self.files if f.priority is priority]


@dataclass(frozen=True)
class SpecsChange:
    """A file that differs between the old snapshot and the new planning output."""

    file: str
    status: str
    """One of "added", "modified", "removed"."""

    summary: str | None = None
    """For modified files, the first changed line of the new version."""
