"""
Data models for story extraction.

Stories are rebuilt from the planning documents on every transition and
never mutated afterwards, so they are frozen dataclasses.
"""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Story:
    """
    One planning work item parsed from an epics/stories document.

    The ``id`` is the key used to carry completion marks between
    regenerations of the checklist.
    """

    epic: str
    """Title of the containing epic ("" for stories outside any epic)."""

    epic_description: str
    """Non-empty lines under the epic header, joined with spaces."""

    id: str
    """Dotted identifier, e.g. "1.2"."""

    title: str

    description: str = ""
    """Free text preceding the acceptance criteria."""

    acceptance_criteria: tuple[str, ...] = ()
    """One comma-joined Given/When/Then string per criterion block."""


@dataclass
class ParseResult:
    """Stories extracted from a document plus advisory warnings."""

    stories: list[Story] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    @property
    def story_count(self) -> int:
        """Number of stories extracted."""
        return len(self.stories)
