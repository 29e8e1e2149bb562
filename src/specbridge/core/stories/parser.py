"""
Story extractor for epics/stories planning documents.

Turns markdown of the form::

    ## Epic 1: Authentication

    Users can sign in and out.

    ### Story 1.1: Login form

    As a user, I want to sign in, So that my data is private.

    **Acceptance Criteria:**

    **Given** a registered user
    **When** they submit valid credentials
    **Then** they land on the dashboard

into Story records. The scan is a single forward pass driven by an explicit
state machine; malformed input never raises, it only produces warnings.

Example:
    >>> result = parse_stories_with_warnings(content)
    >>> result.stories[0].id
    '1.1'
    >>> result.stories[0].acceptance_criteria
    ('Given a registered user, When they submit valid credentials, Then they land on the dashboard',)
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Enum

from specbridge.core.stories.models import ParseResult, Story

EPIC_HEADER_RE = re.compile(r"^##\s+Epic\s+\d+:\s+(.+)")
STORY_HEADER_RE = re.compile(r"^###\s+Story\s+([\d.]+):\s+(.+)")
# Any ## or ### heading closes an epic description or a story body
HEADING_RE = re.compile(r"^#{2,3}\s")
STORY_ID_RE = re.compile(r"^\d+\.\d+$")
AC_LABEL_RE = re.compile(r"^\*?\*?Acceptance Criteria\*?\*?:?", re.IGNORECASE)
GIVEN_LINE_RE = re.compile(r"^\*?\*?Given\*?\*?\s")
GWT_LINE_RE = re.compile(r"^\*?\*?(Given|When|Then)\*?\*?\s")


class ParserState(Enum):
    """Where the scanner currently is in the document."""

    IDLE = "idle"
    IN_EPIC = "in_epic"
    IN_STORY_DESCRIPTION = "in_story_description"
    IN_STORY_CRITERIA = "in_story_criteria"


@dataclass
class _EpicContext:
    title: str = ""
    description_lines: list[str] = field(default_factory=list)

    @property
    def description(self) -> str:
        return " ".join(self.description_lines)


@dataclass
class _StoryDraft:
    id: str
    title: str
    epic: str
    epic_description: str
    body: list[str] = field(default_factory=list)
    label_at: int | None = None
    first_given_at: int | None = None

    @property
    def criteria_start(self) -> int | None:
        # An explicit label wins over a Given line seen before it
        if self.label_at is not None:
            return self.label_at
        return self.first_given_at


def _strip_bold(text: str) -> str:
    return text.replace("**", "")


def _parse_criteria_blocks(lines: list[str]) -> list[str]:
    """Group Given/When/Then lines into comma-joined criteria."""
    criteria: list[str] = []
    current: list[str] = []

    for line in lines:
        trimmed = line.strip()
        if not trimmed:
            continue

        if GIVEN_LINE_RE.match(trimmed):
            if current:
                criteria.append(", ".join(_strip_bold(part) for part in current))
            current = [trimmed]
        elif GWT_LINE_RE.match(trimmed):
            current.append(trimmed)

    if current:
        criteria.append(", ".join(_strip_bold(part) for part in current))

    return criteria


class StoryParser:
    """
    Single-pass story extractor.

    States:
        IDLE: before the first epic, or after a heading that is neither
            an epic nor a story.
        IN_EPIC: collecting the epic description.
        IN_STORY_DESCRIPTION: inside a story body, before any criteria marker.
        IN_STORY_CRITERIA: inside a story body, at or after the criteria marker.

    A parser instance is single-use; call :meth:`parse` once.
    """

    def __init__(self) -> None:
        self.state = ParserState.IDLE
        self.epic = _EpicContext()
        self.draft: _StoryDraft | None = None
        self.result = ParseResult()

    def parse(self, content: str) -> ParseResult:
        for line in content.splitlines():
            self._feed(line)
        self._close_story()
        return self.result

    def _feed(self, line: str) -> None:
        epic_match = EPIC_HEADER_RE.match(line)
        if epic_match:
            self._close_story()
            self.epic = _EpicContext(title=epic_match.group(1).strip())
            self.state = ParserState.IN_EPIC
            return

        story_match = STORY_HEADER_RE.match(line)
        if story_match and story_match.group(2).strip():
            self._close_story()
            self._open_story(story_match.group(1), story_match.group(2).strip())
            return

        if HEADING_RE.match(line):
            # Includes story headers with an empty title: skipped without a record
            self._close_story()
            self.state = ParserState.IDLE
            return

        if self.state is ParserState.IN_EPIC:
            trimmed = line.strip()
            if trimmed:
                self.epic.description_lines.append(trimmed)
        elif self.draft is not None:
            self._feed_story_line(self.draft, line)

    def _open_story(self, story_id: str, title: str) -> None:
        self.draft = _StoryDraft(
            id=story_id,
            title=title,
            epic=self.epic.title,
            epic_description=self.epic.description,
        )
        self.state = ParserState.IN_STORY_DESCRIPTION

    def _feed_story_line(self, draft: _StoryDraft, line: str) -> None:
        index = len(draft.body)
        draft.body.append(line)

        trimmed = line.strip()
        if draft.label_at is None and AC_LABEL_RE.match(trimmed):
            draft.label_at = index
            self.state = ParserState.IN_STORY_CRITERIA
        elif draft.first_given_at is None and GIVEN_LINE_RE.match(trimmed):
            draft.first_given_at = index
            self.state = ParserState.IN_STORY_CRITERIA

    def _close_story(self) -> None:
        draft = self.draft
        if draft is None:
            return
        self.draft = None

        start = draft.criteria_start
        description_source = draft.body if start is None else draft.body[:start]
        description = " ".join(line.strip() for line in description_source if line.strip())
        criteria = _parse_criteria_blocks(draft.body[start:]) if start is not None else []

        warnings = self.result.warnings
        if not STORY_ID_RE.match(draft.id):
            warnings.append(
                f'Story "{draft.title}" has malformed ID "{draft.id}" (expected format: N.M)'
            )
        if not criteria:
            warnings.append(f'Story {draft.id}: "{draft.title}" has no acceptance criteria')
        if not description:
            warnings.append(f'Story {draft.id}: "{draft.title}" has no description')
        if not draft.epic:
            warnings.append(f'Story {draft.id}: "{draft.title}" is not under an epic')

        self.result.stories.append(
            Story(
                epic=draft.epic,
                epic_description=draft.epic_description,
                id=draft.id,
                title=draft.title,
                description=description,
                acceptance_criteria=tuple(criteria),
            )
        )


def parse_stories_with_warnings(content: str) -> ParseResult:
    """
    Parse an epics/stories document.

    Args:
        content: Raw markdown content.

    Returns:
        ParseResult with stories in document order and advisory warnings.
    """
    return StoryParser().parse(content)


def parse_stories(content: str) -> list[Story]:
    """Parse an epics/stories document, discarding warnings."""
    return parse_stories_with_warnings(content).stories
