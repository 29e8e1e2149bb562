"""
Checklist rendering.

The checklist is the human-editable markdown file the implementation loop
works through, one ``- [ ] Story <id>: <title>`` line per story::

    # Implementation Checklist

    ## Stories to Implement

    ### Authentication
    > Goal: Users can sign in and out.

    - [ ] Story 1.1: Login form
      > As a user, I want to sign in
      > AC: Given a registered user, When they submit, Then they land on the dashboard
"""

from __future__ import annotations

import re
from collections.abc import Iterable

from specbridge.core.stories.models import Story

CHECKLIST_TITLE = "# Implementation Checklist"

# Split after a sentence-ending period, or before a ", So that" / ", I want" clause
_DESCRIPTION_SPLIT_RE = re.compile(r",\s*(?=So that|I want)|(?<=\.)\s+")

_NOTES = [
    "## Completed",
    "",
    "## Notes",
    "- Follow TDD methodology (red-green-refactor)",
    "- One story per loop iteration",
    "- Update this file after completing each story",
    "",
]


def split_description(description: str) -> list[str]:
    """Split a story description into sentence-like parts."""
    return [part.strip() for part in _DESCRIPTION_SPLIT_RE.split(description) if part.strip()]


def story_anchor(story_id: str) -> str:
    """Markdown anchor of a story heading, e.g. ``story-1-2``."""
    return "story-" + story_id.replace(".", "-")


def _group_by_epic(stories: Iterable[Story]) -> dict[str, list[Story]]:
    groups: dict[str, list[Story]] = {}
    for story in stories:
        groups.setdefault(story.epic, []).append(story)
    return groups


def render_checklist(stories: list[Story], spec_link: str | None = None) -> str:
    """
    Render stories as an unchecked checklist.

    Args:
        stories: Stories in document order.
        spec_link: Optional path of the stories document relative to the loop
            directory; when given, each item links to its story heading.

    Returns:
        Checklist markdown. Rendering is deterministic for a given input.
    """
    lines = [CHECKLIST_TITLE, "", "## Stories to Implement", ""]

    for epic, epic_stories in _group_by_epic(stories).items():
        if epic:
            lines.append(f"### {epic}")
            goal = epic_stories[0].epic_description
            if goal:
                lines.append(f"> Goal: {goal}")
            lines.append("")

        for story in epic_stories:
            lines.append(f"- [ ] Story {story.id}: {story.title}")
            for part in split_description(story.description):
                lines.append(f"  > {part}")
            for criterion in story.acceptance_criteria:
                lines.append(f"  > AC: {criterion}")
            if spec_link:
                lines.append(f"  > Spec: {spec_link}#{story_anchor(story.id)}")

        lines.append("")

    lines.extend(_NOTES)
    return "\n".join(lines)
