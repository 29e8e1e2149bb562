"""
Progress-preserving checklist merge.

Completion marks survive regeneration by story id only: titles may change
between planning passes, ids are the contract. Two detectors compare the
prior checklist with the new story set and report completed work that has
disappeared (orphaned) or appears to have moved to a new id (renumbered).
"""

from __future__ import annotations

import logging
import re

from specbridge.core.checklist.generator import render_checklist
from specbridge.core.checklist.models import ChecklistItem, ChecklistMerge
from specbridge.core.stories.models import Story

logger = logging.getLogger(__name__)

_ITEM_RE = re.compile(r"^\s*-\s*\[([ xX])\]\s*Story\s+(\d+\.\d+):[ \t]*(.*)$", re.MULTILINE)
_UNCHECKED_ITEM_RE = re.compile(r"^(\s*-\s*)\[ \](\s*Story\s+(\d+\.\d+):)", re.MULTILINE)
_CHECKED_RE = re.compile(r"^\s*-\s*\[x\]", re.MULTILINE | re.IGNORECASE)


def parse_checklist(content: str) -> list[ChecklistItem]:
    """
    Read story items back from a checklist.

    Lines that do not look like story items are ignored, so a damaged or
    hand-edited file yields whatever items are still recognizable.
    """
    return [
        ChecklistItem(
            id=match.group(2),
            completed=match.group(1).lower() == "x",
            title=match.group(3).strip(),
        )
        for match in _ITEM_RE.finditer(content)
    ]


def has_checklist_progress(content: str) -> bool:
    """Whether any checklist line is checked."""
    return bool(_CHECKED_RE.search(content))


def merge_checklist_progress(rendered: str, completed_ids: set[str]) -> str:
    """
    Check every rendered item whose id is in ``completed_ids``.

    Example:
        >>> merge_checklist_progress("- [ ] Story 1.1: Login", {"1.1"})
        '- [x] Story 1.1: Login'
    """

    def _check(match: re.Match[str]) -> str:
        if match.group(3) in completed_ids:
            return f"{match.group(1)}[x]{match.group(2)}"
        return match.group(0)

    return _UNCHECKED_ITEM_RE.sub(_check, rendered)


def detect_orphaned_completions(
    prior_items: list[ChecklistItem], new_ids: set[str]
) -> list[str]:
    """Warn about completed items whose id no longer exists."""
    warnings = []
    for item in prior_items:
        if item.completed and item.id not in new_ids:
            warnings.append(
                f'Completed story {item.id} ("{item.title}") was removed from the '
                "planning documents; its recorded progress is orphaned"
            )
    return warnings


def detect_renumbered_stories(prior_items: list[ChecklistItem], stories: list[Story]) -> list[str]:
    """
    Warn about completed items whose title now appears under another id.

    Titles must match exactly: a title edited in the same pass as an id
    change is reported as an orphan instead.
    """
    unchanged = {(story.id, story.title) for story in stories}
    warnings = []

    for item in prior_items:
        if not item.completed or not item.title:
            continue
        if (item.id, item.title) in unchanged:
            continue
        for story in stories:
            if story.id != item.id and story.title == item.title:
                warnings.append(
                    f'Completed story {item.id} ("{item.title}") may have been renumbered '
                    f"to {story.id}; its completion mark was not carried over"
                )
                break

    return warnings


def reconcile_checklist(
    stories: list[Story],
    prior_content: str | None,
    spec_link: str | None = None,
) -> ChecklistMerge:
    """
    Render a checklist for ``stories`` and carry over prior progress.

    Args:
        stories: Freshly extracted stories.
        prior_content: The previous checklist, or None if there is none.
        spec_link: Passed through to :func:`render_checklist`.

    Returns:
        ChecklistMerge with the merged content, the ids that were completed
        before, and orphan/renumber warnings.
    """
    rendered = render_checklist(stories, spec_link=spec_link)
    if prior_content is None:
        return ChecklistMerge(content=rendered)

    prior_items = parse_checklist(prior_content)
    completed_ids = {item.id for item in prior_items if item.completed}
    logger.debug("Found %d completed stories in existing checklist", len(completed_ids))

    new_ids = {story.id for story in stories}
    warnings = detect_orphaned_completions(prior_items, new_ids)
    warnings.extend(detect_renumbered_stories(prior_items, stories))
    for warning in warnings:
        logger.warning(warning)

    return ChecklistMerge(
        content=merge_checklist_progress(rendered, completed_ids),
        completed_ids=completed_ids,
        warnings=warnings,
    )
