"""
Checklist generation and progress-preserving merge.
"""

from specbridge.core.checklist.generator import (
    CHECKLIST_TITLE,
    render_checklist,
    split_description,
    story_anchor,
)
from specbridge.core.checklist.merger import (
    detect_orphaned_completions,
    detect_renumbered_stories,
    has_checklist_progress,
    merge_checklist_progress,
    parse_checklist,
    reconcile_checklist,
)
from specbridge.core.checklist.models import ChecklistItem, ChecklistMerge

__all__ = [
    "CHECKLIST_TITLE",
    "ChecklistItem",
    "ChecklistMerge",
    "detect_orphaned_completions",
    "detect_renumbered_stories",
    "has_checklist_progress",
    "merge_checklist_progress",
    "parse_checklist",
    "reconcile_checklist",
    "render_checklist",
    "split_description",
    "story_anchor",
]
