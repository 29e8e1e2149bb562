"""
Spec file classification, indexing and change tracking.

Spec files are the planning documents copied into the loop's snapshot
directory. Each is classified by topic (prd, architecture, stories, ...),
given a reading priority, and listed in SPECS_INDEX.md in reading order.
"""

from specbridge.core.specs.changelog import diff_specs_trees, render_changelog
from specbridge.core.specs.classifier import (
    CLASSIFICATION_RULES,
    classify_spec_file,
    extract_description,
    priority_for,
)
from specbridge.core.specs.index import (
    LARGE_FILE_THRESHOLD,
    build_specs_index,
    collect_markdown_files,
    render_specs_index,
)
from specbridge.core.specs.models import (
    SpecFileMetadata,
    SpecFileType,
    SpecPriority,
    SpecsChange,
    SpecsIndex,
)

__all__ = [
    # Models
    "SpecFileMetadata",
    "SpecFileType",
    "SpecPriority",
    "SpecsChange",
    "SpecsIndex",
    # Classification
    "CLASSIFICATION_RULES",
    "classify_spec_file",
    "extract_description",
    "priority_for",
    # Index
    "LARGE_FILE_THRESHOLD",
    "build_specs_index",
    "collect_markdown_files",
    "render_specs_index",
    # Changelog
    "diff_specs_trees",
    "render_changelog",
]
