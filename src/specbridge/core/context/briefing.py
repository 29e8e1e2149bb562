"""
Project context extraction and the briefing document.

Product-facing fields are read from PRD documents, technical fields from
architecture and readiness documents. When the preferred source is empty the
concatenation of both is used instead.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from specbridge.core.context.models import ProjectContext
from specbridge.core.context.sections import (
    SECTION_EXTRACT_MAX_LENGTH,
    TruncationInfo,
    extract_first_section,
)

_PRD_NAME_RE = re.compile(r"prd", re.IGNORECASE)
_ARCHITECTURE_NAME_RE = re.compile(r"architect|readiness", re.IGNORECASE)


def _headings(*names: str) -> tuple[re.Pattern[str], ...]:
    return tuple(re.compile(rf"^##\s+{name}", re.MULTILINE) for name in names)


@dataclass(frozen=True)
class ContextField:
    """One ProjectContext field: its source role and heading synonyms in preference order."""

    name: str
    source: str
    patterns: tuple[re.Pattern[str], ...]


CONTEXT_FIELDS: tuple[ContextField, ...] = (
    ContextField(
        "project_goals",
        "prd",
        _headings("Executive Summary", "Vision", "Goals", "Project Goals"),
    ),
    ContextField(
        "success_metrics",
        "prd",
        _headings("Success (?:Criteria|Metrics)", "KPIs?", "Metrics", "Key Performance"),
    ),
    ContextField(
        "architecture_constraints",
        "architecture",
        _headings("Constraints", "ADR", "Architecture Decision"),
    ),
    ContextField(
        "technical_risks",
        "architecture",
        _headings("Risks", "Technical Risks", "Mitigations", "Risk"),
    ),
    ContextField(
        "scope_boundaries",
        "prd",
        _headings("Scope", "In Scope", "Out of Scope", "Boundaries"),
    ),
    ContextField(
        "target_users",
        "prd",
        _headings("Target Users", "Users", "Personas", "User Profiles"),
    ),
    ContextField(
        "non_functional_requirements",
        "prd",
        _headings("Non-Functional", "NFR", "Quality", "Quality Attributes"),
    ),
)

# Briefing headings, in output order
BRIEFING_SECTIONS: tuple[tuple[str, str], ...] = (
    ("project_goals", "Project Goals"),
    ("success_metrics", "Success Metrics"),
    ("architecture_constraints", "Architecture Constraints"),
    ("technical_risks", "Technical Risks"),
    ("scope_boundaries", "Scope Boundaries"),
    ("target_users", "Target Users"),
    ("non_functional_requirements", "Non-Functional Requirements"),
)


def extract_project_context(
    artifacts: dict[str, str],
    max_length: int = SECTION_EXTRACT_MAX_LENGTH,
) -> tuple[ProjectContext, list[TruncationInfo]]:
    """
    Build the ProjectContext from planning documents.

    Args:
        artifacts: Document text keyed by file name.
        max_length: Per-field length cap.

    Returns:
        The context and one TruncationInfo per clipped field.
    """
    prd_content = ""
    architecture_content = ""
    for name, text in artifacts.items():
        if _PRD_NAME_RE.search(name):
            prd_content += "\n" + text
        if _ARCHITECTURE_NAME_RE.search(name):
            architecture_content += "\n" + text

    all_content = prd_content + "\n" + architecture_content
    sources = {
        "prd": prd_content or all_content,
        "architecture": architecture_content or all_content,
    }

    values: dict[str, str] = {}
    truncated: list[TruncationInfo] = []
    for field in CONTEXT_FIELDS:
        result = extract_first_section(sources[field.source], field.patterns, max_length)
        values[field.name] = result.content
        if result.was_truncated:
            truncated.append(
                TruncationInfo(
                    field=field.name,
                    original_length=result.original_length,
                    truncated_to=len(result.content),
                )
            )

    return ProjectContext(**values), truncated


def truncation_warnings(truncated: list[TruncationInfo]) -> list[str]:
    """Human-readable warnings for clipped fields."""
    return [
        f"{info.field} was truncated from {info.original_length} to {info.truncated_to} "
        "characters. Some content may be missing."
        for info in truncated
    ]


def render_briefing(context: ProjectContext, project_name: str) -> str:
    """Render the briefing document; empty fields are omitted."""
    lines = [f"# {project_name} - Project Context", ""]
    for field_name, heading in BRIEFING_SECTIONS:
        content = getattr(context, field_name)
        if content:
            lines.extend([f"## {heading}", "", content, ""])
    return "\n".join(lines)
