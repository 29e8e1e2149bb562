"""
Project context synthesis: section extraction, the briefing document,
working instructions and agent-instruction customization.
"""

from specbridge.core.context.briefing import (
    BRIEFING_SECTIONS,
    CONTEXT_FIELDS,
    ContextField,
    extract_project_context,
    render_briefing,
    truncation_warnings,
)
from specbridge.core.context.instructions import (
    PROJECT_NAME_PLACEHOLDER,
    build_working_instructions,
    fill_project_name,
    render_working_instructions,
)
from specbridge.core.context.models import ProjectContext
from specbridge.core.context.sections import (
    SECTION_EXTRACT_MAX_LENGTH,
    SectionExtract,
    TruncationInfo,
    extract_first_section,
    extract_section,
)
from specbridge.core.context.techstack import (
    TechStack,
    customize_agent_instructions,
    detect_tech_stack,
)

__all__ = [
    "BRIEFING_SECTIONS",
    "CONTEXT_FIELDS",
    "ContextField",
    "PROJECT_NAME_PLACEHOLDER",
    "ProjectContext",
    "SECTION_EXTRACT_MAX_LENGTH",
    "SectionExtract",
    "TechStack",
    "TruncationInfo",
    "build_working_instructions",
    "customize_agent_instructions",
    "detect_tech_stack",
    "extract_first_section",
    "extract_project_context",
    "extract_section",
    "fill_project_name",
    "render_briefing",
    "render_working_instructions",
    "truncation_warnings",
]
