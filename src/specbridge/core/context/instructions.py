"""
Working-instructions document for the implementation loop.

An existing document that still carries the project-name placeholder is
kept and only has the placeholder filled in; anything else is regenerated
from the template below with the project context embedded.
"""

from __future__ import annotations

from specbridge.core.context.models import ProjectContext

PROJECT_NAME_PLACEHOLDER = "[YOUR PROJECT NAME]"

# Embedded context sections, in output order
_CONTEXT_SECTIONS: tuple[tuple[str, str], ...] = (
    ("project_goals", "Project Goals"),
    ("success_metrics", "Success Metrics"),
    ("architecture_constraints", "Architecture Constraints"),
    ("scope_boundaries", "Scope"),
    ("technical_risks", "Technical Risks"),
    ("target_users", "Target Users"),
    ("non_functional_requirements", "Non-Functional Requirements"),
)

_TEMPLATE = """# Development Instructions

## Context
You are an autonomous development agent working on the {project_name} project.
You work one story at a time and follow test-driven development.
{context_block}
## Development Methodology

For each story in @fix_plan.md:
1. Read the story's inline acceptance criteria (lines starting with `> AC:`)
2. Write failing tests first (RED)
3. Implement the minimum code to pass them (GREEN)
4. Refactor while keeping tests green (REFACTOR)
5. Mark the story as complete in @fix_plan.md
6. Commit with a descriptive conventional commit message

## Specs Reading Strategy
1. Read SPECS_INDEX.md first for a prioritized overview of all spec files
2. Follow its reading order:
   - **Critical**: always read fully (PRD, architecture, stories)
   - **High**: read for implementation details (test design, readiness)
   - **Medium**: reference as needed (UX specs, sprint plans)
   - **Low**: optional background (brainstorming sessions)
3. For files marked [LARGE], scan headers first and read relevant sections

## Current Objectives
1. Read PROJECT_CONTEXT.md for goals, constraints and scope
2. Study specs/ following the reading order in SPECS_INDEX.md
3. Review @fix_plan.md for current priorities
4. Implement the highest priority story using TDD
5. Run the full test suite after each change
6. Update @fix_plan.md with your progress

## Key Principles
- ONE story per loop iteration
- Tests first, always
- Search the codebase before assuming something isn't implemented
- Commit working changes with descriptive messages

## File Structure
- SPECS_INDEX.md: prioritized index of all spec files
- PROJECT_CONTEXT.md: project goals, constraints and scope
- SPECS_CHANGELOG.md: what changed in specs/ since the last transition
- specs/: project specifications (PRD, architecture, stories)
- @fix_plan.md: implementation checklist (one entry per story)
- @AGENT.md: build and run instructions
- PROMPT.md: this file

## Current Task
Follow @fix_plan.md and implement the next incomplete story using TDD.
"""


def _context_block(context: ProjectContext | None) -> str:
    if context is None:
        return ""
    sections = [
        f"### {heading}\n{getattr(context, field_name)}"
        for field_name, heading in _CONTEXT_SECTIONS
        if getattr(context, field_name)
    ]
    if not sections:
        return ""
    return "\n## Project Specifications (CRITICAL - READ THIS)\n\n" + "\n\n".join(sections) + "\n"


def render_working_instructions(project_name: str, context: ProjectContext | None = None) -> str:
    """Render the working-instructions document from the built-in template."""
    return _TEMPLATE.format(project_name=project_name, context_block=_context_block(context))


def fill_project_name(existing: str, project_name: str) -> str | None:
    """
    Substitute the project-name placeholder in an existing document.

    Returns:
        The updated text, or None if the document has no placeholder.
    """
    if PROJECT_NAME_PLACEHOLDER not in existing:
        return None
    return existing.replace(PROJECT_NAME_PLACEHOLDER, project_name)


def build_working_instructions(
    existing: str | None,
    project_name: str,
    context: ProjectContext | None,
) -> str:
    """Fill the placeholder of ``existing`` when possible, else regenerate."""
    if existing is not None:
        filled = fill_project_name(existing, project_name)
        if filled is not None:
            return filled
    return render_working_instructions(project_name, context)
