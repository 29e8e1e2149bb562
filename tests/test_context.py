"""
Unit tests for project context synthesis.

Tests heading-bounded section extraction and truncation, briefing field
extraction from PRD/architecture documents, the briefing and
working-instructions documents, and tech stack detection.
"""

import re

from specbridge.core.context import (
    PROJECT_NAME_PLACEHOLDER,
    ProjectContext,
    TechStack,
    TruncationInfo,
    build_working_instructions,
    customize_agent_instructions,
    detect_tech_stack,
    extract_first_section,
    extract_project_context,
    extract_section,
    fill_project_name,
    render_briefing,
    render_working_instructions,
    truncation_warnings,
)


def heading(text: str) -> re.Pattern[str]:
    return re.compile(rf"^##\s+{text}", re.MULTILINE)


# ==============================================================================
# Section Extraction
# ==============================================================================


class TestExtractSection:
    """Test heading-bounded extraction."""

    def test_extracts_body(self):
        """Test that the body runs to the next heading of the same level."""
        doc = "## Goals\n\nShip it.\n\n## Next\n\nLater."
        result = extract_section(doc, heading("Goals"))
        assert result.content == "Ship it."
        assert not result.was_truncated

    def test_includes_subsections(self):
        """Test that deeper headings stay inside the section."""
        doc = "## Goals\nShip it.\n### Detail\nMore.\n## Next\n"
        assert extract_section(doc, heading("Goals")).content == "Ship it.\n### Detail\nMore."

    def test_runs_to_end_of_document(self):
        """Test a section that is the last one in the document."""
        assert extract_section("## Goals\nLast.\n", heading("Goals")).content == "Last."

    def test_missing_heading(self):
        """Test that a missing heading gives an empty result."""
        result = extract_section("## Other\ntext", heading("Goals"))
        assert result.content == ""
        assert result.original_length == 0

    def test_truncates_to_exact_cap(self):
        """Test that long bodies are clipped to the cap and report the original length."""
        doc = "## Goals\n" + "x" * 100
        result = extract_section(doc, heading("Goals"), max_length=10)
        assert result.content == "x" * 10
        assert result.was_truncated
        assert result.original_length == 100

    def test_first_section_uses_pattern_order(self):
        """Test that the first pattern with content wins."""
        doc = "## Vision\nSee far.\n\n## Goals\nShip.\n"
        patterns = (heading("Executive Summary"), heading("Goals"), heading("Vision"))
        assert extract_first_section(doc, patterns).content == "Ship."


# ==============================================================================
# Project Context and Briefing
# ==============================================================================


class TestExtractProjectContext:
    """Test briefing field extraction from planning documents."""

    def test_fields_from_sources(self, prd_text, architecture_text, stories_text):
        """Test that PRD and architecture fields come from their documents."""
        context, truncated = extract_project_context(
            {
                "prd.md": prd_text,
                "architecture.md": architecture_text,
                "epics-and-stories.md": stories_text,
            }
        )
        assert context.project_goals == "Acme helps teams ship faster."
        assert context.success_metrics == "- 100 active teams"
        assert context.scope_boundaries == "Web app only."
        assert context.target_users == "Small engineering teams."
        assert context.architecture_constraints == "Must run on a single VM."
        assert context.technical_risks == "Vendor lock-in."
        assert context.non_functional_requirements == ""
        assert truncated == []

    def test_falls_back_to_all_content(self):
        """Test that a missing PRD falls back to the architecture text."""
        context, _ = extract_project_context(
            {"architecture.md": "## Goals\nFrom architecture.\n"}
        )
        assert context.project_goals == "From architecture."

    def test_no_documents(self):
        """Test that no documents yield an empty context."""
        context, truncated = extract_project_context({})
        assert context.is_empty
        assert truncated == []

    def test_truncation_reported(self):
        """Test that clipped fields are reported with their lengths."""
        context, truncated = extract_project_context(
            {"prd.md": "## Vision\n" + "v" * 50}, max_length=20
        )
        assert context.project_goals == "v" * 20
        assert truncated == [
            TruncationInfo(field="project_goals", original_length=50, truncated_to=20)
        ]
        assert truncation_warnings(truncated) == [
            "project_goals was truncated from 50 to 20 characters. Some content may be missing."
        ]


class TestRenderBriefing:
    """Test the briefing document."""

    def test_sections_in_order(self):
        """Test that non-empty fields render in fixed order."""
        context = ProjectContext(technical_risks="Risky.", project_goals="Goal.")
        content = render_briefing(context, "acme")
        assert content.startswith("# acme - Project Context\n")
        assert content.index("## Project Goals") < content.index("## Technical Risks")
        assert "## Success Metrics" not in content

    def test_empty_context(self):
        """Test that an empty context renders only the title."""
        assert render_briefing(ProjectContext(), "acme").strip() == "# acme - Project Context"


# ==============================================================================
# Working Instructions
# ==============================================================================


class TestWorkingInstructions:
    """Test the working-instructions document."""

    def test_fill_placeholder(self):
        """Test that every placeholder occurrence is replaced."""
        existing = f"# {PROJECT_NAME_PLACEHOLDER}\nWorking on {PROJECT_NAME_PLACEHOLDER}.\n"
        assert fill_project_name(existing, "acme") == "# acme\nWorking on acme.\n"

    def test_fill_without_placeholder(self):
        """Test that a document without the placeholder is not filled."""
        assert fill_project_name("# Custom\n", "acme") is None

    def test_template_without_context(self):
        """Test rendering with no project context."""
        content = render_working_instructions("acme")
        assert "the acme project" in content
        assert "Project Specifications" not in content

    def test_template_embeds_context(self):
        """Test that context fields are embedded."""
        content = render_working_instructions("acme", ProjectContext(project_goals="Ship fast."))
        assert "## Project Specifications (CRITICAL - READ THIS)" in content
        assert "### Project Goals\nShip fast." in content

    def test_build_prefers_placeholder_fill(self):
        """Test that an existing template with a placeholder is kept."""
        existing = f"Custom prompt for {PROJECT_NAME_PLACEHOLDER}"
        assert build_working_instructions(existing, "acme", None) == "Custom prompt for acme"

    def test_build_regenerates_otherwise(self):
        """Test that an existing document without placeholder is regenerated."""
        content = build_working_instructions("old text", "acme", None)
        assert content == render_working_instructions("acme")


# ==============================================================================
# Tech Stack
# ==============================================================================


class TestDetectTechStack:
    """Test ecosystem detection from an architecture document."""

    def test_python_with_pytest(self, architecture_text):
        """Test Python detection with pytest as the runner."""
        stack = detect_tech_stack(architecture_text)
        assert stack is not None
        assert stack.test == "pytest"
        assert stack.setup == "pip install -r requirements.txt"

    def test_node_with_vitest(self):
        """Test Node detection with a named test runner."""
        stack = detect_tech_stack("## Technology Stack\n\n- Node.js, TypeScript\n- Vitest\n")
        assert stack == TechStack(
            setup="npm install", test="npx vitest run", build="npm run build", dev="npm run dev"
        )

    def test_rust(self):
        """Test Rust detection."""
        stack = detect_tech_stack("## Stack\n\nRust with cargo.\n")
        assert stack is not None
        assert stack.test == "cargo test"

    def test_only_stack_section_inspected(self):
        """Test that keywords outside the stack section are ignored."""
        doc = "## Overview\n\nWe considered Python.\n\n## Tech Stack\n\nCOBOL.\n\n## Later\n\nnpm\n"
        assert detect_tech_stack(doc) is None

    def test_no_stack_section(self):
        """Test that a document without a stack section yields None."""
        assert detect_tech_stack("## Overview\n\nPython everywhere.\n") is None


class TestCustomizeAgentInstructions:
    """Test rewriting command blocks in the agent instructions."""

    def test_replaces_blocks(self, agent_text):
        """Test that each command block gets the stack's command."""
        stack = TechStack(setup="make deps", test="make test", build="make", dev="make run")
        content = customize_agent_instructions(agent_text, stack)
        assert "## Project Setup\n```bash\nmake deps\n```" in content
        assert "## Running Tests\n```bash\nmake test\n```" in content
        assert "## Build Commands\n```bash\nmake\n```" in content
        assert "## Development Server\n```bash\nmake run\n```" in content
        assert "echo" not in content

    def test_missing_headings_left_alone(self):
        """Test that a template without the headings is unchanged."""
        template = "# Agent\n\nNothing to replace.\n"
        stack = TechStack(setup="a", test="b", build="c", dev="d")
        assert customize_agent_instructions(template, stack) == template
