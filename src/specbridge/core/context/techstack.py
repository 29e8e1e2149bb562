"""
Technology stack detection from an architecture document.

Only the "Tech Stack" / "Technology Stack" / "Stack" section is inspected.
The detected commands replace the fenced bash blocks under the fixed
headings of the agent-instructions document.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

_STACK_HEADING_RE = re.compile(r"^##\s+(?:Tech(?:nology)?\s+Stack|Stack)", re.IGNORECASE | re.MULTILINE)
_NEXT_H2_RE = re.compile(r"^##\s", re.MULTILINE)


@dataclass(frozen=True)
class TechStack:
    """Commands for working on a project."""

    setup: str
    test: str
    build: str
    dev: str


def _has(section: str, *words: str) -> bool:
    return any(re.search(rf"\b{word}\b", section, re.IGNORECASE) for word in words)


def _stack_section(content: str) -> str | None:
    match = _STACK_HEADING_RE.search(content)
    if not match:
        return None
    rest = content[match.start() :]
    # Skip the heading line itself when looking for the next section
    next_heading = _NEXT_H2_RE.search(rest, 1)
    return rest[: next_heading.start()] if next_heading else rest


def detect_tech_stack(content: str) -> TechStack | None:
    """
    Detect the project's ecosystem from its architecture document.

    Returns:
        The commands for the first recognized ecosystem (Node, Python, Rust,
        Go, in that order), or None when no stack section or no known
        keyword is present.
    """
    section = _stack_section(content)
    if section is None:
        return None

    if _has(section, r"node(?:\.js)?", "typescript", "npm"):
        test = "npm test"
        if _has(section, "vitest"):
            test = "npx vitest run"
        elif _has(section, "jest"):
            test = "npx jest"
        elif _has(section, "mocha"):
            test = "npx mocha"
        build = "npx tsc" if _has(section, "tsc") else "npm run build"
        return TechStack(setup="npm install", test=test, build=build, dev="npm run dev")

    if _has(section, "python", "pip"):
        test = "python -m pytest"
        if _has(section, "pytest"):
            test = "pytest"
        elif _has(section, "unittest"):
            test = "python -m unittest discover"
        return TechStack(
            setup="pip install -r requirements.txt",
            test=test,
            build="python -m build",
            dev="python -m uvicorn main:app --reload",
        )

    if _has(section, "rust", "cargo"):
        return TechStack(
            setup="cargo build",
            test="cargo test",
            build="cargo build --release",
            dev="cargo run",
        )

    if _has(section, "go", "golang"):
        return TechStack(
            setup="go mod download",
            test="go test ./...",
            build="go build ./...",
            dev="go run .",
        )

    return None


def customize_agent_instructions(template: str, stack: TechStack) -> str:
    """Replace the bash block under each command heading with the stack's command."""
    sections = (
        ("Project Setup", stack.setup),
        ("Running Tests", stack.test),
        ("Build Commands", stack.build),
        ("Development Server", stack.dev),
    )

    result = template
    for heading, command in sections:
        pattern = re.compile(
            rf"(## {re.escape(heading)}\s*\n)```bash\n[\s\S]*?```", re.MULTILINE
        )
        result = pattern.sub(
            lambda m, command=command: f"{m.group(1)}```bash\n{command}\n```", result, count=1
        )

    return result
