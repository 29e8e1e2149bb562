"""
Heading-bounded section extraction.

A section is the body under a matched heading, up to the next heading at the
same or a shallower level, so a ``##`` match includes its ``###``
subsections.
"""

from __future__ import annotations

import re
from collections.abc import Sequence
from dataclasses import dataclass

SECTION_EXTRACT_MAX_LENGTH = 5000

_HEADING_LEVEL_RE = re.compile(r"^(#{1,6})\s")


@dataclass(frozen=True)
class SectionExtract:
    """Body of one extracted section."""

    content: str = ""
    was_truncated: bool = False
    original_length: int = 0


@dataclass(frozen=True)
class TruncationInfo:
    """A briefing field that was clipped to the maximum length."""

    field: str
    original_length: int
    truncated_to: int


def extract_section(
    content: str,
    heading_pattern: re.Pattern[str],
    max_length: int = SECTION_EXTRACT_MAX_LENGTH,
) -> SectionExtract:
    """
    Extract the body of the first heading matching ``heading_pattern``.

    Args:
        content: Markdown document.
        heading_pattern: Compiled pattern matching the heading line from its
            leading ``#`` (use re.MULTILINE with ``^``).
        max_length: Body length cap; longer bodies are clipped.

    Returns:
        SectionExtract; empty when the heading is absent.

    Example:
        >>> doc = "## Goals\\nShip it.\\n### Detail\\nMore.\\n## Next\\n"
        >>> extract_section(doc, re.compile(r"^##\\s+Goals", re.M)).content
        'Ship it.\\n### Detail\\nMore.'
    """
    match = heading_pattern.search(content)
    if not match:
        return SectionExtract()

    level_match = _HEADING_LEVEL_RE.match(match.group(0))
    level = len(level_match.group(1)) if level_match else 2

    rest = content[match.end() :]
    next_heading = re.search(rf"^#{{1,{level}}}\s", rest, re.MULTILINE)
    body = rest[: next_heading.start()] if next_heading else rest

    trimmed = body.strip()
    if len(trimmed) <= max_length:
        return SectionExtract(content=trimmed, original_length=len(trimmed))
    return SectionExtract(
        content=trimmed[:max_length],
        was_truncated=True,
        original_length=len(trimmed),
    )


def extract_first_section(
    content: str,
    patterns: Sequence[re.Pattern[str]],
    max_length: int = SECTION_EXTRACT_MAX_LENGTH,
) -> SectionExtract:
    """Try each heading pattern in order and return the first non-empty body."""
    for pattern in patterns:
        result = extract_section(content, pattern, max_length)
        if result.content:
            return result
    return SectionExtract()
