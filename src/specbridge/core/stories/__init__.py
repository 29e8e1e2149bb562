"""
Story extraction from epics/stories planning documents.
"""

from specbridge.core.stories.models import ParseResult, Story
from specbridge.core.stories.parser import (
    ParserState,
    StoryParser,
    parse_stories,
    parse_stories_with_warnings,
)

__all__ = [
    "ParseResult",
    "ParserState",
    "Story",
    "StoryParser",
    "parse_stories",
    "parse_stories_with_warnings",
]
