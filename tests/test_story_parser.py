"""
Unit tests for the story extractor.

Tests epic/story header recognition, description and acceptance criteria
splitting, warnings for malformed stories, and tolerance of odd input.
"""

from specbridge.core.stories import (
    ParserState,
    StoryParser,
    parse_stories,
    parse_stories_with_warnings,
)


class TestBasicParsing:
    """Test extraction from a well-formed document."""

    def test_extracts_stories_in_order(self, stories_text):
        """Test that every story header becomes a story, in document order."""
        stories = parse_stories(stories_text)
        assert [s.id for s in stories] == ["1.1", "1.2"]
        assert [s.title for s in stories] == ["Login form", "Logout"]

    def test_epic_context_attached(self, stories_text):
        """Test that stories carry their epic title and description."""
        story = parse_stories(stories_text)[0]
        assert story.epic == "Authentication"
        assert story.epic_description == "Users can sign in and out."

    def test_description_stops_at_criteria_label(self, stories_text):
        """Test that the description excludes the criteria block."""
        story = parse_stories(stories_text)[0]
        assert story.description == "As a user, I want to sign in, So that my data is private."

    def test_criteria_joined_and_unbolded(self, stories_text):
        """Test that Given/When/Then lines form one comma-joined criterion."""
        story = parse_stories(stories_text)[0]
        assert story.acceptance_criteria == (
            "Given a registered user, When they submit valid credentials, "
            "Then they land on the dashboard",
        )

    def test_well_formed_document_has_no_warnings(self, stories_text):
        """Test that a clean document yields no warnings."""
        result = parse_stories_with_warnings(stories_text)
        assert result.warnings == []
        assert result.story_count == 2

    def test_empty_input(self):
        """Test that empty input yields nothing."""
        result = parse_stories_with_warnings("")
        assert result.stories == []
        assert result.warnings == []


class TestAcceptanceCriteria:
    """Test criteria block detection."""

    def test_multiple_criteria_blocks(self):
        """Test that each Given starts a new criterion."""
        content = """## Epic 1: Search

### Story 1.1: Find items

As a user, I want to search.

Given an index
When I search for "a"
Then I see matches
Given an empty index
When I search
Then I see nothing
"""
        story = parse_stories(content)[0]
        assert story.acceptance_criteria == (
            'Given an index, When I search for "a", Then I see matches',
            "Given an empty index, When I search, Then I see nothing",
        )
        assert story.description == "As a user, I want to search."

    def test_given_without_label_starts_criteria(self):
        """Test that a Given line alone marks the end of the description."""
        content = """## Epic 1: Search

### Story 1.1: Find items

Some description.
**Given** a query
**Then** results
"""
        story = parse_stories(content)[0]
        assert story.description == "Some description."
        assert story.acceptance_criteria == ("Given a query, Then results",)

    def test_label_case_insensitive(self):
        """Test that the criteria label is matched without regard to case."""
        content = """## Epic 1: Search

### Story 1.1: Find items

Description.

acceptance criteria:
Given a query
Then results
"""
        story = parse_stories(content)[0]
        assert story.description == "Description."
        assert len(story.acceptance_criteria) == 1

    def test_non_gwt_lines_ignored(self):
        """Test that list items and prose in the criteria block are skipped."""
        content = """## Epic 1: Search

### Story 1.1: Find items

Description.

**Acceptance Criteria:**

- see below
Given a query
some aside
Then results
"""
        story = parse_stories(content)[0]
        assert story.acceptance_criteria == ("Given a query, Then results",)


class TestWarnings:
    """Test advisory warnings for malformed stories."""

    def test_missing_criteria(self):
        """Test warning when a story has no acceptance criteria."""
        content = "## Epic 1: A\n\n### Story 1.1: Thing\n\nJust text.\n"
        result = parse_stories_with_warnings(content)
        assert result.story_count == 1
        assert result.warnings == ['Story 1.1: "Thing" has no acceptance criteria']

    def test_missing_description(self):
        """Test warning when a story has no description."""
        content = "## Epic 1: A\n\n### Story 1.1: Thing\n\nGiven x\nThen y\n"
        result = parse_stories_with_warnings(content)
        assert result.warnings == ['Story 1.1: "Thing" has no description']

    def test_malformed_id(self):
        """Test warning for ids that are not N.M."""
        content = "## Epic 1: A\n\n### Story 1: Thing\n\nText.\nGiven x\nThen y\n"
        result = parse_stories_with_warnings(content)
        assert result.stories[0].id == "1"
        assert result.warnings == ['Story "Thing" has malformed ID "1" (expected format: N.M)']

    def test_story_outside_epic(self):
        """Test warning for a story before any epic header."""
        content = "### Story 1.1: Orphan\n\nText.\nGiven x\nThen y\n"
        result = parse_stories_with_warnings(content)
        assert result.stories[0].epic == ""
        assert result.warnings == ['Story 1.1: "Orphan" is not under an epic']

    def test_warning_order_for_one_story(self):
        """Test that a bare story reports each problem."""
        content = "### Story 1: Bare\n"
        warnings = parse_stories_with_warnings(content).warnings
        assert len(warnings) == 4
        assert "malformed ID" in warnings[0]
        assert "no acceptance criteria" in warnings[1]
        assert "no description" in warnings[2]
        assert "not under an epic" in warnings[3]


class TestBoundaries:
    """Test heading boundaries and state transitions."""

    def test_other_heading_closes_story(self):
        """Test that an unrelated ### heading ends the story body."""
        content = """## Epic 1: A

### Story 1.1: First

Description.

### Notes

This text belongs to no story.
"""
        story = parse_stories(content)[0]
        assert story.description == "Description."

    def test_lines_after_closed_story_ignored(self):
        """Test that criteria lines after a story is closed attach to nothing."""
        parser = StoryParser()
        result = parser.parse("## Epic 1: A\n\n### Story 1.1: B\n\nText.\n\n### Notes\n\nGiven x\n")
        assert result.stories[0].acceptance_criteria == ()
        assert parser.state is ParserState.IDLE
        assert parser.draft is None

    def test_story_header_without_title_is_skipped(self):
        """Test that a story header with an empty title produces no story."""
        content = "## Epic 1: A\n\n### Story 1.1: \n\nText.\n\n### Story 1.2: Real\n\nText.\n"
        stories = parse_stories(content)
        assert [s.id for s in stories] == ["1.2"]

    def test_epic_switch(self):
        """Test that stories pick up the most recent epic."""
        content = """## Epic 1: First

### Story 1.1: A

Text.

## Epic 2: Second

Second goal.

### Story 2.1: B

Text.
"""
        stories = parse_stories(content)
        assert [s.epic for s in stories] == ["First", "Second"]
        assert stories[1].epic_description == "Second goal."

    def test_parser_ends_in_criteria_state(self):
        """Test the state machine position after the last criteria line."""
        parser = StoryParser()
        parser.parse("## Epic 1: A\n\n### Story 1.1: B\n\nText.\nGiven x\n")
        assert parser.state is ParserState.IN_STORY_CRITERIA

    def test_count_matches_titled_headers(self):
        """Test that story count equals the number of titled story headers."""
        content = "\n".join(
            f"## Epic {e}: E{e}\n\n" + "\n".join(f"### Story {e}.{s}: S{s}\n\nText.\n" for s in range(3))
            for e in range(1, 4)
        )
        assert len(parse_stories(content)) == 9
