"""
Fatal transition errors.

Each of these stops a transition before anything is written. Advisory
problems never raise; they are returned as warnings on the result.
"""


class TransitionError(Exception):
    """Base exception for transition errors."""

    pass


class ArtifactsNotFoundError(TransitionError):
    """Raised when no planning-artifacts directory exists."""

    def __init__(self, candidates: list[str]) -> None:
        self.candidates = candidates
        super().__init__(
            "No BMAD artifacts found. Run BMAD planning phases first "
            "(at minimum: Create PRD, Create Architecture, Create Epics and Stories)."
        )


class StoriesFileNotFoundError(TransitionError):
    """Raised when the artifacts directory has no epics/stories document."""

    def __init__(self, artifacts_dir: str, available: list[str]) -> None:
        self.artifacts_dir = artifacts_dir
        self.available = available
        super().__init__(
            f"No epics/stories file found in {artifacts_dir}. "
            f"Available files: {', '.join(available)}. "
            "Run 'CE' (Create Epics and Stories) first."
        )


class NoStoriesFoundError(TransitionError):
    """Raised when the stories document yields zero stories."""

    def __init__(self, stories_file: str) -> None:
        self.stories_file = stories_file
        super().__init__(
            "No stories parsed from the epics file. "
            "Ensure stories follow the format: ### Story N.M: Title"
        )
