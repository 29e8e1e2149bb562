"""
Planning-to-implementation transition.

Converts planning documents (PRD, architecture, epics and stories) into the
files an autonomous implementation loop consumes: a checklist with preserved
progress, a spec snapshot with index and changelog, a project briefing,
working instructions and tailored agent instructions.
"""

from specbridge.core.transition.arena import SnapshotArena, SnapshotError
from specbridge.core.transition.artifacts import (
    find_artifacts_dir,
    find_stories_file,
    is_stories_file,
    validate_artifacts,
)
from specbridge.core.transition.errors import (
    ArtifactsNotFoundError,
    NoStoriesFoundError,
    StoriesFileNotFoundError,
    TransitionError,
)
from specbridge.core.transition.models import TransitionResult
from specbridge.core.transition.orchestrator import TransitionOrchestrator, run_transition

__all__ = [
    # Orchestration
    "TransitionOrchestrator",
    "TransitionResult",
    "run_transition",
    # Artifacts
    "find_artifacts_dir",
    "find_stories_file",
    "is_stories_file",
    "validate_artifacts",
    # Snapshot
    "SnapshotArena",
    "SnapshotError",
    # Errors
    "ArtifactsNotFoundError",
    "NoStoriesFoundError",
    "StoriesFileNotFoundError",
    "TransitionError",
]
