"""
Planning-artifacts discovery and validation.
"""

import logging
import re
from pathlib import Path

from specbridge.core.transition.errors import ArtifactsNotFoundError, StoriesFileNotFoundError

logger = logging.getLogger(__name__)

STORIES_FILE_RE = re.compile(r"^(epics[-_]?(and[-_]?)?)?stor(y|ies)([-_]\d+)?\.md$", re.IGNORECASE)
_EPIC_RE = re.compile(r"epic", re.IGNORECASE)
_PRD_RE = re.compile(r"prd", re.IGNORECASE)
_ARCHITECTURE_RE = re.compile(r"architect", re.IGNORECASE)
_READINESS_RE = re.compile(r"readiness", re.IGNORECASE)
_NO_GO_RE = re.compile(r"NO[-\s]?GO", re.IGNORECASE)


def find_artifacts_dir(project_dir: Path, candidates: list[str]) -> Path:
    """
    Locate the planning-artifacts directory.

    Args:
        project_dir: Project root
        candidates: Relative directories to try, in order

    Returns:
        The first candidate that exists

    Raises:
        ArtifactsNotFoundError: If no candidate exists
    """
    for candidate in candidates:
        path = project_dir / candidate
        logger.debug("Checking artifacts dir: %s", path)
        if path.is_dir():
            logger.debug("Found artifacts at: %s", path)
            return path

    logger.debug("No artifacts found. Checked: %s", ", ".join(candidates))
    raise ArtifactsNotFoundError(candidates)


def list_artifacts(artifacts_dir: Path) -> list[str]:
    """Names of the entries directly inside the artifacts directory, sorted."""
    return sorted(entry.name for entry in artifacts_dir.iterdir())


def is_stories_file(name: str) -> bool:
    return bool(STORIES_FILE_RE.match(name) or _EPIC_RE.search(name))


def find_stories_file(artifacts_dir: Path, files: list[str]) -> Path:
    """
    Pick the epics/stories document.

    Raises:
        StoriesFileNotFoundError: If no file name matches
    """
    for name in files:
        if is_stories_file(name) and (artifacts_dir / name).is_file():
            logger.debug("Using stories file: %s", name)
            return artifacts_dir / name

    logger.debug("Files in artifacts dir: %s", ", ".join(files))
    raise StoriesFileNotFoundError(str(artifacts_dir), files)


def find_architecture_file(files: list[str]) -> str | None:
    return next((name for name in files if _ARCHITECTURE_RE.search(name)), None)


def validate_artifacts(files: list[str], artifacts_dir: Path) -> list[str]:
    """
    Check the planning artifacts for gaps an implementer should know about.

    Returns:
        Warnings for a missing PRD, a missing architecture document, and a
        readiness report that declares NO-GO
    """
    warnings: list[str] = []

    if not any(_PRD_RE.search(name) for name in files):
        warnings.append("No PRD document found in planning artifacts")

    if find_architecture_file(files) is None:
        warnings.append("No architecture document found in planning artifacts")

    readiness = next((name for name in files if _READINESS_RE.search(name)), None)
    if readiness:
        try:
            content = (artifacts_dir / readiness).read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            logger.debug("Could not read readiness report %s: %s", readiness, e)
        else:
            if _NO_GO_RE.search(content):
                warnings.append("Readiness report indicates NO-GO status")

    for warning in warnings:
        logger.warning(warning)
    return warnings
