"""
Phase state persistence.

Reads tolerate a missing or corrupt file (the project simply has no state
yet). Writes are atomic so a crash never leaves half a JSON document behind.
"""

import logging
from pathlib import Path

from pydantic import ValidationError

from specbridge.core.state.models import PhaseState
from specbridge.utils.fs import atomic_write_text

logger = logging.getLogger(__name__)

STATE_FILE = Path(".specbridge") / "state" / "current-phase.json"


def get_state_path(project_dir: Path, state_file: str | Path = STATE_FILE) -> Path:
    """Absolute path of the phase state file for a project."""
    return project_dir / state_file


def read_phase_state(project_dir: Path, state_file: str | Path = STATE_FILE) -> PhaseState | None:
    """
    Read the phase state.

    Returns:
        The stored PhaseState, or None when the file is missing or invalid
    """
    path = get_state_path(project_dir, state_file)
    try:
        content = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        logger.debug("No phase state at %s", path)
        return None
    except (OSError, UnicodeDecodeError) as e:
        logger.debug("Could not read phase state %s: %s", path, e)
        return None

    try:
        return PhaseState.model_validate_json(content)
    except ValidationError as e:
        logger.debug("Ignoring invalid phase state %s: %s", path, e)
        return None


def write_phase_state(
    project_dir: Path, state: PhaseState, state_file: str | Path = STATE_FILE
) -> Path:
    """
    Write the phase state atomically.

    Returns:
        Path the state was written to
    """
    path = get_state_path(project_dir, state_file)
    atomic_write_text(path, state.model_dump_json(indent=2) + "\n")
    logger.debug("Wrote phase state %s (phase %d, %s)", path, state.current_phase, state.status)
    return path
