"""
.env loading for the SPECBRIDGE_* overrides.

Two files are read, user first and project second, so a project value wins
over a user value:

  ~/.config/specbridge/.env  (or $XDG_CONFIG_HOME/specbridge/.env)
  <project>/.env

Neither file overrides a variable that was already set before loading.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Iterable

from dotenv import dotenv_values

from .loader import get_xdg_config_home

logger = logging.getLogger(__name__)


def get_env_file_paths(project_dir: Path) -> list[Path]:
    """.env files for a project, in load order."""
    return [get_xdg_config_home() / "specbridge" / ".env", project_dir / ".env"]


def load_layered_env(
    project_dir: Path | None = None,
    env_files: Iterable[Path] | None = None,
) -> set[str]:
    """
    Export the variables of the user and project .env files.

    Args:
        project_dir: Project whose .env is read (defaults to cwd)
        env_files: Files to read instead of the default pair, lowest priority first

    Returns:
        Names of the variables this call exported
    """
    if env_files is None:
        env_files = get_env_file_paths(project_dir or Path.cwd())

    merged: dict[str, str] = {}
    for path in env_files:
        if not path.is_file():
            continue
        values = dotenv_values(path)
        merged.update({key: value for key, value in values.items() if value is not None})
        logger.debug("Read %d variables from %s", len(values), path)

    exported = {key for key in merged if key not in os.environ}
    for key in exported:
        os.environ[key] = merged[key]
    return exported
