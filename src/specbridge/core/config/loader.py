"""
Configuration loading with multi-layer merging.

Implements the configuration precedence chain:
    defaults < user config < project config < env vars

Loaded configs are plain values owned by the caller; nothing is cached at
module level.
"""

import json
import logging
import os
from pathlib import Path
from typing import Any

from .models import SpecbridgeConfig

logger = logging.getLogger(__name__)

PROJECT_CONFIG_FILE = ".specbridge.json"


def get_xdg_config_home() -> Path:
    """
    Get XDG config home directory.

    Returns:
        Path to config directory (defaults to ~/.config)
    """
    if xdg_home := os.environ.get("XDG_CONFIG_HOME"):
        return Path(xdg_home)
    return Path.home() / ".config"


def get_user_config_path() -> Path:
    """
    Get path to user configuration file.

    Returns:
        Path to ~/.config/specbridge/config.json (or XDG equivalent)
    """
    return get_xdg_config_home() / "specbridge" / "config.json"


def get_project_config_path(project_dir: Path | None = None) -> Path:
    """
    Get path to project configuration file.

    Args:
        project_dir: Project root (defaults to current directory)

    Returns:
        Path to .specbridge.json in the project root
    """
    if project_dir is None:
        project_dir = Path.cwd()
    return project_dir / PROJECT_CONFIG_FILE


def deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """
    Deep merge two dictionaries.

    Values in `override` take precedence over values in `base`.
    Nested dicts are merged, not replaced.

    Example:
        >>> deep_merge({"a": 1, "b": {"x": 10}}, {"b": {"y": 30}})
        {'a': 1, 'b': {'x': 10, 'y': 30}}
    """
    result = base.copy()

    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = deep_merge(result[key], value)
        else:
            result[key] = value

    return result


def load_json_file(path: Path) -> dict[str, Any] | None:
    """
    Load a JSON file, returning None if it doesn't exist or is invalid.

    Args:
        path: Path to JSON file

    Returns:
        Parsed JSON as dict, or None if file doesn't exist or can't be parsed
    """
    if not path.exists():
        logger.debug("No config at %s", path)
        return None

    try:
        with path.open(encoding="utf-8") as f:
            data = json.load(f)
    except (json.JSONDecodeError, OSError) as e:
        # Config system should be resilient: a corrupt file is treated as missing
        logger.warning("Failed to parse config at %s: %s", path, e)
        return None

    if isinstance(data, dict):
        return data
    logger.warning("Ignoring config at %s: top level is not an object", path)
    return None


def _int_override(name: str) -> int | None:
    raw = os.environ.get(name)
    if not raw:
        return None
    try:
        value = int(raw)
    except ValueError:
        logger.warning("Invalid %s value '%s', ignoring", name, raw)
        return None
    if value < 1:
        logger.warning("%s must be >= 1, got %d, ignoring", name, value)
        return None
    return value


def apply_env_overrides(config_dict: dict[str, Any]) -> dict[str, Any]:
    """
    Apply environment variable overrides to configuration.

    Supported env vars:
        SPECBRIDGE_PROJECT_NAME - overrides name
        SPECBRIDGE_SECTION_MAX_LENGTH - overrides limits.section_max_length
        SPECBRIDGE_LARGE_FILE_THRESHOLD - overrides limits.large_file_threshold

    Args:
        config_dict: Configuration dictionary to override

    Returns:
        Configuration dictionary with env var overrides applied
    """
    result = config_dict.copy()

    if name := os.environ.get("SPECBRIDGE_PROJECT_NAME"):
        result["name"] = name

    limits = dict(result.get("limits") or {})
    if (max_length := _int_override("SPECBRIDGE_SECTION_MAX_LENGTH")) is not None:
        limits["section_max_length"] = max_length
    if (threshold := _int_override("SPECBRIDGE_LARGE_FILE_THRESHOLD")) is not None:
        limits["large_file_threshold"] = threshold
    if limits:
        result["limits"] = limits

    return result


def load_config(project_dir: Path | None = None) -> SpecbridgeConfig:
    """
    Load configuration with multi-layer merging.

    Configuration precedence (highest to lowest):
        1. Environment variables (SPECBRIDGE_*)
        2. Project config (.specbridge.json)
        3. User config (~/.config/specbridge/config.json)
        4. Model defaults

    Args:
        project_dir: Project directory to load .specbridge.json from (defaults to cwd)

    Returns:
        Validated SpecbridgeConfig instance

    Raises:
        ValidationError: If the merged config fails Pydantic validation
    """
    merged: dict[str, Any] = {}

    if user_config := load_json_file(get_user_config_path()):
        merged = deep_merge(merged, user_config)

    if project_config := load_json_file(get_project_config_path(project_dir)):
        merged = deep_merge(merged, project_config)

    merged = apply_env_overrides(merged)

    return SpecbridgeConfig(**merged)
