"""
Configuration models and loading.

This module provides Pydantic models for specbridge configuration
with multi-layer merging: defaults < user < project < env vars.
"""

from .env import load_layered_env
from .loader import (
    get_project_config_path,
    get_user_config_path,
    get_xdg_config_home,
    load_config,
)
from .models import LimitsConfig, PathsConfig, SpecbridgeConfig

__all__ = [
    # Models
    "LimitsConfig",
    "PathsConfig",
    "SpecbridgeConfig",
    # Loader functions
    "get_project_config_path",
    "get_user_config_path",
    "get_xdg_config_home",
    "load_config",
    "load_layered_env",
]
