"""
Configuration models and loading.

This module provides the Pydantic model for rdmd defaults
with multi-layer merging: defaults < user < project < env vars.
"""

from .env import load_dotenv_overrides
from .loader import (
    clear_cache,
    get_project_config_path,
    get_user_config_path,
    get_xdg_config_home,
    load_config,
)
from .models import RdmdConfig

__all__ = [
    # Models
    "RdmdConfig",
    # Loader functions
    "clear_cache",
    "get_project_config_path",
    "get_user_config_path",
    "get_xdg_config_home",
    "load_config",
    "load_dotenv_overrides",
]
