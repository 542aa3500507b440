"""
Configuration loading with multi-layer merging.

Implements the configuration precedence chain:
    defaults < user config < project config < env vars
"""

import json
import logging
import os
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from .env import effective_environ, load_dotenv_overrides
from .models import RdmdConfig

logger = logging.getLogger(__name__)

# Global cache to avoid reloading config multiple times per process
_config_cache: RdmdConfig | None = None


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
        Path to ~/.config/rdmd/config.json (or XDG equivalent)
    """
    return get_xdg_config_home() / "rdmd" / "config.json"


def get_project_config_path(cwd: Path | None = None) -> Path:
    """
    Get path to project configuration file.

    Args:
        cwd: Working directory to search from (defaults to current directory)

    Returns:
        Path to .rdmd.json in the working directory
    """
    if cwd is None:
        cwd = Path.cwd()
    return cwd / ".rdmd.json"


def load_json_file(path: Path) -> dict[str, Any] | None:
    """
    Load a JSON file, returning None if it doesn't exist or is invalid.

    Args:
        path: Path to JSON file

    Returns:
        Parsed JSON as dict, or None if file doesn't exist or can't be parsed
    """
    if not path.exists():
        return None

    try:
        with path.open() as f:
            data = json.load(f)
            if isinstance(data, dict):
                return data
            logger.warning("Ignoring config at %s: top-level value is not an object", path)
            return None
    except (json.JSONDecodeError, OSError) as e:
        logger.warning("Failed to parse config at %s: %s", path, e)
        return None


def apply_env_overrides(
    config_dict: dict[str, Any], environ: Mapping[str, str] | None = None
) -> dict[str, Any]:
    """
    Apply environment variable overrides to configuration.

    Env vars have the highest precedence and override all config files.

    Supported env vars:
        RDMD_COMPILER - overrides default_compiler
        RDMD_EXCLUSIONS - comma-separated list, overrides default_exclusions

    Args:
        config_dict: Configuration dictionary to override
        environ: Variables to read (defaults to os.environ)

    Returns:
        Configuration dictionary with env var overrides applied
    """
    if environ is None:
        environ = os.environ
    result = config_dict.copy()

    if compiler := environ.get("RDMD_COMPILER"):
        result["default_compiler"] = compiler

    # An empty RDMD_EXCLUSIONS clears the list
    exclusions_str = environ.get("RDMD_EXCLUSIONS")
    if exclusions_str is not None:
        result["default_exclusions"] = [
            part.strip() for part in exclusions_str.split(",") if part.strip()
        ]

    return result


def get_default_config() -> dict[str, Any]:
    """
    Get hardcoded default configuration.

    Returns:
        Dictionary with default configuration values
    """
    return {
        "default_compiler": "dmd",
        "default_exclusions": ["std", "etc", "core"],
    }


def load_config(project_dir: Path | None = None, use_cache: bool = True) -> RdmdConfig:
    """
    Load configuration with multi-layer merging.

    Configuration precedence (highest to lowest):
        1. Environment variables (RDMD_*), then RDMD_* in .env files
        2. Project config (.rdmd.json)
        3. User config (~/.config/rdmd/config.json)
        4. Hardcoded defaults

    Args:
        project_dir: Directory holding .rdmd.json and .env (defaults to cwd)
        use_cache: If True, return cached config from previous load

    Returns:
        Validated RdmdConfig instance

    Raises:
        ValidationError: If the merged config fails Pydantic validation
    """
    global _config_cache

    if use_cache and _config_cache is not None:
        return _config_cache

    merged = get_default_config()

    if user_config := load_json_file(get_user_config_path()):
        merged.update(user_config)

    if project_config := load_json_file(get_project_config_path(project_dir)):
        merged.update(project_config)

    environ = effective_environ(load_dotenv_overrides(project_dir))
    merged = apply_env_overrides(merged, environ)

    config = RdmdConfig(**merged)
    _config_cache = config

    return config


def clear_cache() -> None:
    """
    Clear the cached configuration.

    Useful for testing or when config files change during execution.
    """
    global _config_cache
    _config_cache = None
