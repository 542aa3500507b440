"""
Dotenv overrides for rdmd configuration.

``RDMD_COMPILER`` and ``RDMD_EXCLUSIONS`` may also be kept in ``.env``
files next to a project or in the user config directory. The values are
returned to the config loader rather than exported, so the process
environment is left untouched.

Precedence (highest first): process environment, project ``.env``,
user ``.env``.
"""

from __future__ import annotations

import os
from collections.abc import Iterable, Mapping
from pathlib import Path

from dotenv import dotenv_values

ENV_PREFIX = "RDMD_"


def get_user_env_path() -> Path:
    """Path to the user-wide ``.env`` (``$XDG_CONFIG_HOME/rdmd/.env``)."""
    config_home = os.environ.get("XDG_CONFIG_HOME") or str(Path.home() / ".config")
    return Path(config_home) / "rdmd" / ".env"


def read_rdmd_env(path: Path) -> dict[str, str]:
    """
    Read the ``RDMD_*`` assignments of one ``.env`` file.

    Missing files and keys without a value are ignored.
    """
    if not path.is_file():
        return {}
    return {
        key: value
        for key, value in dotenv_values(path).items()
        if key.startswith(ENV_PREFIX) and value is not None
    }


def load_dotenv_overrides(
    project_dir: Path | None = None,
    *,
    user_env_paths: Iterable[Path] | None = None,
    project_env_paths: Iterable[Path] | None = None,
) -> dict[str, str]:
    """
    Collect ``RDMD_*`` values from the user and project ``.env`` files.

    Args:
        project_dir: Directory holding the project ``.env`` (defaults to cwd)
        user_env_paths: User files to read instead of the XDG default
        project_env_paths: Project files to read instead of ``<project_dir>/.env``

    Returns:
        Merged values, later files overriding earlier ones
    """
    if user_env_paths is None:
        user_env_paths = [get_user_env_path()]
    if project_env_paths is None:
        project_env_paths = [(project_dir or Path.cwd()) / ".env"]

    values: dict[str, str] = {}
    for path in (*user_env_paths, *project_env_paths):
        values.update(read_rdmd_env(Path(path)))
    return values


def effective_environ(
    dotenv_overrides: Mapping[str, str], environ: Mapping[str, str] | None = None
) -> dict[str, str]:
    """Layer the process environment over values read from ``.env`` files."""
    if environ is None:
        environ = os.environ
    return {**dotenv_overrides, **environ}


__all__ = [
    "ENV_PREFIX",
    "effective_environ",
    "get_user_env_path",
    "load_dotenv_overrides",
    "read_rdmd_env",
]
