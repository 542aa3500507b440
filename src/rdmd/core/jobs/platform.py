"""
Platform probes for build job resolution.

The default temporary directory differs by platform: POSIX systems get a
per-user subdirectory so concurrent users never share build outputs, other
systems a single fixed one. Each behaviour is a named strategy;
``detect_temp_dir_strategy`` picks the one for the running platform.
"""

from __future__ import annotations

import os
import re
import sys
import tempfile
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol

TOOL_DIR_NAME = ".rdmd"

# Blank components and components with trailing whitespace are rejected
_BAD_COMPONENT_RE = re.compile(r"^\s*$|\s$")


class TempDirStrategy(Protocol):
    """Computes the default temp directory for rdmd build jobs."""

    def default_temp_dir(self) -> str: ...


@dataclass(frozen=True)
class PosixUserTempDir:
    """``<tempdir>/.rdmd-<uid>``: one directory per user."""

    base: str | None = None
    uid: int | None = None

    def default_temp_dir(self) -> str:
        base = self.base if self.base is not None else tempfile.gettempdir()
        uid = self.uid if self.uid is not None else os.getuid()
        return os.path.join(base, f"{TOOL_DIR_NAME}-{uid}")


@dataclass(frozen=True)
class SharedTempDir:
    """``<tempdir>/.rdmd``: one directory shared by all users."""

    base: str | None = None

    def default_temp_dir(self) -> str:
        base = self.base if self.base is not None else tempfile.gettempdir()
        return os.path.join(os.path.normpath(base), TOOL_DIR_NAME)


def detect_temp_dir_strategy() -> TempDirStrategy:
    """Select the temp directory strategy for the running platform."""
    if hasattr(os, "getuid"):
        return PosixUserTempDir()
    return SharedTempDir()


def is_valid_path(path: str) -> bool:
    """
    Check that a path is syntactically well formed.

    No filesystem access: only the spelling is checked. A path is invalid
    if it is empty, contains a NUL character, or has a component that is
    blank or ends in whitespace.

    Examples:
        >>> is_valid_path("mytmp")
        True
        >>> is_valid_path(" ")
        False
    """
    if not path or "\0" in path:
        return False

    separators = "/\\" if os.name == "nt" else "/"
    components = re.split(f"[{re.escape(separators)}]", path)
    for component in components:
        # Empty components come from leading, trailing or doubled separators
        if component == "":
            continue
        if _BAD_COMPONENT_RE.search(component):
            return False
    return True


def this_exe_path() -> Path:
    """Path of the running launcher executable."""
    launcher = sys.argv[0] if sys.argv and sys.argv[0] else sys.executable
    return Path(launcher).resolve()


def exists_as_file(path: Path) -> bool:
    """Whether ``path`` names an existing regular file."""
    return path.is_file()


__all__ = [
    "TempDirStrategy",
    "PosixUserTempDir",
    "SharedTempDir",
    "detect_temp_dir_strategy",
    "is_valid_path",
    "this_exe_path",
    "exists_as_file",
]
