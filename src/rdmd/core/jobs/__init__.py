"""
Build job parameters.

Modules:
    resolver: Settings assembly, temp directory and compiler resolution
    platform: Temp directory strategies, path validity, launcher location
    models: Data models (BuildSettings, BuildJob)
"""

from rdmd.core.jobs.models import BuildJob, BuildSettings
from rdmd.core.jobs.platform import (
    PosixUserTempDir,
    SharedTempDir,
    TempDirStrategy,
    detect_temp_dir_strategy,
    is_valid_path,
)
from rdmd.core.jobs.resolver import (
    build_settings,
    output_executable,
    resolve_compiler,
    resolve_job,
    resolve_temp_dir,
)

__all__ = [
    # Resolver
    "build_settings",
    "output_executable",
    "resolve_compiler",
    "resolve_job",
    "resolve_temp_dir",
    # Platform
    "TempDirStrategy",
    "PosixUserTempDir",
    "SharedTempDir",
    "detect_temp_dir_strategy",
    "is_valid_path",
    # Models
    "BuildJob",
    "BuildSettings",
]
