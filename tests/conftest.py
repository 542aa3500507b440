"""
Pytest configuration and shared fixtures.

Provides isolated config directories, sample parsed arguments and a
default configuration used across the test suite.
"""

from pathlib import Path

import pytest

from rdmd.core.args.models import OutputOptions, ParsedArgs
from rdmd.core.config import clear_cache
from rdmd.core.config.models import RdmdConfig

# ==============================================================================
# Environment Isolation
# ==============================================================================


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """
    Keep tests away from the real user config and environment.

    Points XDG_CONFIG_HOME at an empty directory, runs from an empty
    working directory, drops RDMD_* overrides and clears the config cache.
    """
    config_home = tmp_path / "xdg"
    config_home.mkdir()
    workdir = tmp_path / "work"
    workdir.mkdir()

    monkeypatch.setenv("XDG_CONFIG_HOME", str(config_home))
    monkeypatch.delenv("RDMD_COMPILER", raising=False)
    monkeypatch.delenv("RDMD_EXCLUSIONS", raising=False)
    monkeypatch.chdir(workdir)

    clear_cache()
    yield
    clear_cache()


@pytest.fixture
def user_config_dir(tmp_path) -> Path:
    """Provide the XDG_CONFIG_HOME/rdmd directory."""
    config_dir = tmp_path / "xdg" / "rdmd"
    config_dir.mkdir(parents=True, exist_ok=True)
    return config_dir


# ==============================================================================
# Sample Data Fixtures
# ==============================================================================


@pytest.fixture
def default_config() -> RdmdConfig:
    """Provide the built-in defaults."""
    return RdmdConfig()


@pytest.fixture
def program_args() -> ParsedArgs:
    """Provide parsed arguments for ``rdmd -odbin -op -O app.d one two``."""
    return ParsedArgs(
        program="app.d",
        program_args=("one", "two"),
        compiler_flags=("-O",),
        output=OutputOptions(output_dir="bin", preserve_output_paths=True),
    )
