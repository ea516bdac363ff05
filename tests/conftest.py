"""Shared test fixtures for ouroboros tests."""

import os
from collections.abc import Generator
from pathlib import Path

import pytest
from typer.testing import CliRunner

from ouroboros.config import OuroborosConfig


@pytest.fixture
def runner() -> CliRunner:
    """Create CLI test runner."""
    return CliRunner()


@pytest.fixture
def workspace(tmp_path: Path) -> Generator[Path, None, None]:
    """Temporary working directory.

    Changes cwd to the directory for the duration of the test, so aliases
    are computed relative to it.
    """
    original_cwd = os.getcwd()
    os.chdir(tmp_path)
    try:
        yield tmp_path
    finally:
        os.chdir(original_cwd)


@pytest.fixture
def memory_dir(workspace: Path) -> Path:
    """Memory root inside the workspace (not created yet)."""
    return workspace / "memory"


@pytest.fixture
def small_config() -> OuroborosConfig:
    """Config with tiny chunks and permits to exercise boundaries."""
    config = OuroborosConfig()
    config.hashing.chunk_size = 4
    config.hashing.max_concurrent = 2
    return config
