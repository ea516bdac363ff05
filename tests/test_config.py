"""Tests for ouroboros configuration."""

import tomllib
from pathlib import Path

import pytest

from ouroboros.config import (
    ConfigError,
    OuroborosConfig,
    load_config,
    write_config_template,
)
from ouroboros.constants import CHUNK_SIZE, MAX_CONCURRENT_HASHES


def test_defaults():
    """Defaults match the pipeline constants."""
    config = OuroborosConfig()
    assert config.hashing.chunk_size == CHUNK_SIZE
    assert config.hashing.max_concurrent == MAX_CONCURRENT_HASHES == 16
    assert config.diff.enabled is True
    assert config.diff.max_size == 8 * 1024 * 1024
    assert config.progress.enabled is True


def test_load_missing_returns_defaults(tmp_path: Path):
    assert load_config(tmp_path) == OuroborosConfig()


def test_load_partial_overrides(tmp_path: Path):
    (tmp_path / "config.toml").write_text("[hashing]\nmax_concurrent = 4\n")
    config = load_config(tmp_path)
    assert config.hashing.max_concurrent == 4
    assert config.hashing.chunk_size == CHUNK_SIZE


def test_template_roundtrip(tmp_path: Path):
    path = write_config_template(tmp_path)
    with open(path, "rb") as f:
        data = tomllib.load(f)
    assert data["diff"]["max_size"] == CHUNK_SIZE
    assert load_config(tmp_path) == OuroborosConfig()


def test_invalid_toml_raises(tmp_path: Path):
    (tmp_path / "config.toml").write_text("[hashing\n")
    with pytest.raises(ConfigError):
        load_config(tmp_path)


def test_invalid_value_raises(tmp_path: Path):
    """Zero permits would deadlock the pipeline and is rejected."""
    (tmp_path / "config.toml").write_text("[hashing]\nmax_concurrent = 0\n")
    with pytest.raises(ConfigError, match="max_concurrent"):
        load_config(tmp_path)
