"""Configuration management for ouroboros."""

import tomllib
from pathlib import Path

import tomli_w
from pydantic import BaseModel, Field, ValidationError

from .constants import CHUNK_SIZE, CONFIG_FILE, MAX_CONCURRENT_HASHES


class ConfigError(Exception):
    """Config file exists but cannot be parsed or validated."""


class HashingConfig(BaseModel):
    """Configuration for the canonical hashing stage."""

    chunk_size: int = Field(default=CHUNK_SIZE, gt=0, description="Read size per chunk (bytes)")
    max_concurrent: int = Field(
        default=MAX_CONCURRENT_HASHES, ge=1, description="Concurrent hashing permits"
    )


class DiffConfig(BaseModel):
    """Configuration for diff artifacts."""

    enabled: bool = True
    max_size: int = Field(
        default=CHUNK_SIZE, ge=0, description="Files at or above this size get no diff"
    )


class ProgressConfig(BaseModel):
    """Configuration for progress bars."""

    enabled: bool = True


class OuroborosConfig(BaseModel):
    """Root configuration for ouroboros."""

    hashing: HashingConfig = Field(default_factory=HashingConfig)
    diff: DiffConfig = Field(default_factory=DiffConfig)
    progress: ProgressConfig = Field(default_factory=ProgressConfig)


def load_config(memory_dir: Path) -> OuroborosConfig:
    """Load config from <memory_dir>/config.toml.

    Args:
        memory_dir: Path to the memory root

    Returns:
        Loaded configuration, or defaults if config.toml doesn't exist

    Raises:
        ConfigError: If the file is not valid TOML or fails validation
    """
    config_path = memory_dir / CONFIG_FILE
    if not config_path.exists():
        return OuroborosConfig()
    try:
        with open(config_path, "rb") as f:
            data = tomllib.load(f)
        return OuroborosConfig.model_validate(data)
    except (tomllib.TOMLDecodeError, ValidationError) as e:
        raise ConfigError(f"Invalid config {config_path}: {e}") from e


def write_config_template(memory_dir: Path) -> Path:
    """Write default config.toml template.

    Args:
        memory_dir: Path to the memory root

    Returns:
        Path to the written config file
    """
    config_path = memory_dir / CONFIG_FILE
    template = {
        "hashing": {"chunk_size": CHUNK_SIZE, "max_concurrent": MAX_CONCURRENT_HASHES},
        # Files at or above max_size are snapshotted without a diff
        "diff": {"enabled": True, "max_size": CHUNK_SIZE},
        "progress": {"enabled": True},
    }
    with open(config_path, "wb") as f:
        tomli_w.dump(template, f)
    return config_path
