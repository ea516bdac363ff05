"""Shared typer options for ouroboros commands."""

from pathlib import Path

import typer

from ..constants import DEFAULT_MEMORY_DIR

MemoryDirOption = typer.Option(
    Path(DEFAULT_MEMORY_DIR),
    "--memory-dir",
    "-m",
    envvar="OUROBOROS_MEMORY_DIR",
    help="Memory root holding stored versions",
)
