"""Ingest command: version every changed file."""

from pathlib import Path

import typer

from ..config import ConfigError, load_config
from ..core import ProcessError, collect_paths, process_paths
from ..output import get_output_context
from .options import MemoryDirOption


def ingest(
    paths: list[Path] = typer.Argument(..., help="Files or directories to version"),
    memory_dir: Path = MemoryDirOption,
    no_diff: bool = typer.Option(False, "--no-diff", help="Store snapshots without diffs"),
) -> None:
    """Store a new version of every file that changed since the last run."""
    ctx = get_output_context()

    try:
        config = load_config(memory_dir)
    except ConfigError as e:
        ctx.error(str(e))
        raise typer.Exit(2) from None
    if no_diff:
        config.diff.enabled = False

    files = collect_paths(paths, exclude=[memory_dir])
    if not files:
        ctx.error("No files to ingest")
        raise typer.Exit(1)

    try:
        with ctx.progress(config.progress.enabled) as progress:
            summary = process_paths(files, memory_dir, config=config, progress=progress)
    except ProcessError as e:
        ctx.process_failure(e)
        raise typer.Exit(1) from None

    ctx.run_summary(summary)
