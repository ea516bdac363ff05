"""Store command: keep a single copy of a file with its metadata."""

from pathlib import Path

import typer

from ..core import ProcessError, store_file
from ..output import get_output_context
from .options import MemoryDirOption


def store(
    file: Path = typer.Argument(..., help="File to store"),
    memory_dir: Path = MemoryDirOption,
) -> None:
    """Copy a file into memory under <name>-<sha256>/ with metadata.json."""
    ctx = get_output_context()

    if not file.is_file():
        ctx.error(f"File not found: {file}")
        raise typer.Exit(1)

    try:
        dest_dir = store_file(file, memory_dir)
    except ProcessError as e:
        ctx.process_failure(e)
        raise typer.Exit(1) from None

    ctx.success(f"Stored {file.name} in {dest_dir}", {"path": str(dest_dir)})
