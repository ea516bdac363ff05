"""History command: show stored versions of a file."""

from pathlib import Path

import typer

from ..core import MetadataError, calculate_path_alias, get_history_path, load_history
from ..output import get_output_context
from .options import MemoryDirOption


def history(
    path: Path = typer.Argument(..., help="Source file to inspect"),
    memory_dir: Path = MemoryDirOption,
) -> None:
    """Show the version history recorded for a file."""
    ctx = get_output_context()

    source = path.resolve()
    alias = calculate_path_alias(source)
    alias_dir = memory_dir / alias

    if not get_history_path(alias_dir).exists():
        ctx.error(f"No history for {source}", {"alias": alias})
        raise typer.Exit(1)

    try:
        file_history = load_history(alias_dir, alias, source)
    except MetadataError as e:
        ctx.process_failure(e)
        raise typer.Exit(1) from None

    ctx.history(file_history)
