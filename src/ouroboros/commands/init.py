"""Init command implementation."""

from pathlib import Path

import typer

from ..config import write_config_template
from ..constants import CONFIG_FILE
from ..output import get_output_context
from .options import MemoryDirOption


def init(memory_dir: Path = MemoryDirOption) -> None:
    """Create the memory directory and a config template."""
    ctx = get_output_context()

    try:
        memory_dir.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        ctx.error(f"Cannot create memory directory {memory_dir}: {e}")
        raise typer.Exit(1) from None

    config_path = memory_dir / CONFIG_FILE
    if config_path.exists():
        ctx.print(f"[yellow]Config already exists:[/yellow] {config_path}")
    else:
        write_config_template(memory_dir)
        ctx.print(f"[green]Created config template:[/green] {config_path}")

    ctx.success("Memory initialized", {"memory_dir": str(memory_dir)})
