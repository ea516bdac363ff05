"""Output formatting for ouroboros CLI."""

import json
from dataclasses import dataclass, field
from typing import Any

from rich.console import Console
from rich.table import Table

from .core import ProcessError
from .models import FileHistory, RunSummary
from .progress import ProgressTracker


@dataclass
class OutputContext:
    """Context for output formatting.

    Results go to stdout; logs and progress bars use the stderr console
    returned by configure_logging.
    """

    console: Console = field(default_factory=Console)
    json_mode: bool = False
    quiet: bool = False
    log_console: Console | None = None

    def print(self, message: str, style: str | None = None) -> None:
        """Print message respecting output mode."""
        if not self.json_mode:
            self.console.print(message, style=style)

    def print_json(self, data: dict[str, Any]) -> None:
        """Print JSON data."""
        if self.json_mode:
            print(json.dumps(data, indent=2, default=str))

    def error(self, message: str, data: dict[str, Any] | None = None) -> None:
        """Print error in appropriate format."""
        if self.json_mode:
            self.print_json({"error": message, **(data or {})})
        else:
            self.console.print(f"[red]Error: {message}[/red]")

    def success(self, message: str, data: dict[str, Any] | None = None) -> None:
        """Print success message in appropriate format."""
        if self.json_mode:
            self.print_json({"success": message, **(data or {})})
        else:
            self.console.print(f"[green]{message}[/green]")

    def progress(self, enabled: bool = True) -> ProgressTracker:
        """Create a progress tracker rendering on the log console.

        Bars are suppressed in JSON and quiet modes.
        """
        show = enabled and not self.json_mode and not self.quiet
        return ProgressTracker(console=self.log_console, enabled=show)

    def process_failure(self, err: ProcessError) -> None:
        """Report a classified pipeline failure with its kind and path."""
        self.error(str(err), {"kind": err.kind, "path": str(err.path)})

    def run_summary(self, summary: RunSummary) -> None:
        if self.json_mode:
            self.print_json({**summary.model_dump(), "total": summary.total})
            return
        unchanged = summary.unchanged_metadata + summary.unchanged_content
        self.console.print(
            f"[green]Stored {len(summary.stored)} new version(s)[/green], "
            f"{unchanged} unchanged of {summary.total} file(s)"
        )
        for path in sorted(summary.stored):
            self.console.print(f"  [cyan]+[/cyan] {path}")

    def history(self, history: FileHistory) -> None:
        if self.json_mode:
            self.print_json(history.model_dump())
            return
        table = Table(title=f"{history.original_path} ({history.alias})")
        table.add_column("Version", justify="right")
        table.add_column("Hash")
        table.add_column("Size", justify="right")
        table.add_column("Processed at")
        table.add_column("Diff")
        for record in history.versions:
            table.add_row(
                f"v{record.version}",
                record.hash[:12],
                str(record.size),
                record.processed_at,
                record.diff_file or "-",
            )
        self.console.print(table)


# Global output context (set by cli.py main callback)
_ctx: OutputContext | None = None


def get_output_context() -> OutputContext:
    """Get the current output context.

    Returns a default OutputContext if not yet initialized by CLI.
    """
    if _ctx is None:
        return OutputContext()
    return _ctx


def set_output_context(ctx: OutputContext) -> None:
    """Set the global output context. Called by CLI main callback."""
    global _ctx
    _ctx = ctx
