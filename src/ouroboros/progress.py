"""Byte-level progress reporting for concurrent hashing.

A single ProgressTracker is created per run and handed to every pipeline
unit. rich's Progress serializes updates internally, so add/advance/finish
may be called from any hashing thread.
"""

from types import TracebackType

from rich.console import Console
from rich.progress import (
    BarColumn,
    DownloadColumn,
    Progress,
    SpinnerColumn,
    TaskID,
    TaskProgressColumn,
    TextColumn,
    TimeElapsedColumn,
)


class ProgressTracker:
    """Shared progress handle with one bar per file being hashed."""

    def __init__(self, console: Console | None = None, enabled: bool = True) -> None:
        self.enabled = enabled
        self._progress = Progress(
            SpinnerColumn(),
            TimeElapsedColumn(),
            BarColumn(),
            DownloadColumn(),
            TaskProgressColumn(),
            TextColumn("{task.description}"),
            console=console,
            disable=not enabled,
        )

    def __enter__(self) -> "ProgressTracker":
        self._progress.start()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self._progress.stop()

    def add_file(self, name: str, total: int) -> TaskID:
        """Start a bar for a file of total bytes."""
        return self._progress.add_task(name, total=total)

    def advance(self, task_id: TaskID, n: int) -> None:
        self._progress.advance(task_id, n)

    def finish(self, task_id: TaskID, name: str) -> None:
        """Label a file's bar as done once all its bytes are hashed."""
        self._progress.update(task_id, description=f"{name} [DONE]")


def null_progress() -> ProgressTracker:
    """Tracker that renders nothing (tests, --quiet, --json)."""
    return ProgressTracker(enabled=False)
