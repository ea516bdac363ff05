"""Classified failures of the versioning pipeline.

Every hard failure carries the offending path. Optional steps (diffing)
never raise these; they report a skip by returning None instead.
"""

from pathlib import Path


class ProcessError(Exception):
    """Base error for a failed per-file pipeline."""

    kind = "process"

    def __init__(self, path: Path | str, message: str | None = None) -> None:
        self.path = Path(path)
        super().__init__(message or f"{self.describe()}: {self.path}")

    @classmethod
    def describe(cls) -> str:
        return "failed to process file"


class CreateDirError(ProcessError):
    """Alias or memory directory could not be created."""

    kind = "create_dir"

    @classmethod
    def describe(cls) -> str:
        return "failed to create directory"


class FileIOError(ProcessError):
    """Open, read, write, copy or rename of a source, snapshot or diff failed."""

    kind = "file"

    @classmethod
    def describe(cls) -> str:
        return "failed to handle file"


class MetadataError(ProcessError):
    """Reading or writing history.json failed."""

    kind = "metadata"

    @classmethod
    def describe(cls) -> str:
        return "failed to write metadata"


class AliasCollisionError(ProcessError):
    """Distinct source paths resolve to the same storage alias."""

    kind = "alias_collision"

    def __init__(self, path: Path | str, alias: str, others: list[str]) -> None:
        self.alias = alias
        self.others = others
        super().__init__(
            path,
            f"alias '{alias}' for {path} is already used by: {', '.join(others)}",
        )
