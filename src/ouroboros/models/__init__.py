"""Pydantic data models for ouroboros storage artifacts.

This package defines the data structures persisted by ouroboros:
- Per-file version history (FileHistory, FileVersion)
- One-shot store metadata (StoredFileMetadata)
- Pipeline run outcomes (FileOutcome, RunSummary)
- Embedding entries (VectorEntry, VectorIndex)

Example:
    >>> from ouroboros.models import FileHistory
    >>> history = FileHistory(alias="notes.txt", original_path="/work/notes.txt")
    >>> history.append("ab12...", size=6, mtime_ns=0).version
    1
"""

from .history import FileHistory, FileVersion, local_timestamp
from .stored_file import StoredFileMetadata
from .summary import FileOutcome, RunSummary
from .vector import VectorEntry, VectorIndex

__all__ = [
    "FileHistory",
    "FileOutcome",
    "FileVersion",
    "RunSummary",
    "StoredFileMetadata",
    "VectorEntry",
    "VectorIndex",
    "local_timestamp",
]
