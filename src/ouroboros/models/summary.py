"""Run outcome models for the versioning pipeline."""

from enum import Enum

from pydantic import BaseModel, Field


class FileOutcome(str, Enum):
    """What the pipeline did with one input file."""

    STORED = "stored"
    UNCHANGED_METADATA = "unchanged_metadata"
    UNCHANGED_CONTENT = "unchanged_content"


class RunSummary(BaseModel):
    """Aggregate result of a successful process_all run.

    Attributes:
        stored: Paths that received a new version
        unchanged_metadata: Files skipped on size/mtime match (no hashing)
        unchanged_content: Files hashed but identical to their last version
    """

    stored: list[str] = Field(default_factory=list)
    unchanged_metadata: int = 0
    unchanged_content: int = 0

    @property
    def total(self) -> int:
        return len(self.stored) + self.unchanged_metadata + self.unchanged_content

    def record(self, path: str, outcome: FileOutcome) -> None:
        if outcome is FileOutcome.STORED:
            self.stored.append(path)
        elif outcome is FileOutcome.UNCHANGED_METADATA:
            self.unchanged_metadata += 1
        else:
            self.unchanged_content += 1
