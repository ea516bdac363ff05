"""Version history models for ingested files.

One FileHistory is kept per alias directory as history.json. Versions are
append-only and numbered contiguously from 1; the last record always
describes the content currently held in the alias's latest snapshot.
"""

from datetime import datetime

from pydantic import BaseModel, Field, model_validator


def local_timestamp() -> str:
    """Return the local wall-clock time as ISO-8601 with UTC offset."""
    return datetime.now().astimezone().isoformat()


class FileVersion(BaseModel):
    """A single stored version of one logical file.

    Attributes:
        version: Version number (1-indexed, contiguous within a history)
        hash: Canonical content hash (hex SHA-256, CR bytes removed)
        size: Source size in bytes when the version was stored
        mtime_ns: Source modification time in nanoseconds since epoch
        processed_at: Local time the version was recorded
        diff_file: Name of the diff artifact introduced by this version
    """

    version: int = Field(ge=1, description="Version number")
    hash: str = Field(description="Canonical content hash")
    size: int = Field(ge=0, description="Size in bytes")
    mtime_ns: int = Field(ge=0, description="Modification time (ns since epoch)")
    processed_at: str = Field(default_factory=local_timestamp, description="When recorded")
    diff_file: str | None = Field(default=None, description="Diff artifact name")


class FileHistory(BaseModel):
    """All known versions of one aliased file.

    Attributes:
        versions: Ordered version records (insertion order = version order)
        alias: Storage alias the history belongs to
        original_path: Absolute source path the alias was derived from
    """

    versions: list[FileVersion] = Field(default_factory=list)
    alias: str = Field(description="Storage alias")
    original_path: str = Field(description="Absolute source path")

    @model_validator(mode="after")
    def _check_contiguous(self) -> "FileHistory":
        for expected, record in enumerate(self.versions, start=1):
            if record.version != expected:
                raise ValueError(
                    f"version {record.version} found at position {expected}, "
                    "versions must be contiguous from 1"
                )
        return self

    @property
    def latest(self) -> FileVersion | None:
        """Most recent version, or None for a fresh history."""
        return self.versions[-1] if self.versions else None

    @property
    def next_version(self) -> int:
        return len(self.versions) + 1

    def matches_metadata(self, size: int, mtime_ns: int) -> bool:
        """True if the latest version has exactly this size and mtime."""
        latest = self.latest
        return latest is not None and latest.size == size and latest.mtime_ns == mtime_ns

    def matches_hash(self, digest: str) -> bool:
        latest = self.latest
        return latest is not None and latest.hash == digest

    def append(
        self,
        digest: str,
        size: int,
        mtime_ns: int,
        diff_file: str | None = None,
    ) -> FileVersion:
        """Append the next version record and return it."""
        record = FileVersion(
            version=self.next_version,
            hash=digest,
            size=size,
            mtime_ns=mtime_ns,
            diff_file=diff_file,
        )
        self.versions.append(record)
        return record
