"""Metadata written next to a one-shot stored file copy."""

from pydantic import BaseModel, Field


class StoredFileMetadata(BaseModel):
    """Contents of metadata.json for a one-shot stored file.

    Attributes:
        name: Base name of the source file
        size: Size in bytes
        hash: Plain SHA-256 of the raw bytes (no normalization)
        created: Creation time in epoch seconds, when the platform reports it
        created_readable: Creation time formatted for humans
        modified: Modification time in epoch seconds
        modified_readable: Modification time formatted for humans
    """

    name: str = Field(description="Source file name")
    size: int = Field(ge=0, description="Size in bytes")
    hash: str = Field(description="SHA-256 of raw content")
    created: int | None = None
    created_readable: str | None = None
    modified: int | None = None
    modified_readable: str | None = None
