"""Embedding entries kept alongside file versions."""

from pydantic import BaseModel, Field


class VectorEntry(BaseModel):
    """One embedded piece of content.

    Attributes:
        id: Caller-chosen identifier, unique within a store
        file_hash: Canonical hash of the file version the content came from
        embedding: Embedding vector
        content_preview: Short excerpt of the embedded content
    """

    id: str
    file_hash: str
    embedding: list[float] = Field(default_factory=list)
    content_preview: str = ""


class VectorIndex(BaseModel):
    """On-disk layout of a vector store file."""

    entries: list[VectorEntry] = Field(default_factory=list)
