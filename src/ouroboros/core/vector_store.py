"""JSON-backed vector store with linear cosine-similarity search.

Embeddings are produced elsewhere; the store only persists entries and
ranks them against a query vector. The whole index is rewritten through
temp-then-rename on every add.
"""

import logging
import math
from collections.abc import Sequence
from pathlib import Path

from pydantic import ValidationError

from ..constants import VECTOR_STORE_FILE
from ..models import VectorEntry, VectorIndex
from .atomic import atomic_write_bytes
from .errors import CreateDirError, MetadataError

logger = logging.getLogger(__name__)


def get_vector_store_path(memory_dir: Path) -> Path:
    """Get path to the vector store inside a memory directory."""
    return memory_dir / VECTOR_STORE_FILE


def cosine_similarity(a: Sequence[float], b: Sequence[float]) -> float:
    """Cosine similarity of two vectors, or 0.0 if either has zero magnitude.

    Vectors of different lengths are compared over the shorter one.
    """
    dot = sum(x * y for x, y in zip(a, b))
    magnitude_a = math.sqrt(sum(x * x for x in a))
    magnitude_b = math.sqrt(sum(y * y for y in b))
    if magnitude_a == 0.0 or magnitude_b == 0.0:
        return 0.0
    return dot / (magnitude_a * magnitude_b)


class VectorStore:
    """Entries persisted as pretty-printed JSON at a single path.

    Args:
        path: Store file location
        entries: Initial entries (empty if omitted)
    """

    def __init__(self, path: Path, entries: list[VectorEntry] | None = None) -> None:
        self.path = path
        self.entries = entries or []

    @classmethod
    def load(cls, path: Path) -> "VectorStore":
        """Load a store, or start an empty one if the file does not exist.

        Raises:
            MetadataError: If the file exists but cannot be read or parsed
        """
        if not path.exists():
            return cls(path)
        try:
            index = VectorIndex.model_validate_json(path.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError, ValidationError) as e:
            logger.error("Failed to load vector store %s: %s", path, e)
            raise MetadataError(path) from e
        logger.debug("Loaded %d vector entries from %s", len(index.entries), path)
        return cls(path, index.entries)

    def save(self) -> None:
        """Persist every entry, creating the parent directory if needed.

        Raises:
            CreateDirError: If the parent directory cannot be created
            MetadataError: If the file cannot be written
        """
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            logger.error("Failed to create directory %s: %s", self.path.parent, e)
            raise CreateDirError(self.path.parent) from e

        data = VectorIndex(entries=self.entries).model_dump_json(indent=2)
        try:
            atomic_write_bytes(self.path, data.encode("utf-8"))
        except OSError as e:
            logger.error("Failed to write vector store %s: %s", self.path, e)
            raise MetadataError(self.path) from e

    def add(self, entry: VectorEntry) -> None:
        """Append an entry and persist the store."""
        self.entries.append(entry)
        self.save()

    def search(self, query: Sequence[float], limit: int) -> list[tuple[VectorEntry, float]]:
        """Rank entries by cosine similarity to query.

        Args:
            query: Query embedding
            limit: Maximum number of results

        Returns:
            (entry, score) pairs, best first; ties keep insertion order
        """
        scored = [(entry, cosine_similarity(entry.embedding, query)) for entry in self.entries]
        scored.sort(key=lambda pair: pair[1], reverse=True)
        return scored[:limit]
