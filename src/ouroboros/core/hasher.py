"""Canonical content hashing.

The canonical hash is SHA-256 over the file's bytes with every carriage
return removed, so CRLF and LF copies of the same text hash identically.
Files are streamed in fixed-size chunks; CR is a single byte, so filtering
each chunk independently gives the same digest for any chunk boundary.
"""

import hashlib
import logging
from collections.abc import Callable
from pathlib import Path

from ..constants import CHUNK_SIZE
from .errors import FileIOError

logger = logging.getLogger(__name__)


def canonical_hash(
    path: Path,
    chunk_size: int = CHUNK_SIZE,
    on_progress: Callable[[int], None] | None = None,
) -> str:
    """Compute the CR-insensitive SHA-256 of a file.

    Args:
        path: File to hash
        chunk_size: Read size per chunk
        on_progress: Called with the raw byte count of each chunk read

    Returns:
        Hex-encoded digest

    Raises:
        FileIOError: If the file cannot be opened or read
    """
    sha = hashlib.sha256()
    try:
        with open(path, "rb") as f:
            for chunk in iter(lambda: f.read(chunk_size), b""):
                sha.update(chunk.replace(b"\r", b""))
                if on_progress is not None:
                    on_progress(len(chunk))
    except OSError as e:
        logger.error("Failed to hash %s: %s", path, e)
        raise FileIOError(path) from e
    return sha.hexdigest()
