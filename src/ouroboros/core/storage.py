"""One-shot file storage.

Copies a single file into <memory>/<name>-<sha256>/ next to a metadata.json
describing it. Unlike the versioning pipeline there is no history and no
normalization: the hash covers the raw bytes, so identical content always
lands in the same directory.
"""

import hashlib
import logging
import os
import shutil
from datetime import datetime
from pathlib import Path

from ..constants import READABLE_TIME_FORMAT, STORED_METADATA_FILE
from ..models import StoredFileMetadata
from .errors import CreateDirError, FileIOError, MetadataError

logger = logging.getLogger(__name__)


def hash_file(path: Path) -> str:
    """Compute SHA256 of file.

    Args:
        path: File path

    Returns:
        Hex-encoded SHA256 hash
    """
    sha = hashlib.sha256()
    with open(path, "rb") as f:
        for chunk in iter(lambda: f.read(8192), b""):
            sha.update(chunk)
    return sha.hexdigest()


def _readable(timestamp: float) -> str:
    return datetime.fromtimestamp(timestamp).astimezone().strftime(READABLE_TIME_FORMAT)


def _created_time(stat: os.stat_result) -> float | None:
    # st_birthtime exists on macOS/BSD and recent Windows builds only
    return getattr(stat, "st_birthtime", None)


def store_file(source: Path, memory_dir: Path) -> Path:
    """Store a single copy of a file with its metadata.

    Args:
        source: File to store
        memory_dir: Memory root

    Returns:
        Directory the copy was written to

    Raises:
        FileIOError: If the source cannot be read or copied
        CreateDirError: If the destination directory cannot be created
        MetadataError: If metadata.json cannot be written
    """
    try:
        digest = hash_file(source)
        stat = source.stat()
    except OSError as e:
        raise FileIOError(source) from e

    created = _created_time(stat)
    metadata = StoredFileMetadata(
        name=source.name,
        size=stat.st_size,
        hash=digest,
        created=int(created) if created is not None else None,
        created_readable=_readable(created) if created is not None else None,
        modified=int(stat.st_mtime),
        modified_readable=_readable(stat.st_mtime),
    )

    dest_dir = memory_dir / f"{source.name}-{digest}"
    try:
        dest_dir.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise CreateDirError(dest_dir) from e

    dest_file = dest_dir / source.name
    try:
        shutil.copy2(source, dest_file)
    except OSError as e:
        raise FileIOError(dest_file) from e

    metadata_path = dest_dir / STORED_METADATA_FILE
    try:
        metadata_path.write_text(metadata.model_dump_json(indent=2))
    except OSError as e:
        raise MetadataError(metadata_path) from e

    logger.info("Stored %s in %s", source, dest_dir)
    return dest_dir
