"""History persistence for aliased files.

Each alias directory holds a history.json with every known version of its
source file. Version numbering:
- an empty history means nothing has been stored yet
- the first stored version is v1
- each genuine content change appends exactly one record

An unreadable history.json is a hard failure. An unparsable one is treated
as lost metadata: it is logged and replaced by a fresh history, so the
alias restarts at v1 while its snapshot and diff files stay on disk.
"""

import logging
from pathlib import Path

from pydantic import ValidationError

from ..constants import HISTORY_FILE
from ..models import FileHistory, FileVersion
from .atomic import atomic_write_bytes
from .errors import MetadataError

logger = logging.getLogger(__name__)


def get_history_path(alias_dir: Path) -> Path:
    """Get path to an alias's history.json."""
    return alias_dir / HISTORY_FILE


def load_history(alias_dir: Path, alias: str, original_path: Path | str) -> FileHistory:
    """Load an alias's history, or start a fresh one.

    Args:
        alias_dir: Directory owned by the alias
        alias: Alias name, used for a fresh history
        original_path: Source path, used for a fresh history

    Returns:
        Existing history, or an empty one if missing or unparsable

    Raises:
        MetadataError: If history.json exists but cannot be read
    """
    history_path = get_history_path(alias_dir)
    fresh = FileHistory(alias=alias, original_path=str(original_path))
    if not history_path.exists():
        return fresh

    try:
        data = history_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        logger.error("Failed to read history file %s: %s", history_path, e)
        raise MetadataError(history_path) from e

    try:
        return FileHistory.model_validate_json(data)
    except ValidationError as e:
        logger.warning(
            "Failed to parse %s for %s, recreating: %s", history_path, original_path, e
        )
        return fresh


def save_history(alias_dir: Path, history: FileHistory) -> Path:
    """Persist a history as pretty-printed JSON via temp-then-rename.

    Returns:
        Path to the written history.json

    Raises:
        MetadataError: If the file cannot be written
    """
    history_path = get_history_path(alias_dir)
    try:
        atomic_write_bytes(history_path, history.model_dump_json(indent=2).encode("utf-8"))
    except OSError as e:
        logger.error("Failed to write history file %s: %s", history_path, e)
        raise MetadataError(history_path) from e
    return history_path


def append_version(
    alias_dir: Path,
    history: FileHistory,
    digest: str,
    size: int,
    mtime_ns: int,
    diff_file: str | None = None,
) -> FileVersion:
    """Append the next version to a history and persist it.

    Args:
        alias_dir: Directory owned by the alias
        history: History loaded for this run
        digest: Canonical hash of the new content
        size: Source size in bytes
        mtime_ns: Source modification time (ns)
        diff_file: Diff artifact introduced by this version, if any

    Returns:
        The appended record
    """
    record = history.append(digest, size=size, mtime_ns=mtime_ns, diff_file=diff_file)
    save_history(alias_dir, history)
    return record
