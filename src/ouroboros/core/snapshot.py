"""Diff artifacts and atomic "latest" snapshots.

A version's diff is optional: when either side is unreadable or not valid
UTF-8, or the new content is too large, the version is represented by its
snapshot alone. Those cases return None and are never errors. Writing the
diff and replacing the snapshot are hard steps and raise FileIOError.
"""

import difflib
import logging
from pathlib import Path

from ..constants import CHUNK_SIZE, LATEST_FILE
from .atomic import atomic_copy
from .errors import FileIOError

logger = logging.getLogger(__name__)

NO_NEWLINE_MARKER = "\\ No newline at end of file\n"


def get_latest_path(alias_dir: Path) -> Path:
    """Get path to an alias's latest snapshot."""
    return alias_dir / LATEST_FILE


def diff_file_name(version: int) -> str:
    """Name of the diff artifact introduced by a version."""
    return f"v{version}.diff"


def _read_text(path: Path) -> str | None:
    """Read strict UTF-8 text without newline translation, or None."""
    try:
        return path.read_bytes().decode("utf-8")
    except (OSError, UnicodeDecodeError) as e:
        logger.debug("Could not read %s as text for diffing: %s", path, e)
        return None


def _split_lines(text: str) -> list[str]:
    # Split on LF only so CRLF lines keep their CR in the diff
    lines = [line + "\n" for line in text.split("\n")]
    lines[-1] = lines[-1][:-1]
    if not lines[-1]:
        lines.pop()
    return lines


def build_diff(previous: str, current: str, label: str) -> str | None:
    """Compute a unified line diff of previous -> current.

    Args:
        previous: Old text
        current: New text
        label: Name used on both the --- and +++ headers

    Returns:
        Diff text, or None if the texts have no line differences
    """
    parts = []
    for line in difflib.unified_diff(
        _split_lines(previous),
        _split_lines(current),
        fromfile=label,
        tofile=label,
        lineterm="\n",
    ):
        if line.endswith("\n"):
            parts.append(line)
        else:
            parts.append(line + "\n" + NO_NEWLINE_MARKER)
    return "".join(parts) or None


def write_diff(alias_dir: Path, version: int, content: str) -> str:
    """Write a diff artifact for a version.

    Returns:
        The artifact's file name

    Raises:
        FileIOError: If the diff cannot be written
    """
    name = diff_file_name(version)
    diff_path = alias_dir / name
    try:
        diff_path.write_bytes(content.encode("utf-8"))
    except OSError as e:
        logger.error("Failed to write diff file %s: %s", diff_path, e)
        raise FileIOError(diff_path) from e
    return name


def generate_version_diff(
    source: Path,
    alias_dir: Path,
    size: int,
    version: int,
    max_size: int = CHUNK_SIZE,
) -> str | None:
    """Diff the current snapshot against the source for a new version.

    A diff is attempted only when a previous snapshot exists and the new
    content is smaller than max_size.

    Args:
        source: Source file holding the new content
        alias_dir: Directory owned by the alias
        size: Source size observed for this version
        version: Version number the diff introduces
        max_size: Size limit (exclusive) for diffing

    Returns:
        Diff artifact name, or None if no diff was produced
    """
    latest = get_latest_path(alias_dir)
    if not latest.exists() or size >= max_size:
        return None

    current = _read_text(source)
    if current is None:
        return None
    previous = _read_text(latest)
    if previous is None:
        return None

    diff_text = build_diff(previous, current, source.name)
    if diff_text is None:
        logger.debug("[%s] Empty diff for v%d, no artifact written.", source.name, version)
        return None
    return write_diff(alias_dir, version, diff_text)


def finalize_snapshot(source: Path, alias_dir: Path) -> Path:
    """Atomically replace the alias's latest snapshot with the source.

    Returns:
        Path to the latest snapshot

    Raises:
        FileIOError: If the copy or rename fails
    """
    latest = get_latest_path(alias_dir)
    try:
        atomic_copy(source, latest)
    except OSError as e:
        logger.error("Failed to update snapshot %s from %s: %s", latest, source, e)
        raise FileIOError(e.filename or latest) from e
    return latest
