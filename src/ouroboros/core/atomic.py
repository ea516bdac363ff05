"""Write-to-temp-then-rename helpers.

The temporary file always lives in the destination's directory so the
final os.replace is a same-filesystem rename: readers observe either the
old file or the complete new one, never a partial write.
"""

import contextlib
import os
import shutil
import tempfile
from pathlib import Path


def _temp_path(dest: Path) -> Path:
    fd, name = tempfile.mkstemp(dir=dest.parent, prefix=f"{dest.name}.", suffix=".tmp")
    os.close(fd)
    return Path(name)


def _replace(tmp: Path, dest: Path) -> None:
    with open(tmp, "rb") as f:
        os.fsync(f.fileno())
    os.replace(tmp, dest)


def atomic_write_bytes(dest: Path, data: bytes) -> None:
    """Atomically replace dest with data.

    Raises:
        OSError: If the temp file cannot be written or renamed
    """
    tmp = _temp_path(dest)
    try:
        tmp.write_bytes(data)
        _replace(tmp, dest)
    finally:
        with contextlib.suppress(FileNotFoundError):
            tmp.unlink()


def atomic_copy(source: Path, dest: Path) -> None:
    """Atomically replace dest with a byte copy of source.

    Raises:
        OSError: If the source cannot be read or the copy cannot be renamed
    """
    tmp = _temp_path(dest)
    try:
        shutil.copyfile(source, tmp)
        _replace(tmp, dest)
    finally:
        with contextlib.suppress(FileNotFoundError):
            tmp.unlink()
