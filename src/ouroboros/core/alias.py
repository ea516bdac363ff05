"""Deterministic storage aliases for source paths.

An alias is a flat, filesystem-safe directory name derived from a path:
separators, drive colons and spaces become underscores and the result is
lowercased. Paths under the working directory are aliased relative to it.

Distinct paths can collide (case-only differences, or names that already
contain underscores where another path has separators). Collisions are
reported by find_alias_collisions and by the pipeline, never merged.
"""

import os
from collections import defaultdict
from collections.abc import Iterable
from pathlib import Path

LONG_PATH_PREFIX = "//?/"


def _clean(raw: str) -> str:
    """Normalize separators to '/' and drop any long-path prefix."""
    cleaned = raw.replace("\\", "/")
    while cleaned.startswith(LONG_PATH_PREFIX):
        cleaned = cleaned[len(LONG_PATH_PREFIX) :]
    return cleaned


def calculate_path_alias(path: Path | str, cwd: Path | str | None = None) -> str:
    """Map an absolute path to its storage alias.

    Args:
        path: Absolute source path
        cwd: Working directory to relativize against (defaults to os.getcwd())

    Returns:
        Lowercased alias with ':', '/' and ' ' replaced by '_'
    """
    path_clean = _clean(str(path))
    if cwd is None:
        cwd = os.getcwd()
    cwd_clean = _clean(str(cwd)).rstrip("/")

    if not cwd_clean:
        # cwd is the filesystem root
        normalized = path_clean.lstrip("/")
    elif path_clean.startswith(cwd_clean + "/"):
        normalized = path_clean[len(cwd_clean) :].lstrip("/")
    else:
        normalized = path_clean

    return normalized.replace(":", "_").replace("/", "_").replace(" ", "_").lower()


def find_alias_collisions(
    paths: Iterable[Path], cwd: Path | str | None = None
) -> dict[str, list[Path]]:
    """Group input paths whose aliases collide.

    Returns:
        Mapping of alias to the (sorted) paths sharing it, only for aliases
        claimed by more than one distinct path
    """
    groups: dict[str, set[Path]] = defaultdict(set)
    for path in paths:
        groups[calculate_path_alias(path, cwd)].add(path)
    return {alias: sorted(members) for alias, members in groups.items() if len(members) > 1}
