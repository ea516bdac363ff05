"""Input path collection.

Expands command-line inputs into the set the pipeline expects: existing
regular files, symlinks resolved, absolute, deduplicated and sorted.
Directories are walked recursively. Missing inputs are warned about and
skipped.
"""

import logging
from collections.abc import Iterable
from pathlib import Path

logger = logging.getLogger(__name__)


def collect_paths(inputs: Iterable[Path], exclude: Iterable[Path] = ()) -> list[Path]:
    """Collect canonical file paths from files and directories.

    Args:
        inputs: Files or directories named by the user
        exclude: Directories whose contents are never collected (e.g. the
            memory root itself)

    Returns:
        Sorted, deduplicated absolute file paths
    """
    excluded = [p.resolve() for p in exclude]
    collected: set[Path] = set()

    for raw in inputs:
        path = raw.resolve()
        if not path.exists():
            logger.warning("Skipping nonexistent path: %s", raw)
            continue
        if path.is_dir():
            candidates = (p.resolve() for p in path.rglob("*"))
        else:
            candidates = iter([path])
        for candidate in candidates:
            if not candidate.is_file():
                continue
            if any(candidate.is_relative_to(ex) for ex in excluded):
                continue
            collected.add(candidate)

    return sorted(collected)
