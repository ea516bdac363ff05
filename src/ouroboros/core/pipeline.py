"""Concurrent versioning pipeline.

One asyncio task is spawned per input file. Each task runs its stages in
order:

1. stat the source and load the alias's history (ungated)
2. skip if the last version's size and mtime both match
3. take a hashing permit, hash on the hashing pool
4. skip if the canonical hash matches the last version
5. write the optional diff, replace the snapshot, append history

The permit pool bounds concurrent heavy disk work; the metadata check for
any number of files runs without it. The first failure observed is raised
once every spawned task has finished, so no file is interrupted between
its snapshot and history writes.
"""

import asyncio
import logging
from collections.abc import Iterable
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path

from ..config import OuroborosConfig
from ..models import FileHistory, FileOutcome, FileVersion, RunSummary
from ..progress import ProgressTracker, null_progress
from .alias import calculate_path_alias, find_alias_collisions
from .errors import AliasCollisionError, CreateDirError, FileIOError, ProcessError
from .hasher import canonical_hash
from .history_store import append_version, load_history
from .snapshot import finalize_snapshot, generate_version_diff

logger = logging.getLogger(__name__)


def _ensure_dir(path: Path) -> None:
    try:
        path.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        logger.error("Failed to create directory %s: %s", path, e)
        raise CreateDirError(path) from e


class Processor:
    """Versions a set of files into a memory directory.

    Args:
        memory_dir: Root holding one directory per alias
        config: Hashing/diff settings (defaults if omitted)
        progress: Shared progress handle (silent if omitted)
        cwd: Directory aliases are relativized against (process cwd if omitted)
    """

    def __init__(
        self,
        memory_dir: Path,
        config: OuroborosConfig | None = None,
        progress: ProgressTracker | None = None,
        cwd: Path | None = None,
    ) -> None:
        self.memory_dir = memory_dir
        self.config = config or OuroborosConfig()
        self.progress = progress or null_progress()
        self.cwd = cwd

    async def process_all(self, paths: Iterable[Path]) -> RunSummary:
        """Process every path concurrently.

        Args:
            paths: Deduplicated absolute file paths

        Returns:
            Per-outcome summary of the run

        Raises:
            ProcessError: The first per-file failure observed
        """
        ordered = sorted(set(paths))
        self._check_collisions(ordered)
        _ensure_dir(self.memory_dir)

        logger.info("Starting processing of %d files", len(ordered))
        semaphore = asyncio.Semaphore(self.config.hashing.max_concurrent)
        summary = RunSummary()
        first_error: ProcessError | None = None

        with ThreadPoolExecutor(
            max_workers=self.config.hashing.max_concurrent,
            thread_name_prefix="ouroboros-hash",
        ) as pool:
            tasks = [
                asyncio.create_task(self._pipeline_file(path, semaphore, pool))
                for path in ordered
            ]
            for next_done in asyncio.as_completed(tasks):
                try:
                    path, outcome = await next_done
                except ProcessError as e:
                    if first_error is None:
                        logger.error("A processing task failed: %s", e)
                        first_error = e
                    else:
                        logger.error("Another processing task failed: %s", e)
                    continue
                summary.record(str(path), outcome)

        if first_error is not None:
            raise first_error
        logger.info(
            "Finished processing: %d stored, %d unchanged",
            len(summary.stored),
            summary.unchanged_metadata + summary.unchanged_content,
        )
        return summary

    def _check_collisions(self, paths: list[Path]) -> None:
        collisions = find_alias_collisions(paths, self.cwd)
        if not collisions:
            return
        for alias, members in sorted(collisions.items()):
            logger.error("Alias '%s' is shared by: %s", alias, ", ".join(map(str, members)))
        alias, members = min(collisions.items())
        raise AliasCollisionError(members[-1], alias, [str(m) for m in members[:-1]])

    async def _pipeline_file(
        self,
        path: Path,
        semaphore: asyncio.Semaphore,
        pool: ThreadPoolExecutor,
    ) -> tuple[Path, FileOutcome]:
        try:
            stat = await asyncio.to_thread(path.stat)
        except OSError as e:
            logger.error("Failed to get metadata for %s: %s", path, e)
            raise FileIOError(path) from e
        size, mtime_ns = stat.st_size, stat.st_mtime_ns

        alias = calculate_path_alias(path, self.cwd)
        alias_dir = self.memory_dir / alias
        await asyncio.to_thread(_ensure_dir, alias_dir)
        history = await asyncio.to_thread(load_history, alias_dir, alias, path)

        if history.original_path != str(path):
            logger.error(
                "Alias '%s' already holds history for %s, refusing to merge %s",
                alias,
                history.original_path,
                path,
            )
            raise AliasCollisionError(path, alias, [history.original_path])

        if history.matches_metadata(size, mtime_ns):
            logger.debug("[%s] Skipping unchanged file (metadata).", path.name)
            return path, FileOutcome.UNCHANGED_METADATA

        async with semaphore:
            loop = asyncio.get_running_loop()
            digest = await loop.run_in_executor(pool, self._hash, path, size)

            if history.matches_hash(digest):
                logger.debug("[%s] Skipping unchanged file (content).", path.name)
                return path, FileOutcome.UNCHANGED_CONTENT

            await asyncio.to_thread(
                self._store_version, path, alias_dir, history, digest, size, mtime_ns
            )
        return path, FileOutcome.STORED

    def _hash(self, path: Path, size: int) -> str:
        task_id = self.progress.add_file(path.name, size)
        try:
            return canonical_hash(
                path,
                chunk_size=self.config.hashing.chunk_size,
                on_progress=lambda n: self.progress.advance(task_id, n),
            )
        finally:
            self.progress.finish(task_id, path.name)

    def _store_version(
        self,
        path: Path,
        alias_dir: Path,
        history: FileHistory,
        digest: str,
        size: int,
        mtime_ns: int,
    ) -> FileVersion:
        diff_file = None
        if self.config.diff.enabled:
            diff_file = generate_version_diff(
                path,
                alias_dir,
                size=size,
                version=history.next_version,
                max_size=self.config.diff.max_size,
            )
        finalize_snapshot(path, alias_dir)
        record = append_version(alias_dir, history, digest, size, mtime_ns, diff_file)
        logger.info("[%s] Version v%d stored.", path.name, record.version)
        return record


def process_paths(
    paths: Iterable[Path],
    memory_dir: Path,
    config: OuroborosConfig | None = None,
    progress: ProgressTracker | None = None,
) -> RunSummary:
    """Run Processor.process_all on a fresh event loop."""
    return asyncio.run(Processor(memory_dir, config, progress).process_all(paths))
