"""Core versioning logic for ouroboros.

This package contains the storage and change-detection engine:
- alias: Path to storage alias mapping and collision detection
- hasher: CR-insensitive streaming content hash
- history_store: history.json load/append/persist
- snapshot: Diff artifacts and atomic latest snapshots
- pipeline: Concurrent orchestration with a hashing permit pool
- collector: Input path expansion
- storage: One-shot file store with metadata
- vector_store: Embedding persistence and cosine-similarity search
"""

from .alias import calculate_path_alias, find_alias_collisions
from .collector import collect_paths
from .errors import (
    AliasCollisionError,
    CreateDirError,
    FileIOError,
    MetadataError,
    ProcessError,
)
from .hasher import canonical_hash
from .history_store import append_version, get_history_path, load_history, save_history
from .pipeline import Processor, process_paths
from .snapshot import (
    build_diff,
    diff_file_name,
    finalize_snapshot,
    generate_version_diff,
    get_latest_path,
)
from .storage import hash_file, store_file
from .vector_store import VectorStore, cosine_similarity, get_vector_store_path

__all__ = [
    "AliasCollisionError",
    "CreateDirError",
    "FileIOError",
    "MetadataError",
    "ProcessError",
    "Processor",
    "VectorStore",
    "append_version",
    "build_diff",
    "calculate_path_alias",
    "canonical_hash",
    "collect_paths",
    "cosine_similarity",
    "diff_file_name",
    "finalize_snapshot",
    "find_alias_collisions",
    "generate_version_diff",
    "get_history_path",
    "get_latest_path",
    "get_vector_store_path",
    "hash_file",
    "load_history",
    "process_paths",
    "save_history",
    "store_file",
]
