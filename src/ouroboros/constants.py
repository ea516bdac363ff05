"""Constants for ouroboros."""

# Streaming and diff threshold (bytes)
CHUNK_SIZE = 8 * 1024 * 1024

# Concurrent hashing permits
MAX_CONCURRENT_HASHES = 16

# Default memory root, relative to the working directory
DEFAULT_MEMORY_DIR = "memory"

# Per-alias layout
HISTORY_FILE = "history.json"
LATEST_FILE = "latest"
CONFIG_FILE = "config.toml"
STORED_METADATA_FILE = "metadata.json"
VECTOR_STORE_FILE = "vectors.json"

# Readable timestamp format for one-shot store metadata
READABLE_TIME_FORMAT = "%Y-%m-%d %H:%M:%S %A %z"
