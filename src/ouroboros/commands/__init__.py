"""CLI command implementations for ouroboros.

This package contains the implementation of each CLI command,
separated from the CLI framework setup in cli.py.
"""

from .history import history
from .ingest import ingest
from .init import init
from .store import store

__all__ = [
    "history",
    "ingest",
    "init",
    "store",
]
