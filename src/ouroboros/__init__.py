"""Ouroboros: incremental, content-addressed file versioning."""

__version__ = "0.1.0"
