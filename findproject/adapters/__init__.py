"""Adapters that supply directory listings to the matcher."""

from .filesystem import FileSystemAdapter

__all__ = [
    "FileSystemAdapter",
]
