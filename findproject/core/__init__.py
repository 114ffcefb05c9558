"""Core abstractions for find-project.

This package holds the search algorithm and the interfaces it depends on.
"""

from .adapter import DirectoryAdapter
from .matcher import BreadthFirstMatcher
from .sink import DiagnosticSink, LoggingSink, CollectingSink

__all__ = [
    "DirectoryAdapter",
    "BreadthFirstMatcher",
    "DiagnosticSink",
    "LoggingSink",
    "CollectingSink",
]
