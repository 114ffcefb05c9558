"""find-project - jump to a project folder by name.

Searches a configured root breadth-first for a directory with an exact
name and returns the shallowest match.

Library use:
    from findproject import find_directory
    find_directory("myrepo", "/home/user/go/src")

Command line:
    find-project myrepo
"""

__version__ = "0.1.0"

from .errors import (
    FindProjectError,
    ConfigurationError,
    PathResolutionError,
    DirectoryReadError,
)
from .config import FilterConfig, SearchConfig, resolve_search_root
from .core import (
    DirectoryAdapter,
    BreadthFirstMatcher,
    DiagnosticSink,
    LoggingSink,
    CollectingSink,
)
from .adapters import FileSystemAdapter
from .api import find_directory, list_directories

__all__ = [
    "__version__",
    # Errors
    "FindProjectError",
    "ConfigurationError",
    "PathResolutionError",
    "DirectoryReadError",
    # Config
    "FilterConfig",
    "SearchConfig",
    "resolve_search_root",
    # Core
    "DirectoryAdapter",
    "BreadthFirstMatcher",
    "DiagnosticSink",
    "LoggingSink",
    "CollectingSink",
    "FileSystemAdapter",
    # API
    "find_directory",
    "list_directories",
]
