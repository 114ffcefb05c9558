"""High-level API for find-project.

Simple functional wrappers around the adapter and matcher for callers that
do not need to build the objects themselves.
"""

from pathlib import Path
from typing import List, Optional, Union

from .adapters.filesystem import FileSystemAdapter
from .config import FilterConfig
from .core.matcher import BreadthFirstMatcher
from .core.sink import DiagnosticSink


def list_directories(
    path: Union[str, Path],
    include_hidden: bool = False,
    include_vendor: bool = False,
    sort_alphabetically: bool = False,
) -> List[Path]:
    """List the immediate subdirectories of ``path`` after filtering.

    Args:
        path: Directory to list
        include_hidden: Keep entries whose name starts with ``.``
        include_vendor: Keep entries named ``vendor``
        sort_alphabetically: Sort the result by full path

    Returns:
        List of child directory paths

    Raises:
        DirectoryReadError: If the directory cannot be read

    Example:
        >>> list_directories("/home/user/src", sort_alphabetically=True)
        [PosixPath('/home/user/src/alpha'), PosixPath('/home/user/src/beta')]
    """
    config = FilterConfig(
        include_hidden=include_hidden,
        include_vendor=include_vendor,
        sort_alphabetically=sort_alphabetically,
    )
    return FileSystemAdapter().list_directories(Path(path), config)


def find_directory(
    name: str,
    root: Union[str, Path],
    include_hidden: bool = False,
    include_vendor: bool = False,
    sort_alphabetically: bool = False,
    sink: Optional[DiagnosticSink] = None,
) -> Optional[Path]:
    """Find the shallowest directory called ``name`` below ``root``.

    Args:
        name: Exact directory name to look for
        root: Directory to search below (never matched itself)
        include_hidden: Also search inside dot-directories
        include_vendor: Also search inside ``vendor`` directories
        sort_alphabetically: Break same-depth ties alphabetically
        sink: Optional receiver for trace lines

    Returns:
        Path of the match, or None

    Raises:
        DirectoryReadError: If any visited directory cannot be read
    """
    config = FilterConfig(
        target_name=name,
        include_hidden=include_hidden,
        include_vendor=include_vendor,
        sort_alphabetically=sort_alphabetically,
    )
    matcher = BreadthFirstMatcher(FileSystemAdapter())
    return matcher.find(Path(root), config, sink=sink)
