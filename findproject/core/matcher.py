"""Breadth-first directory matcher.

Finds the shallowest directory with a given name below a root. The frontier
is a plain list walked front to back by index: entries are appended as they
are discovered and never removed, so after a search it holds every directory
that was queued, in BFS order.
"""

from pathlib import Path
from typing import List, Optional

from ..config import FilterConfig
from .adapter import DirectoryAdapter
from .sink import DiagnosticSink


SEARCHING_PREFIX = "Searching in: "
FOUND_PREFIX = "Found: "


class BreadthFirstMatcher:
    """Breadth-first search for a directory by exact name.

    Every directory at depth N is tested before any directory at depth N+1.
    Among matches at the same depth, the one earliest in listing order wins
    (alphabetical if configured, filesystem order otherwise).

    The root itself is never a candidate: the search begins with the root's
    children.
    """

    def __init__(self, adapter: DirectoryAdapter):
        """Initialize matcher with an adapter.

        Args:
            adapter: DirectoryAdapter used for every listing
        """
        self.adapter = adapter
        self.frontier: List[Path] = []

    def find(self,
             root: Path,
             config: FilterConfig,
             sink: Optional[DiagnosticSink] = None) -> Optional[Path]:
        """Search below ``root`` for ``config.target_name``.

        Each frontier entry is first tested by name, then listed; each of
        its children is tested before being appended, so a match is
        returned as soon as it is discovered rather than when its turn in
        the queue comes.

        Args:
            root: Directory to search below
            config: Target name and filter switches
            sink: Optional receiver for ``Searching in:``/``Found:`` lines

        Returns:
            Path of the first match, or None if the tree holds none

        Raises:
            DirectoryReadError: If any listing fails. The search stops
                there; no partial result is returned.
        """
        self.frontier = self.adapter.list_directories(root, config)
        frontier = self.frontier

        index = 0
        while index < len(frontier):
            directory = frontier[index]
            self._emit(sink, SEARCHING_PREFIX, directory)

            # Only the root's own children can match here; deeper entries
            # were already tested when they were discovered.
            if config.matches(directory):
                self._emit(sink, FOUND_PREFIX, directory)
                return directory

            for child in self.adapter.list_directories(directory, config):
                if config.matches(child):
                    self._emit(sink, FOUND_PREFIX, child)
                    return child
                frontier.append(child)

            index += 1

        return None

    @staticmethod
    def _emit(sink: Optional[DiagnosticSink], prefix: str, path: Path) -> None:
        if sink is not None:
            sink.emit(f"{prefix}{path}")
