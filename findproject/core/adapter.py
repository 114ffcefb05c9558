"""DirectoryAdapter abstraction for find-project.

The adapter knows HOW to list a directory; the matcher only decides the
order in which directories get listed. Keeping them apart lets tests swap in
a fake filesystem without touching the search algorithm.
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import List

from ..config import FilterConfig


class DirectoryAdapter(ABC):
    """Abstract source of filtered directory listings."""

    @abstractmethod
    def list_directories(self, path: Path, config: FilterConfig) -> List[Path]:
        """Return the immediate subdirectories of ``path`` that pass the filter.

        Implementations must:
        - return only entries that are directories themselves
        - drop entries rejected by ``config.should_include``
        - sort by full path when ``config.sort_alphabetically`` is set,
          otherwise keep the order the underlying source yields

        Args:
            path: Directory to list
            config: Active filter switches

        Returns:
            List of child directory paths

        Raises:
            DirectoryReadError: If the directory or one of its entries
                cannot be read
        """
        pass
