"""Filesystem adapter for find-project.

Lists real directories with ``os.scandir``. Each entry gets exactly one
file-type check, ``is_dir(follow_symlinks=False)``: a symlink is never
treated as a directory, whatever it points to.
"""

import os
from pathlib import Path
from typing import List

from ..config import FilterConfig
from ..core.adapter import DirectoryAdapter
from ..errors import DirectoryReadError


class FileSystemAdapter(DirectoryAdapter):
    """Adapter for listing directories on the local filesystem.

    Read failures are never swallowed. A directory that cannot be opened,
    or an entry whose type cannot be determined, raises DirectoryReadError
    and ends the search.
    """

    def list_directories(self, path: Path, config: FilterConfig) -> List[Path]:
        """List the filtered subdirectories of ``path``."""
        dirs: List[Path] = []
        try:
            with os.scandir(path) as entries:
                for entry in entries:
                    if not entry.is_dir(follow_symlinks=False):
                        continue
                    if not config.should_include(entry.name):
                        continue
                    dirs.append(Path(entry.path))
        except OSError as exc:
            raise DirectoryReadError(path, exc.strerror or str(exc)) from exc

        if config.sort_alphabetically:
            dirs.sort(key=str)

        return dirs
