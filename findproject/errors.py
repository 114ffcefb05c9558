"""Exception hierarchy for find-project.

Every failure is fatal: nothing here is retried or skipped, and the CLI is
the only place these exceptions are caught.
"""

from pathlib import Path
from typing import Optional, Union


class FindProjectError(Exception):
    """Base class for all find-project errors."""


class ConfigurationError(FindProjectError):
    """Neither root-location environment variable is set."""


class PathResolutionError(FindProjectError):
    """The configured search root cannot be made absolute or does not exist."""


class DirectoryReadError(FindProjectError):
    """A directory could not be listed, or an entry's type could not be read.

    Raised for the search root as well as for any subdirectory discovered
    during the search. The underlying ``OSError`` is chained as ``__cause__``.
    """

    def __init__(self, path: Union[str, Path], reason: Optional[str] = None):
        self.path = Path(path)
        self.reason = reason
        message = f"Unable to read directory '{self.path}'"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)
