"""Configuration for find-project.

The search root is read from the environment exactly once, at startup, and
handed to the search engine inside a ``SearchConfig``. Nothing below the CLI
looks at ``os.environ``.
"""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Mapping, Optional

from .errors import ConfigurationError, PathResolutionError


# Checked first; its value gets GOPATH_SUBDIR appended.
GOPATH_ENV = "GOPATH"
FOLDER_ENV = "FP_FOLDER"
DEBUG_ENV = "FP_DEBUG"

GOPATH_SUBDIR = "src"

HIDDEN_PREFIX = "."
VENDOR_NAME = "vendor"


@dataclass(frozen=True)
class FilterConfig:
    """What to look for and which directories to skip on the way.

    Attributes:
        target_name: Exact directory name to find (no glob or regex).
        include_hidden: Descend into directories whose name starts with ``.``
        include_vendor: Descend into directories named exactly ``vendor``
        sort_alphabetically: Visit siblings in ascending path order instead
            of the order the filesystem returns them in
    """

    target_name: str = ""
    include_hidden: bool = False
    include_vendor: bool = False
    sort_alphabetically: bool = False

    def should_include(self, name: str) -> bool:
        """Check a directory entry name against the hidden/vendor exclusions.

        Args:
            name: Final path component of the entry

        Returns:
            True if the entry survives both exclusion rules
        """
        if not self.include_hidden and name.startswith(HIDDEN_PREFIX):
            return False
        if not self.include_vendor and name == VENDOR_NAME:
            return False
        return True

    def matches(self, path: Path) -> bool:
        """True if the final component of ``path`` is the target name."""
        return path.name == self.target_name


@dataclass(frozen=True)
class SearchConfig:
    """Everything one search needs, resolved up front.

    Attributes:
        root: Absolute, existing directory to search below
        filter: Target name plus filtering and ordering switches
        debug: Emit a diagnostic line for every visited directory
    """

    root: Path
    filter: FilterConfig = field(default_factory=FilterConfig)
    debug: bool = False

    @classmethod
    def from_environment(cls,
                         filter_config: FilterConfig,
                         environ: Optional[Mapping[str, str]] = None) -> 'SearchConfig':
        """Build a config from environment variables.

        Args:
            filter_config: Search criteria, usually built from CLI arguments
            environ: Mapping to read from (defaults to ``os.environ``)

        Returns:
            SearchConfig with a resolved root

        Raises:
            ConfigurationError: If no root variable is set
            PathResolutionError: If the root does not exist
        """
        if environ is None:
            environ = os.environ
        return cls(
            root=resolve_search_root(environ),
            filter=filter_config,
            debug=DEBUG_ENV in environ,
        )


def resolve_search_root(environ: Mapping[str, str]) -> Path:
    """Locate the directory to search below.

    ``$GOPATH`` takes priority over ``$FP_FOLDER``. When ``$GOPATH`` is the
    one used, its ``src`` subdirectory is the root; ``$FP_FOLDER`` is used
    as-is.

    Args:
        environ: Environment mapping

    Returns:
        Absolute path with symlinks resolved

    Raises:
        ConfigurationError: If neither variable is set
        PathResolutionError: If the path cannot be resolved or does not exist
    """
    if GOPATH_ENV in environ:
        location = Path(environ[GOPATH_ENV]) / GOPATH_SUBDIR
        described = f"${GOPATH_ENV}/{GOPATH_SUBDIR}"
    elif FOLDER_ENV in environ:
        location = Path(environ[FOLDER_ENV])
        described = f"${FOLDER_ENV}"
    else:
        raise ConfigurationError(
            f"Please set the ${FOLDER_ENV} environment variable or the "
            f"${GOPATH_ENV} environment variable to a location that "
            f"find-project can search. Neither are set."
        )

    try:
        return location.resolve(strict=True)
    except (OSError, RuntimeError) as exc:
        raise PathResolutionError(
            f"Unable to get absolute path to {described}: {exc}"
        ) from exc
