"""Command line entry point for find-project.

Usage:
    find-project myrepo
    find-project --include-vendor --sort-alphabetically myrepo

Prints the absolute path of the first directory named ``myrepo`` below
``$GOPATH/src`` (or ``$FP_FOLDER`` when ``$GOPATH`` is unset), so a shell
function can ``cd "$(find-project myrepo)"``. Set ``$FP_DEBUG`` to trace
every directory visited.
"""

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import List, Mapping, Optional

from . import __version__
from .adapters.filesystem import FileSystemAdapter
from .config import FilterConfig, SearchConfig
from .core.matcher import BreadthFirstMatcher
from .core.sink import LoggingSink
from .errors import FindProjectError
from .log import configure_logging

logger = logging.getLogger(__name__)

EXIT_FOUND = 0
EXIT_FAILURE = 1


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="find-project",
        description=(
            "Search the directory given by $GOPATH/src or $FP_FOLDER "
            "breadth-first for a folder and print its absolute path. "
            "$GOPATH is checked first."
        ),
    )
    parser.add_argument("folder_name", help="Exact name of the folder to find")
    parser.add_argument("--include-vendor", action="store_true",
                        help='Also search in "vendor" folders')
    parser.add_argument("--include-hidden", action="store_true",
                        help="Also search in hidden (dot) folders")
    parser.add_argument("--sort-alphabetically", action="store_true",
                        help="Sort folders alphabetically")
    parser.add_argument("--version", action="version",
                        version=f"%(prog)s {__version__}")
    return parser


def strip_trailing_separators(name: str) -> str:
    """Drop trailing path separators, as left by shell tab-completion.

    A name made only of separators is returned unchanged.
    """
    separators = os.sep + (os.altsep or "")
    return name.rstrip(separators) or name


def write_path(path: Path) -> None:
    """Print ``path`` on stdout as raw filesystem bytes.

    Names that cannot be encoded for stdout are written as they are stored
    on disk instead of raising UnicodeEncodeError.
    """
    buffer = getattr(sys.stdout, "buffer", None)
    if buffer is None:
        print(path)
        return
    sys.stdout.flush()
    buffer.write(os.fsencode(path) + b"\n")
    buffer.flush()


def main(argv: Optional[List[str]] = None,
         environ: Optional[Mapping[str, str]] = None) -> int:
    """Run the CLI and return the process exit status."""
    args = build_parser().parse_args(argv)
    target_name = strip_trailing_separators(args.folder_name)

    filter_config = FilterConfig(
        target_name=target_name,
        include_hidden=args.include_hidden,
        include_vendor=args.include_vendor,
        sort_alphabetically=args.sort_alphabetically,
    )

    # Logging goes up before the root is resolved so config errors are shown.
    configure_logging(debug=False)
    try:
        config = SearchConfig.from_environment(filter_config, environ)
        configure_logging(debug=config.debug)

        sink = LoggingSink() if config.debug else None
        matcher = BreadthFirstMatcher(FileSystemAdapter())
        found = matcher.find(config.root, config.filter, sink=sink)
    except FindProjectError as exc:
        logger.error("%s", exc)
        return EXIT_FAILURE

    if found is None:
        logger.error('Folder "%s" not found inside %s', target_name, config.root)
        return EXIT_FAILURE

    write_path(found)
    return EXIT_FOUND


if __name__ == "__main__":
    sys.exit(main())
