"""Logging setup for the find-project command line.

All diagnostics go through the ``findproject`` logger to stderr, one bare
message per line. Standard output is reserved for the matched path.
"""

import logging
import sys
from typing import Optional, TextIO

LOGGER_NAME = "findproject"

# Marks handlers installed here so reconfiguring replaces only our own.
_HANDLER_TAG = "_findproject_handler"


def configure_logging(debug: bool = False, stream: Optional[TextIO] = None) -> logging.Logger:
    """Attach a stream handler to the package logger.

    Safe to call more than once; a previous handler from this function is
    removed first.

    Args:
        debug: Show DEBUG records (the per-directory search trace)
        stream: Destination, defaults to the current ``sys.stderr``

    Returns:
        The configured ``findproject`` logger
    """
    logger = logging.getLogger(LOGGER_NAME)

    for handler in list(logger.handlers):
        if getattr(handler, _HANDLER_TAG, False):
            logger.removeHandler(handler)
            handler.close()

    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.setFormatter(logging.Formatter("%(message)s"))
    setattr(handler, _HANDLER_TAG, True)

    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG if debug else logging.INFO)
    logger.propagate = False
    return logger
