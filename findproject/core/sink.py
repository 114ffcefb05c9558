"""Diagnostic sinks.

The matcher reports progress through a sink instead of writing anywhere
itself. A sink has one job: accept a finished line of text.
"""

import logging
from abc import ABC, abstractmethod
from typing import List, Optional


class DiagnosticSink(ABC):
    """Receiver for search trace lines."""

    @abstractmethod
    def emit(self, line: str) -> None:
        """Record a single diagnostic line."""
        pass


class LoggingSink(DiagnosticSink):
    """Forwards every line to a logger at DEBUG level."""

    def __init__(self, logger: Optional[logging.Logger] = None):
        self.logger = logger or logging.getLogger("findproject.search")

    def emit(self, line: str) -> None:
        self.logger.debug("%s", line)


class CollectingSink(DiagnosticSink):
    """Keeps emitted lines in memory, in emission order."""

    def __init__(self):
        self.lines: List[str] = []

    def emit(self, line: str) -> None:
        self.lines.append(line)

    def __len__(self) -> int:
        return len(self.lines)
