"""Error hierarchy for DOT serialization."""

from __future__ import annotations


class DotGraphError(Exception):
    """Base error for all dotgraph errors."""

    def __init__(self, message: str, *, cause: Exception | None = None):
        super().__init__(message)
        self.cause = cause


class DotWriteError(DotGraphError):
    """The byte sink failed while a graph was being written."""
