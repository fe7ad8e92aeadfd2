"""
errors.py - Exception hierarchy for vault indexation

Every fatal condition of a run surfaces as an IndexationError that names
the failing path; the underlying OSError is kept as ``__cause__``.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Union


class IndexationError(Exception):
    """Base class for failures that abort an indexing run."""

    action = "failed to index"

    def __init__(self, path: Union[str, Path], cause: Optional[BaseException] = None):
        self.path = str(path)
        self.cause = cause
        message = f"{self.action} {self.path}"
        if cause is not None:
            message = f"{message}: {cause}"
        super().__init__(message)


class CollectionError(IndexationError):
    action = "failed to collect directories under"


class DirectoryReadError(IndexationError):
    action = "failed to read directory"


class IndexWriteError(IndexationError):
    action = "failed to write index"


class ConfigError(ValueError):
    """Raised when run settings fail validation."""
