"""Error taxonomy. Every failure is terminal for a run."""
from __future__ import annotations

from pathlib import Path
from typing import Optional


class ClassifierError(Exception):
    """Base class for all classifier failures."""


class UsageError(ClassifierError):
    """Invalid command line arguments."""


class ConfigError(ClassifierError):
    """Configuration could not be read, parsed or validated."""


class FileOperationError(ClassifierError):
    """A filesystem operation failed.

    The offending path is kept on the exception and the underlying
    ``OSError`` is chained as ``__cause__`` by the raiser.
    """

    def __init__(self, path: Path, message: str, cause: Optional[BaseException] = None):
        self.path = path
        detail = f"{message} {path}"
        if cause is not None:
            detail = f"{detail}: {cause}"
        super().__init__(detail)


class NameExhaustedError(FileOperationError):
    """No free numbered name was found below the suffix cap."""


class ReportError(FileOperationError):
    """The duplicate report could not be written."""
