"""Protocol definitions (interfaces) for dependency injection."""
from __future__ import annotations

from abc import abstractmethod
from typing import Optional, Protocol

from .models import ProcessingStats


class ProgressReporter(Protocol):
    """Interface for progress reporting and user-facing messages.

    Implementations:
    - RichProgressReporter: progress bar and tables on stderr
    - QuietProgressReporter: warnings and errors only
    """

    @abstractmethod
    def start_phase(self, name: str, total: int) -> None:
        """Start a new processing phase."""
        ...

    @abstractmethod
    def advance_phase(self, amount: int = 1) -> None:
        """Advance the current phase."""
        ...

    @abstractmethod
    def end_phase(self) -> None:
        """End the current phase."""
        ...

    @abstractmethod
    def info(self, message: str) -> None:
        ...

    @abstractmethod
    def success(self, message: str) -> None:
        ...

    @abstractmethod
    def warning(self, message: str) -> None:
        ...

    @abstractmethod
    def error(self, message: str) -> None:
        ...

    @abstractmethod
    def debug(self, message: str) -> None:
        ...

    @abstractmethod
    def print_header(self, title: str) -> None:
        ...

    @abstractmethod
    def print_config(self, config_items: dict) -> None:
        ...

    @abstractmethod
    def print_stats(self, stats: ProcessingStats, report: Optional[str] = None) -> None:
        """Print final statistics, with the report path if one was written."""
        ...
