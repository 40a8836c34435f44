"""Domain models - immutable data classes."""
from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Optional


class ProcessingAction(Enum):
    """What action was taken on a file."""
    COPIED = "copied"
    SKIPPED_DUPLICATE = "skipped_duplicate"
    SKIPPED_SMALL = "skipped_small"


@dataclass(frozen=True, slots=True)
class SkippedEntry:
    """A source file suppressed because its content was already copied."""
    source: Path
    kept: Path

    def as_row(self) -> list[str]:
        return [str(self.source), str(self.kept)]


@dataclass(frozen=True, slots=True)
class ProcessingResult:
    """Result of processing a single file."""
    source: Path
    category: str
    action: ProcessingAction
    target_path: Optional[Path] = None
    duplicate_of: Optional[Path] = None

    @property
    def renamed(self) -> bool:
        """True if the copy landed under a numbered name."""
        return self.target_path is not None and self.target_path.name != self.source.name


@dataclass(slots=True)
class ProcessingStats:
    """Mutable statistics for a processing run."""
    total_files: int = 0
    processed: int = 0
    copied: int = 0
    renamed: int = 0
    skipped_duplicate: int = 0
    skipped_small: int = 0
    elapsed_seconds: float = 0.0
    per_category: Counter = field(default_factory=Counter)

    def record(self, result: ProcessingResult) -> None:
        """Record a processing result."""
        self.processed += 1
        match result.action:
            case ProcessingAction.COPIED:
                self.copied += 1
                self.per_category[result.category] += 1
                if result.renamed:
                    self.renamed += 1
            case ProcessingAction.SKIPPED_DUPLICATE:
                self.skipped_duplicate += 1
            case ProcessingAction.SKIPPED_SMALL:
                self.skipped_small += 1

