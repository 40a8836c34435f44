"""Duplicate report (warn.csv)."""
from __future__ import annotations

import csv
from pathlib import Path
from typing import Iterable

from ..core.errors import ReportError
from ..core.models import SkippedEntry


class ReportWriter:
    """Writes one ``source,kept`` row per suppressed duplicate."""

    def __init__(self, path: Path):
        self._path = path

    def write(self, entries: Iterable[SkippedEntry]) -> int:
        """Write the report, replacing any previous one.

        Paths that are not valid UTF-8 are written back as their original bytes.

        Returns:
            Number of rows written.
        """
        count = 0
        try:
            with self._path.open("w", newline="", encoding="utf-8", errors="surrogateescape") as f:
                writer = csv.writer(f, lineterminator="\n")
                for entry in entries:
                    writer.writerow(entry.as_row())
                    count += 1
        except (OSError, UnicodeError) as e:
            raise ReportError(self._path, "write warnings", e) from e
        return count
