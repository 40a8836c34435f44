"""Directory scanning service."""
from __future__ import annotations

import os
import stat
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator

from ..core.errors import FileOperationError


@dataclass(frozen=True, slots=True)
class SourceFile:
    """A regular file discovered under the source root."""
    path: Path
    size: int

    @property
    def name(self) -> str:
        return self.path.name


class DirectoryScanner:
    """Walks a source tree and yields its regular files.

    Entries of each directory are visited in lexical order with
    directories and files interleaved, depth first, so the order is
    stable across runs. Symlinks are never followed and anything that
    is not a regular file (links, devices, sockets, FIFOs) is skipped.
    """

    def scan(self, root: Path) -> Iterator[SourceFile]:
        """Yield every regular file below ``root``.

        Raises:
            FileOperationError: If a directory or entry cannot be read.
        """
        yield from self._scan_directory(root)

    def collect(self, root: Path) -> list[SourceFile]:
        """Scan eagerly so the walk is complete before anything is written."""
        return list(self.scan(root))

    def _scan_directory(self, directory: Path) -> Iterator[SourceFile]:
        try:
            with os.scandir(directory) as it:
                entries = sorted(it, key=lambda e: e.name)
        except OSError as e:
            raise FileOperationError(directory, "read directory", e) from e

        for entry in entries:
            path = Path(entry.path)
            try:
                info = entry.stat(follow_symlinks=False)
            except OSError as e:
                raise FileOperationError(path, "stat source entry", e) from e

            if stat.S_ISDIR(info.st_mode):
                yield from self._scan_directory(path)
            elif stat.S_ISREG(info.st_mode):
                yield SourceFile(path=path, size=info.st_size)
