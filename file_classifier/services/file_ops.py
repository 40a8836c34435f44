"""File operations service."""
from __future__ import annotations

import shutil
from pathlib import Path
from typing import Optional

from ..core.errors import FileOperationError, NameExhaustedError
from ..engines.date_resolver import DateBucket

DEFAULT_MAX_SUFFIX = 100_000


def split_name(name: str) -> tuple[str, str]:
    """Split ``name`` at its last dot; the extension keeps the dot."""
    index = name.rfind(".")
    if index == -1:
        return name, ""
    return name[:index], name[index:]


class FileManager:
    """Places files under the destination root.

    Assumes exclusive use of the destination for the duration of a run:
    the existence probe in ``unique_path`` is not atomic.
    """

    def __init__(self, output_root: Path, max_suffix: int = DEFAULT_MAX_SUFFIX):
        """Initialize file manager.

        Args:
            output_root: Root directory for output.
            max_suffix: Highest numeric suffix tried before giving up.
        """
        self._output_root = output_root
        self._max_suffix = max_suffix

    def build_output_directory(self, category: str, bucket: Optional[DateBucket] = None) -> Path:
        """``<root>/<category>`` plus ``<year>/<yearmonth>`` when dated."""
        directory = self._output_root / category
        if bucket is not None:
            directory = directory / bucket.relative_path
        return directory

    def ensure_directory(self, path: Path) -> None:
        """Create ``path`` and its parents if missing."""
        try:
            path.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise FileOperationError(path, "create directory", e) from e

    def unique_path(self, directory: Path, name: str) -> Path:
        """Return a path in ``directory`` that does not exist yet.

        ``name`` is used as is when free; otherwise ``base_1.ext``,
        ``base_2.ext``, ... are probed in order.
        """
        target = directory / name
        if not self._exists(target):
            return target

        base, ext = split_name(name)
        for counter in range(1, self._max_suffix + 1):
            candidate = directory / f"{base}_{counter}{ext}"
            if not self._exists(candidate):
                return candidate

        raise NameExhaustedError(target, f"no free name after {self._max_suffix} attempts for")

    def copy_file(self, source: Path, target: Path) -> None:
        """Copy file bytes and permission bits."""
        try:
            shutil.copyfile(source, target)
        except OSError as e:
            raise FileOperationError(source, f"copy to {target} from", e) from e
        try:
            shutil.copymode(source, target)
        except OSError as e:
            raise FileOperationError(target, "set permissions on", e) from e

    @staticmethod
    def _exists(path: Path) -> bool:
        try:
            path.lstat()
        except FileNotFoundError:
            return False
        except OSError as e:
            raise FileOperationError(path, "stat destination", e) from e
        return True
