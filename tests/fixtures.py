"""Test fixtures for classifier tests.

Helpers that lay out a source tree on disk and describe where each file
is expected to land.
"""
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

MIB = 1024 * 1024

TEST_CONFIG = """\
categories:
  - name: images
    extensions: [jpg, jpeg, png]
  - name: movies
    extensions:
      - mp4
      - mpeg
  - name: documents
    extensions: [txt, log]
default_category: others
"""

DATED_CONFIG = TEST_CONFIG + """\
date_patterns:
  - '(?P<year>\\d{4})-(?P<month>\\d{2})-\\d{2}'
  - 'IMG_(\\d{4})(\\d{2})\\d{2}'
"""


def big_content(char: str, size: int = 2 * MIB) -> bytes:
    """Content above the image size gate, unique per ``char``."""
    return char.encode() * size


def write_file(directory: Path, name: str, content: bytes | str) -> Path:
    """Write a file, creating parent folders."""
    directory.mkdir(parents=True, exist_ok=True)
    path = directory / name
    if isinstance(content, str):
        content = content.encode()
    path.write_bytes(content)
    return path


@dataclass
class SourceFixture:
    """A file placed in the source tree and where it should end up."""
    name: str
    content: bytes
    subdir: Optional[str] = None
    expected: Optional[str] = None  # Relative to dest; None = not copied

    def create(self, source_root: Path) -> Path:
        directory = source_root / self.subdir if self.subdir else source_root
        return write_file(directory, self.name, self.content)


class Workspace:
    """Source and destination directories under a pytest tmp_path."""

    def __init__(self, tmp_path: Path):
        self.root = tmp_path
        self.source = tmp_path / "src"
        self.dest = tmp_path / "dest"
        self.source.mkdir()

    def add(self, fixture: SourceFixture) -> Path:
        return fixture.create(self.source)

    def write_config(self, text: str = TEST_CONFIG, name: str = "config.yaml") -> Path:
        return write_file(self.root, name, text)

    def dest_files(self) -> list[str]:
        """All files under dest, relative and sorted."""
        if not self.dest.exists():
            return []
        return sorted(
            str(p.relative_to(self.dest)) for p in self.dest.rglob("*") if p.is_file()
        )

    def warn_rows(self) -> list[list[str]]:
        warn = self.dest / "warn.csv"
        return [line.split(",") for line in warn.read_text().strip().splitlines()]
