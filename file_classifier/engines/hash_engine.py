"""Content hashing."""
from __future__ import annotations

import hashlib
from pathlib import Path

from ..core.errors import FileOperationError

CHUNK_SIZE = 1024 * 1024


def sha256_file(path: Path, chunk_size: int = CHUNK_SIZE) -> str:
    """Compute SHA256 of file contents as a hex digest."""
    digest = hashlib.sha256()
    try:
        with path.open("rb") as f:
            for chunk in iter(lambda: f.read(chunk_size), b""):
                digest.update(chunk)
    except OSError as e:
        raise FileOperationError(path, "hash", e) from e
    return digest.hexdigest()


class Sha256HashEngine:
    """Full-content SHA256 hashing, read in fixed-size chunks."""

    def __init__(self, chunk_size: int = CHUNK_SIZE):
        if chunk_size < 1:
            raise ValueError("chunk_size must be at least 1")
        self._chunk_size = chunk_size

    def compute_hash(self, path: Path) -> str:
        return sha256_file(path, self._chunk_size)
