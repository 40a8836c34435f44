"""Duplicate detection by content hash."""
from __future__ import annotations

from pathlib import Path
from typing import Optional

from ..core.config import DedupPolicy, DedupScope

_GLOBAL = ""


class DedupIndex:
    """Remembers where each content hash was first copied.

    With ``DedupScope.GLOBAL`` every eligible file shares one index; with
    ``DedupScope.CATEGORY`` each category gets its own, so identical
    content in two categories is copied twice. First sighting wins: the
    orchestrator records a hash only after its copy succeeded.
    """

    def __init__(self, policy: DedupPolicy):
        self._policy = policy
        self._indexes: dict[str, dict[str, Path]] = {}

    def is_eligible(self, category: str) -> bool:
        """Whether files of ``category`` should be hashed at all."""
        return self._policy.is_eligible(category)

    def _scope_key(self, category: str) -> str:
        if self._policy.scope == DedupScope.CATEGORY:
            return category
        return _GLOBAL

    def check(self, category: str, digest: str) -> Optional[Path]:
        """Return the path already kept for ``digest``, if any."""
        return self._indexes.get(self._scope_key(category), {}).get(digest)

    def record(self, category: str, digest: str, path: Path) -> None:
        """Register ``path`` as the kept copy of ``digest``.

        An existing entry is left untouched.
        """
        index = self._indexes.setdefault(self._scope_key(category), {})
        index.setdefault(digest, path)
