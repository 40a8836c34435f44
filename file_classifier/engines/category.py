"""Extension to category resolution."""
from __future__ import annotations

from ..core.config import ClassifierSettings


def extension_of(filename: str) -> str:
    """Lowercased text after the last dot, or an empty string."""
    _, dot, ext = filename.rpartition(".")
    return ext.lower() if dot else ""


class CategoryResolver:
    """Maps a filename's extension to a category name.

    Built once from the settings and read-only afterwards. Later
    categories win when two of them claim the same extension.
    """

    def __init__(self, extension_map: dict[str, str], default_category: str):
        self._ext_to_category = dict(extension_map)
        self._default = default_category

    @classmethod
    def from_settings(cls, settings: ClassifierSettings) -> "CategoryResolver":
        table: dict[str, str] = {}
        for category in settings.categories:
            for ext in category.extensions:
                clean = ext.lower().lstrip(".")
                if not clean:
                    continue
                table[clean] = category.name
        return cls(table, settings.default_category)

    def category_for(self, filename: str) -> str:
        ext = extension_of(filename)
        if not ext:
            return self._default
        return self._ext_to_category.get(ext, self._default)
