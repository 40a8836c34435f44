"""Configuration schema and loading."""
from __future__ import annotations

import os
import re
from dataclasses import dataclass, field
from enum import Enum
from importlib import resources
from pathlib import Path, PurePath
from typing import Optional

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .errors import ConfigError, UsageError


DEFAULT_CATEGORY = "others"
DEFAULT_REPORT_NAME = "warn.csv"
MIN_IMAGE_SIZE = 1 << 20  # 1 MiB


def check_folder_name(value: str) -> str:
    """Reject names that would not stay a single folder below the destination."""
    separators = {"/", os.sep, os.altsep} - {None}
    if value in (".", "..") or any(sep in value for sep in separators) or PurePath(value).anchor:
        raise ValueError(f"category name must be a plain folder name, got {value!r}")
    return value


class DedupScope(str, Enum):
    """Which files are compared against each other for duplicate content."""
    NONE = "none"          # No hashing at all
    CATEGORY = "category"  # One index per category
    GLOBAL = "global"      # One index shared by all categories


class Category(BaseModel):
    """A named bucket and the extensions that map to it."""
    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1, description="Folder name under the destination")
    extensions: list[str] = Field(default_factory=list, description="Extensions without leading dot")

    @field_validator("name")
    @classmethod
    def plain_name(cls, value: str) -> str:
        return check_folder_name(value)


class DedupPolicy(BaseModel):
    """Content deduplication policy."""
    model_config = ConfigDict(frozen=True)

    scope: DedupScope = Field(
        default=DedupScope.GLOBAL,
        description="none, category (per-category index) or global (one index)",
    )
    categories: Optional[list[str]] = Field(
        default=None,
        description="Hash-eligible categories (None = every category)",
    )

    def is_eligible(self, category: str) -> bool:
        if self.scope == DedupScope.NONE:
            return False
        if self.categories is None:
            return True
        return category in self.categories


class ClassifierSettings(BaseModel):
    """Settings loaded from the YAML configuration.

    Immutable once loaded; the same instance is handed to every resolver.
    """
    model_config = ConfigDict(frozen=True)

    categories: list[Category] = Field(default_factory=list)
    default_category: str = Field(
        default=DEFAULT_CATEGORY,
        description="Category for unknown or missing extensions",
    )
    date_patterns: list[str] = Field(
        default_factory=list,
        description="Regular expressions tried in order to find year/month",
    )
    date_categories: list[str] = Field(
        default_factory=lambda: ["images", "movies"],
        description="Categories that get a <year>/<yearmonth> subfolder",
    )
    min_sizes: dict[str, int] = Field(
        default_factory=lambda: {"images": MIN_IMAGE_SIZE},
        description="Files smaller than this (bytes) are skipped, per category",
    )
    dedup: DedupPolicy = Field(default_factory=DedupPolicy)

    @field_validator("default_category", mode="before")
    @classmethod
    def blank_default(cls, value: Optional[str]) -> str:
        if value is None or not str(value).strip():
            return DEFAULT_CATEGORY
        return value

    @field_validator("default_category")
    @classmethod
    def plain_default(cls, value: str) -> str:
        return check_folder_name(value)

    @field_validator("date_patterns")
    @classmethod
    def compile_patterns(cls, value: list[str]) -> list[str]:
        for pattern in value:
            try:
                re.compile(pattern)
            except re.error as e:
                raise ValueError(f"invalid date pattern {pattern!r}: {e}") from e
        return value

    def with_dedup_scope(self, scope: DedupScope) -> "ClassifierSettings":
        """Return a copy with the dedup scope overridden."""
        return self.model_copy(update={"dedup": self.dedup.model_copy(update={"scope": scope})})


def parse_settings(text: str, source: str = "<string>") -> ClassifierSettings:
    """Parse and validate a YAML document."""
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise ConfigError(f"parse config {source}: {e}") from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigError(f"parse config {source}: top level must be a mapping")

    try:
        return ClassifierSettings.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"invalid config {source}: {e}") from e


def load_embedded_settings() -> ClassifierSettings:
    """Load the default configuration shipped with the package."""
    try:
        text = resources.files("file_classifier.core").joinpath("default_config.yaml").read_text(
            encoding="utf-8"
        )
    except OSError as e:
        raise ConfigError(f"read embedded config: {e}") from e
    return parse_settings(text, source="<embedded>")


def load_settings(path: Optional[Path] = None) -> ClassifierSettings:
    """Load settings from ``path``, or the embedded default if not given."""
    if path is None:
        return load_embedded_settings()

    try:
        text = Path(path).read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"read config {path}: {e}") from e
    return parse_settings(text, source=str(path))


@dataclass(slots=True)
class RunConfig:
    """Everything a single run needs.

    Validation here never touches the filesystem.
    """
    source: Path
    destination: Path
    settings: ClassifierSettings = field(default_factory=ClassifierSettings)
    report_name: str = DEFAULT_REPORT_NAME

    def __post_init__(self) -> None:
        self.source = Path(self.source)
        self.destination = Path(self.destination)
        if not self.source.is_absolute() or not self.destination.is_absolute():
            raise UsageError("source and destination must be absolute paths")

    @property
    def report_path(self) -> Path:
        return self.destination / self.report_name
