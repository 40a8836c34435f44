"""Core domain models, configuration and protocols."""
from .config import (
    Category,
    ClassifierSettings,
    DedupPolicy,
    DedupScope,
    RunConfig,
    load_settings,
    parse_settings,
)
from .errors import (
    ClassifierError,
    ConfigError,
    FileOperationError,
    NameExhaustedError,
    ReportError,
    UsageError,
)
from .models import ProcessingAction, ProcessingResult, ProcessingStats, SkippedEntry
from .protocols import ProgressReporter

__all__ = [
    # Config
    "Category",
    "ClassifierSettings",
    "DedupPolicy",
    "DedupScope",
    "RunConfig",
    "load_settings",
    "parse_settings",
    # Errors
    "ClassifierError",
    "ConfigError",
    "FileOperationError",
    "NameExhaustedError",
    "ReportError",
    "UsageError",
    # Models
    "ProcessingAction",
    "ProcessingResult",
    "ProcessingStats",
    "SkippedEntry",
    # Protocols
    "ProgressReporter",
]
