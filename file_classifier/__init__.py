"""Sort a directory tree into category folders.

Files are bucketed by extension, optionally by a year/month found in the
filename, and content duplicates are skipped and listed in warn.csv.
"""

__version__ = "1.0.0"

# Core exports
from .core.config import Category, ClassifierSettings, DedupPolicy, DedupScope, RunConfig, load_settings
from .core.errors import ClassifierError, ConfigError, FileOperationError, UsageError
from .core.models import ProcessingAction, ProcessingResult, ProcessingStats, SkippedEntry
from .core.protocols import ProgressReporter

# Engine exports
from .engines.category import CategoryResolver
from .engines.date_resolver import DateBucket, DateResolver
from .engines.hash_engine import Sha256HashEngine

# Service exports
from .services.processor import Classifier, ClassifierDependencies, RunOutcome
from .services.scanner import DirectoryScanner
from .services.deduplicator import DedupIndex
from .services.file_ops import FileManager
from .services.report import ReportWriter

# Logging exports
from .logging.rich_logger import RichProgressReporter, QuietProgressReporter

__all__ = [
    # Core
    "Category",
    "ClassifierSettings",
    "DedupPolicy",
    "DedupScope",
    "RunConfig",
    "load_settings",
    "ClassifierError",
    "ConfigError",
    "FileOperationError",
    "UsageError",
    "ProcessingAction",
    "ProcessingResult",
    "ProcessingStats",
    "SkippedEntry",
    "ProgressReporter",
    # Engines
    "CategoryResolver",
    "DateBucket",
    "DateResolver",
    "Sha256HashEngine",
    # Services
    "Classifier",
    "ClassifierDependencies",
    "RunOutcome",
    "DirectoryScanner",
    "DedupIndex",
    "FileManager",
    "ReportWriter",
    # Logging
    "RichProgressReporter",
    "QuietProgressReporter",
]
