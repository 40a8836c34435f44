"""Service layer - walking, deduplication, placement and reporting."""
from .scanner import DirectoryScanner, SourceFile
from .deduplicator import DedupIndex
from .file_ops import FileManager, split_name
from .report import ReportWriter
from .processor import Classifier, ClassifierDependencies, RunOutcome

__all__ = [
    "DirectoryScanner",
    "SourceFile",
    "DedupIndex",
    "FileManager",
    "split_name",
    "ReportWriter",
    "Classifier",
    "ClassifierDependencies",
    "RunOutcome",
]
