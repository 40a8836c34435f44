"""Main processor - walks the source tree and places every file."""
from __future__ import annotations

import logging
import stat
import time
from dataclasses import dataclass, field
from typing import Optional

from ..core.config import RunConfig
from ..core.errors import FileOperationError
from ..core.models import ProcessingAction, ProcessingResult, ProcessingStats, SkippedEntry
from ..core.protocols import ProgressReporter
from ..engines.category import CategoryResolver
from ..engines.date_resolver import DateResolver
from ..engines.hash_engine import Sha256HashEngine
from .deduplicator import DedupIndex
from .file_ops import FileManager
from .report import ReportWriter
from .scanner import DirectoryScanner, SourceFile

logger = logging.getLogger(__name__)


@dataclass
class ClassifierDependencies:
    """All dependencies needed by the classifier.

    This is explicitly passed in - no globals or singletons.
    """
    categories: CategoryResolver
    dates: DateResolver
    dedup: DedupIndex
    hash_engine: Sha256HashEngine
    scanner: DirectoryScanner
    file_manager: FileManager
    report: ReportWriter
    progress: ProgressReporter

    @classmethod
    def from_config(cls, config: RunConfig, progress: ProgressReporter) -> "ClassifierDependencies":
        settings = config.settings
        return cls(
            categories=CategoryResolver.from_settings(settings),
            dates=DateResolver(settings.date_patterns),
            dedup=DedupIndex(settings.dedup),
            hash_engine=Sha256HashEngine(),
            scanner=DirectoryScanner(),
            file_manager=FileManager(config.destination),
            report=ReportWriter(config.report_path),
            progress=progress,
        )


@dataclass
class RunOutcome:
    """What a finished run produced."""
    stats: ProcessingStats
    skipped: list[SkippedEntry] = field(default_factory=list)
    report_written: bool = False


class Classifier:
    """Copies every regular file of the source tree into its category.

    Per file, in walk order:
    1. resolve the category from the extension,
    2. drop undersized files of size-gated categories,
    3. hash eligible files and skip content already copied,
    4. pick ``<dest>/<category>[/<year>/<yearmonth>]``,
    5. create it, find a free name and copy,
    6. remember the hash of the copy.

    The first filesystem error aborts the run; files already copied stay.
    """

    def __init__(self, config: RunConfig, deps: ClassifierDependencies):
        """Initialize classifier with config and dependencies.

        Args:
            config: Run configuration.
            deps: All required dependencies.
        """
        self._config = config
        self._deps = deps
        self._settings = config.settings
        self._stats = ProcessingStats()
        self._skipped: list[SkippedEntry] = []

    @property
    def skipped(self) -> list[SkippedEntry]:
        return list(self._skipped)

    def run(self) -> RunOutcome:
        """Run the full classification.

        Raises:
            FileOperationError: On the first filesystem failure.
            ReportError: If warn.csv cannot be written.
        """
        start = time.monotonic()
        self._check_source()
        self._deps.file_manager.ensure_directory(self._config.destination)

        files = self._deps.scanner.collect(self._config.source)
        self._stats.total_files = len(files)
        if not files:
            self._deps.progress.info("No files to process")

        progress = self._deps.progress
        progress.start_phase("Classifying", len(files))
        try:
            for source in files:
                result = self.process_file(source)
                self._stats.record(result)
                progress.advance_phase()
        finally:
            progress.end_phase()

        report_written = False
        if self._skipped:
            self._deps.report.write(self._skipped)
            report_written = True

        self._stats.elapsed_seconds = time.monotonic() - start
        return RunOutcome(stats=self._stats, skipped=self.skipped, report_written=report_written)

    def process_file(self, source: SourceFile) -> ProcessingResult:
        """Classify and place a single file."""
        deps = self._deps
        category = deps.categories.category_for(source.name)

        min_size = self._settings.min_sizes.get(category)
        if min_size is not None and source.size < min_size:
            deps.progress.debug(f"skip small {category} file: {source.path}")
            return ProcessingResult(source.path, category, ProcessingAction.SKIPPED_SMALL)

        digest: Optional[str] = None
        if deps.dedup.is_eligible(category):
            digest = deps.hash_engine.compute_hash(source.path)
            existing = deps.dedup.check(category, digest)
            if existing is not None:
                self._skipped.append(SkippedEntry(source=source.path, kept=existing))
                deps.progress.warning(f"duplicate of {existing}: {source.path}")
                return ProcessingResult(
                    source.path,
                    category,
                    ProcessingAction.SKIPPED_DUPLICATE,
                    duplicate_of=existing,
                )

        bucket = None
        if category in self._settings.date_categories:
            bucket = deps.dates.resolve(source.name)

        target_dir = deps.file_manager.build_output_directory(category, bucket)
        deps.file_manager.ensure_directory(target_dir)
        target = deps.file_manager.unique_path(target_dir, source.name)
        deps.file_manager.copy_file(source.path, target)
        deps.progress.debug(f"{source.path} -> {target}")

        if digest is not None:
            deps.dedup.record(category, digest, target)

        return ProcessingResult(source.path, category, ProcessingAction.COPIED, target_path=target)

    def _check_source(self) -> None:
        source = self._config.source
        try:
            info = source.stat()
        except OSError as e:
            raise FileOperationError(source, "read source", e) from e
        if not stat.S_ISDIR(info.st_mode):
            raise FileOperationError(source, "source is not a directory:")
        logger.debug("classifying %s into %s", source, self._config.destination)
