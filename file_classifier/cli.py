"""Command line entry point: classifier [-c CONFIG] SOURCE DEST."""
from __future__ import annotations

import argparse
import sys
import traceback
from pathlib import Path
from typing import Optional

from .core.config import DedupScope, RunConfig, load_settings
from .core.errors import ClassifierError
from .core.protocols import ProgressReporter
from .logging.rich_logger import QuietProgressReporter, RichProgressReporter
from .services.processor import Classifier, ClassifierDependencies


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="classifier",
        description="Copy files into category folders by extension, date and content.",
    )
    parser.add_argument(
        "source",
        type=Path,
        help="Absolute path of the directory tree to classify",
    )
    parser.add_argument(
        "dest",
        type=Path,
        help="Absolute path of the destination directory (created if missing)",
    )
    parser.add_argument(
        "-c", "--config",
        type=Path,
        default=None,
        help="YAML configuration file (default: built-in configuration)",
    )
    parser.add_argument(
        "--dedup-scope",
        type=str,
        choices=[scope.value for scope in DedupScope],
        default=None,
        help="Override the configured duplicate detection scope",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose output",
    )
    parser.add_argument(
        "-q", "--quiet",
        action="store_true",
        help="Suppress non-essential output",
    )
    return parser


def build_config(args: argparse.Namespace) -> RunConfig:
    """Validate paths, then load settings.

    Path validation comes first so bad arguments never touch the disk.
    """
    config = RunConfig(source=args.source, destination=args.dest)
    settings = load_settings(args.config)
    if args.dedup_scope:
        settings = settings.with_dedup_scope(DedupScope(args.dedup_scope))
    config.settings = settings
    return config


def run(args: argparse.Namespace, reporter: ProgressReporter) -> int:
    """Run one classification and report the outcome."""
    config = build_config(args)

    reporter.print_header("classifier")
    reporter.print_config({
        "Source": str(config.source),
        "Destination": str(config.destination),
        "Config": str(args.config) if args.config else "built-in",
        "Default Category": config.settings.default_category,
        "Date Patterns": len(config.settings.date_patterns),
        "Dedup Scope": config.settings.dedup.scope.value,
    })

    deps = ClassifierDependencies.from_config(config, reporter)
    outcome = Classifier(config=config, deps=deps).run()
    reporter.success(f"Classified {outcome.stats.processed} files into {config.destination}")

    report = str(config.report_path) if outcome.report_written else None
    reporter.print_stats(outcome.stats, report=report)
    return 0


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)

    reporter: ProgressReporter
    if args.quiet:
        reporter = QuietProgressReporter()
    else:
        reporter = RichProgressReporter(verbose=args.verbose)

    try:
        return run(args, reporter)
    except KeyboardInterrupt:
        return 130
    except ClassifierError as e:
        reporter.error(str(e))
        if args.verbose:
            traceback.print_exc()
        return 1


if __name__ == "__main__":
    sys.exit(main())
