"""Logging package with Rich-based progress reporting."""

from .rich_logger import QuietProgressReporter, RichProgressReporter

__all__ = ["QuietProgressReporter", "RichProgressReporter"]
