"""Year/month extraction from filenames.

Patterns are tried in the configured order and the first one that yields
a valid pair wins. For each match the values are taken from, in order of
precedence:

1. the named groups ``year`` and ``month`` when both are non-empty,
2. the first two capture groups, positionally,
3. a scan of the whole match followed by the capture groups for the first
   4-digit token (year) and the first 2-digit token (month), used while
   either value is still empty.

A pair is valid only if the year has 4 characters and the month 2;
otherwise the pattern counts as a miss and the next one is tried.
"""
from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from pathlib import PurePath
from typing import Iterable, Optional

from ..core.errors import ConfigError

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class DateBucket:
    """A resolved ``<year>/<yearmonth>`` folder."""
    year: str
    year_month: str

    @property
    def relative_path(self) -> PurePath:
        return PurePath(self.year, self.year_month)


def _is_digits(value: str) -> bool:
    return value.isascii() and value.isdigit()


def _scan_groups(groups: Iterable[str]) -> tuple[str, str]:
    year = ""
    month = ""
    for value in groups:
        if len(value) == 4 and _is_digits(value) and not year:
            year = value
            continue
        if len(value) == 2 and _is_digits(value) and not month:
            month = value
        if year and month:
            break
    return year, month


def extract_year_month(match: re.Match) -> tuple[str, str]:
    """Pull (year, month) out of a match, possibly empty or malformed."""
    groups = tuple(g or "" for g in match.groups())
    named = match.re.groupindex

    year = month = ""
    if "year" in named and "month" in named:
        year = match.group("year") or ""
        month = match.group("month") or ""
        if not (year and month):
            year = month = ""

    if not (year and month) and len(groups) >= 2:
        year, month = groups[0], groups[1]

    if not (year and month):
        year, month = _scan_groups((match.group(0), *groups))

    return year, month


class DateResolver:
    """Applies an ordered list of regular expressions to filenames."""

    def __init__(self, patterns: Iterable[str | re.Pattern] = ()):
        compiled = []
        for pattern in patterns:
            if isinstance(pattern, re.Pattern):
                compiled.append(pattern)
                continue
            try:
                compiled.append(re.compile(pattern))
            except re.error as e:
                raise ConfigError(f"compile date pattern {pattern!r}: {e}") from e
        self._patterns: tuple[re.Pattern, ...] = tuple(compiled)

    def resolve(self, filename: str) -> Optional[DateBucket]:
        """Return the date bucket for ``filename``, or None if no pattern fits."""
        for pattern in self._patterns:
            match = pattern.search(filename)
            if match is None:
                continue
            year, month = extract_year_month(match)
            if len(year) == 4 and len(month) == 2:
                logger.debug("%s matched %s -> %s/%s", filename, pattern.pattern, year, month)
                return DateBucket(year=year, year_month=year + month)
        return None
