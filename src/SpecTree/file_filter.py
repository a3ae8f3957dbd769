"""Parsing of pasted path lists and regex search over spec paths."""

from __future__ import annotations

import re
from collections.abc import Iterable

from SpecTree.models import PathEntry
from SpecTree.path_classifier import entry_path


def parse_path_input(raw: str) -> list[str]:
    """Split pasted text into paths, one per line.

    Surrounding whitespace is stripped and blank lines are dropped.
    Separators are left untouched: Windows-style paths must be converted
    by the caller.
    """
    if not raw:
        return []
    return [line.strip() for line in raw.splitlines() if line.strip()]


def parse_pattern_input(raw: str) -> list[str]:
    """Split a comma-separated search string into patterns.

    Blank entries and repeats of an earlier pattern are dropped.
    """
    patterns: list[str] = []
    for chunk in (raw or "").split(","):
        pattern = chunk.strip()
        if pattern and pattern not in patterns:
            patterns.append(pattern)
    return patterns


def validate_patterns(patterns: list[str]) -> list[str]:
    """Describe every search pattern that is not a valid regex."""
    errors: list[str] = []
    for pattern in patterns:
        try:
            re.compile(pattern)
        except re.error as exc:
            errors.append(
                f"`{pattern}` is not a valid search pattern: "
                f"{exc.msg} (position {exc.pos})"
            )
    return errors


def compile_patterns(
    patterns: list[str],
    ignore_case: bool = True,
) -> list[re.Pattern[str]]:
    """Compile search patterns, skipping the ones that do not compile."""
    flags = re.IGNORECASE if ignore_case else 0
    compiled: list[re.Pattern[str]] = []
    for pattern in patterns:
        try:
            compiled.append(re.compile(pattern, flags))
        except re.error:
            continue
    return compiled


def matches_search(path: str, compiled: list[re.Pattern[str]]) -> bool:
    """Return True if a spec path is found by the search.

    A pattern may hit anywhere in the path. An empty search finds every spec.
    """
    return not compiled or any(pat.search(path) for pat in compiled)


def filter_paths(
    paths: Iterable[str | PathEntry],
    compiled: list[re.Pattern[str]],
) -> list[str | PathEntry]:
    """Keep the paths found by the search, in input order.

    Entries come back as given, so a ``PathEntry`` keeps its classification.
    """
    return [p for p in paths if matches_search(entry_path(p), compiled)]
