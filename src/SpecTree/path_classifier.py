"""File/folder classification of POSIX path strings."""

from __future__ import annotations

import logging

from SpecTree.models import PathEntry

logger = logging.getLogger(__name__)

SEPARATOR = "/"


class InvalidPathError(ValueError):
    """Raised when a path has no segments (the empty string)."""


def is_file_segment(segment: str) -> bool:
    """Return True if a path segment looks like a file name.

    Files are assumed to have an extension, so any segment containing a
    ``.`` counts as a file. Dotted folder names (``v1.2``) are misread.
    """
    return "." in segment


def entry_path(entry: str | PathEntry) -> str:
    """Return the raw path string of a plain path or a PathEntry."""
    return entry.path if isinstance(entry, PathEntry) else entry


def split_path(path: str) -> list[str]:
    """Split a path on ``/``. The empty string is rejected."""
    if not path:
        logger.warning("Rejected empty path")
        raise InvalidPathError("Path is empty.")
    return path.split(SEPARATOR)


def classify(entry: str | PathEntry) -> tuple[list[str], bool]:
    """Split *entry* and decide whether its last segment is a file.

    An explicit ``PathEntry.is_file`` wins over the dot heuristic.
    """
    segments = split_path(entry_path(entry))
    if isinstance(entry, PathEntry) and entry.is_file is not None:
        return segments, entry.is_file
    return segments, is_file_segment(segments[-1])
