"""Rooted tree built by inserting paths into a folder trie one at a time."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field

from SpecTree.models import PathEntry, TreeFile, TreeFolder
from SpecTree.path_classifier import SEPARATOR, entry_path, split_path

logger = logging.getLogger(__name__)


@dataclass
class _BuildingFile:
    path: str
    name: str


@dataclass
class _BuildingFolder:
    path: str
    name: str
    files: list[_BuildingFile] = field(default_factory=list)
    folders: dict[str, _BuildingFolder] = field(default_factory=dict)


def root_name(root_directory: str) -> str:
    """Return the display name of a root directory path.

    The last non-empty segment is used, so ``"/home/me/project/"`` gives
    ``"project"``. A path without segments gives ``"/"``.
    """
    parts = [part for part in root_directory.split(SEPARATOR) if part]
    return parts[-1] if parts else "/"


def build_tree(
    paths: Iterable[str | PathEntry],
    root_directory: str,
) -> TreeFolder:
    """Build a single rooted tree from file paths relative to *root_directory*.

    The last segment of every path is taken as a file, whether or not it
    has an extension; folders come only from the segments before it.
    Each folder lists its sub-folders (in first-seen order) before its
    files (in insertion order). ``id`` fields hold full paths.
    """
    root = _BuildingFolder(path=root_directory, name=root_name(root_directory))
    count = 0

    for entry in paths:
        file_path = entry_path(entry)
        parts = split_path(file_path)
        parent = root

        for i, part in enumerate(parts[:-1]):
            folder = parent.folders.get(part)
            if folder is None:
                # First time this directory is seen under the parent
                folder = _BuildingFolder(
                    path=SEPARATOR.join(parts[: i + 1]),
                    name=part,
                )
                parent.folders[part] = folder
            parent = folder

        parent.files.append(_BuildingFile(path=file_path, name=parts[-1]))
        count += 1

    logger.debug("Built tree for %s from %d paths", root_directory, count)
    return _convert(root)


def _convert(folder: _BuildingFolder) -> TreeFolder:
    """Freeze a trie folder (and everything below it) into a TreeFolder."""
    return TreeFolder(
        id=folder.path,
        name=folder.name,
        children=(
            *(_convert(sub) for sub in folder.folders.values()),
            *(TreeFile(id=f.path, name=f.name) for f in folder.files),
        ),
    )
