"""Depth-grouped folder hierarchy built from a flat list of paths.

Folders are inferred from path strings alone, grouped by depth (number of
``/`` separators) and walked top-down from depth 0:

    make_file_hierarchy(["x/y/z.js"])
    # [FolderNode(name="x", relative="x", files=(
    #     FolderNode(name="y", relative="x/y", files=(
    #         FileNode(name="z.js", relative="x/y/z.js"),)),))]

Files that have no enclosing folder are not part of the forest; they are
returned separately by ``get_root_files``.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from SpecTree.models import FileNode, FolderNode, PathEntry, TreeNode
from SpecTree.path_classifier import SEPARATOR, classify

logger = logging.getLogger(__name__)

# Key of the files that sit directly at the root, outside any folder
ROOT_KEY = "/"


def get_all_folders(paths: Iterable[str | PathEntry]) -> list[str]:
    """Return every folder implied by *paths*, in first-discovery order.

    Example:
        get_all_folders(["foo.js", "foo/y/bar.js", "foo/bar", "a/b/c"])
        # ["foo", "foo/y", "foo/bar", "a", "a/b", "a/b/c"]
    """
    folders: dict[str, None] = {}
    for entry in paths:
        segments, has_file = classify(entry)
        dir_only = segments[:-1] if has_file else segments
        for i in range(len(dir_only)):
            folders.setdefault(SEPARATOR.join(dir_only[: i + 1]), None)
    return list(folders)


def group_folders_by_depth(folders: Iterable[str]) -> dict[int, list[str]]:
    """Group folder paths by the number of separators they contain."""
    by_depth: dict[int, list[str]] = {}
    for folder in folders:
        by_depth.setdefault(folder.count(SEPARATOR), []).append(folder)
    return by_depth


def get_all_files(paths: Iterable[str | PathEntry]) -> dict[str, list[str]]:
    """Map each folder path to the names of the files directly inside it.

    Root-level files are collected under ``ROOT_KEY``, which is always
    present. Duplicate paths produce duplicate names.
    """
    files: dict[str, list[str]] = {ROOT_KEY: []}
    for entry in paths:
        segments, has_file = classify(entry)
        if not has_file:
            continue
        if len(segments) == 1:
            files[ROOT_KEY].append(segments[0])
        else:
            folder = SEPARATOR.join(segments[:-1])
            files.setdefault(folder, []).append(segments[-1])
    return files


def make_file_hierarchy(paths: Iterable[str | PathEntry]) -> list[TreeNode]:
    """Build the folder forest for *paths*.

    Each folder lists its nested folders first, then its own files in
    input order. Root-level files are left out; see ``get_root_files``.
    """
    paths = list(paths)
    folders_by_depth = group_folders_by_depth(get_all_folders(paths))
    files_by_folder = get_all_files(paths)

    def walk(folders: list[str], depth: int = 0) -> list[TreeNode]:
        nodes: list[TreeNode] = []
        for folder in folders:
            deeper = folders_by_depth.get(depth + 1, [])
            prefix = folder + SEPARATOR
            nested = walk([f for f in deeper if f.startswith(prefix)], depth + 1)
            contained = [
                FileNode(name=name, relative=f"{folder}{SEPARATOR}{name}")
                for name in files_by_folder.get(folder, [])
            ]
            nodes.append(
                FolderNode(
                    name=folder.rsplit(SEPARATOR, maxsplit=1)[-1],
                    relative=folder,
                    files=(*nested, *contained),
                )
            )
        return nodes

    forest = walk(folders_by_depth.get(0, []))
    logger.debug(
        "Built file hierarchy: %d paths, %d top-level folders",
        len(paths),
        len(forest),
    )
    return forest


def get_root_files(paths: Iterable[str | PathEntry]) -> list[FileNode]:
    """Return the files that have no enclosing folder, in input order."""
    return [
        FileNode(name=name, relative=name)
        for name in get_all_files(paths)[ROOT_KEY]
    ]


def make_combined_hierarchy(paths: Iterable[str | PathEntry]) -> list[TreeNode]:
    """Return the folder forest followed by the root-level files."""
    paths = list(paths)
    return [*make_file_hierarchy(paths), *get_root_files(paths)]
