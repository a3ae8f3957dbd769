"""Data classes for SpecTree."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Union


class NodeType(Enum):
    FILE = "file"
    FOLDER = "folder"


@dataclass(frozen=True)
class PathEntry:
    """A path with an optional, caller-supplied file/folder classification.

    When ``is_file`` is None the last segment is classified by the dot
    heuristic, which misreads dotted folder names such as ``v1.2``.
    """

    path: str
    is_file: bool | None = None


@dataclass(frozen=True)
class FileNode:
    name: str
    relative: str
    type: NodeType = field(default=NodeType.FILE, init=False)

    def to_dict(self) -> dict:
        return {"name": self.name, "relative": self.relative, "type": self.type.value}


@dataclass(frozen=True)
class FolderNode:
    name: str
    relative: str
    files: tuple[TreeNode, ...] = ()
    type: NodeType = field(default=NodeType.FOLDER, init=False)

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "relative": self.relative,
            "type": self.type.value,
            "files": [node.to_dict() for node in self.files],
        }


TreeNode = Union[FileNode, FolderNode]


@dataclass(frozen=True)
class TreeFile:
    id: str
    name: str

    def to_dict(self) -> dict:
        return {"id": self.id, "name": self.name}


@dataclass(frozen=True)
class TreeFolder:
    id: str
    name: str
    children: tuple[TreeFolder | TreeFile, ...] = ()

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "children": [child.to_dict() for child in self.children],
        }
