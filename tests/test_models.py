"""Tests for models module."""

import dataclasses

import pytest

from SpecTree.models import FileNode, FolderNode, NodeType, PathEntry, TreeFile, TreeFolder


class TestNodeType:
    def test_discriminator(self):
        assert FileNode(name="a.js", relative="a.js").type is NodeType.FILE
        assert FolderNode(name="a", relative="a").type is NodeType.FOLDER

    def test_type_not_settable(self):
        with pytest.raises(TypeError):
            FileNode(name="a.js", relative="a.js", type=NodeType.FOLDER)


class TestToDict:
    def test_folder_node(self):
        node = FolderNode(
            name="x",
            relative="x",
            files=(FolderNode(name="y", relative="x/y"), FileNode(name="z.js", relative="x/z.js")),
        )
        assert node.to_dict() == {
            "name": "x",
            "relative": "x",
            "type": "folder",
            "files": [
                {"name": "y", "relative": "x/y", "type": "folder", "files": []},
                {"name": "z.js", "relative": "x/z.js", "type": "file"},
            ],
        }

    def test_tree_folder(self):
        folder = TreeFolder(id="r", name="r", children=(TreeFile(id="a.js", name="a.js"),))
        assert folder.to_dict() == {
            "id": "r",
            "name": "r",
            "children": [{"id": "a.js", "name": "a.js"}],
        }


class TestImmutability:
    def test_nodes_are_frozen(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            FileNode(name="a.js", relative="a.js").name = "b.js"
        with pytest.raises(dataclasses.FrozenInstanceError):
            TreeFolder(id="r", name="r").children = ()

    def test_path_entry_default(self):
        assert PathEntry("a/b").is_file is None
