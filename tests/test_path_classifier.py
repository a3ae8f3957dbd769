"""Tests for path_classifier module."""

import pytest

from SpecTree.models import PathEntry
from SpecTree.path_classifier import (
    InvalidPathError,
    classify,
    entry_path,
    is_file_segment,
    split_path,
)


class TestIsFileSegment:
    def test_extension_is_file(self):
        assert is_file_segment("login.spec.js") is True
        assert is_file_segment("README.md") is True

    def test_no_dot_is_folder(self):
        assert is_file_segment("integration") is False
        assert is_file_segment("Makefile") is False

    def test_dotted_folder_is_misread_as_file(self):
        assert is_file_segment("v1.2") is True

    def test_hidden_file(self):
        assert is_file_segment(".eslintrc") is True


class TestSplitPath:
    def test_splits_on_slash(self):
        assert split_path("a/b/c.js") == ["a", "b", "c.js"]

    def test_single_segment(self):
        assert split_path("foo.js") == ["foo.js"]

    def test_empty_raises(self):
        with pytest.raises(InvalidPathError, match="empty"):
            split_path("")

    def test_backslash_is_not_a_separator(self):
        assert split_path("a\\b.js") == ["a\\b.js"]


class TestClassify:
    def test_plain_string_uses_heuristic(self):
        assert classify("foo/bar.js") == (["foo", "bar.js"], True)
        assert classify("foo/bar") == (["foo", "bar"], False)

    def test_explicit_flag_wins(self):
        assert classify(PathEntry("foo/Makefile", is_file=True)) == (
            ["foo", "Makefile"],
            True,
        )
        assert classify(PathEntry("lib/v1.2", is_file=False)) == (
            ["lib", "v1.2"],
            False,
        )

    def test_entry_without_flag_uses_heuristic(self):
        assert classify(PathEntry("lib/v1.2")) == (["lib", "v1.2"], True)

    def test_empty_entry_raises(self):
        with pytest.raises(InvalidPathError):
            classify(PathEntry(""))


class TestEntryPath:
    def test_string(self):
        assert entry_path("a/b.js") == "a/b.js"

    def test_path_entry(self):
        assert entry_path(PathEntry("a/b.js", is_file=True)) == "a/b.js"
