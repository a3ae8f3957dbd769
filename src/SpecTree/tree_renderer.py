"""ASCII rendering of spec trees for plain-text display."""

from __future__ import annotations

from collections.abc import Sequence

from SpecTree.models import FolderNode, TreeFolder, TreeNode


def render_forest(nodes: Sequence[TreeNode]) -> str:
    """Render a forest from ``make_file_hierarchy`` as an ASCII tree.

    Example output:
        ├── src/
        │   ├── utils/
        │   └── main.spec.js
        └── app.spec.js

    Children keep the order they have in the tree; nothing is sorted.
    """
    lines: list[str] = []
    _render(list(nodes), lines, prefix="")
    return "\n".join(lines)


def render_tree(folder: TreeFolder, show_root: bool = True) -> str:
    """Render a ``build_tree`` result, headed by the root folder name."""
    lines: list[str] = [f"{folder.name}/"] if show_root else []
    _render(list(folder.children), lines, prefix="")
    return "\n".join(lines)


def _children(node) -> list | None:
    """Return the children of a folder node, or None for a file."""
    if isinstance(node, FolderNode):
        return list(node.files)
    if isinstance(node, TreeFolder):
        return list(node.children)
    return None


def _render(nodes: list, lines: list[str], prefix: str) -> None:
    """Recursively render the nodes into lines."""
    for i, node in enumerate(nodes):
        is_last = i == len(nodes) - 1
        connector = "└── " if is_last else "├── "
        children = _children(node)

        # Append "/" for folders, including empty ones
        display_name = node.name if children is None else f"{node.name}/"
        lines.append(f"{prefix}{connector}{display_name}")

        if children:
            extension = "    " if is_last else "│   "
            _render(children, lines, prefix + extension)
