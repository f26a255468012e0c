"""Flatten the node tree into the rows currently visible in the tree pane."""

from __future__ import annotations

from dataclasses import dataclass

from .build import iter_nodes
from .types import TreeNode


@dataclass(frozen=True)
class TreeRow:
    """One visible tree-pane row."""

    node: TreeNode
    depth: int


def default_expanded(root: TreeNode) -> set[str]:
    """Return keys of every directory node so the tree starts fully open."""
    return {node.key for node in iter_nodes(root) if node.is_dir}


def visible_rows(root: TreeNode, expanded: set[str], include_root: bool = True) -> list[TreeRow]:
    """List rows in pre-order, descending only into expanded directories."""
    rows: list[TreeRow] = []

    def walk(node: TreeNode, depth: int) -> None:
        rows.append(TreeRow(node, depth))
        if node.is_dir and node.key in expanded:
            for child in node.children:
                walk(child, depth + 1)

    if include_root:
        walk(root, 0)
    else:
        for child in root.children:
            walk(child, 0)
    return rows


def row_index_for_key(rows: list[TreeRow], key: str) -> int | None:
    """Return the index of the row showing ``key``, if visible."""
    for idx, row in enumerate(rows):
        if row.node.key == key:
            return idx
    return None


def parent_key(key: str) -> str:
    """Return the cumulative key of the parent of ``key`` (``""`` for top level)."""
    return key.rsplit("/", 1)[0] if "/" in key else ""
