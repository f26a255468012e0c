"""Tree-model creation, flattening, and row formatting.

Builds ``TreeNode`` hierarchies from relative Markdown paths and projects them
into visible tree-pane rows.
"""

from __future__ import annotations

from .build import ROOT_LABEL, build_path_tree, find_node, iter_nodes, leaf_references, segments_of
from .layout import clamp_left_width, compute_left_width
from .rendering import format_tree_row, tree_outline
from .rows import TreeRow, default_expanded, parent_key, row_index_for_key, visible_rows
from .types import DirectoryKind, FileKind, NodeKind, PathEntry, TreeNode

__all__ = [
    "ROOT_LABEL",
    "DirectoryKind",
    "FileKind",
    "NodeKind",
    "PathEntry",
    "TreeNode",
    "TreeRow",
    "build_path_tree",
    "clamp_left_width",
    "compute_left_width",
    "default_expanded",
    "find_node",
    "format_tree_row",
    "iter_nodes",
    "leaf_references",
    "parent_key",
    "row_index_for_key",
    "segments_of",
    "tree_outline",
    "visible_rows",
]
