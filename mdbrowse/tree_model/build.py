"""Path-tree construction from a flat list of relative file paths.

Shared path prefixes collapse onto shared ancestor nodes. Nodes are looked up
by their cumulative path key rather than their label, so ``x/f.md`` and
``y/f.md`` produce two distinct ``f.md`` leaves under distinct parents.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence

from .types import DirectoryKind, FileKind, PathEntry, TreeNode

ROOT_LABEL = "Markdown Files"
KEY_SEPARATOR = "/"


def segments_of(path: PathEntry | Sequence[str]) -> tuple[str, ...] | None:
    """Split ``path`` into segments, or return ``None`` when it is malformed.

    Strings are split on ``/``; sequences are taken as already split. Empty
    paths and paths with an empty segment (``a//b.md``, ``/a.md``) are
    malformed.
    """
    if isinstance(path, str):
        if not path:
            return None
        parts = tuple(path.split(KEY_SEPARATOR))
    else:
        parts = tuple(path)
    if not parts or any(not part for part in parts):
        return None
    return parts


def _entry_for(path: PathEntry | Sequence[str], parts: tuple[str, ...]) -> PathEntry:
    if isinstance(path, str):
        return path
    return KEY_SEPARATOR.join(parts)


def build_path_tree(
    paths: Iterable[PathEntry | Sequence[str]],
    ignore: Iterable[str] = (),
    root_label: str = ROOT_LABEL,
) -> TreeNode:
    """Build the browsable tree for ``paths`` in a single pass.

    Paths whose file name is in ``ignore`` contribute nothing. Input order
    decides sibling order. Repeating a path re-marks the same leaf.
    """
    ignored = frozenset(ignore)
    root = TreeNode(label=root_label, key="")
    nodes_by_key: dict[str, TreeNode] = {}

    for path in paths:
        parts = segments_of(path)
        if parts is None:
            continue
        if parts[-1] in ignored:
            continue

        current = root
        key = ""
        for part in parts:
            key = f"{key}{KEY_SEPARATOR}{part}"
            node = nodes_by_key.get(key)
            if node is None:
                node = TreeNode(label=part, key=key, kind=DirectoryKind())
                nodes_by_key[key] = node
                current.children.append(node)
            current = node

        current.kind = FileKind(_entry_for(path, parts))

    return root


def iter_nodes(root: TreeNode) -> Iterator[TreeNode]:
    """Yield ``root`` and all descendants in pre-order."""
    stack = [root]
    while stack:
        node = stack.pop()
        yield node
        stack.extend(reversed(node.children))


def find_node(root: TreeNode, key: str) -> TreeNode | None:
    """Return the node whose cumulative key equals ``key``."""
    return next((node for node in iter_nodes(root) if node.key == key), None)


def leaf_references(root: TreeNode) -> list[PathEntry]:
    """Return file references of all leaves in tree order."""
    return [node.reference for node in iter_nodes(root) if node.reference is not None]
