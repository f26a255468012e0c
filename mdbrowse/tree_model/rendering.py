"""Formatting helpers for tree-pane rows."""

from __future__ import annotations

from ..ui_theme import DEFAULT_THEME, UITheme
from .rows import TreeRow


def format_tree_row(
    row: TreeRow,
    expanded: set[str],
    theme: UITheme | None = None,
    no_color: bool = False,
) -> str:
    """Render one tree row as display text, ANSI-styled unless ``no_color``."""
    active_theme = theme or DEFAULT_THEME
    node = row.node
    indent = "  " * row.depth

    def paint(color: str, text: str) -> str:
        if no_color or not color:
            return text
        return f"{color}{text}{active_theme.reset}"

    if node.is_dir:
        marker = "▾ " if node.key in expanded else "▸ "
        color = active_theme.tree_root if not node.key else active_theme.tree_dir
        suffix = "" if not node.key else "/"
        return f"{indent}{paint(active_theme.tree_marker, marker)}{paint(color, node.label + suffix)}"

    # Align file names under the parent directory arrow column.
    return f"{indent}  {paint(active_theme.tree_file, node.label)}"


def tree_outline(rows: list[TreeRow], expanded: set[str]) -> str:
    """Plain-text outline of ``rows``, one per line."""
    return "".join(format_tree_row(row, expanded, no_color=True) + "\n" for row in rows)
