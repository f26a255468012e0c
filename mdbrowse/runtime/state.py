"""Mutable browsing-session state owned by the runtime loop."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from ..markdown import StyledLine
from ..tree_model import TreeNode, TreeRow, default_expanded, row_index_for_key, visible_rows


@dataclass
class BrowserSession:
    """Everything that changes while the browser runs.

    The tree itself is read-only after startup; only expansion, selection,
    scroll offsets, the visible view, and the current preview change.
    """

    root: TreeNode
    root_dir: Path
    expanded: set[str]
    rows: list[TreeRow]
    selected_idx: int = 0
    tree_start: int = 0
    tree_view_rows: int = 1
    preview_visible: bool = False
    preview_path: str | None = None
    preview_lines: list[StyledLine] = field(default_factory=list)
    preview_start: int = 0
    preview_max_start: int = 0
    preview_wrap_key: tuple | None = None
    preview_wrapped: list[str] = field(default_factory=list)
    status_message: str = ""
    status_message_until: float = 0.0
    dirty: bool = True
    quit_requested: bool = False

    @classmethod
    def create(cls, root: TreeNode, root_dir: Path) -> BrowserSession:
        """Start a session with every directory expanded and the first file selected."""
        expanded = default_expanded(root)
        rows = visible_rows(root, expanded)
        selected_idx = next((idx for idx, row in enumerate(rows) if row.node.selectable), 0)
        return cls(root=root, root_dir=Path(root_dir), expanded=expanded, rows=rows, selected_idx=selected_idx)

    def selected_node(self) -> TreeNode | None:
        if not self.rows:
            return None
        return self.rows[max(0, min(self.selected_idx, len(self.rows) - 1))].node

    def refresh_rows(self, keep_key: str | None = None) -> None:
        """Recompute visible rows, keeping selection on ``keep_key`` when still visible."""
        if keep_key is None:
            current = self.selected_node()
            keep_key = current.key if current is not None else ""
        self.rows = visible_rows(self.root, self.expanded)
        idx = row_index_for_key(self.rows, keep_key)
        if idx is None:
            idx = min(self.selected_idx, max(0, len(self.rows) - 1))
        self.selected_idx = idx
        self.dirty = True

    def set_status(self, message: str, until: float) -> None:
        self.status_message = message
        self.status_message_until = until
        self.dirty = True
