"""Composition root for the interactive browser."""

from __future__ import annotations

import sys
from pathlib import Path

from ..tree_model import TreeNode, default_expanded, tree_outline, visible_rows
from ..ui_theme import resolve_theme
from .loop import RuntimeLoopOptions, run_main_loop
from .state import BrowserSession
from .terminal import TerminalController


def run_browser(
    root: TreeNode,
    root_dir: Path,
    theme_name: str | None = None,
    no_color: bool = False,
    nopager: bool = False,
) -> None:
    """Browse ``root`` interactively, or print its outline when not on a TTY."""
    if nopager or not sys.stdin.isatty() or not sys.stdout.isatty():
        expanded = default_expanded(root)
        sys.stdout.write(tree_outline(visible_rows(root, expanded), expanded))
        sys.stdout.flush()
        return

    stdin_fd = sys.stdin.fileno()
    stdout_fd = sys.stdout.fileno()

    session = BrowserSession.create(root, root_dir)
    terminal = TerminalController(stdin_fd, stdout_fd)
    options = RuntimeLoopOptions(theme=resolve_theme(theme_name), no_color=no_color)
    run_main_loop(session, terminal, stdin_fd, options)
