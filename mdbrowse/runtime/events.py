"""Browser events, key-to-event mapping, and the single dispatch function.

Input handling is split in two so behavior is testable without a terminal:
``events_for_key`` turns a decoded key token into events, and ``dispatch``
applies one event to a ``BrowserSession``.
"""

from __future__ import annotations

import time
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path
from typing import Union

from ..fs import read_text, sanitize_terminal_text
from ..markdown import style_markdown_lines
from ..tree_model import parent_key, row_index_for_key
from .state import BrowserSession

STATUS_MESSAGE_SECONDS = 3.0
TOGGLE_VIEW_KEYS = frozenset({"CTRL_P", "CTRL_W"})
ENTER_KEYS = frozenset({"ENTER_CR", "ENTER_LF"})
QUIT_KEYS = frozenset({"q", "CTRL_C"})


@dataclass(frozen=True)
class NodeSelected:
    """A file leaf was chosen; ``path`` is relative to the session root directory."""

    path: str


@dataclass(frozen=True)
class ToggleView:
    """Switch between the tree view and the preview view."""


@dataclass(frozen=True)
class MoveSelection:
    delta: int


@dataclass(frozen=True)
class ToggleDirectory:
    key: str


@dataclass(frozen=True)
class CollapseDirectory:
    """Collapse the selected directory, or jump to its parent."""


@dataclass(frozen=True)
class ExpandDirectory:
    """Expand the selected directory, or step into its first child."""


@dataclass(frozen=True)
class ScrollPreview:
    delta: int


@dataclass(frozen=True)
class Quit:
    pass


Event = Union[
    NodeSelected,
    ToggleView,
    MoveSelection,
    ToggleDirectory,
    CollapseDirectory,
    ExpandDirectory,
    ScrollPreview,
    Quit,
]


def events_for_key(key: str, session: BrowserSession, page_rows: int = 10) -> list[Event]:
    """Translate one key token into events for the currently visible view."""
    if key in TOGGLE_VIEW_KEYS:
        return [ToggleView()]
    if key in QUIT_KEYS:
        return [Quit()]

    page = max(1, page_rows)
    if session.preview_visible:
        if key == "ESC":
            return [ToggleView()]
        steps = {
            "UP": -1,
            "k": -1,
            "DOWN": 1,
            "j": 1,
            "PAGE_UP": -page,
            "b": -page,
            "PAGE_DOWN": page,
            " ": page,
        }
        if key in steps:
            return [ScrollPreview(steps[key])]
        return []

    moves = {"UP": -1, "k": -1, "DOWN": 1, "j": 1, "PAGE_UP": -page, "PAGE_DOWN": page}
    if key in moves:
        return [MoveSelection(moves[key])]
    if key in {"LEFT", "h"}:
        return [CollapseDirectory()]
    if key in {"RIGHT", "l"}:
        return [ExpandDirectory()]
    if key in ENTER_KEYS:
        node = session.selected_node()
        if node is None:
            return []
        if node.reference is not None:
            return [NodeSelected(node.reference)]
        return [ToggleDirectory(node.key)]
    return []


def load_preview(
    session: BrowserSession,
    path: str,
    read_file: Callable[[Path], str] = read_text,
    now: float | None = None,
) -> None:
    """Read, style, and show ``path``; read failures become the preview text."""
    try:
        content = read_file(session.root_dir / path)
    except OSError as exc:
        content = f"Error: {exc}"
        session.set_status(
            f"Cannot read {path}",
            (time.monotonic() if now is None else now) + STATUS_MESSAGE_SECONDS,
        )
    session.preview_lines = style_markdown_lines(sanitize_terminal_text(content))
    session.preview_wrap_key = None
    session.preview_path = path
    session.preview_start = 0
    session.preview_visible = True
    session.dirty = True


def _move_selection(session: BrowserSession, delta: int) -> None:
    if not session.rows:
        return
    target = max(0, min(len(session.rows) - 1, session.selected_idx + delta))
    if target != session.selected_idx:
        session.selected_idx = target
        session.dirty = True


def _collapse_selected(session: BrowserSession) -> None:
    node = session.selected_node()
    if node is None:
        return
    if node.is_dir and node.key in session.expanded:
        session.expanded.discard(node.key)
        session.refresh_rows(node.key)
        return
    if not node.key:
        return
    parent_idx = row_index_for_key(session.rows, parent_key(node.key))
    if parent_idx is not None:
        session.selected_idx = parent_idx
        session.dirty = True


def _expand_selected(session: BrowserSession) -> None:
    node = session.selected_node()
    if node is None or not node.is_dir:
        return
    if node.key not in session.expanded:
        session.expanded.add(node.key)
        session.refresh_rows(node.key)
        return
    if node.children:
        _move_selection(session, 1)


def dispatch(
    session: BrowserSession,
    event: Event,
    read_file: Callable[[Path], str] = read_text,
    now: float | None = None,
) -> None:
    """Apply one event to ``session``."""
    if isinstance(event, NodeSelected):
        load_preview(session, event.path, read_file=read_file, now=now)
        return
    if isinstance(event, ToggleView):
        session.preview_visible = not session.preview_visible
        session.dirty = True
        return
    if isinstance(event, MoveSelection):
        _move_selection(session, event.delta)
        return
    if isinstance(event, ToggleDirectory):
        if event.key in session.expanded:
            session.expanded.discard(event.key)
        else:
            session.expanded.add(event.key)
        session.refresh_rows(event.key)
        return
    if isinstance(event, CollapseDirectory):
        _collapse_selected(session)
        return
    if isinstance(event, ExpandDirectory):
        _expand_selected(session)
        return
    if isinstance(event, ScrollPreview):
        target = max(0, min(session.preview_max_start, session.preview_start + event.delta))
        if target != session.preview_start:
            session.preview_start = target
            session.dirty = True
        return
    if isinstance(event, Quit):
        session.quit_requested = True
        return
    raise TypeError(f"unsupported event: {event!r}")
