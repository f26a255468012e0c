"""Tests for frame composition and viewport bookkeeping."""

from __future__ import annotations

import unittest
from pathlib import Path
from unittest import mock

from mdbrowse.ansi import strip_ansi
from mdbrowse.runtime import BrowserSession, NodeSelected, dispatch
from mdbrowse.runtime.render import (
    PREVIEW_HINT,
    TREE_HINT,
    compose_frame,
    preview_screen_lines,
    split_widths,
    update_viewport,
)
from mdbrowse.tree_model import build_path_tree

FRAME_PREFIX = "\033[H\033[J"


def _make_session() -> BrowserSession:
    root = build_path_tree(["docs/a.md", "docs/b.md", "top.md"])
    return BrowserSession.create(root, Path("/srv/pages"))


def _frame_rows(frame: str) -> list[str]:
    assert frame.startswith(FRAME_PREFIX)
    return frame[len(FRAME_PREFIX):].split("\r\n")


class TreeViewFrameTests(unittest.TestCase):
    def test_tree_view_fills_height_and_ends_with_status(self) -> None:
        session = _make_session()

        rows = _frame_rows(compose_frame(session, 70, 8, no_color=True))

        self.assertEqual(len(rows), 8)
        self.assertEqual(rows[0].rstrip(), "▾ Markdown Files")
        self.assertEqual(rows[2].rstrip(), "      a.md")
        self.assertIn(TREE_HINT, rows[-1])
        self.assertTrue(all(len(row) == 70 for row in rows[:-1]))

    def test_selected_row_is_highlighted(self) -> None:
        session = _make_session()

        rows = _frame_rows(compose_frame(session, 60, 8))

        self.assertTrue(rows[2].startswith("\033[7m"))
        self.assertFalse(rows[3].startswith("\033[7m"))

    def test_status_message_replaces_title(self) -> None:
        session = _make_session()
        session.set_status("Cannot read docs/a.md", until=50.0)

        active = _frame_rows(compose_frame(session, 60, 5, no_color=True, now=10.0))[-1]
        expired = _frame_rows(compose_frame(session, 60, 5, no_color=True, now=60.0))[-1]

        self.assertIn("Cannot read docs/a.md", active)
        self.assertNotIn("Cannot read", expired)


class PreviewFrameTests(unittest.TestCase):
    def test_split_widths(self) -> None:
        self.assertEqual(split_widths(80), (26, 53))

    def test_preview_view_shows_tree_and_styled_text(self) -> None:
        session = _make_session()
        dispatch(session, NodeSelected("docs/a.md"), read_file=lambda _path: "# Hello\nworld\n")

        frame = compose_frame(session, 80, 6)
        rows = [strip_ansi(row) for row in _frame_rows(frame)]

        self.assertIn("\033[1m\033[4m\033[33mHello\033[0m", frame)
        self.assertEqual(rows[0], "▾ Markdown Files".ljust(26) + "│Hello")
        self.assertEqual(rows[1], "  ▾ docs/".ljust(26) + "│world")
        self.assertIn("docs/a.md (1-2/2)", rows[-1])
        self.assertIn(PREVIEW_HINT, rows[-1])

    def test_preview_long_lines_wrap_to_pane(self) -> None:
        session = _make_session()
        dispatch(session, NodeSelected("top.md"), read_file=lambda _path: "x" * 60)

        rows = [strip_ansi(row) for row in _frame_rows(compose_frame(session, 80, 6, no_color=True))]

        self.assertEqual(rows[0].split("│", 1)[1], "x" * 53)
        self.assertEqual(rows[1].split("│", 1)[1], "x" * 7)

    def test_preview_scroll_offsets_visible_lines(self) -> None:
        session = _make_session()
        content = "\n".join(f"line {idx}" for idx in range(30))
        dispatch(session, NodeSelected("top.md"), read_file=lambda _path: content)
        session.preview_start = 5

        rows = _frame_rows(compose_frame(session, 80, 6, no_color=True))

        self.assertTrue(rows[0].endswith("│line 5"))
        self.assertIn("(6-10/30)", rows[-1])

    def test_toggled_preview_without_selection(self) -> None:
        session = _make_session()
        session.preview_visible = True

        rows = _frame_rows(compose_frame(session, 80, 4, no_color=True))

        self.assertIn("no file selected", rows[-1])


class UpdateViewportTests(unittest.TestCase):
    def test_preview_max_start_tracks_content_height(self) -> None:
        session = _make_session()
        content = "\n".join(f"line {idx}" for idx in range(30))
        dispatch(session, NodeSelected("top.md"), read_file=lambda _path: content)
        session.preview_start = 100

        update_viewport(session, 80, 10)

        self.assertEqual(session.tree_view_rows, 9)
        self.assertEqual(session.preview_max_start, 21)
        self.assertEqual(session.preview_start, 21)

    def test_tree_scrolls_to_keep_selection_visible(self) -> None:
        root = build_path_tree([f"f{idx:02d}.md" for idx in range(20)])
        session = BrowserSession.create(root, Path("."))
        session.selected_idx = 15

        update_viewport(session, 40, 6)

        self.assertEqual(session.tree_start, 11)

        session.selected_idx = 3
        update_viewport(session, 40, 6)
        self.assertEqual(session.tree_start, 3)

    def test_hidden_preview_is_not_rewrapped(self) -> None:
        session = _make_session()
        dispatch(session, NodeSelected("top.md"), read_file=lambda _path: "body\n" * 50)
        session.preview_visible = False

        with mock.patch("mdbrowse.runtime.render.build_screen_lines") as build:
            update_viewport(session, 120, 40)

        build.assert_not_called()

    def test_wrapped_preview_is_reused_until_content_or_width_changes(self) -> None:
        session = _make_session()
        dispatch(session, NodeSelected("top.md"), read_file=lambda _path: "first\n")

        first = preview_screen_lines(session, 40)
        self.assertIs(preview_screen_lines(session, 40), first)
        update_viewport(session, 80, 10)
        wrapped = session.preview_wrapped
        compose_frame(session, 80, 10)
        self.assertIs(session.preview_wrapped, wrapped)

        self.assertIsNot(preview_screen_lines(session, 30), first)

        dispatch(session, NodeSelected("top.md"), read_file=lambda _path: "second\n")
        self.assertEqual(strip_ansi(preview_screen_lines(session, 40)[0]), "second")


if __name__ == "__main__":
    unittest.main()
