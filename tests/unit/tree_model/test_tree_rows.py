"""Tests for visible-row flattening, row formatting, and pane widths."""

from __future__ import annotations

import unittest

from mdbrowse.tree_model import (
    build_path_tree,
    clamp_left_width,
    compute_left_width,
    default_expanded,
    format_tree_row,
    parent_key,
    row_index_for_key,
    tree_outline,
    visible_rows,
)


class VisibleRowsTests(unittest.TestCase):
    def setUp(self) -> None:
        self.root = build_path_tree(["a/b.md", "c.md"])

    def test_default_expanded_contains_only_directories(self) -> None:
        self.assertEqual(default_expanded(self.root), {"", "/a"})

    def test_fully_expanded_rows_are_preorder_with_depths(self) -> None:
        rows = visible_rows(self.root, default_expanded(self.root))

        self.assertEqual([row.node.label for row in rows], ["Markdown Files", "a", "b.md", "c.md"])
        self.assertEqual([row.depth for row in rows], [0, 1, 2, 1])

    def test_collapsed_directory_hides_children(self) -> None:
        rows = visible_rows(self.root, {""})

        self.assertEqual([row.node.label for row in rows], ["Markdown Files", "a", "c.md"])

    def test_rows_without_root(self) -> None:
        rows = visible_rows(self.root, default_expanded(self.root), include_root=False)

        self.assertEqual([(row.node.label, row.depth) for row in rows], [("a", 0), ("b.md", 1), ("c.md", 0)])

    def test_row_index_for_key(self) -> None:
        rows = visible_rows(self.root, default_expanded(self.root))

        self.assertEqual(row_index_for_key(rows, "/a/b.md"), 2)
        self.assertIsNone(row_index_for_key(rows, "/missing"))

    def test_parent_key(self) -> None:
        self.assertEqual(parent_key("/a/b.md"), "/a")
        self.assertEqual(parent_key("/a"), "")
        self.assertEqual(parent_key(""), "")


class FormatTreeRowTests(unittest.TestCase):
    def test_plain_rows_show_markers_and_indentation(self) -> None:
        root = build_path_tree(["a/b.md"])
        expanded = default_expanded(root)
        rows = visible_rows(root, expanded)

        formatted = [format_tree_row(row, expanded, no_color=True) for row in rows]

        self.assertEqual(formatted, ["▾ Markdown Files", "  ▾ a/", "      b.md"])

    def test_collapsed_directory_uses_closed_marker(self) -> None:
        root = build_path_tree(["a/b.md"])
        rows = visible_rows(root, {""})

        self.assertEqual(format_tree_row(rows[1], {""}, no_color=True), "  ▸ a/")

    def test_colored_rows_reset_styles(self) -> None:
        root = build_path_tree(["b.md"])
        expanded = default_expanded(root)
        row = visible_rows(root, expanded)[1]

        text = format_tree_row(row, expanded)

        self.assertIn("b.md", text)
        self.assertTrue(text.endswith("\033[0m"))

    def test_tree_outline_lists_every_row(self) -> None:
        root = build_path_tree(["a/b.md", "c.md"])
        expanded = default_expanded(root)

        outline = tree_outline(visible_rows(root, expanded), expanded)

        self.assertEqual(outline, "▾ Markdown Files\n  ▾ a/\n      b.md\n    c.md\n")


class PaneWidthTests(unittest.TestCase):
    def test_compute_left_width(self) -> None:
        self.assertEqual(compute_left_width(120), 40)
        self.assertEqual(compute_left_width(80), 26)
        self.assertEqual(compute_left_width(50), 25)

    def test_clamp_left_width_keeps_preview_room(self) -> None:
        self.assertEqual(clamp_left_width(100, 5), 20)
        self.assertEqual(clamp_left_width(100, 95), 88)
        self.assertEqual(clamp_left_width(80, 26), 26)


if __name__ == "__main__":
    unittest.main()
