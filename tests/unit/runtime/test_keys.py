"""Tests for raw key decoding from a file descriptor."""

from __future__ import annotations

import os
import unittest

from mdbrowse.runtime import keys


class ReadKeyTests(unittest.TestCase):
    def setUp(self) -> None:
        keys._PENDING_BYTES.clear()
        self.read_fd, self.write_fd = os.pipe()

    def tearDown(self) -> None:
        os.close(self.read_fd)
        os.close(self.write_fd)
        keys._PENDING_BYTES.clear()

    def _decode(self, data: bytes) -> str:
        os.write(self.write_fd, data)
        return keys.read_key(self.read_fd, timeout_ms=100)

    def test_toggle_keys(self) -> None:
        self.assertEqual(self._decode(b"\x10"), "CTRL_P")
        self.assertEqual(self._decode(b"\x17"), "CTRL_W")

    def test_enter_and_ctrl_c(self) -> None:
        self.assertEqual(self._decode(b"\r"), "ENTER_CR")
        self.assertEqual(self._decode(b"\n"), "ENTER_LF")
        self.assertEqual(self._decode(b"\x03"), "CTRL_C")

    def test_arrow_and_paging_sequences(self) -> None:
        self.assertEqual(self._decode(b"\x1b[A"), "UP")
        self.assertEqual(self._decode(b"\x1b[B"), "DOWN")
        self.assertEqual(self._decode(b"\x1bOC"), "RIGHT")
        self.assertEqual(self._decode(b"\x1b[5~"), "PAGE_UP")
        self.assertEqual(self._decode(b"\x1b[6~"), "PAGE_DOWN")

    def test_printable_and_multibyte_characters(self) -> None:
        self.assertEqual(self._decode(b"q"), "q")
        self.assertEqual(self._decode("é".encode("utf-8")), "é")

    def test_lone_escape_keeps_following_byte(self) -> None:
        self.assertEqual(self._decode(b"\x1bx"), "ESC")
        self.assertEqual(keys.read_key(self.read_fd, timeout_ms=100), "x")

    def test_timeout_returns_empty_token(self) -> None:
        self.assertEqual(keys.read_key(self.read_fd, timeout_ms=0), "")


if __name__ == "__main__":
    unittest.main()
