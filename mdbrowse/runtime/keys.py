"""Low-level terminal input decoding.

Reads raw bytes from stdin and translates them into normalized key tokens
(``"UP"``, ``"CTRL_P"``, ``"ENTER_CR"``, or the literal character).
"""

from __future__ import annotations

import os
import select

ESC_SEQUENCE_TIMEOUT_MS = 25
_PENDING_BYTES: list[bytes] = []

_CONTROL_KEYS: dict[bytes, str] = {
    b"\x03": "CTRL_C",
    b"\x10": "CTRL_P",
    b"\x17": "CTRL_W",
    b"\t": "TAB",
    b"\x08": "BACKSPACE",
    b"\x7f": "BACKSPACE",
    b"\r": "ENTER_CR",
    b"\n": "ENTER_LF",
}

_CSI_FINAL_KEYS: dict[bytes, str] = {
    b"A": "UP",
    b"B": "DOWN",
    b"C": "RIGHT",
    b"D": "LEFT",
    b"H": "HOME",
    b"F": "END",
}

_CSI_TILDE_KEYS: dict[bytes, str] = {
    b"1": "HOME",
    b"4": "END",
    b"5": "PAGE_UP",
    b"6": "PAGE_DOWN",
}


def _read_ready_byte(fd: int, timeout_ms: int) -> bytes | None:
    ready, _, _ = select.select([fd], [], [], max(0.0, timeout_ms / 1000.0))
    if not ready:
        return None
    ch = os.read(fd, 1)
    if not ch:
        return None
    return ch


def _read_utf8_tail(fd: int, first: bytes) -> str:
    """Complete a multi-byte UTF-8 character that started with ``first``."""
    lead = first[0]
    if lead >= 0xF0:
        extra = 3
    elif lead >= 0xE0:
        extra = 2
    elif lead >= 0xC0:
        extra = 1
    else:
        extra = 0
    data = first
    for _ in range(extra):
        nxt = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
        if nxt is None:
            break
        data += nxt
    return data.decode("utf-8", errors="replace")


def read_key(fd: int, timeout_ms: int | None = None) -> str:
    """Block for one key (or until ``timeout_ms``) and return its token; ``""`` on timeout."""
    if _PENDING_BYTES:
        ch = _PENDING_BYTES.pop(0)
    else:
        if timeout_ms is not None:
            ready, _, _ = select.select([fd], [], [], max(0.0, timeout_ms / 1000.0))
            if not ready:
                return ""
        ch = os.read(fd, 1)
        if not ch:
            return ""

    if ch in _CONTROL_KEYS:
        return _CONTROL_KEYS[ch]
    if ch != b"\x1b":
        return _read_utf8_tail(fd, ch)

    seq = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
    if seq is None:
        return "ESC"
    if seq not in {b"[", b"O"}:
        _PENDING_BYTES.append(seq)
        return "ESC"
    seq = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
    if seq is None:
        return "ESC"
    if seq in _CSI_FINAL_KEYS:
        return _CSI_FINAL_KEYS[seq]
    if seq in _CSI_TILDE_KEYS:
        tail = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
        if tail == b"~":
            return _CSI_TILDE_KEYS[seq]
    return "ESC"
