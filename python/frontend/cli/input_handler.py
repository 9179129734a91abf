"""Cross-platform single-keypress reader for CLI frontends.

Handles arrow keys, WASD, and special keys without requiring Enter.
Works on macOS / Linux (tty+termios) and Windows (msvcrt).
"""

from __future__ import annotations

import os
import sys

from backend.models.keys import Key


# -- low-level character readers -----------------------------------------------


def _getch_unix() -> str:
    import termios
    import tty

    fd = sys.stdin.fileno()
    try:
        old = termios.tcgetattr(fd)
    except termios.error as exc:
        # stdin is not a terminal (pipe, /dev/null, ...)
        raise OSError(*exc.args) from exc
    try:
        tty.setraw(fd)
        ch = sys.stdin.read(1)
    finally:
        termios.tcsetattr(fd, termios.TCSADRAIN, old)
    return ch


def _getch_windows() -> str:
    import msvcrt  # type: ignore[import-not-found]

    raw = msvcrt.getch()
    # Arrow keys: a 0x00 / 0xE0 prefix followed by a scan code.
    if raw in (b"\x00", b"\xe0"):
        return _SCAN_PREFIX + msvcrt.getch().decode("latin-1")
    return raw.decode("utf-8", errors="ignore")


_getch = _getch_windows if os.name == "nt" else _getch_unix


# -- shared key mapping --------------------------------------------------------

_KEY_MAP: dict[str, str] = {
    "w": Key.UP,
    "W": Key.UP,
    "s": Key.DOWN,
    "S": Key.DOWN,
    "a": Key.LEFT,
    "A": Key.LEFT,
    "d": Key.RIGHT,
    "D": Key.RIGHT,
    "q": Key.QUIT,
    "Q": Key.QUIT,
    "\x03": Key.QUIT,  # Ctrl-C
    " ": Key.TOGGLE,
    "c": Key.CHECK,
    "C": Key.CHECK,
    "\r": Key.ENTER,
    "\n": Key.ENTER,
}

_ARROW_MAP: dict[str, str] = {
    "A": Key.UP,
    "B": Key.DOWN,
    "C": Key.RIGHT,
    "D": Key.LEFT,
}

_SCAN_PREFIX = "\x00"

_SCAN_MAP: dict[str, str] = {
    "H": Key.UP,
    "P": Key.DOWN,
    "M": Key.RIGHT,
    "K": Key.LEFT,
}


def _resolve(ch: str) -> str:
    """Map a raw character to its action string."""
    return _KEY_MAP.get(ch, ch if ch.isprintable() else "")


# -- public API ----------------------------------------------------------------


def get_key() -> str:
    """Read a single keypress and return a normalised action string.

    Blocks until a key is pressed.

    Possible return values:
        "up", "down", "left", "right"  — cursor / menu movement
        "enter"                        — Enter / Return
        "toggle"                       — Space
        "check"                        — c
        "quit"                         — q / Ctrl-C / Escape
        "<char>"                       — unmapped printable char
        ""                             — unrecognised key
    """
    ch = _getch()

    # Arrow keys (Unix escape sequences: ESC [ A/B/C/D)
    if ch == "\x1b":
        ch2 = _getch()
        if ch2 == "[":
            ch3 = _getch()
            return _ARROW_MAP.get(ch3, "")
        return Key.QUIT  # bare Escape

    # Arrow keys (Windows scan codes)
    if ch.startswith(_SCAN_PREFIX):
        return _SCAN_MAP.get(ch[1:], "")

    return _resolve(ch)
