"""Vanilla terminal frontend — no third-party dependencies.

Uses only stdlib (print, ANSI codes, tty/termios) for rendering and input.
"""

from __future__ import annotations

import logging
import sys
from typing import TextIO

from backend.engine.gameloop import GameLoop
from backend.screens.base import Line, RenderDescription
from frontend.cli.input_handler import get_key

logger = logging.getLogger(__name__)


# -- ANSI helpers -------------------------------------------------------------

_Y = "\033[33;1m"    # bold yellow
_C = "\033[36;1m"    # bold cyan
_RED = "\033[31;1m"  # bold red
_DIM = "\033[2m"     # dim
_R = "\033[0m"       # reset
_BG_SEL = "\033[43;30m"  # yellow bg, black fg (cursor / selected entry)

_ALT_ON = "\033[?1049h"
_ALT_OFF = "\033[?1049l"

_REGION_COLOURS: dict[str, str] = {
    "status": _RED,
    "stats": _Y,
    "controls": _DIM,
}


def _clear(out: TextIO) -> None:
    out.write("\033[2J\033[H")
    out.flush()


def _render_line(line: Line, colour: str) -> str:
    parts: list[str] = []
    for seg in line:
        if seg.emphasis:
            parts.append(f"{_BG_SEL}{seg.text}{_R}{colour}")
        else:
            parts.append(seg.text)
    return f"{colour}{''.join(parts)}{_R}" if colour else "".join(parts)


def render_text(description: RenderDescription) -> str:
    """Return an ANSI-coloured text representation of a screen."""
    lines: list[str] = [f"  {_C}=== {description.title} ==={_R}"]
    for region in description.regions:
        if not region.lines:
            continue
        lines.append("")
        colour = _REGION_COLOURS.get(region.name, "")
        lines.extend(f"  {_render_line(line, colour)}" for line in region.lines)
    return "\n".join(lines)


# -- platform adapter ---------------------------------------------------------


class AnsiTerminal:
    """Draws screens with raw ANSI codes and reads raw keypresses."""

    def __init__(self, out: TextIO | None = None) -> None:
        self.out = out or sys.stdout

    def next_event(self) -> str:
        return get_key()

    def render(self, description: RenderDescription) -> None:
        _clear(self.out)
        self.out.write(render_text(description) + "\n")
        self.out.flush()


# -- public entry point -------------------------------------------------------


def run() -> None:
    """Launch the vanilla CLI on the alternate screen."""
    terminal = AnsiTerminal()
    terminal.out.write(_ALT_ON)
    try:
        GameLoop(terminal).run()
    finally:
        terminal.out.write(_ALT_OFF)
        terminal.out.flush()
    print("  Goodbye!\n")
    logger.info("Vanilla session finished")
