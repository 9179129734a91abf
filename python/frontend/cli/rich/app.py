"""Rich terminal frontend — panels, colours, and a highlighted cursor.

Uses the ``rich`` library for styled output while sharing the same
input handler and backend screens as the vanilla CLI.
"""

from __future__ import annotations

import logging

from rich.align import Align
from rich.console import Console, Group
from rich.panel import Panel
from rich.text import Text

from backend.engine.gameloop import GameLoop
from backend.screens.base import Region, RenderDescription
from frontend.cli.input_handler import get_key

logger = logging.getLogger(__name__)

_REGION_STYLES: dict[str, str] = {
    "board": "bold white",
    "menu": "white",
    "status": "bold red",
    "stats": "bold yellow",
    "controls": "dim",
}

_EMPHASIS_STYLE = "bold yellow on #313244"


# -- rendering ----------------------------------------------------------------


def _render_region(region: Region) -> Text:
    """Return the region as one Rich Text, emphasised segments highlighted."""
    text = Text(style=_REGION_STYLES.get(region.name, ""))
    for i, line in enumerate(region.lines):
        if i:
            text.append("\n")
        for seg in line:
            if seg.emphasis:
                text.append(seg.text, style=_EMPHASIS_STYLE)
            else:
                text.append(seg.text)
    return text


def build_panel(description: RenderDescription) -> Panel:
    """Stack every non-empty region vertically inside a titled panel."""
    parts: list[Align | Text] = []
    for region in description.regions:
        if not region.lines:
            continue
        if parts:
            parts.append(Text(""))
        parts.append(Align.center(_render_region(region)))

    return Panel(
        Group(*parts),
        title=f"[bold cyan]{description.title}[/bold cyan]",
        border_style="bright_blue",
        padding=(1, 4),
    )


# -- platform adapter ---------------------------------------------------------


class RichTerminal:
    """Draws screens with Rich and reads raw keypresses."""

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    def next_event(self) -> str:
        return get_key()

    def render(self, description: RenderDescription) -> None:
        self.console.clear()
        self.console.print()
        self.console.print(Align.center(build_panel(description)))


# -- public entry point -------------------------------------------------------


def run() -> None:
    """Launch the Rich CLI on the alternate screen."""
    terminal = RichTerminal()
    with terminal.console.screen():
        GameLoop(terminal).run()
    terminal.console.print(Align.center(Text("\nGoodbye!\n", style="bold cyan")))
    logger.info("Rich session finished")
