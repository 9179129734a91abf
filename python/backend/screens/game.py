"""Game screen — the puzzle itself."""

from __future__ import annotations

import logging

from backend.engine.gamechecker import Valid
from backend.engine.gameplay import GamePlay
from backend.models.board import BoardState, Direction, Mark
from backend.models.keys import Key
from backend.screens.base import (
    STAY,
    Line,
    Outcome,
    Region,
    RenderDescription,
    Segment,
    TransitionTo,
)

logger = logging.getLogger(__name__)

CELL_CHARS: dict[Mark, str] = {
    Mark.UNMARKED: ".",
    Mark.FILLED: "#",
    Mark.EMPTY: "X",
}

_DIRECTIONS: dict[str, Direction] = {
    Key.UP: Direction.UP,
    Key.DOWN: Direction.DOWN,
    Key.LEFT: Direction.LEFT,
    Key.RIGHT: Direction.RIGHT,
}


def _hint_or_zero(hint: list[int]) -> list[int]:
    return hint or [0]


def render_board(board: BoardState) -> tuple[Line, ...]:
    """Lay out column hints above the grid and row hints to its left."""
    col_hints = [_hint_or_zero(h) for h in board.column_hints]
    row_texts = [" ".join(str(n) for n in _hint_or_zero(h)) for h in board.row_hints]

    width = max(len(str(n)) for hint in col_hints for n in hint)
    row_w = max(len(t) for t in row_texts)
    depth = max(len(hint) for hint in col_hints)

    lines: list[Line] = []
    for k in range(depth):
        cells: list[str] = []
        for hint in col_hints:
            offset = k - (depth - len(hint))
            cells.append(f"{hint[offset] if offset >= 0 else '':>{width}}")
        lines.append((Segment(" " * row_w + " " + " ".join(cells)),))

    for r in range(board.size):
        line: list[Segment] = [Segment(f"{row_texts[r]:>{row_w}} ")]
        for c in range(board.size):
            if c:
                line.append(Segment(" "))
            ch = CELL_CHARS[board.get_mark(r, c)]
            line.append(Segment(f"{ch:>{width}}", emphasis=(r, c) == board.cursor))
        lines.append(tuple(line))
    return tuple(lines)


class GameScreen:
    def __init__(self, game: GamePlay) -> None:
        self.game = game

    def handle_input(self, key: str) -> Outcome:
        if key in _DIRECTIONS:
            self.game.move_cursor(_DIRECTIONS[key])
        elif key == Key.TOGGLE:
            self.game.toggle()
        elif key == Key.CHECK:
            return self._check()
        return STAY

    def _check(self) -> Outcome:
        from backend.screens.end import EndScreen

        if isinstance(self.game.check(), Valid):
            logger.info("Solved %d×%d board", self.game.size, self.game.size)
            return TransitionTo(EndScreen(self.game.state))
        return STAY

    def render(self) -> RenderDescription:
        board = self.game.board
        status: tuple[str, ...] = ()
        if board.last_mismatch is not None:
            r, c = board.last_mismatch
            status = (f"Not yet: row {r + 1}, column {c + 1} is wrong.",)
        return RenderDescription(
            title=f"Nonogram  {board.size}×{board.size}",
            regions=(
                Region(name="board", lines=render_board(board)),
                Region.text("status", *status),
                Region.text(
                    "controls",
                    "↑↓←→ move   Space toggle   C check   Q quit",
                ),
            ),
        )
