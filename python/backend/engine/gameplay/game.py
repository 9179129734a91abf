"""Core gameplay logic — toggles cells, moves the cursor and checks the win."""

from __future__ import annotations

import logging
import random

from backend.engine.gamechecker import Checker, CheckResult, Invalid
from backend.engine.gamestate import GameState
from backend.models.board import BoardState, Coord, Direction
from backend.models.settings import GameSettings

logger = logging.getLogger(__name__)


class GamePlay:
    """Orchestrates a single game session."""

    def __init__(self, settings: GameSettings, rng: random.Random | None = None) -> None:
        self.state = GameState.generate(settings, rng)

    @classmethod
    def from_board(cls, board: BoardState) -> "GamePlay":
        """Create a game session from an existing board."""
        obj = object.__new__(cls)
        obj.state = GameState.from_board(board)
        return obj

    @property
    def board(self) -> BoardState:
        return self.state.board

    @property
    def size(self) -> int:
        return self.state.settings.size

    # -- cells ----------------------------------------------------------------

    def toggle(self, coord: Coord | None = None) -> None:
        """Cycle the mark at *coord* (the cursor by default).

        unmarked → filled → empty → unmarked
        """
        board = self.board
        row, col = board.cursor if coord is None else coord
        if not board.in_bounds(row, col):
            raise IndexError(
                f"Cell ({row}, {col}) is outside the {board.size}×{board.size} board."
            )
        board.assigned[row][col] = board.assigned[row][col].next

    # -- cursor ---------------------------------------------------------------

    def move_cursor(self, direction: Direction) -> bool:
        """Move the cursor one cell, stopping at the edges.

        Returns True if the cursor actually moved.
        """
        offsets = {
            Direction.UP: (-1, 0),
            Direction.DOWN: (1, 0),
            Direction.LEFT: (0, -1),
            Direction.RIGHT: (0, 1),
        }
        board = self.board
        dr, dc = offsets[direction]
        row, col = board.cursor
        target = (
            min(max(row + dr, 0), board.size - 1),
            min(max(col + dc, 0), board.size - 1),
        )
        if target == board.cursor:
            return False
        board.cursor = target
        return True

    # -- win condition --------------------------------------------------------

    def check(self) -> CheckResult:
        """Check the board and remember where the first mistake is."""
        result = Checker.check(self.board)
        if isinstance(result, Invalid):
            self.board.last_mismatch = result.coord
            logger.debug("Check failed at %s", result.coord)
        else:
            self.board.last_mismatch = None
            logger.debug("Check passed on %d×%d board", self.size, self.size)
        return result
