"""Generates random nonogram boards."""

from __future__ import annotations

import logging
import random

from backend.models.board import BoardState
from backend.models.settings import GameSettings

logger = logging.getLogger(__name__)


class GameGenerator:
    """Creates puzzles by flipping a fair coin for every cell.

    Boards are always displayable and checkable, but the hints are not
    guaranteed to admit a unique solution.
    """

    @staticmethod
    def random_solution(size: int, rng: random.Random | None = None) -> list[list[bool]]:
        """Return a *size*×*size* grid of independent fair coin flips."""
        rng = rng or random
        return [[rng.random() < 0.5 for _ in range(size)] for _ in range(size)]

    @staticmethod
    def generate(settings: GameSettings, rng: random.Random | None = None) -> BoardState:
        """Return a fresh, unmarked board of the configured size."""
        solution = GameGenerator.random_solution(settings.size, rng)
        board = BoardState.from_solution(solution)
        logger.debug(
            "Generated %s board with %d filled cells",
            settings.label,
            board.filled_count(),
        )
        return board
