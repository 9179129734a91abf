"""Tracks the state of one play-through."""

from __future__ import annotations

import random
from dataclasses import dataclass

from backend.engine.gamegenerator import GameGenerator
from backend.models.board import BoardState
from backend.models.settings import GameSettings


@dataclass(frozen=True)
class EndGameStats:
    total_cells: int
    filled_cells: int


class GameState:
    """Holds the settings and the board they produced."""

    def __init__(self, settings: GameSettings, board: BoardState) -> None:
        if board.size != settings.size:
            raise ValueError(
                f"Board is {board.size}×{board.size} but settings ask for "
                f"{settings.label}."
            )
        self.settings = settings
        self.board = board

    @classmethod
    def generate(cls, settings: GameSettings, rng: random.Random | None = None) -> GameState:
        return cls(settings, GameGenerator.generate(settings, rng))

    @classmethod
    def from_board(cls, board: BoardState) -> GameState:
        """Wrap an existing board (e.g. a hand-built test puzzle)."""
        return cls(GameSettings(size=board.size), board)

    # -- queries --------------------------------------------------------------

    @property
    def stats(self) -> EndGameStats:
        return EndGameStats(
            total_cells=self.settings.size * self.settings.size,
            filled_cells=self.board.filled_count(),
        )
