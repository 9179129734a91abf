"""Compares the player's marks against the hidden solution."""

from __future__ import annotations

from dataclasses import dataclass

from backend.models.board import BoardState, Coord


@dataclass(frozen=True)
class Valid:
    pass


@dataclass(frozen=True)
class Invalid:
    coord: Coord


CheckResult = Valid | Invalid


class Checker:
    """Stateless checker — all methods are static."""

    @staticmethod
    def first_mismatch(board: BoardState) -> Coord | None:
        """Return the row-major first incorrect cell, or ``None``."""
        for r in range(board.size):
            for c in range(board.size):
                if not board.is_cell_correct(r, c):
                    return (r, c)
        return None

    @staticmethod
    def check(board: BoardState) -> CheckResult:
        """Return ``Valid()`` only if every cell carries the right mark."""
        mismatch = Checker.first_mismatch(board)
        if mismatch is None:
            return Valid()
        return Invalid(mismatch)
