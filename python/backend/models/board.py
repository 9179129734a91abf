"""Board model for the nonogram game."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum

Coord = tuple[int, int]


class Direction(StrEnum):
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"


class Mark(StrEnum):
    """What the player has written into a cell."""

    UNMARKED = "unmarked"
    FILLED = "filled"
    EMPTY = "empty"

    @property
    def next(self) -> Mark:
        return _MARK_CYCLE[self]


_MARK_CYCLE: dict[Mark, Mark] = {
    Mark.UNMARKED: Mark.FILLED,
    Mark.FILLED: Mark.EMPTY,
    Mark.EMPTY: Mark.UNMARKED,
}


def run_lengths(line: list[bool]) -> list[int]:
    """Return the lengths of consecutive ``True`` runs in *line*.

    Example::

        run_lengths([True, True, False, True])  # [2, 1]
        run_lengths([False, False])             # []
    """
    runs: list[int] = []
    current = 0
    for filled in line:
        if filled:
            current += 1
        elif current:
            runs.append(current)
            current = 0
    if current:
        runs.append(current)
    return runs


@dataclass
class BoardState:
    """A single puzzle instance.

    ``solution`` and the hints are fixed once the board is built; only
    ``assigned``, ``cursor`` and ``last_mismatch`` change during play.
    """

    size: int
    solution: list[list[bool]]
    row_hints: list[list[int]]
    column_hints: list[list[int]]
    assigned: list[list[Mark]]
    cursor: Coord = (0, 0)
    last_mismatch: Coord | None = field(default=None)

    # -- construction helpers -------------------------------------------------

    @classmethod
    def from_solution(cls, solution: list[list[bool]]) -> BoardState:
        """Create a fresh, unmarked board for a square *solution* grid.

        Example::

            BoardState.from_solution([[True, False], [False, True]])
        """
        size = len(solution)
        if size == 0:
            raise ValueError("A board needs at least one cell.")
        for r, row in enumerate(solution):
            if len(row) != size:
                raise ValueError(
                    f"Expected {size} cells in row {r} of a {size}×{size} "
                    f"board, got {len(row)}."
                )
        rows = [list(row) for row in solution]
        columns = [[rows[r][c] for r in range(size)] for c in range(size)]
        return cls(
            size=size,
            solution=rows,
            row_hints=[run_lengths(row) for row in rows],
            column_hints=[run_lengths(col) for col in columns],
            assigned=[[Mark.UNMARKED] * size for _ in range(size)],
        )

    # -- queries --------------------------------------------------------------

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.size and 0 <= col < self.size

    def get_mark(self, row: int, col: int) -> Mark:
        return self.assigned[row][col]

    def is_cell_correct(self, row: int, col: int) -> bool:
        """Check whether the player's mark at (row, col) matches the solution.

        An unmarked cell is never correct.
        """
        mark = self.assigned[row][col]
        if self.solution[row][col]:
            return mark is Mark.FILLED
        return mark is Mark.EMPTY

    def filled_count(self) -> int:
        return sum(sum(row) for row in self.solution)
