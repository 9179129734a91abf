from backend.models.board import BoardState, Coord, Direction, Mark, run_lengths
from backend.models.keys import Key
from backend.models.settings import DEFAULT_SIZES, GameSettings

__all__ = [
    "BoardState",
    "Coord",
    "DEFAULT_SIZES",
    "Direction",
    "GameSettings",
    "Key",
    "Mark",
    "run_lengths",
]
