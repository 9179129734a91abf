"""Per-game settings chosen on the Settings screen."""

from __future__ import annotations

from dataclasses import dataclass

DEFAULT_SIZES: tuple[int, ...] = (5, 10, 15)


@dataclass(frozen=True)
class GameSettings:
    size: int

    def __post_init__(self) -> None:
        if self.size < 1:
            raise ValueError(f"Board size must be at least 1, got {self.size}.")

    @property
    def label(self) -> str:
        return f"{self.size}×{self.size}"
