"""End screen — shown once the board has been solved."""

from __future__ import annotations

from backend.engine.gamestate import EndGameStats, GameState
from backend.models.keys import Key
from backend.screens.base import STAY, Outcome, Region, RenderDescription, TransitionTo


class EndScreen:
    def __init__(self, end_game_state: GameState) -> None:
        self.end_game_state = end_game_state

    @property
    def stats(self) -> EndGameStats:
        return self.end_game_state.stats

    def handle_input(self, key: str) -> Outcome:
        from backend.screens.home import HomeScreen

        if key == Key.ENTER:
            return TransitionTo(HomeScreen.create())
        return STAY

    def render(self) -> RenderDescription:
        stats = self.stats
        return RenderDescription(
            title="★ Solved! ★",
            regions=(
                Region.text(
                    "stats",
                    f"Total squares: {stats.total_cells}",
                    f"Black squares: {stats.filled_cells}",
                ),
                Region.text("controls", "Press Enter to return home   Q quit"),
            ),
        )
