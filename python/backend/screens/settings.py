"""Settings screen — pick a board size or go back."""

from __future__ import annotations

import logging

from backend.engine.gameplay import GamePlay
from backend.models.keys import Key
from backend.models.settings import DEFAULT_SIZES, GameSettings
from backend.screens.base import STAY, Outcome, Region, RenderDescription, TransitionTo
from backend.screens.menu import Menu, MenuEntry

logger = logging.getLogger(__name__)

BACK_ID = "back_button"


class SettingsScreen:
    """Size choices map to ``GameSettings``; ``Back`` returns home.

    Sizes are validated here, so an invalid size never reaches the
    board generator.
    """

    def __init__(self, menu: Menu, choices: dict[str, GameSettings]) -> None:
        self.menu = menu
        self.choices = choices

    @classmethod
    def create(cls, sizes: tuple[int, ...] = DEFAULT_SIZES) -> SettingsScreen:
        choices: dict[str, GameSettings] = {}
        entries: list[MenuEntry] = []
        for size in sizes:
            settings = GameSettings(size=size)
            entry_id = f"size_{size}"
            choices[entry_id] = settings
            entries.append(MenuEntry(entry_id, settings.label))
        entries.append(MenuEntry(BACK_ID, "Back"))
        return cls(Menu(entries), choices)

    def handle_input(self, key: str) -> Outcome:
        if key == Key.UP:
            self.menu.move_prev()
        elif key == Key.DOWN:
            self.menu.move_next()
        elif key == Key.ENTER:
            return self._select()
        return STAY

    def _select(self) -> Outcome:
        from backend.screens.game import GameScreen
        from backend.screens.home import HomeScreen

        entry_id = self.menu.current.id
        if entry_id == BACK_ID:
            return TransitionTo(HomeScreen.create())
        settings = self.choices[entry_id]
        logger.info("Starting %s game", settings.label)
        return TransitionTo(GameScreen(GamePlay(settings)))

    def render(self) -> RenderDescription:
        return RenderDescription(
            title="Board size",
            regions=(
                self.menu.region(),
                Region.text("controls", "↑↓ choose   Enter select   Q quit"),
            ),
        )
