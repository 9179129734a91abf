"""Home screen — Play or Quit."""

from __future__ import annotations

from backend.models.keys import Key
from backend.screens.base import EXIT, STAY, Outcome, Region, RenderDescription, TransitionTo
from backend.screens.menu import Menu, MenuEntry

PLAY_ID = "play_button"
QUIT_ID = "quit_button"


class HomeScreen:
    def __init__(self, menu: Menu) -> None:
        self.menu = menu

    @classmethod
    def create(cls) -> HomeScreen:
        return cls(Menu([MenuEntry(PLAY_ID, "Play!"), MenuEntry(QUIT_ID, "Quit!")]))

    def handle_input(self, key: str) -> Outcome:
        if key == Key.UP:
            self.menu.move_prev()
        elif key == Key.DOWN:
            self.menu.move_next()
        elif key == Key.ENTER:
            return self._select()
        return STAY

    def _select(self) -> Outcome:
        from backend.screens.settings import SettingsScreen

        entry_id = self.menu.current.id
        if entry_id == PLAY_ID:
            return TransitionTo(SettingsScreen.create())
        if entry_id == QUIT_ID:
            return EXIT
        return STAY

    def render(self) -> RenderDescription:
        return RenderDescription(
            title="N O N O G R A M",
            regions=(
                self.menu.region(),
                Region.text("controls", "↑↓ choose   Enter select   Q quit"),
            ),
        )
