"""Application loop — feeds input to the active screen and swaps screens."""

from __future__ import annotations

import logging
from typing import Protocol

from backend.models.keys import Key
from backend.screens.base import Exit, RenderDescription, Screen, Stay, TransitionTo
from backend.screens.home import HomeScreen

logger = logging.getLogger(__name__)


class Platform(Protocol):
    """What a frontend must provide to host the loop."""

    def next_event(self) -> str:
        """Block until the next keypress and return its action string."""
        ...

    def render(self, description: RenderDescription) -> None: ...


class GameLoop:
    """Owns the single active screen and the exit flag."""

    def __init__(self, platform: Platform, screen: Screen | None = None) -> None:
        self.platform = platform
        self.screen: Screen = screen or HomeScreen.create()
        self.exit = False

    def step(self, key: str) -> None:
        """Apply one input event to the active screen."""
        if key == Key.QUIT:
            self.exit = True
            return

        outcome = self.screen.handle_input(key)
        match outcome:
            case Exit():
                self.exit = True
            case TransitionTo(screen=screen):
                logger.debug(
                    "Screen %s -> %s",
                    type(self.screen).__name__,
                    type(screen).__name__,
                )
                self.screen = screen
            case Stay():
                pass

    def run(self) -> None:
        while not self.exit:
            self.platform.render(self.screen.render())
            self.step(self.platform.next_event())
