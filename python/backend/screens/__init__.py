from backend.screens.base import (
    EXIT,
    STAY,
    Exit,
    Outcome,
    Region,
    RenderDescription,
    Screen,
    Segment,
    Stay,
    TransitionTo,
)
from backend.screens.end import EndScreen
from backend.screens.game import GameScreen
from backend.screens.home import HomeScreen
from backend.screens.settings import SettingsScreen

__all__ = [
    "EXIT",
    "STAY",
    "EndScreen",
    "Exit",
    "GameScreen",
    "HomeScreen",
    "Outcome",
    "Region",
    "RenderDescription",
    "Screen",
    "Segment",
    "SettingsScreen",
    "Stay",
    "TransitionTo",
]
