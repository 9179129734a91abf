"""Normalised input events shared by every frontend."""

from __future__ import annotations

from enum import StrEnum


class Key(StrEnum):
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    ENTER = "enter"
    TOGGLE = "toggle"
    CHECK = "check"
    QUIT = "quit"
