"""Vertical button menu used by the Home and Settings screens."""

from __future__ import annotations

from dataclasses import dataclass

from backend.screens.base import Region, Segment


@dataclass(frozen=True)
class MenuEntry:
    id: str
    text: str


class Menu:
    """An ordered list of entries with a clamped selection index."""

    def __init__(self, entries: list[MenuEntry]) -> None:
        if not entries:
            raise ValueError("A menu needs at least one entry.")
        self.entries = entries
        self.selected = 0

    @property
    def current(self) -> MenuEntry:
        return self.entries[self.selected]

    def move_prev(self) -> None:
        self.selected = max(0, self.selected - 1)

    def move_next(self) -> None:
        self.selected = min(len(self.entries) - 1, self.selected + 1)

    def region(self, name: str = "menu") -> Region:
        return Region(
            name=name,
            lines=tuple(
                (Segment(entry.text, emphasis=i == self.selected),)
                for i, entry in enumerate(self.entries)
            ),
        )
