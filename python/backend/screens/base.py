"""Shared contract for every screen: input handling and render descriptions.

A screen never draws anything itself.  ``render()`` returns a
``RenderDescription`` — an ordered stack of named regions whose lines are
made of text segments, some flagged for emphasis — and the frontend turns
that into terminal output.  ``handle_input()`` returns an ``Outcome`` telling
the loop whether to stay, exit, or swap in a different screen.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, runtime_checkable

# -- render descriptions ------------------------------------------------------


@dataclass(frozen=True)
class Segment:
    text: str
    emphasis: bool = False


Line = tuple[Segment, ...]


@dataclass(frozen=True)
class Region:
    name: str
    lines: tuple[Line, ...]

    @classmethod
    def text(cls, name: str, *lines: str) -> Region:
        """Build a region of plain, un-emphasised lines."""
        return cls(name=name, lines=tuple((Segment(line),) for line in lines))

    def plain(self) -> list[str]:
        return ["".join(seg.text for seg in line) for line in self.lines]


@dataclass(frozen=True)
class RenderDescription:
    title: str
    regions: tuple[Region, ...]

    def region(self, name: str) -> Region:
        for region in self.regions:
            if region.name == name:
                return region
        raise KeyError(name)


# -- outcomes -----------------------------------------------------------------


@dataclass(frozen=True)
class Stay:
    pass


@dataclass(frozen=True)
class Exit:
    pass


@dataclass(frozen=True)
class TransitionTo:
    screen: Screen


Outcome = Stay | Exit | TransitionTo

STAY = Stay()
EXIT = Exit()


# -- screen protocol ----------------------------------------------------------


@runtime_checkable
class Screen(Protocol):
    def handle_input(self, key: str) -> Outcome: ...

    def render(self) -> RenderDescription: ...
