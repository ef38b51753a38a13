from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import NamedTuple


class Direction(Enum):
    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def delta(self) -> tuple[int, int]:
        return self.value

    def opposite(self) -> Direction:
        return _OPPOSITES[self]


_OPPOSITES = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}


class Key(Enum):
    LEFT = "left"
    RIGHT = "right"
    UP = "up"
    DOWN = "down"
    GROW = "g"


# Checked in this order each tick; a later applicable key overrides an earlier one.
STEERING = (
    (Key.LEFT, Direction.LEFT),
    (Key.RIGHT, Direction.RIGHT),
    (Key.UP, Direction.UP),
    (Key.DOWN, Direction.DOWN),
)


class Position(NamedTuple):
    x: int
    y: int

    def step(self, direction: Direction) -> Position:
        dx, dy = direction.delta
        return Position(self.x + dx, self.y + dy)


@dataclass
class Segment:
    position: Position
    color: tuple[int, int, int]
    glyphs: tuple[str, str]
