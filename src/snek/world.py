from __future__ import annotations

import logging
import random

from .config import DEFAULT, Settings
from .state import Position, Segment

logger = logging.getLogger(__name__)


class FoodSpawner:
    def __init__(self, settings: Settings = DEFAULT, rng: random.Random | None = None):
        self.settings = settings
        self.rng = rng if rng is not None else random.Random()

    def spawn_between(self, top_left: Position, bottom_right: Position) -> Segment:
        """Food somewhere strictly inside the rectangle; border rows/columns are never picked."""
        x = self.rng.randrange(top_left.x + 1, bottom_right.x)
        y = self.rng.randrange(top_left.y + 1, bottom_right.y)
        return Segment(Position(x, y), self.settings.food_color, self.settings.glyphs)


class Map:
    """Playable rectangle plus the single piece of food on it.

    Food may respawn on the snake's body or where it was before; nothing
    here knows about the snake.
    """

    def __init__(
        self,
        top_left: Position,
        bottom_right: Position,
        settings: Settings = DEFAULT,
        rng: random.Random | None = None,
    ):
        top_left = Position(*top_left)
        bottom_right = Position(*bottom_right)
        self.check_corners(top_left, bottom_right)
        self.top_left = top_left
        self.bottom_right = bottom_right
        self.settings = settings
        self.spawner = FoodSpawner(settings, rng)
        self.food = self.spawner.spawn_between(top_left, bottom_right)

    @staticmethod
    def check_corners(top_left: Position, bottom_right: Position) -> None:
        if bottom_right[0] - top_left[0] < 2 or bottom_right[1] - top_left[1] < 2:
            raise ValueError(
                f"map {tuple(top_left)}-{tuple(bottom_right)} has no interior cells (need width and height >= 3)"
            )

    @classmethod
    def from_settings(cls, settings: Settings = DEFAULT, rng: random.Random | None = None) -> Map:
        return cls(settings.top_left, settings.bottom_right, settings, rng)

    @property
    def min_x(self) -> int:
        return self.top_left.x

    @property
    def max_x(self) -> int:
        return self.bottom_right.x

    @property
    def min_y(self) -> int:
        return self.top_left.y

    @property
    def max_y(self) -> int:
        return self.bottom_right.y

    @property
    def center(self) -> Position:
        return Position((self.min_x + self.max_x) // 2, (self.min_y + self.max_y) // 2)

    @property
    def food_position(self) -> Position:
        return self.food.position

    def is_border(self, position: Position) -> bool:
        x, y = position
        return x in (self.min_x, self.max_x) or y in (self.min_y, self.max_y)

    def border(self):
        """Yield every border cell, row by row."""
        for y in range(self.min_y, self.max_y + 1):
            for x in range(self.min_x, self.max_x + 1):
                if y in (self.min_y, self.max_y) or x in (self.min_x, self.max_x):
                    yield Position(x, y)

    def new_food(self) -> None:
        old = self.food.position
        self.food = self.spawner.spawn_between(self.top_left, self.bottom_right)
        logger.debug("food eaten at %s, respawned at %s", tuple(old), tuple(self.food.position))
