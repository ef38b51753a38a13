from __future__ import annotations

import logging
from collections import deque
from typing import Iterable, Protocol

from .config import DEFAULT, Settings
from .state import STEERING, Direction, Key, Position, Segment
from .world import Map

logger = logging.getLogger(__name__)


class KeySource(Protocol):
    def is_key_pressed(self, key: Key) -> bool: ...


class Snake:
    def __init__(
        self,
        body: Iterable[Segment],
        direction: Direction = Direction.RIGHT,
        settings: Settings = DEFAULT,
    ):
        self.body: deque[Segment] = deque(body)
        self.direction = direction
        self.growing = False
        self.settings = settings

    @classmethod
    def hatch(cls, world: Map, settings: Settings = DEFAULT) -> Snake:
        """Every initial segment starts stacked on the map center; the body unfolds as it moves."""
        center = world.center
        body = [Segment(center, settings.body_color, settings.glyphs) for _ in range(settings.initial_length)]
        body[0].color = settings.head_color
        return cls(body, Direction.RIGHT, settings)

    @classmethod
    def from_positions(
        cls,
        positions: Iterable[tuple[int, int]],
        direction: Direction = Direction.RIGHT,
        settings: Settings = DEFAULT,
    ) -> Snake:
        body = [Segment(Position(*p), settings.body_color, settings.glyphs) for p in positions]
        if body:
            body[0].color = settings.head_color
        return cls(body, direction, settings)

    def head(self) -> Segment:
        return self.body[0]

    def positions(self) -> list[Position]:
        return [segment.position for segment in self.body]

    def __len__(self) -> int:
        return len(self.body)

    def resolve_direction(self, keys: KeySource) -> Direction:
        # judged against the heading the snake arrived with, so two keys
        # in one tick can never add up to a U-turn
        forbidden = self.direction.opposite()
        for key, direction in STEERING:
            if keys.is_key_pressed(key) and direction is not forbidden:
                self.direction = direction
        return self.direction

    def munched(self, world: Map) -> bool:
        if self.head().position != world.food_position:
            return False
        world.new_food()
        return True

    def grow(self) -> None:
        self.growing = True

    def slither(self, world: Map, keys: KeySource) -> bool:
        """Advance one tick. Returns False when the snake hit a wall or itself."""
        settings = self.settings
        self.body[0].color = settings.body_color

        before = self.direction
        if self.resolve_direction(keys) is not before:
            logger.debug("turned %s -> %s", before.name, self.direction.name)

        if self.munched(world):
            self.grow()
        if settings.debug_grow and keys.is_key_pressed(Key.GROW):
            self.grow()

        old_head = self.body[0].position
        if self.growing:
            self.growing = False
            new_head = Segment(old_head, settings.head_color, settings.glyphs)
            logger.debug("grew to %d segments", len(self.body) + 1)
        else:
            # an empty body is a broken invariant; let IndexError propagate
            new_head = self.body.pop()

        new_head.color = settings.head_color
        new_head.position = old_head.step(self.direction)
        self.body.appendleft(new_head)

        if not settings.walls:
            return True
        return self.is_alive(world)

    def is_alive(self, world: Map) -> bool:
        head = self.body[0].position
        if world.is_border(head):
            logger.debug("hit the wall at %s", tuple(head))
            return False
        for segment in list(self.body)[1:]:
            if segment.position == head:
                logger.debug("bit itself at %s", tuple(head))
                return False
        return True
