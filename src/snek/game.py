from __future__ import annotations

import logging
from typing import NamedTuple

from .backends import Backend
from .render import draw_map, draw_snake
from .snake import Snake
from .world import Map

logger = logging.getLogger(__name__)


class GameResult(NamedTuple):
    ticks: int
    alive: bool
    length: int
    reason: str  # "died", "budget" or "quit"


def tick(backend: Backend, world: Map, snake: Snake) -> bool:
    backend.poll()
    alive = snake.slither(world, backend)

    backend.clear()
    draw_map(backend.buffer, world, backend.settings)
    draw_snake(backend.buffer, snake)
    backend.present()
    return alive


def run(backend: Backend, world: Map, snake: Snake, ticks: int | None = None) -> GameResult:
    """Play until the snake dies, ``ticks`` frames pass, or the player quits.

    ``ticks=None`` runs until death.
    """
    count = 0
    while ticks is None or count < ticks:
        if backend.quit_requested:
            return GameResult(count, True, len(snake), "quit")
        alive = tick(backend, world, snake)
        count += 1
        if not alive:
            logger.debug("snake died on tick %d at %s", count, tuple(snake.head().position))
            return GameResult(count, False, len(snake), "died")
    return GameResult(count, True, len(snake), "budget")
