from __future__ import annotations

from .config import Settings
from .primitives import CellBuffer
from .snake import Snake
from .state import Position, Segment
from .world import Map


def grid_size(settings: Settings) -> tuple[int, int]:
    """Character columns and rows needed to show the whole map."""
    return (settings.bottom_right.x + 1) * 2, settings.bottom_right.y + 1


def draw_cell(buf: CellBuffer, position: Position, glyphs: tuple[str, str], color) -> None:
    # one grid cell is two character cells wide so it looks roughly square
    col = position.x * 2
    buf.set_cell(col, position.y, glyphs[0], color)
    buf.set_cell(col + 1, position.y, glyphs[1], color)


def draw_segment(buf: CellBuffer, segment: Segment) -> None:
    draw_cell(buf, segment.position, segment.glyphs, segment.color)


def draw_map(buf: CellBuffer, world: Map, settings: Settings) -> None:
    if settings.walls:
        for position in world.border():
            draw_cell(buf, position, settings.wall_glyphs, settings.wall_color)
    draw_segment(buf, world.food)


def draw_snake(buf: CellBuffer, snake: Snake) -> None:
    # tail first so the head ends up on top when segments overlap
    for segment in reversed(snake.body):
        draw_segment(buf, segment)
