from __future__ import annotations

from dataclasses import dataclass

from .state import Position

Color = tuple[int, int, int]

BLACK: Color = (0, 0, 0)
GREY: Color = (128, 128, 128)
WHITE: Color = (255, 255, 255)
RED: Color = (255, 0, 0)
DARK_RED: Color = (139, 0, 0)
GREEN: Color = (0, 255, 0)


@dataclass(frozen=True)
class Settings:
    """Fixed game constants, built once at startup."""

    left_glyph: str = "["
    right_glyph: str = "]"
    wall_glyphs: tuple[str, str] = ("#", "#")

    head_color: Color = DARK_RED
    body_color: Color = RED
    food_color: Color = GREEN
    wall_color: Color = GREY
    background: Color = BLACK
    foreground: Color = WHITE

    initial_length: int = 3
    top_left: Position = Position(2, 2)
    bottom_right: Position = Position(10, 10)

    walls: bool = True
    debug_grow: bool = False

    fps: int = 8
    # pixel width of one character cell in the pygame window; cells are twice as tall
    cell_size: int = 12

    @property
    def glyphs(self) -> tuple[str, str]:
        return (self.left_glyph, self.right_glyph)


DEFAULT = Settings()
