from __future__ import annotations

import numpy as np
import pygame

from ..config import DEFAULT, Settings
from ..primitives import BLANK
from ..state import Key
from . import Backend, SurfaceError

KEY_MAP = {
    pygame.K_LEFT: Key.LEFT,
    pygame.K_RIGHT: Key.RIGHT,
    pygame.K_UP: Key.UP,
    pygame.K_DOWN: Key.DOWN,
    pygame.K_g: Key.GROW,
}
QUIT_KEYS = (pygame.K_ESCAPE, pygame.K_q)


class PygameBackend(Backend):
    """Character-cell window: each cell is ``cell_size`` wide and twice as tall."""

    def __init__(self, settings: Settings = DEFAULT):
        super().__init__(settings)
        self.cell_w = settings.cell_size
        self.cell_h = settings.cell_size * 2
        self.screen: pygame.Surface | None = None
        self.font: pygame.font.Font | None = None
        self.clock: pygame.time.Clock | None = None
        self._glyph_cache: dict[str, pygame.Surface] = {}

    def open(self) -> None:
        pygame.init()
        size = (self.buffer.cols * self.cell_w, self.buffer.rows * self.cell_h)
        try:
            self.screen = pygame.display.set_mode(size)
        except pygame.error as e:
            pygame.quit()
            raise SurfaceError(f"cannot open a {size[0]}x{size[1]} window: {e}") from e
        pygame.display.set_caption("snek")
        self.font = pygame.font.SysFont("monospace", self.cell_h - 4, bold=True)
        self.clock = pygame.time.Clock()

    def close(self) -> None:
        if self.screen is None:
            return
        self.screen = None
        self._glyph_cache.clear()
        pygame.quit()

    def poll(self) -> None:
        self.pressed = set()
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.quit_requested = True
            elif event.type == pygame.KEYDOWN:
                if event.key in QUIT_KEYS:
                    self.quit_requested = True
                elif event.key in KEY_MAP:
                    self.pressed.add(KEY_MAP[event.key])

        state = pygame.key.get_pressed()
        self.held = {key for code, key in KEY_MAP.items() if state[code]}

    def _glyph(self, glyph: str) -> pygame.Surface:
        surf = self._glyph_cache.get(glyph)
        if surf is None:
            surf = self.font.render(glyph, True, self.settings.foreground)
            self._glyph_cache[glyph] = surf
        return surf

    def present(self) -> None:
        buf = self.buffer
        pixels = np.repeat(np.repeat(buf.colors, self.cell_h, axis=0), self.cell_w, axis=1)
        # pygame surfarray is (w, h, c), the buffer is (h, w, c).
        pygame.surfarray.blit_array(self.screen, np.transpose(pixels, (1, 0, 2)))

        for row, col in buf.painted():
            glyph = buf.glyph_at(int(col), int(row))
            if glyph == BLANK:
                continue
            surf = self._glyph(glyph)
            center = (int(col) * self.cell_w + self.cell_w // 2, int(row) * self.cell_h + self.cell_h // 2)
            self.screen.blit(surf, surf.get_rect(center=center))

        pygame.display.flip()
        self.clock.tick(self.settings.fps)
