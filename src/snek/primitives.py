from __future__ import annotations

import numpy as np

BLANK = " "


class CellBuffer:
    """Frame buffer of terminal-style character cells.

    Each cell holds one glyph and a background color. Backends read
    ``glyphs`` (rows, cols) and ``colors`` (rows, cols, 3) when presenting.
    """

    def __init__(self, cols: int, rows: int, background: tuple[int, int, int] = (0, 0, 0)):
        self.cols = int(cols)
        self.rows = int(rows)
        self.background = background
        self.glyphs = np.full((self.rows, self.cols), BLANK, dtype="<U1")
        self.colors = np.zeros((self.rows, self.cols, 3), dtype=np.uint8)
        self.clear()

    def clear(self) -> None:
        self.glyphs.fill(BLANK)
        self.colors[:, :, 0] = self.background[0]
        self.colors[:, :, 1] = self.background[1]
        self.colors[:, :, 2] = self.background[2]

    def in_bounds(self, col: int, row: int) -> bool:
        return 0 <= col < self.cols and 0 <= row < self.rows

    def set_cell(self, col: int, row: int, glyph: str, color: tuple[int, int, int]) -> None:
        if not self.in_bounds(col, row):
            return
        self.glyphs[row, col] = glyph
        self.colors[row, col] = color

    def glyph_at(self, col: int, row: int) -> str:
        return str(self.glyphs[row, col])

    def color_at(self, col: int, row: int) -> tuple[int, int, int]:
        r, g, b = self.colors[row, col]
        return (int(r), int(g), int(b))

    def painted(self) -> np.ndarray:
        """(row, col) pairs of every cell that differs from the cleared state."""
        bg = np.array(self.background, dtype=np.uint8)
        mask = (self.glyphs != BLANK) | np.any(self.colors != bg, axis=2)
        return np.argwhere(mask)

    def lines(self) -> list[str]:
        return ["".join(row) for row in self.glyphs.tolist()]
