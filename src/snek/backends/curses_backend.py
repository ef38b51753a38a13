from __future__ import annotations

import curses
import logging
import time
from collections import deque

import numpy as np

from ..config import DEFAULT, Settings
from ..state import Key
from . import Backend, SurfaceError

logger = logging.getLogger(__name__)

KEY_MAP = {
    curses.KEY_LEFT: Key.LEFT,
    curses.KEY_RIGHT: Key.RIGHT,
    curses.KEY_UP: Key.UP,
    curses.KEY_DOWN: Key.DOWN,
    ord("g"): Key.GROW,
}
QUIT_KEYS = (27, ord("q"))

# The eight basic curses colors, in curses.COLOR_* order.
BASIC_PALETTE = np.array(
    [
        (0, 0, 0),
        (205, 0, 0),
        (0, 205, 0),
        (205, 205, 0),
        (0, 0, 238),
        (205, 0, 205),
        (0, 205, 205),
        (229, 229, 229),
    ],
    dtype=np.int32,
)


def nearest_color(rgb: tuple[int, int, int], colors: int) -> int:
    """Map an RGB triple onto the terminal's palette index."""
    if colors >= 256:
        r, g, b = (round(c / 255 * 5) for c in rgb)
        return 16 + 36 * r + 6 * g + b
    dist = np.sum((BASIC_PALETTE - np.array(rgb, dtype=np.int32)) ** 2, axis=1)
    return int(np.argmin(dist))


class HeldRecords(logging.Handler):
    """Keeps the newest ``capacity`` records until they can be replayed."""

    def __init__(self, capacity: int = 10_000):
        super().__init__()
        self.records: deque[logging.LogRecord] = deque(maxlen=capacity)

    def emit(self, record: logging.LogRecord) -> None:
        self.records.append(record)


class CursesBackend(Backend):
    """Terminal surface. Keys are edge-triggered only, so held == pressed here."""

    def __init__(self, settings: Settings = DEFAULT):
        super().__init__(settings)
        self.screen = None
        self._pairs: dict[tuple[int, int, int], int] = {}
        self._next_frame = 0.0
        self._log_buffer: HeldRecords | None = None
        self._saved_handlers: list[logging.Handler] = []

    def open(self) -> None:
        self._hold_logs()
        try:
            self.screen = curses.initscr()
            curses.noecho()
            curses.cbreak()
            self.screen.keypad(True)
            self.screen.nodelay(True)
            if curses.has_colors():
                curses.start_color()
            rows, cols = self.screen.getmaxyx()
        except curses.error as e:
            self.close()
            raise SurfaceError(f"cannot set up the terminal: {e}") from e

        if rows < self.buffer.rows or cols < self.buffer.cols:
            self.close()
            raise SurfaceError(
                f"terminal is {cols}x{rows}, need at least {self.buffer.cols}x{self.buffer.rows}"
            )

        try:
            curses.curs_set(0)
        except curses.error:
            logger.debug("terminal cannot hide the cursor")
        self._next_frame = time.monotonic()

    def close(self) -> None:
        if self.screen is not None:
            self.screen.keypad(False)
            curses.nocbreak()
            curses.echo()
            curses.endwin()
            self.screen = None
        self._release_logs()

    def _hold_logs(self) -> None:
        # Records written while curses owns the screen would corrupt it.
        root = logging.getLogger()
        self._saved_handlers = root.handlers[:]
        self._log_buffer = HeldRecords()
        root.handlers = [self._log_buffer]

    def _release_logs(self) -> None:
        if self._log_buffer is None:
            return
        root = logging.getLogger()
        root.handlers = self._saved_handlers
        for record in self._log_buffer.records:
            for handler in self._saved_handlers:
                if record.levelno >= handler.level:
                    handler.handle(record)
        self._log_buffer.close()
        self._log_buffer = None

    def poll(self) -> None:
        pressed = set()
        while True:
            ch = self.screen.getch()
            if ch == -1:
                break
            if ch in QUIT_KEYS:
                self.quit_requested = True
            elif ch in KEY_MAP:
                pressed.add(KEY_MAP[ch])
        self.pressed = pressed
        self.held = set(pressed)

    def _attr(self, color: tuple[int, int, int]) -> int:
        if not curses.has_colors():
            return curses.A_REVERSE if color != self.settings.background else curses.A_NORMAL
        pair = self._pairs.get(color)
        if pair is None:
            pair = len(self._pairs) + 1
            if pair >= curses.COLOR_PAIRS:
                return curses.A_NORMAL
            fg = nearest_color(self.settings.foreground, curses.COLORS)
            bg = nearest_color(color, curses.COLORS)
            curses.init_pair(pair, fg, bg)
            self._pairs[color] = pair
        return curses.color_pair(pair)

    def present(self) -> None:
        buf = self.buffer
        self.screen.erase()
        for row, col in buf.painted():
            row, col = int(row), int(col)
            try:
                self.screen.addstr(row, col, buf.glyph_at(col, row), self._attr(buf.color_at(col, row)))
            except curses.error:
                # writing the bottom-right cell moves the cursor off screen
                pass
        self.screen.refresh()
        self._wait_frame()

    def _wait_frame(self) -> None:
        self._next_frame += 1.0 / self.settings.fps
        delay = self._next_frame - time.monotonic()
        if delay > 0:
            time.sleep(delay)
        else:
            self._next_frame = time.monotonic()
