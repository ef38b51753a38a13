from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Iterable

from ..config import DEFAULT, Settings
from ..primitives import CellBuffer
from ..render import grid_size
from ..state import Key

BACKENDS = ("terminal", "pygame", "headless")


class SurfaceError(RuntimeError):
    """The render surface could not be set up (no display, terminal too small, ...)."""


class ScriptedKeys:
    """Replays a fixed list of per-tick key sets; ticks past the end press nothing."""

    def __init__(self, frames: Iterable[Iterable[Key]] = ()):
        self.frames = [frozenset(keys) for keys in frames]
        self.tick = -1
        self.current: frozenset[Key] = frozenset()

    def poll(self) -> None:
        self.tick += 1
        self.current = self.frames[self.tick] if self.tick < len(self.frames) else frozenset()

    def is_key_pressed(self, key: Key) -> bool:
        return key in self.current

    def is_key_held(self, key: Key) -> bool:
        return key in self.current


class Backend(ABC):
    """Render surface and input source for one game.

    Use as a context manager: ``open`` acquires the display, ``close``
    always gives it back.
    """

    def __init__(self, settings: Settings = DEFAULT):
        self.settings = settings
        cols, rows = grid_size(settings)
        self.buffer = CellBuffer(cols, rows, settings.background)
        self.quit_requested = False
        self.pressed: set[Key] = set()
        self.held: set[Key] = set()

    def __enter__(self) -> Backend:
        self.open()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def open(self) -> None:
        pass

    def close(self) -> None:
        pass

    @abstractmethod
    def poll(self) -> None: ...

    def is_key_pressed(self, key: Key) -> bool:
        return key in self.pressed

    def is_key_held(self, key: Key) -> bool:
        return key in self.held

    def clear(self) -> None:
        self.buffer.clear()

    @abstractmethod
    def present(self) -> None: ...


class HeadlessBackend(Backend):
    """No display: frames stay in the buffer, input comes from ``keys``."""

    def __init__(self, settings: Settings = DEFAULT, keys: ScriptedKeys | None = None):
        super().__init__(settings)
        self.keys = keys if keys is not None else ScriptedKeys()
        self.frames = 0
        self.last_frame: list[str] = []

    def poll(self) -> None:
        self.keys.poll()
        self.pressed = set(self.keys.current)
        self.held = set(self.keys.current)

    def present(self) -> None:
        self.frames += 1
        self.last_frame = self.buffer.lines()


def open_backend(name: str, settings: Settings = DEFAULT) -> Backend:
    """Build the named backend; the caller opens it with ``with``."""
    if name == "headless":
        return HeadlessBackend(settings)
    if name == "pygame":
        from .pygame_backend import PygameBackend

        return PygameBackend(settings)
    if name == "terminal":
        from .curses_backend import CursesBackend

        return CursesBackend(settings)
    raise ValueError(f"unknown backend: {name}")
