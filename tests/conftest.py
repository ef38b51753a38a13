from __future__ import annotations

import pytest

from snek.state import Key


class FixedRandom:
    """Hands out queued values from randrange, then falls back to the range start."""

    def __init__(self, *values: int):
        self.values = list(values)
        self.calls: list[tuple[int, int]] = []

    def randrange(self, lo: int, hi: int) -> int:
        self.calls.append((lo, hi))
        if self.values:
            value = self.values.pop(0)
            assert lo <= value < hi, f"{value} outside [{lo}, {hi})"
            return value
        return lo


class Keys:
    def __init__(self, *pressed: Key):
        self.pressed = set(pressed)

    def is_key_pressed(self, key: Key) -> bool:
        return key in self.pressed


@pytest.fixture
def no_keys() -> Keys:
    return Keys()
