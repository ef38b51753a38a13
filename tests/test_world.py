from __future__ import annotations

import random

import pytest

from snek.config import DEFAULT
from snek.state import Position
from snek.world import FoodSpawner, Map

from .conftest import FixedRandom


def test_spawn_between_stays_strictly_inside() -> None:
    spawner = FoodSpawner(rng=random.Random(1234))
    seen = set()
    for _ in range(500):
        food = spawner.spawn_between(Position(2, 2), Position(5, 5))
        seen.add(food.position)
        assert 2 < food.position.x < 5
        assert 2 < food.position.y < 5
    assert seen == {Position(x, y) for x in (3, 4) for y in (3, 4)}


def test_spawn_between_uses_half_open_ranges() -> None:
    rng = FixedRandom(3, 7)
    food = FoodSpawner(rng=rng).spawn_between(Position(2, 2), Position(10, 10))
    assert rng.calls == [(3, 10), (3, 10)]
    assert food.position == Position(3, 7)
    assert food.color == DEFAULT.food_color


@pytest.mark.parametrize(
    "top_left, bottom_right",
    [
        ((2, 2), (3, 10)),
        ((2, 2), (10, 3)),
        ((2, 2), (2, 2)),
        ((5, 5), (1, 1)),
    ],
)
def test_degenerate_map_is_rejected(top_left, bottom_right) -> None:
    with pytest.raises(ValueError):
        Map(Position(*top_left), Position(*bottom_right))


def test_smallest_map_has_one_food_cell() -> None:
    world = Map(Position(0, 0), Position(2, 2), rng=random.Random(0))
    assert world.food_position == Position(1, 1)


def test_bounds_and_center() -> None:
    world = Map(Position(2, 2), Position(20, 10), rng=random.Random(0))
    assert (world.min_x, world.max_x, world.min_y, world.max_y) == (2, 20, 2, 10)
    assert world.center == Position(11, 6)
    assert Map.from_settings(DEFAULT, random.Random(0)).center == Position(6, 6)


def test_is_border() -> None:
    world = Map(Position(2, 2), Position(10, 10), rng=random.Random(0))
    assert world.is_border(Position(2, 5))
    assert world.is_border(Position(10, 5))
    assert world.is_border(Position(5, 2))
    assert world.is_border(Position(5, 10))
    assert not world.is_border(Position(3, 3))
    assert not world.is_border(Position(9, 9))


def test_border_cells_form_the_outline() -> None:
    world = Map(Position(0, 0), Position(3, 2), rng=random.Random(0))
    cells = list(world.border())
    assert len(cells) == len(set(cells)) == 10
    assert all(world.is_border(p) for p in cells)


def test_new_food_replaces_food() -> None:
    world = Map(Position(2, 2), Position(10, 10), rng=FixedRandom(4, 4, 8, 3))
    assert world.food_position == Position(4, 4)
    world.new_food()
    assert world.food_position == Position(8, 3)


def test_new_food_may_land_where_it_was() -> None:
    world = Map(Position(2, 2), Position(10, 10), rng=FixedRandom(4, 4, 4, 4))
    world.new_food()
    assert world.food_position == Position(4, 4)
