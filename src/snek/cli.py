from __future__ import annotations

import argparse
import dataclasses
import logging
import random
import sys

from . import config
from .backends import BACKENDS, SurfaceError, open_backend
from .game import run
from .snake import Snake
from .world import Map


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="snek", description="Snake on a fixed grid.")
    parser.add_argument(
        "--backend",
        choices=BACKENDS,
        default="terminal",
        help="Render surface (terminal=curses, pygame=window, headless=no display).",
    )
    parser.add_argument(
        "--ticks",
        type=int,
        default=None,
        help="Stop after this many ticks. Without it the game runs until the snake dies.",
    )
    parser.add_argument("--seed", type=int, default=None, help="Seed for food placement.")
    parser.add_argument("--debug-grow", action="store_true", help="Let the g key force growth.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log game events to stderr.")
    return parser


def main(argv: list[str] | None = None) -> int:
    ns = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if ns.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    if ns.ticks is not None and ns.ticks < 0:
        print("error: --ticks must be >= 0", file=sys.stderr)
        return 2

    settings = config.DEFAULT
    if ns.debug_grow:
        settings = dataclasses.replace(settings, debug_grow=True)

    try:
        Map.check_corners(settings.top_left, settings.bottom_right)
        backend = open_backend(ns.backend, settings)
        backend.open()
    except (SurfaceError, ValueError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    try:
        world = Map.from_settings(settings, random.Random(ns.seed))
        snake = Snake.hatch(world, settings)
        result = run(backend, world, snake, ns.ticks)
    finally:
        backend.close()

    if result.reason == "died":
        print(f"Game Over! Crashed after {result.ticks} ticks at length {result.length}.")
    else:
        print(f"Stopped after {result.ticks} ticks at length {result.length}.")
    return 0
