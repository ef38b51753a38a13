from .config import DEFAULT, Settings
from .game import GameResult, run
from .snake import Snake
from .state import Direction, Key, Position, Segment
from .world import FoodSpawner, Map

__all__ = [
    "DEFAULT",
    "Settings",
    "GameResult",
    "run",
    "Snake",
    "Direction",
    "Key",
    "Position",
    "Segment",
    "FoodSpawner",
    "Map",
]
