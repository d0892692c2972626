"""
snakeworld - a deterministic grid snake engine.

The World class is the whole public surface: build one, call
`game_start()`, then `change_direction()` on input and `step()` once per
tick, reading state back through its properties.
"""

from .domain import Direction, GameState, WorldSnapshot, UP, DOWN, LEFT, RIGHT
from .exceptions import ConfigError, InvalidStateError, SnakeWorldError
from .world import World

__all__ = [
    'World',
    'Direction',
    'GameState',
    'WorldSnapshot',
    'UP', 'DOWN', 'LEFT', 'RIGHT',
    'ConfigError',
    'InvalidStateError',
    'SnakeWorldError',
]
