"""
Domain entities for the snakeworld engine.

This package contains the board, snake, food and game-mode entities.
They hold no global state; a World composes one of each.
"""

from .constants import (
    UP, DOWN, LEFT, RIGHT, VALID_MOVES, Direction,
    MIN_WORLD_SIZE, DEFAULT_WORLD_SIZE, SCORE_INCREMENT,
)
from .grid import Grid
from .snake import Snake
from .food import Food
from .game_state import GameState, GameStateMachine
from .snapshot import WorldSnapshot

__all__ = [
    'UP', 'DOWN', 'LEFT', 'RIGHT', 'VALID_MOVES', 'Direction',
    'MIN_WORLD_SIZE', 'DEFAULT_WORLD_SIZE', 'SCORE_INCREMENT',
    'Grid',
    'Snake',
    'Food',
    'GameState',
    'GameStateMachine',
    'WorldSnapshot',
]
