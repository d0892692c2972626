"""
Game constants for snakeworld.
"""

from enum import Enum


class Direction(str, Enum):
    """Heading of the snake's next move."""

    UP = "UP"
    RIGHT = "RIGHT"
    DOWN = "DOWN"
    LEFT = "LEFT"

    @property
    def opposite(self) -> "Direction":
        return OPPOSITES[self]

    @property
    def code(self) -> int:
        """Stable numeric code for front ends that exchange plain integers."""
        return DIRECTION_CODES[self]


# Movement directions
UP = Direction.UP
DOWN = Direction.DOWN
LEFT = Direction.LEFT
RIGHT = Direction.RIGHT
VALID_MOVES = {UP, DOWN, LEFT, RIGHT}

OPPOSITES = {
    UP: DOWN,
    DOWN: UP,
    LEFT: RIGHT,
    RIGHT: LEFT,
}

DIRECTION_CODES = {
    UP: 0,
    RIGHT: 1,
    DOWN: 2,
    LEFT: 3,
}

# (row delta, col delta) for one step
DELTAS = {
    UP: (-1, 0),
    DOWN: (1, 0),
    LEFT: (0, -1),
    RIGHT: (0, 1),
}

# Game settings
MIN_WORLD_SIZE = 4
DEFAULT_WORLD_SIZE = 10
DEFAULT_DIRECTION = RIGHT
SCORE_INCREMENT = 1
DEFAULT_TICK_RATE = 6
DEFAULT_MAX_TICKS = 500
