"""
WorldSnapshot entity - a copy of the world at a point in time.
"""

from typing import Any, Dict, Optional, Tuple

from .constants import Direction
from .game_state import GameState


class WorldSnapshot:
    """
    A read-only copy of a World taken between steps.

    Attributes:
        width: board width (the board is width x width)
        cells: snake cells, head first
        food: food cell, or None once the board is full
        score: points collected so far
        state: GameState at the time of the snapshot
        direction: heading committed by the last step
        ticks: number of steps taken while playing
    """

    __slots__ = ("width", "cells", "food", "score", "state", "direction", "ticks")

    def __init__(
        self,
        width: int,
        cells: Tuple[int, ...],
        food: Optional[int],
        score: int,
        state: GameState,
        direction: Direction,
        ticks: int,
    ):
        self.width = width
        self.cells = tuple(cells)
        self.food = food
        self.score = score
        self.state = state
        self.direction = direction
        self.ticks = ticks

    @property
    def head(self) -> int:
        return self.cells[0]

    @property
    def length(self) -> int:
        return len(self.cells)

    def print_board(self) -> str:
        """
        Returns a string representation of the board with:
        . = empty cell
        A = food
        H = snake head
        o = snake body
        Row 0 is printed first; column labels run along the bottom.
        """
        board = [['.' for _ in range(self.width)] for _ in range(self.width)]

        if self.food is not None:
            row, col = divmod(self.food, self.width)
            board[row][col] = 'A'

        for pos_idx, cell in enumerate(self.cells):
            row, col = divmod(cell, self.width)
            board[row][col] = 'H' if pos_idx == 0 else 'o'

        result = [f"{row:2d} {' '.join(board[row])}" for row in range(self.width)]
        result.append("   " + " ".join(str(col % 10) for col in range(self.width)))
        return "\n".join(result)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "width": self.width,
            "cells": list(self.cells),
            "food": self.food,
            "score": self.score,
            "state": self.state.value,
            "direction": self.direction.value,
            "ticks": self.ticks,
        }

    def __eq__(self, other):
        if not isinstance(other, WorldSnapshot):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def __repr__(self):
        return (
            f"<WorldSnapshot tick={self.ticks}, state={self.state.name}, "
            f"head={self.head}, len={self.length}, food={self.food}, score={self.score}>"
        )
