"""
Snake entity for the game engine.
"""

from collections import deque
from typing import List, Optional

from .constants import DEFAULT_DIRECTION, Direction
from .grid import Grid


class Snake:
    """
    Represents the snake on the board.

    Attributes:
        grid: board geometry used to compute moves
        body: deque of cells from head at index 0 to tail at the end
        direction: heading committed by the last step
        pending_direction: heading buffered for the next step
    """

    def __init__(
        self,
        grid: Grid,
        positions: List[int],
        direction: Direction = DEFAULT_DIRECTION,
    ):
        self.grid = grid
        self.body = deque(positions)
        self.direction = direction
        self.pending_direction = direction

    @property
    def head(self) -> int:
        """Return the head cell (first element)."""
        return self.body[0]

    @property
    def tail(self) -> int:
        return self.body[-1]

    def __len__(self) -> int:
        return len(self.body)

    def cells(self) -> List[int]:
        """Return the body as a head-first list."""
        return list(self.body)

    def occupies(self, cell: int) -> bool:
        return cell in self.body

    def advance_head(self, direction: Optional[Direction] = None) -> int:
        """Return the cell the head would move to, without moving."""
        if direction is None:
            direction = self.pending_direction
        return self.grid.neighbor(self.head, direction)

    def set_pending_direction(self, direction: Direction) -> bool:
        """
        Buffer a heading for the next step.

        A request for the exact opposite of the current heading is ignored
        so the snake can never turn back into its own neck in one tick.
        Returns True when the request was buffered.
        """
        if direction == self.direction.opposite:
            return False
        self.pending_direction = direction
        return True

    def collides_with_self(self, candidate_head: int, grew: bool = False) -> bool:
        """
        Check whether moving the head to `candidate_head` hits the body.

        On a non-growth move the tail cell is vacated during the same step,
        so the head may follow directly onto it.
        """
        remaining = list(self.body)
        if not grew:
            remaining = remaining[:-1]
        return candidate_head in remaining

    def apply_step(self, grew: bool) -> int:
        """
        Commit the pending heading and move one cell.

        The tail is retained on a growth step (length + 1) and dropped
        otherwise. Returns the new head cell.
        """
        self.direction = self.pending_direction
        new_head = self.advance_head(self.direction)
        self.body.appendleft(new_head)
        if not grew:
            self.body.pop()
        return new_head

    def __repr__(self):
        return f"<Snake head={self.head} len={len(self.body)} dir={self.direction.value}>"
