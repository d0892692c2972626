"""
Grid geometry for a square, wrap-around board.

Cells are integer indices into the row-major flattened board:
``index = row * width + col``.
"""

from typing import Tuple

from .constants import DELTAS, MIN_WORLD_SIZE, Direction
from ..exceptions import ConfigError


class Grid:
    """
    Coordinate math for an N x N board.

    Attributes:
        width: number of rows (and columns)
        size: total number of cells (width * width)
    """

    def __init__(self, width: int):
        if isinstance(width, bool) or not isinstance(width, int):
            raise ConfigError(f"World size must be an integer, got {width!r}.")
        if width < MIN_WORLD_SIZE:
            raise ConfigError(
                f"World size {width} is below the minimum of {MIN_WORLD_SIZE}."
            )
        self.width = width
        self.size = width * width

    def to_index(self, row: int, col: int) -> int:
        return row * self.width + col

    def to_coords(self, cell: int) -> Tuple[int, int]:
        """Return (row, col) for a cell index."""
        return divmod(cell, self.width)

    def contains(self, cell: int) -> bool:
        return 0 <= cell < self.size

    def neighbor(self, cell: int, direction: Direction) -> int:
        """
        Return the cell one step away in `direction`.

        The board has no walls: leaving one edge re-enters from the
        opposite edge.
        """
        row, col = self.to_coords(cell)
        d_row, d_col = DELTAS[direction]
        return self.to_index((row + d_row) % self.width, (col + d_col) % self.width)

    def __repr__(self):
        return f"<Grid {self.width}x{self.width}>"
