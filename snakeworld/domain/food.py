"""
Food placement.
"""

import logging
import random
from typing import Iterable, Optional

from .grid import Grid
from ..exceptions import InvalidStateError


logger = logging.getLogger(__name__)


class Food:
    """
    The single active food cell.

    Attributes:
        grid: board geometry
        cell: current food cell, or None when the board has no free cell
    """

    def __init__(self, grid: Grid, cell: Optional[int] = None):
        self.grid = grid
        self.cell = cell

    def place(self, excluding: Iterable[int], rng: random.Random) -> int:
        """
        Move the food to a cell sampled uniformly from the free cells.

        Raises InvalidStateError when every cell is excluded; callers check
        for a full board before asking for a placement.
        """
        occupied = set(excluding)
        free_cells = [cell for cell in range(self.grid.size) if cell not in occupied]
        if not free_cells:
            raise InvalidStateError("No free cell left to place food on.")

        self.cell = rng.choice(free_cells)
        logger.debug("Placed food at %d (%d free cells)", self.cell, len(free_cells))
        return self.cell

    def clear(self) -> None:
        self.cell = None

    def __repr__(self):
        return f"<Food cell={self.cell}>"
