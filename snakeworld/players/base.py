"""
Base player interface for the game driver.
"""

from typing import Optional

from ..domain.constants import Direction
from ..domain.snapshot import WorldSnapshot


class Player:
    """
    Base class/interface for input sources.

    A player is asked once per tick for a heading given the current
    snapshot of the world.
    """

    def get_direction(self, snapshot: WorldSnapshot) -> Optional[Direction]:
        """
        Return a heading for the next step, or None for no input.

        Args:
            snapshot: Current state of the world
        """
        raise NotImplementedError
