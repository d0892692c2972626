"""
Scripted player - replays a fixed sequence of inputs.
"""

import re
from typing import Iterable, List, Optional

from ..domain.constants import DOWN, LEFT, RIGHT, UP, Direction
from ..domain.snapshot import WorldSnapshot
from ..exceptions import ConfigError
from .base import Player


_TOKEN_ALIASES = {
    "U": UP,
    "D": DOWN,
    "L": LEFT,
    "R": RIGHT,
    "UP": UP,
    "DOWN": DOWN,
    "LEFT": LEFT,
    "RIGHT": RIGHT,
}

# "." or "-" means no input for that tick
_IDLE_TOKENS = {".", "-"}


def parse_moves(text: str) -> List[Optional[Direction]]:
    """
    Parse a move script such as "R R D . L" or "right,down,up".

    Raises:
        ConfigError: on an unknown token.
    """
    moves: List[Optional[Direction]] = []
    for token in re.split(r"[\s,]+", text.strip()):
        if not token:
            continue
        if token in _IDLE_TOKENS:
            moves.append(None)
            continue
        direction = _TOKEN_ALIASES.get(token.upper())
        if direction is None:
            raise ConfigError(f"Unknown move {token!r} (expected U/D/L/R, a direction name or '.').")
        moves.append(direction)
    return moves


class ScriptedPlayer(Player):
    """
    Returns the scripted moves in order, one per tick, then None forever.
    """

    def __init__(self, moves: Iterable[Optional[Direction]]):
        self.moves = list(moves)
        self.position = 0

    @property
    def exhausted(self) -> bool:
        return self.position >= len(self.moves)

    def get_direction(self, snapshot: WorldSnapshot) -> Optional[Direction]:
        if self.exhausted:
            return None
        move = self.moves[self.position]
        self.position += 1
        return move
