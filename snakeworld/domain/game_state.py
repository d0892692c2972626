"""
GameState enum and the transitions allowed between modes.
"""

import logging
from enum import Enum
from typing import Dict, FrozenSet

from ..exceptions import InvalidStateError


logger = logging.getLogger(__name__)


class GameState(Enum):
    """The engine's current mode."""

    READY = "ready"
    PLAYING = "playing"
    WON = "won"
    GAME_OVER = "game_over"

    @property
    def is_terminal(self) -> bool:
        return self in (GameState.WON, GameState.GAME_OVER)

    @property
    def code(self) -> int:
        """Stable numeric code for front ends that exchange plain integers."""
        return STATE_CODES[self]


STATE_CODES = {
    GameState.PLAYING: 0,
    GameState.WON: 1,
    GameState.GAME_OVER: 2,
    GameState.READY: 3,
}

# Leaving a terminal state means building a new World, so WON and
# GAME_OVER have no outgoing transitions here.
TRANSITIONS: Dict[GameState, FrozenSet[GameState]] = {
    GameState.READY: frozenset({GameState.PLAYING}),
    GameState.PLAYING: frozenset({GameState.PLAYING, GameState.WON, GameState.GAME_OVER}),
    GameState.WON: frozenset(),
    GameState.GAME_OVER: frozenset(),
}


class GameStateMachine:
    """
    Holds the authoritative mode and enforces the transition table.
    """

    def __init__(self):
        self.state = GameState.READY

    @property
    def is_ready(self) -> bool:
        return self.state is GameState.READY

    @property
    def is_playing(self) -> bool:
        return self.state is GameState.PLAYING

    @property
    def is_finished(self) -> bool:
        return self.state.is_terminal

    def can_transition(self, target: GameState) -> bool:
        return target in TRANSITIONS[self.state]

    def transition(self, target: GameState) -> None:
        """
        Move to `target`.

        Raises:
            InvalidStateError: if the table has no edge from the current mode.
        """
        if not self.can_transition(target):
            raise InvalidStateError(
                f"Cannot move from {self.state.name} to {target.name}."
            )
        if target is not self.state:
            logger.debug("Game state %s -> %s", self.state.name, target.name)
        self.state = target

    def __repr__(self):
        return f"<GameStateMachine state={self.state.name}>"
