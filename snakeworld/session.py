"""
Headless game driver.

Plays the part of a front end: it polls a Player for input, feeds it to the
World, steps the World on a fixed cadence and keeps a history of snapshots.
"""

import logging
import random
import time
from typing import Any, Callable, Dict, List, Optional

from .config import GameConfig
from .domain.game_state import GameState
from .domain.snapshot import WorldSnapshot
from .players.base import Player
from .world import World


logger = logging.getLogger(__name__)


class GameSession:
    """
    Owns one World at a time. Restarting throws the World away and builds
    a new one at a fresh spawn cell.
    """

    def __init__(
        self,
        config: GameConfig,
        player: Player,
        rng: Optional[random.Random] = None,
    ):
        self.config = config
        self.player = player
        self.rng = rng if rng is not None else config.make_rng()
        self.history: List[WorldSnapshot] = []
        self.games_played = 0
        self.world = self._new_world()

    def _new_world(self) -> World:
        spawn = self.config.resolve_spawn(self.rng)
        world = World(self.config.world_size, spawn, rng=self.rng)
        self.games_played += 1
        logger.info(
            "Game #%d: %dx%d board, spawn=%d",
            self.games_played, world.width, world.width, spawn,
        )
        return world

    def start(self) -> None:
        self.world.game_start()

    def restart(self) -> World:
        """Discard the current World and return a freshly built one (Ready)."""
        self.history = []
        self.world = self._new_world()
        return self.world

    def record_history(self) -> WorldSnapshot:
        snapshot = self.world.snapshot()
        self.history.append(snapshot)
        return snapshot

    def tick(self) -> WorldSnapshot:
        """
        Run one frame:
          1) Ask the player for input and forward it
          2) Step the world if it is playing
          3) Record and return the resulting snapshot
        """
        direction = self.player.get_direction(self.world.snapshot())
        if direction is not None:
            self.world.change_direction(direction)

        if self.world.game_state is GameState.PLAYING:
            self.world.step()

        return self.record_history()

    def run(
        self,
        max_ticks: Optional[int] = None,
        on_tick: Optional[Callable[[WorldSnapshot], None]] = None,
    ) -> Dict[str, Any]:
        """
        Start the game if needed and tick until it ends or the tick limit is hit.

        `on_tick` is called with the snapshot taken after every tick.
        """
        if max_ticks is None:
            max_ticks = self.config.max_ticks
        delay = 1.0 / self.config.tick_rate if self.config.tick_rate > 0 else 0.0

        self.start()
        if not self.history:
            self.record_history()

        while self.world.game_state is GameState.PLAYING and self.world.ticks < max_ticks:
            snapshot = self.tick()
            logger.debug("%r", snapshot)
            if on_tick is not None:
                on_tick(snapshot)
            if delay:
                time.sleep(delay)

        summary = self.summary()
        logger.info(
            "Finished after %d ticks: state=%s, score=%d, length=%d",
            summary["ticks"], summary["state"], summary["score"], summary["length"],
        )
        return summary

    def summary(self) -> Dict[str, Any]:
        world = self.world
        return {
            "state": world.game_state.value,
            "score": world.score,
            "length": world.snake_length,
            "ticks": world.ticks,
            "head": world.snake_head_index,
            "food": world.food_index,
        }

    def serialize_history(self) -> List[Dict[str, Any]]:
        """
        Convert the list of snapshots to a JSON-serializable list of dicts.
        """
        return [snapshot.to_dict() for snapshot in self.history]
