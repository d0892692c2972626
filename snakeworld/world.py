"""
World - the command/query surface a presentation layer talks to.

A World is built once per game and mutated in place by `change_direction`
and `step`. Restarting a finished game means constructing a new World.
"""

import logging
import random
from typing import Optional, Tuple

from .domain.constants import SCORE_INCREMENT, Direction
from .domain.food import Food
from .domain.game_state import GameState, GameStateMachine
from .domain.grid import Grid
from .domain.snake import Snake
from .domain.snapshot import WorldSnapshot
from .exceptions import ConfigError


logger = logging.getLogger(__name__)


class World:
    """
    Composes:
      - Grid (board geometry)
      - Snake
      - Food
      - GameStateMachine (Ready / Playing / Won / GameOver)
      - Score
    """

    def __init__(self, size: int, initial_head: int, rng: Optional[random.Random] = None):
        self.grid = Grid(size)
        if isinstance(initial_head, bool) or not isinstance(initial_head, int):
            raise ConfigError(f"Initial head must be an integer cell, got {initial_head!r}.")
        if not self.grid.contains(initial_head):
            raise ConfigError(
                f"Initial head {initial_head} is outside the board [0, {self.grid.size})."
            )

        self.rng = rng if rng is not None else random.Random()
        self.snake = Snake(self.grid, [initial_head])
        self.food = Food(self.grid)
        self._state = GameStateMachine()
        self._score = 0
        self._ticks = 0

        self.food.place(self.snake.body, self.rng)
        logger.debug(
            "New world %dx%d, head=%d, food=%d",
            size, size, initial_head, self.food.cell,
        )

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------
    def game_start(self) -> None:
        """Leave Ready for Playing. Ignored in any other mode."""
        if not self._state.is_ready:
            logger.debug("game_start() ignored in state %s", self._state.state.name)
            return
        self._state.transition(GameState.PLAYING)
        logger.info("Game started (head=%d, food=%d)", self.snake.head, self.food.cell)

    def change_direction(self, direction: Direction) -> None:
        """
        Buffer a heading for the next step.

        Accepted in every mode; it only shows up once `step` runs while
        playing. Requests to reverse straight back are ignored.
        """
        direction = Direction(direction)
        if not self.snake.set_pending_direction(direction):
            logger.debug(
                "Ignored reversal %s while heading %s",
                direction.value, self.snake.direction.value,
            )

    def step(self) -> None:
        """
        Advance one tick. Does nothing unless the game is Playing.

        Every check runs before anything moves, so the world is either fully
        advanced or, on a collision, left exactly where it was apart from the
        switch to GAME_OVER.
        """
        if not self._state.is_playing:
            logger.debug("step() ignored in state %s", self._state.state.name)
            return

        candidate = self.snake.advance_head()
        grew = candidate == self.food.cell

        if self.snake.collides_with_self(candidate, grew):
            self._ticks += 1
            self._state.transition(GameState.GAME_OVER)
            logger.info(
                "Game over at tick %d: head %d ran into the body (score=%d, length=%d)",
                self._ticks, candidate, self._score, len(self.snake),
            )
            return

        self.snake.apply_step(grew)
        self._ticks += 1

        if not grew:
            logger.debug("Tick %d: head -> %d", self._ticks, candidate)
            return

        self._score += SCORE_INCREMENT
        if len(self.snake) == self.grid.size:
            self.food.clear()
            self._state.transition(GameState.WON)
            logger.info("Board filled at tick %d: game won (score=%d)", self._ticks, self._score)
            return

        self.food.place(self.snake.body, self.rng)
        logger.debug(
            "Tick %d: ate food at %d, length=%d, score=%d, new food=%d",
            self._ticks, candidate, len(self.snake), self._score, self.food.cell,
        )

    def set_food(self, cell: int) -> None:
        """
        Put the food on a specific cell.

        Raises:
            ConfigError: if the cell is off the board or under the snake.
        """
        if isinstance(cell, bool) or not isinstance(cell, int) or not self.grid.contains(cell):
            raise ConfigError(f"Food cell {cell!r} is outside the board [0, {self.grid.size}).")
        if self.snake.occupies(cell):
            raise ConfigError(f"Food cell {cell} is occupied by the snake.")
        self.food.cell = cell

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    @property
    def width(self) -> int:
        return self.grid.width

    @property
    def snake_head_index(self) -> int:
        return self.snake.head

    @property
    def snake_length(self) -> int:
        return len(self.snake)

    @property
    def snake_cells(self) -> Tuple[int, ...]:
        """Snake cells, head first."""
        return tuple(self.snake.body)

    @property
    def food_index(self) -> Optional[int]:
        """Food cell; None only after the board has been filled."""
        return self.food.cell

    @property
    def score(self) -> int:
        return self._score

    @property
    def game_state(self) -> GameState:
        return self._state.state

    @property
    def current_direction(self) -> Direction:
        return self.snake.direction

    @property
    def ticks(self) -> int:
        return self._ticks

    def snapshot(self) -> WorldSnapshot:
        """Return a copy of the current state for rendering or history."""
        return WorldSnapshot(
            width=self.width,
            cells=self.snake_cells,
            food=self.food_index,
            score=self._score,
            state=self._state.state,
            direction=self.snake.direction,
            ticks=self._ticks,
        )

    def print_board(self) -> str:
        return self.snapshot().print_board()

    def __repr__(self):
        return (
            f"<World {self.width}x{self.width} state={self.game_state.name}, "
            f"head={self.snake_head_index}, len={self.snake_length}, score={self._score}>"
        )
