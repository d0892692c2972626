"""
Runtime configuration for snakeworld drivers.

Values come from the environment (optionally via a .env file):

    SNAKE_WORLD_SIZE    board width, default 10
    SNAKE_SPAWN_INDEX   initial head cell, default random per game
    SNAKE_TICK_RATE     ticks per second, 0 runs without sleeping (default 6)
    SNAKE_MAX_TICKS     tick limit for headless runs (default 500)
    SNAKE_SEED          seed for food placement and spawns (default unseeded)
    SNAKE_LOG_LEVEL     logging level name (default INFO)
"""

import logging
import os
import random
from dataclasses import dataclass
from typing import Mapping, Optional

from dotenv import load_dotenv

from .domain.constants import (
    DEFAULT_MAX_TICKS,
    DEFAULT_TICK_RATE,
    DEFAULT_WORLD_SIZE,
    MIN_WORLD_SIZE,
)
from .exceptions import ConfigError

load_dotenv()


def _sanitize_env_value(value: Optional[str]) -> Optional[str]:
    """
    Clean up env-provided strings that may include surrounding quotes or whitespace.

    Some shells/export flows set values like SNAKE_WORLD_SIZE="12".
    Empty values are treated as unset.
    """
    if value is None:
        return None
    cleaned = value.strip()
    if len(cleaned) >= 2 and (
        (cleaned[0] == '"' and cleaned[-1] == '"') or (cleaned[0] == "'" and cleaned[-1] == "'")
    ):
        cleaned = cleaned[1:-1].strip()
    return cleaned or None


def _int_setting(environ: Mapping[str, str], name: str, default: Optional[int]) -> Optional[int]:
    raw = _sanitize_env_value(environ.get(name))
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError:
        raise ConfigError(f"{name} must be an integer, got {raw!r}.") from None


@dataclass
class GameConfig:
    world_size: int = DEFAULT_WORLD_SIZE
    spawn_index: Optional[int] = None
    tick_rate: float = DEFAULT_TICK_RATE
    max_ticks: int = DEFAULT_MAX_TICKS
    seed: Optional[int] = None
    log_level: str = "INFO"

    def __post_init__(self):
        self.validate()

    def validate(self) -> None:
        if self.world_size < MIN_WORLD_SIZE:
            raise ConfigError(
                f"world_size {self.world_size} is below the minimum of {MIN_WORLD_SIZE}."
            )
        if self.spawn_index is not None and not 0 <= self.spawn_index < self.world_size ** 2:
            raise ConfigError(
                f"spawn_index {self.spawn_index} is outside the board [0, {self.world_size ** 2})."
            )
        if self.tick_rate < 0:
            raise ConfigError(f"tick_rate must be >= 0, got {self.tick_rate}.")
        if self.max_ticks < 0:
            raise ConfigError(f"max_ticks must be >= 0, got {self.max_ticks}.")
        if not isinstance(logging.getLevelName(self.log_level.upper()), int):
            raise ConfigError(f"Unknown log level {self.log_level!r}.")

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "GameConfig":
        """Build a config from environment variables (os.environ by default)."""
        if environ is None:
            environ = os.environ

        raw_rate = _sanitize_env_value(environ.get("SNAKE_TICK_RATE"))
        try:
            tick_rate = float(raw_rate) if raw_rate is not None else DEFAULT_TICK_RATE
        except ValueError:
            raise ConfigError(f"SNAKE_TICK_RATE must be a number, got {raw_rate!r}.") from None

        return cls(
            world_size=_int_setting(environ, "SNAKE_WORLD_SIZE", DEFAULT_WORLD_SIZE),
            spawn_index=_int_setting(environ, "SNAKE_SPAWN_INDEX", None),
            tick_rate=tick_rate,
            max_ticks=_int_setting(environ, "SNAKE_MAX_TICKS", DEFAULT_MAX_TICKS),
            seed=_int_setting(environ, "SNAKE_SEED", None),
            log_level=_sanitize_env_value(environ.get("SNAKE_LOG_LEVEL")) or "INFO",
        )

    def make_rng(self) -> random.Random:
        return random.Random(self.seed)

    def resolve_spawn(self, rng: random.Random) -> int:
        """Return the configured spawn cell, or a random one when unset."""
        if self.spawn_index is not None:
            return self.spawn_index
        return rng.randrange(self.world_size * self.world_size)
