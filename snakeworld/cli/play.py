#!/usr/bin/env python3
"""Play a headless snake game from the command line.

Inputs come from a move script: one token per tick, where U/D/L/R (or the
full direction names) request a turn and "." means no input that tick.
Defaults are read from the environment (see snakeworld.config).

Usage examples:

    snakeworld-play --size 6 --spawn 14 --seed 7 --moves "R R D D L L" --show-board

    python -m snakeworld.cli.play --moves "R . . D" --tick-rate 0 --json
"""

import argparse
import json
import logging

from snakeworld.config import GameConfig
from snakeworld.exceptions import ConfigError
from snakeworld.players import ScriptedPlayer, parse_moves
from snakeworld.session import GameSession


logger = logging.getLogger(__name__)


def build_parser(defaults: GameConfig) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Run a snake game headlessly from a scripted move sequence.",
    )
    parser.add_argument("--size", type=int, default=defaults.world_size,
                        help=f"Board width (default: {defaults.world_size})")
    parser.add_argument("--spawn", type=int, default=defaults.spawn_index,
                        help="Initial head cell (default: random)")
    parser.add_argument("--seed", type=int, default=defaults.seed,
                        help="Seed for food placement and spawn (default: unseeded)")
    parser.add_argument("--moves", type=str, default="",
                        help='Move script, e.g. "R R D . L" (default: no input)')
    parser.add_argument("--max-ticks", type=int, default=defaults.max_ticks,
                        help=f"Stop after this many ticks (default: {defaults.max_ticks})")
    parser.add_argument("--tick-rate", type=float, default=defaults.tick_rate,
                        help=f"Ticks per second, 0 for no delay (default: {defaults.tick_rate})")
    parser.add_argument("--show-board", action="store_true",
                        help="Log the board after every tick")
    parser.add_argument("--json", action="store_true",
                        help="Print the final summary as JSON")
    parser.add_argument("--log-level", type=str, default=defaults.log_level,
                        help=f"Logging level (default: {defaults.log_level})")
    return parser


def main() -> None:
    try:
        defaults = GameConfig.from_env()
    except ConfigError as e:
        raise SystemExit(f"Invalid environment configuration: {e}")

    args = build_parser(defaults).parse_args()

    try:
        config = GameConfig(
            world_size=args.size,
            spawn_index=args.spawn,
            tick_rate=args.tick_rate,
            max_ticks=args.max_ticks,
            seed=args.seed,
            log_level=args.log_level,
        )
        moves = parse_moves(args.moves)
    except ConfigError as e:
        raise SystemExit(f"Invalid configuration: {e}")

    logging.basicConfig(
        level=config.log_level.upper(),
        format="%(asctime)s [%(levelname)s] %(message)s",
    )

    session = GameSession(config, ScriptedPlayer(moves))
    logger.info("Starting board:\n%s", session.world.print_board())

    def show(snapshot):
        logger.info("Tick %d (score=%d)\n%s", snapshot.ticks, snapshot.score, snapshot.print_board())

    summary = session.run(on_tick=show if args.show_board else None)
    if args.json:
        print(json.dumps(summary))
    else:
        print(
            f"Game {summary['state']}: score={summary['score']} length={summary['length']} "
            f"ticks={summary['ticks']}"
        )


if __name__ == "__main__":
    main()
