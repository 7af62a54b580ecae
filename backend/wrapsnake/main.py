#!/usr/bin/env python3
"""
Run a headless toroidal snake game steered by the random autopilot.

Usage:
    python -m wrapsnake.main
    python -m wrapsnake.main --rows 10 --cols 10 --speed 10 --win-food-count 5
    python -m wrapsnake.main --fast --seed 42 --quiet

Settings not given on the command line come from SNAKE_ROWS_COUNT,
SNAKE_COLS_COUNT, SNAKE_SPEED and SNAKE_WIN_FOOD_COUNT (a .env file is
loaded if present), then from the built-in defaults.
"""

import argparse
import json
import logging
import random
import sys
import time
from typing import Any, Callable, Dict, Optional

from dotenv import load_dotenv

from wrapsnake.domain.config import GameConfig, ConfigurationError
from wrapsnake.domain.game_state import GameState
from wrapsnake.game_loop import GameLoop
from wrapsnake.players import Player, RandomPlayer

load_dotenv()

logger = logging.getLogger(__name__)

DEFAULT_MAX_TICKS = 10_000


def run_game(
    config: GameConfig,
    max_ticks: int = DEFAULT_MAX_TICKS,
    seed: Optional[int] = None,
    fast: bool = False,
    player: Optional[Player] = None,
    printer: Optional[Callable[[str], None]] = print
) -> Dict[str, Any]:
    """
    Runs a single game until it finishes or max_ticks is reached.

    Args:
        config: Game settings; validated before anything else happens.
        max_ticks: Upper bound on ticks, after which the game is stopped.
        seed: Seed for food placement and the autopilot.
        fast: Fire ticks back to back instead of waiting for the timer.
        player: Steering player, RandomPlayer by default.
        printer: Receives the text board after every render; None to disable.

    Returns:
        A dictionary summarizing the game (ticks, score, length, status, outcome).

    Raises:
        ConfigurationError: If the settings are out of bounds.
    """
    rng = random.Random(seed)
    player = player or RandomPlayer(random.Random(seed))

    def render(state: GameState) -> None:
        if printer is not None:
            printer(f"\nTick {state.tick_number} | score {state.score}\n{state.print_board()}")

    game = GameLoop(render_sink=render, rng=rng)
    game.init(config).raise_for_errors()
    game.play()

    while game.status.is_playing() and game.tick_number < max_ticks:
        move = player.get_move(game.get_current_state())
        game.request_direction(move)

        if fast:
            game.ticker.fire_now()
            continue

        wait = game.ticker.idle_seconds()
        if wait is not None and wait > 0:
            time.sleep(wait)
        game.run_pending()

    if game.status.is_playing():
        logger.info(f"Tick limit {max_ticks} reached; stopping the game")
        game.stop()

    return {
        "ticks": game.tick_number,
        "score": game.score.count,
        "length": len(game.snake),
        "status": game.status.condition.value,
        "outcome": game.outcome,
        "settings": game.config.to_dict(),
    }


def main():
    parser = argparse.ArgumentParser(
        description="Run a single-player snake game on a wrapped-around grid.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__
    )
    parser.add_argument("--rows", type=int, default=None,
                        help="Number of rows, 10 to 30 (default 21)")
    parser.add_argument("--cols", type=int, default=None,
                        help="Number of columns, 10 to 30 (default 21)")
    parser.add_argument("--speed", type=int, default=None,
                        help="Steps per second, 1 to 10 (default 2)")
    parser.add_argument("--win-food-count", type=int, default=None,
                        help="Length past which the snake wins, 5 to 50 (default 50)")
    parser.add_argument("--max-ticks", type=int, default=DEFAULT_MAX_TICKS,
                        help="Stop the game after this many ticks")
    parser.add_argument("--seed", type=int, default=None,
                        help="Random seed for food placement and the autopilot")
    parser.add_argument("--fast", action="store_true",
                        help="Run ticks back to back instead of in real time")
    parser.add_argument("--quiet", action="store_true",
                        help="Do not print the board every tick")
    parser.add_argument("--log-level", default="INFO",
                        help="Logging level (default INFO)")

    args = parser.parse_args()

    logging.basicConfig(
        level=args.log_level.upper(),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    config = GameConfig.from_env().merged({
        "rows_count": args.rows,
        "cols_count": args.cols,
        "speed": args.speed,
        "win_food_count": args.win_food_count,
    })

    try:
        result = run_game(
            config,
            max_ticks=args.max_ticks,
            seed=args.seed,
            fast=args.fast,
            printer=None if args.quiet else print,
        )
    except ConfigurationError as e:
        for err in e.errors:
            print(err, file=sys.stderr)
        sys.exit(2)

    print("\nGame Result Summary:")
    print(json.dumps(result, indent=2))


if __name__ == "__main__":
    main()
