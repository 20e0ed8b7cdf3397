import argparse
import json
import logging
import random
import time
from typing import Any, Dict, Optional

from config import load_settings
from game_engine import SnakeGame
from players import RandomPlayer
from services.frame_renderer import FrameRenderer

logger = logging.getLogger(__name__)


# -------------------------------
# Session Function
# -------------------------------

def run_session(params: argparse.Namespace, player=None, sleep=time.sleep) -> Dict[str, Any]:
    """
    Runs a single headless game, steered by a player, on a fixed tick interval.

    Args:
        params: An object (like argparse.Namespace) with grid_size, seed,
                speed (milliseconds), max_ticks (None for no limit),
                no_delay, show_board and snapshot.
        player: Direction source; a RandomPlayer sharing the seed by default.
        sleep: Called with the tick interval in seconds between ticks.

    Returns:
        A dictionary summarizing the session (score, ticks, length, ...).
    """
    seed = getattr(params, 'seed', None)
    game = SnakeGame(grid_size=params.grid_size, rng=random.Random(seed))
    if player is None:
        player = RandomPlayer(rng=random.Random(seed))

    max_ticks: Optional[int] = getattr(params, 'max_ticks', None)
    interval = params.speed / 1000.0

    game.start()
    while not game.state.game_over:
        if max_ticks is not None and game.state.tick_number >= max_ticks:
            logger.info(f"Stopping after {max_ticks} ticks")
            break

        move = player.get_move(game.snapshot())
        if move is not None:
            game.set_direction(move)
        game.tick()

        if getattr(params, 'show_board', False):
            print("\n" + game.state.print_board() + "\n")
        if not getattr(params, 'no_delay', False):
            sleep(interval)

    state = game.state
    snapshot_path = getattr(params, 'snapshot', None)
    if snapshot_path:
        FrameRenderer().save(state, snapshot_path)

    return {
        "score": state.score,
        "ticks": state.tick_number,
        "length": len(state.snake),
        "game_over": state.game_over,
        "death_reason": state.snake.death_reason,
        "snapshot": snapshot_path
    }


def build_parser(settings=None) -> argparse.ArgumentParser:
    settings = settings or load_settings()
    parser = argparse.ArgumentParser(
        description="Run a headless single-player Snake game steered by a random player."
    )
    parser.add_argument("--grid-size", dest="grid_size", type=int, default=settings.grid_size,
                        help="Board is N x N cells")
    parser.add_argument("--seed", type=int, default=settings.seed,
                        help="Seed for food placement and the player's choices")
    parser.add_argument("--speed", type=int, default=settings.game_speed_ms,
                        help="Milliseconds between ticks")
    parser.add_argument("--max-ticks", dest="max_ticks", type=int, default=None,
                        help="Stop after this many ticks even if the snake is alive")
    parser.add_argument("--no-delay", dest="no_delay", action="store_true",
                        help="Do not wait between ticks")
    parser.add_argument("--show-board", dest="show_board", action="store_true",
                        help="Print the board after every tick")
    parser.add_argument("--snapshot", type=str, default=None,
                        help="Save the final frame as an image at this path")
    return parser


# -------------------------------
# Main Entry Point
# -------------------------------
def main(argv=None):
    settings = load_settings()
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s"
    )

    args = build_parser(settings).parse_args(argv)
    if args.speed <= 0:
        raise ValueError("--speed must be a positive number of milliseconds.")
    if args.max_ticks is not None and args.max_ticks < 0:
        raise ValueError("--max-ticks cannot be negative.")

    result = run_session(args)

    print("\nSession Result Summary:")
    print(json.dumps(result, indent=2))
    return result


if __name__ == "__main__":
    main()
