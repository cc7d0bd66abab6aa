"""
Command-line interface for playing Nim against the solver.
"""

import argparse
import logging
import sys
from typing import Callable, List, Optional

from nim_solver.api import play
from nim_solver.core.errors import NoMoveAvailableError
from nim_solver.core.types import Player
from nim_solver.debug.profiler import compare_cache_modes, profile_function
from nim_solver.selection import best_move
from nim_solver.utils.config import LOG_LEVELS, Config, load_config
from nim_solver.utils.factory import create_game, parse_piles

logger = logging.getLogger(__name__)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Play Nim against an exhaustive minimax solver"
    )
    parser.add_argument(
        "--piles",
        type=str,
        default=None,
        help="Pile sizes, e.g. '3,4,5' (default: ask)",
    )
    parser.add_argument(
        "--first", "-f",
        type=int,
        choices=[1, 2],
        default=None,
        help="Who moves first: 1 = you, 2 = AI (default: ask)",
    )
    parser.add_argument(
        "--self-play",
        action="store_true",
        help="AI plays both seats",
    )
    parser.add_argument(
        "--no-cache",
        action="store_true",
        help="Search without the transposition cache",
    )
    parser.add_argument(
        "--show-scores",
        action="store_true",
        help="Print every AI candidate move with its score",
    )
    parser.add_argument(
        "--profile",
        action="store_true",
        help="Profile the search on the given piles and exit",
    )
    parser.add_argument(
        "--config", "-c",
        type=str,
        default=None,
        help="TOML config file (default: $NIM_SOLVER_CONFIG or nim_solver.toml)",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default=None,
        help="Logging level (default: from config, INFO)",
    )
    return parser.parse_args(argv)


def _ask(prompt: str, parse: Callable, input_fn: Callable[[str], str] = input):
    """Prompt until ``parse`` accepts the answer."""
    while True:
        raw = input_fn(prompt)
        try:
            return parse(raw)
        except ValueError as e:
            print(f"Invalid input: {e}")


def _parse_first(raw: str) -> int:
    value = int(raw.strip())
    if value not in (Player.HUMAN, Player.AI):
        raise ValueError("enter 1 or 2")
    return value


def build_config(args: argparse.Namespace) -> Config:
    """Merge config file values with command-line overrides."""
    config = load_config(args.config)
    return config.replace(
        piles=parse_piles(args.piles) if args.piles else None,
        first_player=args.first,
        use_cache=False if args.no_cache else None,
        show_scores=True if args.show_scores else None,
        log_level=args.log_level,
    )


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)

    try:
        config = build_config(args)
    except ValueError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logger.debug("Loaded %r", config)

    if args.profile:
        try:
            compare_cache_modes(config.piles, include_uncached=not args.no_cache)
        except NoMoveAvailableError as e:
            print(f"error: {e}", file=sys.stderr)
            return 2
        profile_function(best_move, config.piles, use_cache=config.use_cache)
        return 0

    print("Welcome to the Nim Game!\n")

    try:
        piles = config.piles
        if args.piles is None and not args.self_play:
            piles = _ask("Enter pile sizes (e.g. 3 4 5): ", parse_piles)

        first = config.first_player
        if args.first is None and not args.self_play:
            first = _ask("Who goes first? (1 = You, 2 = AI): ", _parse_first)
    except (EOFError, KeyboardInterrupt):
        print()
        return 1

    game = create_game(piles, first)
    human_players = [] if args.self_play else [Player.HUMAN]

    play(
        game,
        human_players,
        use_cache=config.use_cache,
        show_scores=config.show_scores,
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
