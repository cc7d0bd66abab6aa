"""
Public API for solving and playing Nim.

Usage:
    from nim_solver import best_move, play, Nim

    best_move([3, 4, 5])           # Move(pile_index=0, count=2)
    play(Nim([3, 4, 5]), human_players=[1])
"""

from __future__ import annotations

import logging
from typing import Callable, Iterable, Optional, Set

from nim_solver.core.errors import IllegalMoveError, NoMoveAvailableError
from nim_solver.core.types import Move, Player
from nim_solver.debug.viz import render_debug
from nim_solver.games.nim import Nim
from nim_solver.selection import best_move, find_best_move, score_moves, select_move
from nim_solver.selection.inference import best_move as pick_best
from nim_solver.utils.factory import parse_move

logger = logging.getLogger(__name__)

InputFn = Callable[[str], str]
OutputFn = Callable[[str], None]

INVALID_MOVE = "Invalid move. Try again."


def _seat_name(player: Player, human_set: Set[Player]) -> str:
    if len(human_set) == 1:
        return "You" if player in human_set else "AI"
    return f"Player {int(player)}"


def _ai_turn(
    game: Nim,
    use_cache: bool,
    show_scores: bool,
    output_fn: OutputFn,
) -> Move:
    """AI selects and applies its move."""
    if show_scores:
        scored = score_moves(game.piles, use_cache=use_cache)
        move, _ = pick_best(scored)
        output_fn(render_debug(game.piles, scored, selected=move))
    else:
        move = select_move(game, use_cache=use_cache)

    game.apply_move(move, validated=True)
    return move


def _human_turn(
    game: Nim,
    human_set: Set[Player],
    input_fn: InputFn,
    output_fn: OutputFn,
) -> Optional[Move]:
    """Prompt for a move until a legal one is applied. Returns None on EOF."""
    if len(human_set) == 1:
        prompt = "\nYour move (pile number & how many to remove): "
    else:
        prompt = f"\nPlayer {int(game.current_player())}, your move (pile number & how many to remove): "

    while True:
        try:
            raw = input_fn(prompt)
        except EOFError:
            return None

        try:
            move = parse_move(raw)
            game.apply_move(move)
            return move
        except (ValueError, IllegalMoveError) as e:
            logger.debug("Rejected move %r: %s", raw, e)
            output_fn(INVALID_MOVE)


def play(
    game: Nim,
    human_players: Optional[Iterable[int]] = None,
    *,
    use_cache: bool = True,
    show_scores: bool = False,
    input_fn: InputFn = input,
    output_fn: OutputFn = print,
) -> Optional[Player]:
    """
    Main entry point: run a match until the table is empty.

    Parameters
    ----------
    game : Nim
        The match to play; mutated in place.
    human_players : Iterable[int], optional
        Seats controlled by input (1 and/or 2). Empty means self-play.
    use_cache : bool
        Search with the transposition cache.
    show_scores : bool
        Print the per-move score table before each AI move.
    input_fn, output_fn : callables
        Line input and output, ``input``/``print`` by default.

    Returns
    -------
    The winning player, or None if input ended before the game did.
    """
    human_set = {Player(p) for p in (human_players or [])}

    output_fn(game.state_string())

    try:
        while not game.is_over():
            current = game.current_player()
            if current in human_set:
                move = _human_turn(game, human_set, input_fn, output_fn)
                if move is None:
                    output_fn("\nInput closed - game abandoned.")
                    return None
            else:
                output_fn(f"\n{_seat_name(current, human_set)} is thinking...")
                move = _ai_turn(game, use_cache, show_scores, output_fn)
                output_fn(
                    f"{_seat_name(current, human_set)} removes {move.count} "
                    f"from pile {move.pile_index + 1}"
                )

            output_fn("\n" + game.state_string())

        winner = game.winner()
        output_fn(f"\nGame over. Winner is {_seat_name(winner, human_set)}!")
        return winner

    except KeyboardInterrupt:
        output_fn("\nInterrupted - game abandoned.")
        return None
    except Exception:
        logger.exception("Fatal error in game loop")
        raise


__all__ = [
    "best_move",
    "find_best_move",
    "score_moves",
    "select_move",
    "play",
    "NoMoveAvailableError",
]
