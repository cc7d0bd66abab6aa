"""
Selection module - best-move extraction for the automated player.

Provides the main entry points:
- best_move(): The move the automated player makes from a pile configuration
- find_best_move(): Same, together with its minimax score
- score_moves(): Every root move with its score
- select_move(): Adapter for a live Nim match
"""

from __future__ import annotations

import logging
from typing import List, Optional, Sequence, Tuple, TYPE_CHECKING

from nim_solver.core.errors import NoMoveAvailableError
from nim_solver.core.types import Move, Player
from nim_solver.games.game_state import GameState
from nim_solver.games.nim import generate_children, is_terminal, move_between
from nim_solver.search.minimax import SearchStats, evaluate
from nim_solver.search.transposition import TranspositionCache
from nim_solver.selection import inference

if TYPE_CHECKING:
    from nim_solver.games.nim import Nim

logger = logging.getLogger(__name__)


def score_moves(
    piles: Sequence[int],
    cache: Optional[TranspositionCache] = None,
    use_cache: bool = True,
    stats: Optional[SearchStats] = None,
) -> List[Tuple[Move, int]]:
    """
    Score every move available to Player B from ``piles``.

    One cache is shared across all root children and the whole recursion.

    Args:
        piles: Non-negative pile counts
        cache: Cache to reuse; a fresh one is created when omitted
        use_cache: If False, search without memoization
        stats: Optional node counters, updated in place

    Returns:
        (move, score) pairs in generation order

    Raises:
        InvalidStateError: if ``piles`` holds negative or non-integer counts
        NoMoveAvailableError: if every pile is empty
    """
    root = GameState(piles, Player.B)
    if is_terminal(root):
        raise NoMoveAvailableError(root.piles)

    if use_cache and cache is None:
        cache = TranspositionCache()
    if stats is None:
        stats = SearchStats()

    return [
        (move_between(root, child), evaluate(child, cache, use_cache=use_cache, stats=stats))
        for child in generate_children(root)
    ]


def find_best_move(
    piles: Sequence[int],
    cache: Optional[TranspositionCache] = None,
    use_cache: bool = True,
) -> Tuple[Move, int]:
    """
    Best move for Player B (the automated player) and its score.

    Ties go to the first move found: lowest pile index, then smallest count.
    """
    if use_cache and cache is None:
        cache = TranspositionCache()
    stats = SearchStats()

    scored = score_moves(piles, cache, use_cache=use_cache, stats=stats)
    move, score = inference.best_move(scored, pick_best=True)

    logger.debug(
        "best_move %s -> %s score=%+d nodes=%d cache=%s",
        list(piles), tuple(move), score, stats.nodes,
        cache.stats if cache is not None else "off",
    )
    return move, score


def best_move(
    piles: Sequence[int],
    cache: Optional[TranspositionCache] = None,
    use_cache: bool = True,
) -> Move:
    """
    Select the automated player's move from ``piles``.

    Raises:
        NoMoveAvailableError: if every pile is empty
    """
    return find_best_move(piles, cache, use_cache=use_cache)[0]


def select_move(game: "Nim", use_cache: bool = True) -> Move:
    """
    Select a move for whoever is to act in a live match.

    The search is symmetric in the player tag, so the side to move is
    always searched as Player B regardless of its seat.
    """
    if game.is_over():
        raise NoMoveAvailableError(game.piles)
    return best_move(game.piles, use_cache=use_cache)


__all__ = [
    "best_move",
    "find_best_move",
    "score_moves",
    "select_move",
]
