"""
Exhaustive minimax with a transposition cache.

Player B maximizes, Player A minimizes, and every position scores +1 or -1
from Player B's point of view. The tree is finite because each ply removes
at least one object, so recursion depth is bounded by the total number of
objects on the table.
"""

from __future__ import annotations

import logging
import sys
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Iterator, Optional

from nim_solver.core.hashing import canonical_key
from nim_solver.core.types import Player
from nim_solver.games.game_state import GameState
from nim_solver.games.nim import generate_children, is_terminal, terminal_score
from nim_solver.search.transposition import TranspositionCache

logger = logging.getLogger(__name__)

# Frames reserved for callers above the search (test runners, the CLI, ...)
STACK_HEADROOM = 1000


@dataclass
class SearchStats:
    """Node counters for one search."""
    nodes: int = 0
    terminal_nodes: int = 0
    expanded_nodes: int = 0
    cache_hits: int = 0


@contextmanager
def _recursion_room(depth: int) -> Iterator[None]:
    """Temporarily raise the interpreter recursion limit to fit ``depth`` plies."""
    previous = sys.getrecursionlimit()
    needed = depth + STACK_HEADROOM
    if needed <= previous:
        yield
        return

    logger.debug("Raising recursion limit %d -> %d", previous, needed)
    sys.setrecursionlimit(needed)
    try:
        yield
    finally:
        sys.setrecursionlimit(previous)


def evaluate(
    state: GameState,
    cache: Optional[TranspositionCache] = None,
    *,
    use_cache: bool = True,
    stats: Optional[SearchStats] = None,
) -> int:
    """
    Exact minimax value of ``state``.

    Args:
        state: Position to evaluate.
        cache: Shared transposition cache. A fresh one is created when
               omitted and ``use_cache`` is set.
        use_cache: If False, bypass the cache entirely. Results are
                   identical either way; only the node count changes.
        stats: Optional counters, updated in place.

    Returns:
        +1 if Player B can force a win from ``state``, else -1.
    """
    if not use_cache:
        cache = None
    elif cache is None:
        cache = TranspositionCache()

    if stats is None:
        stats = SearchStats()

    with _recursion_room(state.total):
        score = _minimax(state, cache, stats)

    logger.debug(
        "evaluate %s -> %+d (%d nodes, cache %s)",
        state, score, stats.nodes, len(cache) if cache is not None else "off",
    )
    return score


def _minimax(
    state: GameState,
    cache: Optional[TranspositionCache],
    stats: SearchStats,
) -> int:
    stats.nodes += 1

    # Terminal positions are cheap and never cached
    if is_terminal(state):
        stats.terminal_nodes += 1
        return terminal_score(state.current_player)

    key = None
    if cache is not None:
        key = canonical_key(state)
        cached = cache.get(key)
        if cached is not None:
            stats.cache_hits += 1
            return cached

    stats.expanded_nodes += 1
    maximizing = state.current_player == Player.B

    # One frame per ply: keep the running best in this frame
    best = None
    for child in generate_children(state):
        score = _minimax(child, cache, stats)
        if best is None or (score > best if maximizing else score < best):
            best = score

    if cache is not None:
        cache.store(key, best)
    return best
