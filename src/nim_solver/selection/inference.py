"""
Move choice over scored root moves.

Deterministic: the first move reaching the best score wins, so ties go to
the lowest pile index and then the smallest removal (generation order).
"""

from __future__ import annotations

from typing import List, Tuple

from nim_solver.core.types import Move


def best_move(moves: List[Tuple[Move, int]], pick_best: bool = True) -> Tuple[Move, int]:
    """
    Pick the first move with the best/worst score.

    Args:
        moves: List of (move, score) tuples in generation order
        pick_best: If True, maximize score; if False, minimize score

    Returns:
        (move, score) of the selected entry
    """
    if not moves:
        raise ValueError("No moves to choose from")

    chosen = moves[0]
    for entry in moves[1:]:
        better = entry[1] > chosen[1] if pick_best else entry[1] < chosen[1]
        if better:
            chosen = entry
    return chosen


def winning_moves(moves: List[Tuple[Move, int]], score: int) -> List[Move]:
    """All moves reaching ``score``, in generation order."""
    return [m for m, s in moves if s == score]
