"""
Closed-form Nim theory (Bouton's theorem).

The player to move wins under normal play iff the XOR of all pile sizes
is non-zero. The search never relies on this; it is kept as an
independent cross-check for the exhaustive evaluation.
"""

from functools import reduce
from operator import xor
from typing import Iterable

from nim_solver.core.types import LOSS_SCORE, WIN_SCORE, Player


def nim_sum(piles: Iterable[int]) -> int:
    """XOR of all pile sizes."""
    return reduce(xor, (int(p) for p in piles), 0)


def predicted_score(piles: Iterable[int], player_to_move: Player) -> int:
    """Minimax score (Player B's view) that Nim theory predicts for a position."""
    mover_wins = nim_sum(piles) != 0
    b_wins = mover_wins if player_to_move == Player.B else not mover_wins
    return WIN_SCORE if b_wins else LOSS_SCORE
