"""
State hashing utilities - canonical keys for the transposition cache.
"""

from __future__ import annotations

from typing import NamedTuple, Tuple, TYPE_CHECKING

import numpy as np

from nim_solver.core.types import Player

if TYPE_CHECKING:
    from nim_solver.games.game_state import GameState


class CanonicalKey(NamedTuple):
    """
    Order-independent identity of a position.

    Piles are sorted ascending, so permutations of the same multiset
    with the same player to move collapse to one key.
    """

    piles: Tuple[int, ...]
    player: Player

    def __str__(self) -> str:
        return ",".join(map(str, self.piles)) + f"|P{int(self.player)}"


def canonical_key(state: "GameState") -> CanonicalKey:
    """Build the cache key for ``state``."""
    return CanonicalKey(tuple(np.sort(state.piles).tolist()), state.current_player)
