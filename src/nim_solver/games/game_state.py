"""
GameState - immutable Nim position.

Optimized for cheap child generation and canonical hashing.
"""

from __future__ import annotations

from typing import Sequence, Union

import numpy as np

from nim_solver.core.errors import InvalidStateError
from nim_solver.core.hashing import CanonicalKey, canonical_key
from nim_solver.core.types import Player

PILE_DTYPE = np.int64


class GameState:
    """
    Immutable position: pile counts plus the player to move.

    Piles are held in a read-only int64 array. Equality and hashing go
    through the canonical key, so two states that differ only in pile
    order compare equal.
    """
    __slots__ = ('piles', 'current_player')

    def __init__(
        self,
        piles: Union[Sequence[int], np.ndarray],
        current_player: Union[Player, int],
        *,
        validated: bool = False,
    ):
        """
        Args:
            piles: Object count per pile.
            current_player: Player to move (Player or its int value).
            validated:  If True, skip validation (caller guarantees
                        ``piles`` is a fresh non-negative int array).
        """
        if validated:
            arr = piles
            player = current_player
        else:
            arr = _coerce_piles(piles)
            try:
                player = Player(current_player)
            except ValueError as e:
                raise InvalidStateError(f"Unknown player: {current_player!r}") from e

        arr.flags.writeable = False
        object.__setattr__(self, 'piles', arr)
        object.__setattr__(self, 'current_player', player)

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name):
        raise AttributeError(f"{type(self).__name__} is immutable")

    @property
    def total(self) -> int:
        """Objects left on the table."""
        return int(self.piles.sum())

    def key(self) -> CanonicalKey:
        return canonical_key(self)

    def __eq__(self, other) -> bool:
        if not isinstance(other, GameState):
            return NotImplemented
        return self.key() == other.key()

    def __hash__(self) -> int:
        return hash(self.key())

    def __repr__(self) -> str:
        return f"GameState(piles={self.piles.tolist()}, current_player={self.current_player.name})"


def _coerce_piles(piles) -> np.ndarray:
    """Copy ``piles`` into a fresh int array, failing fast on anything invalid."""
    raw = np.asarray(piles)

    if raw.ndim != 1:
        raise InvalidStateError(f"Piles must be a flat sequence, got shape {raw.shape}")
    if raw.size == 0:
        return np.zeros(0, dtype=PILE_DTYPE)
    if raw.dtype.kind not in "iu":
        raise InvalidStateError(f"Pile counts must be integers, got {raw.tolist()}")
    if np.any(raw < 0):
        raise InvalidStateError(f"Pile counts must be non-negative, got {raw.tolist()}")

    return raw.astype(PILE_DTYPE, copy=True)
