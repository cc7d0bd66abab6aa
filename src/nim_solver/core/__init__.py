"""
Core module - fundamental types, errors, hashing, and Nim theory.

This module provides the building blocks used throughout the solver.
"""

from nim_solver.core.types import (
    Player,
    Move,
    other_player,
    WIN_SCORE,
    LOSS_SCORE,
    SCORES,
)
from nim_solver.core.errors import (
    NimError,
    InvalidStateError,
    IllegalMoveError,
    NoMoveAvailableError,
)
from nim_solver.core.hashing import CanonicalKey, canonical_key
from nim_solver.core.theory import nim_sum, predicted_score

__all__ = [
    # Types
    "Player",
    "Move",
    "CanonicalKey",
    # Constants
    "WIN_SCORE",
    "LOSS_SCORE",
    "SCORES",
    # Errors
    "NimError",
    "InvalidStateError",
    "IllegalMoveError",
    "NoMoveAvailableError",
    # Functions
    "other_player",
    "canonical_key",
    "nim_sum",
    "predicted_score",
]
