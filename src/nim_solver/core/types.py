"""
Core types and constants.

This module contains the fundamental types used throughout the solver:
- Player: the two seats at the table
- Score constants for the minimax value
- Move: a (pile, count) removal
"""

from __future__ import annotations

from enum import IntEnum
from typing import NamedTuple


class Player(IntEnum):
    """
    Seat identifiers.

    A is the minimizing side (the human in interactive play),
    B is the maximizing side (the automated player).
    """

    A = 1
    B = 2

    # Interactive-play aliases
    HUMAN = 1
    AI = 2


def other_player(player: Player) -> Player:
    """Return the opponent of ``player``."""
    return Player.A if player == Player.B else Player.B


# ─── Scores ───────────────────────────────────────────────────────────────────
#
# Scores are always from Player B's point of view. Nim has no draws, so
# every evaluated position is one of these two values.

WIN_SCORE = 1    # Player B can force a win
LOSS_SCORE = -1  # Player A can force a win

SCORES = (LOSS_SCORE, WIN_SCORE)


class Move(NamedTuple):
    """Removal of ``count`` objects from the pile at ``pile_index``."""

    pile_index: int
    count: int

    def __str__(self) -> str:
        return f"remove {self.count} from pile {self.pile_index + 1}"
