"""
Games module - Nim rules and match wrapper.
"""

from nim_solver.games.game_state import GameState
from nim_solver.games.game_base import GameBase
from nim_solver.games.nim import (
    Nim,
    DEFAULT_PILES,
    is_terminal,
    terminal_score,
    generate_children,
    legal_moves,
    move_between,
    apply_to_state,
)

__all__ = [
    "GameState",
    "GameBase",
    "Nim",
    "DEFAULT_PILES",
    "is_terminal",
    "terminal_score",
    "generate_children",
    "legal_moves",
    "move_between",
    "apply_to_state",
]
