"""
Nim Solver - optimal play for Nim by exhaustive minimax search.

This package computes the game-theoretically optimal move for the
automated player from any pile configuration, memoizing positions by
their sorted pile multiset so pile order never costs extra search.

Quick Start:
    from nim_solver import best_move, Nim, play

    best_move([3, 4, 5])                      # Move(pile_index=0, count=2)
    play(Nim([3, 4, 5]), human_players=[1])   # interactive match

Modules:
    core       - Fundamental types, errors, canonical keys, Nim-sum theory
    games      - Immutable GameState, move generation, the Nim match
    search     - Minimax evaluation and the transposition cache
    selection  - Best-move extraction for the automated player
    debug      - Score tables and search profiling
"""

from nim_solver.api import (
    best_move,
    find_best_move,
    score_moves,
    select_move,
    play,
)

from nim_solver.core import (
    Player,
    Move,
    NimError,
    InvalidStateError,
    IllegalMoveError,
    NoMoveAvailableError,
)
from nim_solver.games import GameState, Nim
from nim_solver.search import TranspositionCache, evaluate

__version__ = "1.0.0"

__all__ = [
    # Main API
    "best_move",
    "find_best_move",
    "score_moves",
    "select_move",
    "play",
    "evaluate",
    # Types
    "Player",
    "Move",
    "GameState",
    "Nim",
    "TranspositionCache",
    # Errors
    "NimError",
    "InvalidStateError",
    "IllegalMoveError",
    "NoMoveAvailableError",
]
