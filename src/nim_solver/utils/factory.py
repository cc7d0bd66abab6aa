"""
Factory and parsing helpers for building games from raw user input.
"""

from typing import List, Sequence

from nim_solver.core.types import Move, Player
from nim_solver.games.nim import Nim


def parse_ints(text: str) -> List[int]:
    """
    Parse whitespace- or comma-separated integers.

    Raises:
        ValueError: if any token is not an integer
    """
    tokens = text.replace(",", " ").split()
    try:
        return [int(tok) for tok in tokens]
    except ValueError as e:
        raise ValueError(f"Expected integers, got '{text.strip()}'") from e


def parse_piles(text: str) -> List[int]:
    """
    Parse pile sizes such as "3 4 5" or "3,4,5".

    Raises:
        ValueError: if a size is not a non-negative integer or none are given
    """
    piles = parse_ints(text)
    if not piles:
        raise ValueError("Enter at least one pile size")
    negative = [p for p in piles if p < 0]
    if negative:
        raise ValueError(f"Pile sizes must be non-negative, got {negative}")
    return piles


def parse_move(text: str) -> Move:
    """
    Parse a human move "<pile> <count>" with a 1-based pile number.

    Only the format is checked here; legality is up to the game.

    Raises:
        ValueError: if the input is not exactly two integers
    """
    values = parse_ints(text)
    if len(values) != 2:
        raise ValueError(f"Expected '<pile> <count>', got '{text.strip()}'")
    pile, count = values
    return Move(pile - 1, count)


def create_game(piles: Sequence[int], first_player: int = Player.HUMAN) -> Nim:
    """
    Create a Nim match from validated user input.

    Args:
        piles: Pile sizes (non-negative integers)
        first_player: 1 (human / Player A) or 2 (AI / Player B)

    Returns:
        Configured game instance

    Raises:
        ValueError: on negative piles or an unknown first player
    """
    try:
        player = Player(first_player)
    except ValueError as e:
        raise ValueError(f"Unknown player: {first_player}. Available: 1, 2") from e

    return Nim(piles, player)
