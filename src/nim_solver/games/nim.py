"""
Nim game implementation.

Normal play: the player who removes the last object wins, i.e. the player
left to move on an empty table loses.

Module-level functions are the pure rules used by the search
(move generation, terminal detection, move diffing). The Nim class wraps
them in a mutable match for interactive play.
"""

from __future__ import annotations

from typing import List, Optional, Sequence, Tuple

import numpy as np

from nim_solver.core.errors import IllegalMoveError
from nim_solver.core.types import LOSS_SCORE, WIN_SCORE, Move, Player, other_player
from nim_solver.games.game_base import GameBase
from nim_solver.games.game_state import GameState

DEFAULT_PILES: Tuple[int, ...] = (3, 4, 5)


# ---------------------------------------------------------------------------
# Rules
# ---------------------------------------------------------------------------

def is_terminal(state: GameState) -> bool:
    """True iff every pile is empty."""
    return not state.piles.any()


def terminal_score(player_to_move: Player) -> int:
    """
    Score of an empty table, from Player B's view.

    Only meaningful for terminal states: whoever is left to move has
    no move and has lost.
    """
    return LOSS_SCORE if player_to_move == Player.B else WIN_SCORE


def generate_children(state: GameState) -> List[GameState]:
    """
    Every position reachable in one ply.

    Ordered by pile index ascending, then by count removed ascending
    from 1. Move selection tie-breaks depend on this order.
    """
    piles = state.piles
    next_player = other_player(state.current_player)
    children = []

    for i in np.flatnonzero(piles):
        for take in range(1, int(piles[i]) + 1):
            nxt = piles.copy()
            nxt[i] -= take
            children.append(GameState(nxt, next_player, validated=True))

    return children


def legal_moves(state: GameState) -> List[Move]:
    """Moves matching generate_children() one-to-one, in the same order."""
    return [
        Move(int(i), take)
        for i in np.flatnonzero(state.piles)
        for take in range(1, int(state.piles[i]) + 1)
    ]


def move_between(parent: GameState, child: GameState) -> Move:
    """
    Recover the move that turns ``parent`` into ``child``.

    Raises:
        ValueError: if the piles do not differ by a single removal.
    """
    if parent.piles.shape != child.piles.shape:
        raise ValueError(
            f"Pile counts differ in length: {parent.piles.tolist()} vs {child.piles.tolist()}"
        )

    changed = np.flatnonzero(parent.piles != child.piles)
    if len(changed) != 1:
        raise ValueError(
            f"Expected exactly one changed pile between "
            f"{parent.piles.tolist()} and {child.piles.tolist()}"
        )

    i = int(changed[0])
    removed = int(parent.piles[i] - child.piles[i])
    if removed <= 0:
        raise ValueError(f"Pile {i} grew from {parent.piles[i]} to {child.piles[i]}")

    return Move(i, removed)


def apply_to_state(state: GameState, move: Move) -> GameState:
    """
    Return the position after ``move``.

    Raises:
        IllegalMoveError: if the pile index or count does not fit ``state``.
    """
    pile_index, count = int(move[0]), int(move[1])
    piles = state.piles

    if not 0 <= pile_index < len(piles):
        raise IllegalMoveError(
            f"Pile {pile_index + 1} does not exist (there are {len(piles)} piles)"
        )
    if not 1 <= count <= piles[pile_index]:
        raise IllegalMoveError(
            f"Cannot remove {count} from pile {pile_index + 1} holding {int(piles[pile_index])}"
        )

    nxt = piles.copy()
    nxt[pile_index] -= count
    return GameState(nxt, other_player(state.current_player), validated=True)


# ---------------------------------------------------------------------------
# Match
# ---------------------------------------------------------------------------

class Nim(GameBase):
    """A running game of Nim."""

    def __init__(
        self,
        piles: Sequence[int] = DEFAULT_PILES,
        first_player: Player = Player.A,
    ):
        self.state = GameState(piles, first_player)

    def game_id(self) -> str:
        return "nim"

    def num_players(self) -> int:
        return 2

    def deep_clone(self) -> "Nim":
        # States are immutable, so sharing one is safe
        g = Nim.__new__(Nim)
        g.state = self.state
        return g

    def get_state(self) -> GameState:
        return self.state

    def set_state(self, game_state: GameState) -> None:
        self.state = game_state

    def current_player(self) -> Player:
        return self.state.current_player

    @property
    def piles(self) -> List[int]:
        return self.state.piles.tolist()

    def valid_moves(self) -> List[Move]:
        return legal_moves(self.state)

    def apply_move(self, move: Move, *, validated: bool = False) -> None:
        if not validated and self.is_over():
            raise IllegalMoveError("Game is over")
        self.state = apply_to_state(self.state, move)

    def is_over(self) -> bool:
        return is_terminal(self.state)

    def winner(self) -> Optional[Player]:
        if not self.is_over():
            return None
        # The player who took the last object
        return other_player(self.state.current_player)

    def state_string(self) -> str:
        lines = ["Current piles:"]
        for i, count in enumerate(self.piles):
            lines.append(f"Pile {i + 1}: {count}")
        return "\n".join(lines)
