"""
GameBase - abstract base class for turn-based games.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from nim_solver.core.types import Move, Player
from nim_solver.games.game_state import GameState


class GameBase(ABC):
    """
    Abstract base class for a live, two-seat match.

    IMPORTANT ARCHITECTURE NOTE:
    -----------------------------
    - The match object is the only mutable thing in the system.
    - Positions (GameState) are immutable values; apply_move() swaps
      in a fresh state rather than editing the current one.
    - The search never touches a match object, only GameState values.
    """

    @abstractmethod
    def game_id(self) -> str:
        """Return a stable identifier (e.g. 'nim')."""
        pass

    @abstractmethod
    def num_players(self) -> int:
        """Return number of players in the game."""
        pass

    @abstractmethod
    def deep_clone(self) -> "GameBase":
        """Independent copy of game + state."""
        pass

    @abstractmethod
    def get_state(self) -> GameState:
        """Return the current game state."""
        pass

    @abstractmethod
    def set_state(self, game_state: GameState) -> None:
        """Replace the current game state."""
        pass

    @abstractmethod
    def current_player(self) -> Player:
        """Return the player to act."""
        pass

    @abstractmethod
    def valid_moves(self) -> List[Move]:
        """Return all legal moves from the current state, in generation order."""
        pass

    @abstractmethod
    def apply_move(self, move: Move, *, validated: bool = False) -> None:
        """
        Apply a move and hand the turn to the other player.

        Args:
            move: The move to apply.
            validated:  If True, skip validation (caller guarantees
                        the move came from valid_moves()). Games may
                        ignore this hint if validation is already cheap.
        """
        pass

    @abstractmethod
    def is_over(self) -> bool:
        """Return True if the game has ended."""
        pass

    @abstractmethod
    def winner(self) -> Optional[Player]:
        """Return the winning player, or None while the game is running."""
        pass

    @abstractmethod
    def state_string(self) -> str:
        """Pretty string representation of the state."""
        pass
