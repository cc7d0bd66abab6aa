"""
Exception hierarchy for the solver.
"""


class NimError(Exception):
    """Base class for all solver errors."""


class InvalidStateError(NimError, ValueError):
    """A game state was built from piles that cannot occur (e.g. negative counts)."""


class IllegalMoveError(NimError, ValueError):
    """A move does not fit the current piles, or the game is already over."""


class NoMoveAvailableError(NimError):
    """A move was requested for a position with every pile empty."""

    def __init__(self, piles):
        self.piles = tuple(int(p) for p in piles)
        super().__init__(f"No move available: all piles are empty {list(self.piles)}")
