"""
Tests for nim_solver.core.types

Tests player tags, score constants and the Move tuple.
"""

import pytest

from nim_solver.core.types import (
    LOSS_SCORE,
    SCORES,
    WIN_SCORE,
    Move,
    Player,
    other_player,
)


class TestPlayer:
    """Player enum tests."""

    def test_values_match_seats(self):
        """Player A is seat 1, Player B is seat 2."""
        assert Player.A == 1
        assert Player.B == 2

    def test_aliases(self):
        """HUMAN/AI are aliases of A/B."""
        assert Player.HUMAN is Player.A
        assert Player.AI is Player.B

    def test_from_int(self):
        """Players can be built from their int value."""
        assert Player(1) is Player.A
        assert Player(2) is Player.B

    def test_unknown_value_raises(self):
        """Unknown seat numbers are rejected."""
        with pytest.raises(ValueError):
            Player(3)

    @pytest.mark.parametrize("player, expected", [
        (Player.A, Player.B),
        (Player.B, Player.A),
    ])
    def test_other_player(self, player, expected):
        """other_player flips the seat."""
        assert other_player(player) is expected

    def test_other_player_involution(self):
        """Flipping twice returns the original player."""
        for p in Player:
            assert other_player(other_player(p)) is p


class TestScores:
    """Score constant tests."""

    def test_win_and_loss(self):
        """Scores are +1 / -1 with no draw value."""
        assert WIN_SCORE == 1
        assert LOSS_SCORE == -1
        assert 0 not in SCORES

    def test_scores_ordered(self):
        """SCORES lists the loss first."""
        assert SCORES == (LOSS_SCORE, WIN_SCORE)


class TestMove:
    """Move tuple tests."""

    def test_fields(self):
        """Move exposes pile_index and count."""
        m = Move(2, 3)
        assert m.pile_index == 2
        assert m.count == 3

    def test_tuple_equality(self):
        """Move compares equal to a plain tuple."""
        assert Move(0, 5) == (0, 5)

    def test_immutable(self):
        """Move is immutable (NamedTuple)."""
        m = Move(0, 1)
        with pytest.raises(AttributeError):
            m.count = 2

    def test_str_is_one_based(self):
        """String form uses 1-based pile numbers."""
        assert str(Move(0, 2)) == "remove 2 from pile 1"
