"""
Tests for nim_solver.utils.factory

Tests parsing of raw user input and game creation.
"""

import pytest

from nim_solver.core.types import Move, Player
from nim_solver.games.game_base import GameBase
from nim_solver.utils.factory import create_game, parse_ints, parse_move, parse_piles


class TestParseInts:
    """parse_ints tests."""

    @pytest.mark.parametrize("text, expected", [
        ("3 4 5", [3, 4, 5]),
        ("3,4,5", [3, 4, 5]),
        (" 3, 4  5 ", [3, 4, 5]),
        ("", []),
        ("-1 2", [-1, 2]),
    ])
    def test_values(self, text, expected):
        """Whitespace and commas both separate values."""
        assert parse_ints(text) == expected

    def test_non_integer_raises(self):
        """Non-integers raise ValueError."""
        with pytest.raises(ValueError, match="integers"):
            parse_ints("3 x")


class TestParsePiles:
    """parse_piles tests."""

    def test_valid(self):
        """Non-negative sizes are accepted."""
        assert parse_piles("0 2 7") == [0, 2, 7]

    def test_empty_raises(self):
        """At least one pile is needed."""
        with pytest.raises(ValueError, match="at least one"):
            parse_piles("   ")

    def test_negative_raises(self):
        """Negative sizes are rejected before reaching the core."""
        with pytest.raises(ValueError, match="non-negative"):
            parse_piles("3 -1")


class TestParseMove:
    """parse_move tests."""

    def test_one_based_pile(self):
        """Pile numbers are converted to 0-based indices."""
        assert parse_move("2 3") == Move(1, 3)

    def test_comma(self):
        """Commas work as separators."""
        assert parse_move("1,1") == Move(0, 1)

    @pytest.mark.parametrize("text", ["", "1", "1 2 3", "a b"])
    def test_bad_format_raises(self, text):
        """Anything but two integers is rejected."""
        with pytest.raises(ValueError):
            parse_move(text)

    def test_legality_not_checked(self):
        """Out-of-range values parse; the game rejects them."""
        assert parse_move("0 99") == Move(-1, 99)


class TestCreateGame:
    """create_game tests."""

    def test_creates_game_instance(self):
        """Creates a playable GameBase."""
        game = create_game([3, 4, 5])
        assert isinstance(game, GameBase)
        assert game.piles == [3, 4, 5]
        assert len(game.valid_moves()) == 12

    def test_first_player(self):
        """First player is honored."""
        assert create_game([1], 2).current_player() is Player.AI
        assert create_game([1]).current_player() is Player.HUMAN

    def test_unknown_player_raises(self):
        """Unknown first player raises ValueError."""
        with pytest.raises(ValueError, match="Unknown player"):
            create_game([1], 5)

    def test_negative_piles_raise(self):
        """Negative piles raise ValueError."""
        with pytest.raises(ValueError):
            create_game([-1])

    def test_games_independent(self):
        """Separate games do not share state."""
        g1 = create_game([2, 2])
        g2 = create_game([2, 2])
        g1.apply_move(Move(0, 2))
        assert g2.piles == [2, 2]
