"""
Tests for the player input sources.
"""

import pytest

from snakeworld.domain import DOWN, LEFT, RIGHT, UP
from snakeworld.exceptions import ConfigError
from snakeworld.players import Player, ScriptedPlayer, parse_moves


class TestParseMoves:
    """Tests for parse_moves()."""

    def test_short_tokens(self):
        assert parse_moves("R R D . L") == [RIGHT, RIGHT, DOWN, None, LEFT]

    def test_names_and_commas(self):
        assert parse_moves("up,Down, left  right") == [UP, DOWN, LEFT, RIGHT]

    def test_empty_script(self):
        assert parse_moves("") == []
        assert parse_moves("   ") == []

    def test_dash_is_idle(self):
        assert parse_moves("- u") == [None, UP]

    def test_unknown_token_raises(self):
        with pytest.raises(ConfigError):
            parse_moves("R X")


class TestScriptedPlayer:
    """Tests for ScriptedPlayer."""

    def test_replays_moves_in_order_then_goes_idle(self):
        player = ScriptedPlayer([UP, None, LEFT])

        assert player.get_direction(None) is UP
        assert player.get_direction(None) is None
        assert player.get_direction(None) is LEFT
        assert player.exhausted
        assert player.get_direction(None) is None
        assert player.get_direction(None) is None

    def test_base_player_is_abstract(self):
        with pytest.raises(NotImplementedError):
            Player().get_direction(None)
