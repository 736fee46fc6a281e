"""Unit tests for /src/tictactoe/player.py"""

import pytest

from src.core.shared_types import Role
from src.tictactoe.player import Player
from src.tictactoe.square import Square


@pytest.fixture
def player() -> Player:
    return Player("Player 1", "X", Role.P1)


def test_new_player(player: Player) -> None:
    assert player.score == 0
    assert player.move_history == []


def test_move_history(player: Player) -> None:
    player.update_player_move(0, 1)
    player.update_player_move(2, 2)
    assert player.move_history == [Square(0, 1), Square(2, 2)]

    player.reset_player_move_history()
    assert player.move_history == []


def test_score(player: Player) -> None:
    player.add_score(1)
    player.add_score(0.5)
    assert player.score == 1.5

    player.reset_score()
    assert player.score == 0


def test_players_do_not_share_history() -> None:
    p1 = Player("Player 1", "X", Role.P1)
    p2 = Player("Player 2", "O", Role.P2)
    p1.update_player_move(0, 0)
    assert p2.move_history == []
