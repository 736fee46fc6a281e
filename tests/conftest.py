"""
Pytest will auto-discover / import this file called 'conftest.py'.
This file defines fixtures required for testing multiple layers.
"""

from typing import Callable

import pytest

from src.core.config import GameSettings
from src.core.shared_types import GameState
from src.tictactoe.game import Game

PlayMovesFn = Callable[[Game, list[tuple[int, int]]], GameState]


@pytest.fixture
def settings() -> GameSettings:
    """Classic 3x3 tic-tac-toe. Passed explicitly so environment variables cannot leak into the tests."""
    return GameSettings(
        board_size_x=3,
        board_size_y=3,
        win_length=3,
        is_limited_pieces=False,
        num_pieces=3,
        is_fifo_order=True,
        log_level=None,
        log_dir=None,
    )


@pytest.fixture
def game(settings: GameSettings) -> Game:
    return Game.new_game(settings)


@pytest.fixture
def ongoing_game(game: Game) -> Game:
    """A fresh match with the first game already started. Player 1 is to move."""
    game.reset_match()
    game.start_game()
    return game


@pytest.fixture
def play_moves() -> PlayMovesFn:
    """Call the inner function to play a sequence of (x, y) moves, alternating players like a real caller would."""

    def _play(game: Game, moves: list[tuple[int, int]]) -> GameState:
        for x, y in moves:
            assert game.player_make_move(x, y), f"move {(x, y)} was rejected"
            game.update_game_state_by_last_move(x, y)
        return game.state

    return _play
