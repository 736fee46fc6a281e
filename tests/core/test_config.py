"""Unit tests for /src/core/config.py"""

import pytest
from pydantic import ValidationError

from src.core.config import GameSettings


@pytest.fixture(autouse=True)
def _clean_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ["BOARD_SIZE_X", "BOARD_SIZE_Y", "WIN_LENGTH", "NUM_PIECES", "IS_LIMITED_PIECES", "IS_FIFO_ORDER", "LOG_LEVEL", "LOG_DIR"]:
        monkeypatch.delenv(f"TTT_{name}", raising=False)


def test_defaults() -> None:
    settings = GameSettings()
    assert (settings.board_size_x, settings.board_size_y) == (3, 3)
    assert settings.win_length == 3
    assert settings.num_pieces == 3
    assert not settings.is_limited_pieces
    assert settings.is_fifo_order
    assert settings.log_level is None
    assert settings.log_dir is None


def test_environment_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TTT_BOARD_SIZE_X", "6")
    monkeypatch.setenv("TTT_BOARD_SIZE_Y", "7")
    monkeypatch.setenv("TTT_WIN_LENGTH", "5")
    monkeypatch.setenv("TTT_IS_LIMITED_PIECES", "true")

    settings = GameSettings()
    assert (settings.board_size_x, settings.board_size_y) == (6, 7)
    assert settings.win_length == 5
    assert settings.is_limited_pieces


@pytest.mark.parametrize(
    "overrides",
    [
        {"board_size_x": 0},
        {"win_length": 0},
        {"num_pieces": -1},
        {"board_size_x": 3, "board_size_y": 5, "win_length": 4},  # longer than the smallest dimension
        {"num_pieces": 10},  # more than the 9 cells
    ],
)
def test_invalid_settings(overrides: dict) -> None:
    with pytest.raises(ValidationError):
        GameSettings(**overrides)
