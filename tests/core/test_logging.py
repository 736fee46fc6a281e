"""Unit tests for /src/core/logging.py"""

import logging
from datetime import UTC, datetime
from pathlib import Path
from unittest.mock import patch

import pytest

from src.core.logging import LOG_DATE_FORMAT, LOG_FORMAT, setup_logging
from src.tictactoe.game import Game


@pytest.fixture(autouse=True)
def _cleanup_root_logger():
    """Close and remove all handlers from the root logger after each test (file handlers must not leak across tests)."""
    root = logging.getLogger()
    level_before = root.level
    yield
    for handler in root.handlers[:]:
        handler.close()
        root.removeHandler(handler)
    root.setLevel(level_before)


def test_configures_stdout_handler() -> None:
    assert setup_logging() is None
    root = logging.getLogger()

    assert root.level == logging.INFO
    assert len(root.handlers) == 1

    handler = root.handlers[0]
    assert isinstance(handler, logging.StreamHandler)
    assert handler.formatter is not None
    assert handler.formatter._fmt == LOG_FORMAT
    assert handler.formatter.datefmt == LOG_DATE_FORMAT


def test_level_by_name() -> None:
    setup_logging(level="debug")
    assert logging.getLogger().level == logging.DEBUG


def test_repeated_calls_do_not_duplicate_handlers() -> None:
    setup_logging()
    setup_logging()
    assert len(logging.getLogger().handlers) == 1


def test_configures_file_handler_in_log_dir(tmp_path: Path) -> None:
    log_dir = tmp_path / "tictactoe"
    setup_logging(log_dir=log_dir)
    root = logging.getLogger()

    assert len(root.handlers) == 2
    file_handler = root.handlers[1]
    assert isinstance(file_handler, logging.FileHandler)
    assert Path(file_handler.baseFilename).parent == log_dir


def test_log_file_has_datetime_in_name(tmp_path: Path) -> None:
    fixed_time = datetime(2025, 3, 15, 10, 30, 45, tzinfo=UTC)
    with patch("src.core.logging.datetime") as mock_dt:
        mock_dt.now.return_value = fixed_time
        log_path = setup_logging(log_dir=tmp_path)

    assert log_path is not None
    assert log_path.name == "match_2025-03-15_10-30-45.log"


def test_game_events_end_up_in_log_file(tmp_path: Path) -> None:
    log_path = setup_logging(log_dir=tmp_path, level=logging.DEBUG)
    game = Game.new_game()
    game.reset_match()
    game.start_game()
    game.player_make_move(1, 1)

    for handler in logging.getLogger().handlers:
        handler.flush()
    assert log_path is not None
    content = log_path.read_text()
    assert "New match" in content
    assert "Player 1 played (1, 1)" in content
