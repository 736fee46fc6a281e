"""Orchestration of the calls a presentation layer makes into a match (and the snapshots it gets back)."""

from typing import Any, Mapping, Optional

from src.core.config import GameSettings
from src.core.logging import setup_logging
from src.core.models import GameModel
from src.core.shared_types import GameProp, Role
from src.tictactoe.game import Game
from src.tictactoe.player import Player


class MatchService:
    """Drives a single Game: one call per user action, each answered with a fresh GameModel."""

    def __init__(self, game: Game) -> None:
        self.game = game

    @classmethod
    def from_settings(cls, settings: Optional[GameSettings] = None) -> "MatchService":
        """Build the service around a new Game. Sets up logging too when the settings ask for it."""
        settings = settings if settings is not None else GameSettings()
        if settings.log_level is not None or settings.log_dir is not None:
            setup_logging(settings.log_dir, settings.log_level or "INFO")
        return cls(Game.new_game(settings))

    # -- Presentation layer logic ---
    def configure(self, prop: GameProp | str, args: Mapping[str, Any]) -> tuple[bool, GameModel]:
        """Change a setting in between matches. The flag tells whether the change went through."""
        accepted = self.game.update_game_config(prop, args)
        return accepted, self.snapshot()

    def new_match(self, starting_player: Player | Role = Role.P1) -> GameModel:
        """Scores back to zero; the board is ready for the first game."""
        self.game.reset_match(starting_player)
        return self.snapshot()

    def start(self) -> GameModel:
        self.game.start_game()
        return self.snapshot()

    def play_turn(self, x: int, y: int) -> tuple[bool, GameModel]:
        """
        One turn of the current player
        ----

        1. Try to place the mark.
        2. Placed? Resolve win / draw / next turn based on that move.
        """
        accepted = self.game.player_make_move(x, y)
        if accepted:
            self.game.update_game_state_by_last_move(x, y)
        return accepted, self.snapshot()

    def next_game(self) -> GameModel:
        """Ready up the next game of the match, with the other player moving first."""
        self.game.next_game()
        return self.snapshot()

    def snapshot(self) -> GameModel:
        return self.game.to_model()
