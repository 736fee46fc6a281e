"""
The Game class is the entrypoint into the domain layer.
It owns the board and both players, and is responsible for the bookkeeping of a match:
configuration changes, turn order, resolving the outcome of a move, and the score across games.

Breaking a rule never raises: the call returns False (or a falsy ConfigResult) and nothing changes.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Mapping, Optional, Self

from src.core.config import GameSettings
from src.core.exceptions import GameStateError
from src.core.models import GameModel, PlayerModel
from src.core.shared_types import GameProp, GameState, Role
from src.tictactoe.board import Board
from src.tictactoe.commands import (
    ConfigCommand,
    ConfigResult,
    SetFifoOrder,
    SetLimitedPieces,
    SetNumPieces,
    SetSize,
    SetWinLength,
    command_from_prop,
)
from src.tictactoe.player import Player
from src.tictactoe.square import Square
from src.tictactoe.winner_check import find_winning_line

logger = logging.getLogger(__name__)

WIN_POINTS = 1.0
DRAW_POINTS = 0.5


@dataclass
class Game:
    # --- DOMAIN LAYER API ---

    board: Board
    player1: Player
    player2: Player
    win_length: int
    is_limited_pieces: bool
    num_pieces: int
    is_fifo_order: bool
    # NOTE: turns are tracked by role and resolved against player1/player2, so score and history updates
    # made through the current player are the ones visible on player1/player2.
    current_role: Role = Role.P1
    first_turn_role: Role = Role.P1
    winner: Role = Role.NONE
    win_cells: list[Square] = field(default_factory=list)
    total_games_played: int = 0
    state: GameState = GameState.READY

    @classmethod
    def new_game(cls, settings: Optional[GameSettings] = None) -> Self:
        """Set up a Game (and its match) from the given settings, or from the defaults / environment."""
        settings = settings if settings is not None else GameSettings()
        return cls(
            board=Board(settings.board_size_x, settings.board_size_y),
            player1=Player("Player 1", "X", Role.P1),
            player2=Player("Player 2", "O", Role.P2),
            win_length=settings.win_length,
            is_limited_pieces=settings.is_limited_pieces,
            num_pieces=settings.num_pieces,
            is_fifo_order=settings.is_fifo_order,
        )

    # -- PLAYERS / TURNS --
    def player(self, role: Role) -> Player:
        if role == Role.P1:
            return self.player1
        if role == Role.P2:
            return self.player2
        raise GameStateError(f"No player holds the role {role!r}.")

    @property
    def players(self) -> tuple[Player, Player]:
        return (self.player1, self.player2)

    @property
    def current_player(self) -> Player:
        return self.player(self.current_role)

    @property
    def first_turn_player(self) -> Player:
        """The player who moves first in the next game"""
        return self.player(self.first_turn_role)

    def swap_turns(self) -> Player:
        self.current_role = _opponent(self.current_role)
        return self.current_player

    def swap_first_turn(self) -> Player:
        self.first_turn_role = _opponent(self.first_turn_role)
        return self.first_turn_player

    @property
    def match_leading_player(self) -> Role:
        """Role of the player with the strictly higher score. Role.NONE on a tie."""
        if self.player1.score > self.player2.score:
            return self.player1.role
        if self.player2.score > self.player1.score:
            return self.player2.role
        return Role.NONE

    # -- CONFIGURATION --
    @property
    def board_size(self) -> tuple[int, int]:
        return self.board.size

    @property
    def is_during_match(self) -> bool:
        """A match is in progress while a game is being played, or once any game of it has been completed."""
        return self.state == GameState.ONGOING or self.total_games_played > 0

    def update_game_config(self, prop: GameProp | str, args: Mapping[str, Any]) -> bool:
        """Boolean version of `configure`, e.g. update_game_config(GameProp.SIZE, {"x": 4, "y": 4})"""
        return bool(self.configure(prop, args))

    def configure(self, prop: GameProp | str, args: Mapping[str, Any]) -> ConfigResult:
        """Translate a property selector + argument bag into a config command and apply it."""
        if self.is_during_match:
            return self._config_rejected(prop, ConfigResult.REJECTED_MATCH_IN_PROGRESS)

        command = command_from_prop(prop, args)
        if command is None:
            return self._config_rejected(prop, ConfigResult.UNKNOWN_PROPERTY)
        return self.apply_config(command)

    def apply_config(self, command: ConfigCommand) -> ConfigResult:
        """
        Single entry point for every configuration change
        ----

        Nothing can be changed while a match is in progress (see `is_during_match`).
        Cross-field rules:
        * shrinking the board below the win length drags the win length down with it.
        * a win length is accepted if it fits along at least one of the board's dimensions.
        * the number of pieces per player can not exceed the number of cells.
        """
        if self.is_during_match:
            return self._config_rejected(command, ConfigResult.REJECTED_MATCH_IN_PROGRESS)

        match command:
            case SetSize(x=x, y=y):
                result = self._update_size(x, y)
            case SetWinLength(length=length):
                result = self._update_win_length(length)
            case SetLimitedPieces(is_limited=is_limited):
                self.is_limited_pieces = is_limited
                result = ConfigResult.ACCEPTED
            case SetNumPieces(num=num):
                result = self._update_num_pieces(num)
            case SetFifoOrder(is_fifo=is_fifo):
                self.is_fifo_order = is_fifo
                result = ConfigResult.ACCEPTED
            case _:
                result = ConfigResult.UNKNOWN_PROPERTY

        if not result:
            return self._config_rejected(command, result)
        logger.info("Config updated: %r", command)
        return result

    def _update_size(self, x: int, y: int) -> ConfigResult:
        if x < 1 or y < 1:
            return ConfigResult.REJECTED_INVALID_VALUE
        self.board.update_size(x, y)
        if x < self.win_length or y < self.win_length:
            self.win_length = min(x, y)
        return ConfigResult.ACCEPTED

    def _update_win_length(self, length: int) -> ConfigResult:
        if length < 1:
            return ConfigResult.REJECTED_INVALID_VALUE
        # NOTE: fitting along ONE of the dimensions is enough
        size_x, size_y = self.board_size
        if size_x >= length or size_y >= length:
            self.win_length = length
            return ConfigResult.ACCEPTED
        return ConfigResult.REJECTED_INVALID_VALUE

    def _update_num_pieces(self, num: int) -> ConfigResult:
        size_x, size_y = self.board_size
        if num < 0 or size_x * size_y < num:
            return ConfigResult.REJECTED_INVALID_VALUE
        return self._update_num_pieces_each_player(num)

    def _update_num_pieces_each_player(self, num: int) -> ConfigResult:
        if self.state == GameState.ONGOING:
            return ConfigResult.REJECTED_ILLEGAL_STATE
        self.num_pieces = num
        return ConfigResult.ACCEPTED

    def _config_rejected(self, request: Any, result: ConfigResult) -> ConfigResult:
        logger.debug("Config change %r rejected: %s", request, result.name)
        return result

    # -- MATCH / GAME LIFECYCLE --
    def reset_match(self, starting_player: Player | Role = Role.P1) -> None:
        """
        Start a brand-new match: scores and game count go back to zero.

        The player to move first is given by role, or as one of this game's own two Player objects.
        """
        if isinstance(starting_player, Player):
            if starting_player is not self.player(starting_player.role):
                raise GameStateError(f"{starting_player.name} is not a player of this game.")
        else:
            starting_player = self.player(starting_player)
        self.player1.reset_score()
        self.player2.reset_score()

        self.first_turn_role = starting_player.role
        self.total_games_played = 0
        logger.info("New match, %s moves first", starting_player.name)
        self.ready_game()

    def ready_game(self) -> None:
        """
        Prepare the board and turn order for the next game.

        NOTE: only the player about to move first gets their move history cleared.
        """
        self.state = GameState.PREPARING
        self.board.reset_board()
        self.current_role = self.first_turn_role
        self.current_player.reset_player_move_history()
        self.winner = Role.NONE
        self.win_cells = []

        self.state = GameState.READY

    def start_game(self) -> None:
        self.state = GameState.ONGOING

    def next_game(self) -> None:
        """Next game in the same match: the other player gets to move first."""
        self.swap_first_turn()
        self.ready_game()

    # -- MOVES --
    def player_make_move(self, x: int, y: int) -> bool:
        """
        Attempt to place the current player's mark on (x, y).

        The board decides whether the square can be played (and which mark has to make room when pieces are limited).
        The caller is expected to follow up a successful move with `update_game_state_by_last_move`.
        """
        # only proceed if game is ongoing
        if self.state != GameState.ONGOING:
            logger.debug("Move (%d, %d) rejected: game is %s", x, y, self.state)
            return False

        player = self.current_player
        piece_limit = self.num_pieces if self.is_limited_pieces else None
        is_mark_placed = self.board.place_mark(
            x, y, player.role, piece_limit=piece_limit, fifo=self.is_fifo_order
        )
        if not is_mark_placed:
            return False

        player.update_player_move(x, y)
        logger.debug(
            "%s played (%d, %d)\nboard: %s\nhistory %s: %s\nhistory %s: %s",
            player.name,
            x,
            y,
            self.board.to_rows(),
            self.player1.name,
            [square.as_tuple() for square in self.player1.move_history],
            self.player2.name,
            [square.as_tuple() for square in self.player2.move_history],
        )
        return True

    def update_game_state_by_last_move(self, x: int, y: int) -> GameState:
        """
        Resolve the move just made on (x, y)
        ----

        1. A winning line through (x, y)? --> the mover wins the game.
        2. Any empty square left? --> the other player's turn.
        3. Neither? --> draw, half a point for both.

        Only an ongoing game is resolved, so a finished game is never counted twice.
        """
        if self.state != GameState.ONGOING:
            logger.debug("Nothing to resolve: game is %s", self.state)
            return self.state

        win_cells = self._check_winner(x, y)
        if win_cells:
            mover = self.current_player
            self.winner = mover.role
            self.win_cells = win_cells
            mover.add_score(WIN_POINTS)
            self._finish_game()
            logger.info(
                "%s wins with %s", mover.name, [square.as_tuple() for square in win_cells]
            )
        elif self._check_valid_moves():
            self.swap_turns()
            self.state = GameState.ONGOING
        else:
            self.winner = Role.NONE
            self.player1.add_score(DRAW_POINTS)
            self.player2.add_score(DRAW_POINTS)
            self._finish_game()
            logger.info("Game ended in a draw")
        return self.state

    def _check_winner(self, x: int, y: int) -> Optional[list[Square]]:
        return find_winning_line(
            self.board.cells, self.current_player.role, x, y, self.win_length
        )

    def _check_valid_moves(self) -> bool:
        return self.board.has_playable_squares()

    def _finish_game(self) -> None:
        self.total_games_played += 1
        self.state = GameState.FINISHED

    # -- SNAPSHOT --
    def to_model(self) -> GameModel:
        """Copy of everything a presentation layer needs to show the game"""
        return GameModel(
            board_size=self.board_size,
            cells=self.board.to_rows(),
            win_length=self.win_length,
            is_limited_pieces=self.is_limited_pieces,
            num_pieces=self.num_pieces,
            is_fifo_order=self.is_fifo_order,
            players={str(player.role): _player_model(player) for player in self.players},
            current_player=str(self.current_role),
            first_turn_player=str(self.first_turn_role),
            winner=str(self.winner),
            win_cells=[square.as_tuple() for square in self.win_cells],
            match_leader=str(self.match_leading_player),
            total_games_played=self.total_games_played,
            state=str(self.state),
        )


def _opponent(role: Role) -> Role:
    return Role.P2 if role == Role.P1 else Role.P1


def _player_model(player: Player) -> PlayerModel:
    return PlayerModel(
        name=player.name,
        mark=player.mark,
        role=str(player.role),
        score=player.score,
        move_history=[square.as_tuple() for square in player.move_history],
    )
