"""
Boundary layer data model(s).

These objects are handed to whatever sits on top of the Game (a presentation layer, the MatchService, tests).
They are copies: mutating a model never touches the Game it was taken from.
"""

from dataclasses import dataclass

# Type aliases to make GameModel easier to read
RoleName = str
Coordinate = tuple[int, int]


@dataclass(frozen=True)
class PlayerModel:
    name: str
    mark: str
    role: RoleName
    score: float
    move_history: list[Coordinate]


@dataclass(frozen=True)
class GameModel:
    """Read-only snapshot of a game and the match it belongs to."""

    board_size: Coordinate
    cells: list[list[RoleName]]
    win_length: int
    is_limited_pieces: bool
    num_pieces: int
    is_fifo_order: bool
    players: dict[RoleName, PlayerModel]
    current_player: RoleName
    first_turn_player: RoleName
    winner: RoleName
    win_cells: list[Coordinate]
    match_leader: RoleName
    total_games_played: int
    state: str
