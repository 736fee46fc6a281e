"""A participant of the match: keeps track of the score and the moves made in the current game"""

from dataclasses import dataclass, field

from src.core.shared_types import Role
from src.tictactoe.square import Square


@dataclass
class Player:
    name: str
    mark: str
    role: Role
    score: float = 0.0
    move_history: list[Square] = field(default_factory=list)

    def update_player_move(self, x: int, y: int) -> None:
        self.move_history.append(Square(x, y))

    def reset_player_move_history(self) -> None:
        self.move_history = []

    def add_score(self, amount: float) -> None:
        """A win is worth 1 point, a draw 0.5 for both players."""
        self.score += amount

    def reset_score(self) -> None:
        self.score = 0.0
