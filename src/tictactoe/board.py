"""The Game board owns the grid and implements the rules that effect a single placement (bounds, occupancy, piece limits)"""

import logging
from collections import deque
from dataclasses import dataclass, field
from typing import Optional

from src.core.exceptions import InvalidRequestError
from src.core.shared_types import Role
from src.tictactoe.square import Square

logger = logging.getLogger(__name__)

PLAYING_ROLES = (Role.P1, Role.P2)


@dataclass
class Board:
    size_x: int
    size_y: int
    # cells[x][y]
    cells: list[list[Role]] = field(init=False)
    # live marks per role, oldest first
    placement_order: dict[Role, deque[Square]] = field(init=False)

    def __post_init__(self) -> None:
        self._validate_size(self.size_x, self.size_y)
        self.reset_board()

    @property
    def size(self) -> tuple[int, int]:
        return (self.size_x, self.size_y)

    def mark(self, square: Square) -> Role:
        return self.cells[square.x][square.y]

    def is_within_bounds(self, square: Square) -> bool:
        return square.within(self.size_x, self.size_y)

    def has_playable_squares(self) -> bool:
        return any(Role.NONE in column for column in self.cells)

    def live_marks(self, role: Role) -> list[Square]:
        """Squares currently holding a mark of the given role, in the order they were placed."""
        return list(self.placement_order[role])

    def place_mark(
        self,
        x: int,
        y: int,
        role: Role,
        piece_limit: Optional[int] = None,
        fifo: bool = True,
    ) -> bool:
        """
        Put a mark of `role` on (x, y) if the square is on the board and empty.
        ----

        With a `piece_limit`, a role never has more than that many marks on the board at once.
        When the limit is reached, one of its marks is taken off first to make room:
        * fifo=True: the oldest one
        * fifo=False: the most recent one
        """
        square = Square(x, y)
        if role == Role.NONE:
            logger.debug("Rejected placement on %s: no role given", square)
            return False
        if not self.is_within_bounds(square):
            logger.debug("Rejected placement on %s: out of bounds for %s", square, self.size)
            return False
        if self.mark(square) != Role.NONE:
            logger.debug("Rejected placement on %s: occupied by %s", square, self.mark(square))
            return False

        if piece_limit is not None:
            if piece_limit < 1:
                logger.debug("Rejected placement on %s: no pieces to play (limit %d)", square, piece_limit)
                return False
            live = self.placement_order[role]
            while len(live) >= piece_limit:
                eliminated = live[0] if fifo else live[-1]
                self.remove_mark(eliminated)
                logger.debug("Eliminated %s mark on %s", role, eliminated)

        self.cells[square.x][square.y] = role
        self.placement_order[role].append(square)
        return True

    def remove_mark(self, square: Square) -> None:
        """Take a mark off the board (no-op for an empty square)"""
        role = self.mark(square)
        if role == Role.NONE:
            return
        self.cells[square.x][square.y] = Role.NONE
        self.placement_order[role].remove(square)

    def reset_board(self) -> None:
        self.cells = [[Role.NONE] * self.size_y for _ in range(self.size_x)]
        self.placement_order = {role: deque() for role in PLAYING_ROLES}

    def update_size(self, x: int, y: int) -> None:
        """Resizing throws away whatever is on the board."""
        self._validate_size(x, y)
        self.size_x = x
        self.size_y = y
        self.reset_board()

    def to_rows(self) -> list[list[str]]:
        """Role names per cell, indexed [x][y] like the grid itself."""
        return [[str(role) for role in column] for column in self.cells]

    @staticmethod
    def _validate_size(x: int, y: int) -> None:
        if x < 1 or y < 1:
            raise InvalidRequestError(f"Board dimensions must be positive. Got ({x}, {y}).")
