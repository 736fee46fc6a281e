"""
Locate a winning line through the last placed mark.

Only lines through the last move need to be checked: any other line would have ended the game earlier.
"""

from typing import Optional, Sequence

from src.core.shared_types import Role
from src.tictactoe.square import Square

# (dx, dy): horizontal, vertical, diagonal, anti-diagonal
DIRECTIONS: list[tuple[int, int]] = [(1, 0), (0, 1), (1, 1), (1, -1)]


def find_winning_line(
    cells: Sequence[Sequence[Role]],
    role: Role,
    x: int,
    y: int,
    win_length: int,
) -> Optional[list[Square]]:
    """
    Sliding window over each direction through (x, y).
    ----

    1. Collect the squares within `win_length - 1` steps on either side of the anchor (clipped to the board).
    2. Slide a window of `win_length` squares over them.
    3. The first window owned entirely by `role` is the winning line, ordered from low to high along the direction.

    Returns None when there is no such line.
    """
    size_x = len(cells)
    size_y = len(cells[0]) if size_x else 0
    anchor = Square(x, y)
    if win_length < 1 or not anchor.within(size_x, size_y):
        return None

    for dx, dy in DIRECTIONS:
        segment = _segment_through(anchor, dx, dy, win_length - 1, size_x, size_y)
        for start in range(len(segment) - win_length + 1):
            window = segment[start : start + win_length]
            if all(cells[square.x][square.y] == role for square in window):
                return window
    return None


def _segment_through(
    anchor: Square, dx: int, dy: int, reach: int, size_x: int, size_y: int
) -> list[Square]:
    """Squares along (dx, dy) within `reach` steps of the anchor, stopping at the board edges."""
    backward: list[Square] = []
    for step in range(1, reach + 1):
        square = anchor.shifted(-dx, -dy, step)
        if not square.within(size_x, size_y):
            break
        backward.append(square)

    forward: list[Square] = []
    for step in range(1, reach + 1):
        square = anchor.shifted(dx, dy, step)
        if not square.within(size_x, size_y):
            break
        forward.append(square)

    return backward[::-1] + [anchor] + forward
