"""
A square on the board

(placed in its own module as multiple other modules need to import it)
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Square:
    x: int
    y: int

    def within(self, size_x: int, size_y: int) -> bool:
        return (0 <= self.x < size_x) and (0 <= self.y < size_y)

    def shifted(self, dx: int, dy: int, steps: int = 1) -> "Square":
        return Square(self.x + dx * steps, self.y + dy * steps)

    def as_tuple(self) -> tuple[int, int]:
        return (self.x, self.y)
