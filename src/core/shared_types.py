"""
Type definitions used across layers
"""

from enum import StrEnum


class Role(StrEnum):
    """Identity tag of a player's mark. NONE doubles as the marker of an empty cell."""

    NONE = "none"
    P1 = "p1"
    P2 = "p2"


class GameState(StrEnum):
    READY = "ready"
    PREPARING = "preparing"
    ONGOING = "ongoing"
    FINISHED = "finished"


class GameProp(StrEnum):
    """Configuration properties that can only be changed in between matches."""

    SIZE = "size"
    WIN_LENGTH = "win_length"
    IS_LIMITED_PIECES = "is_limited_pieces"
    NUM_PIECES = "num_pieces"
    IS_FIFO_ORDER = "is_fifo_order"
