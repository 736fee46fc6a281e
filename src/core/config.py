"""Default game configuration, overridable via environment variables (TTT_BOARD_SIZE_X=4, ...)."""

from typing import Optional, Self

from pydantic import NonNegativeInt, PositiveInt, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class GameSettings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="TTT_")

    board_size_x: PositiveInt = 3
    board_size_y: PositiveInt = 3
    win_length: PositiveInt = 3
    is_limited_pieces: bool = False
    num_pieces: NonNegativeInt = 3
    is_fifo_order: bool = True

    # leave both unset to keep whatever logging the host application configured
    log_level: Optional[str] = None
    log_dir: Optional[str] = None

    @model_validator(mode="after")
    def validate_fits_on_board(self) -> Self:
        """A new game must start out with a winning line and a piece count the board can hold."""
        if self.win_length > min(self.board_size_x, self.board_size_y):
            raise ValueError(
                f"win_length {self.win_length} does not fit on a {self.board_size_x}x{self.board_size_y} board."
            )
        if self.num_pieces > self.board_size_x * self.board_size_y:
            raise ValueError(
                f"num_pieces {self.num_pieces} exceeds the {self.board_size_x * self.board_size_y} cells of the board."
            )
        return self
