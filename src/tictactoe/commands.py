"""
Configuration commands: one typed payload per configurable property.

The Game dispatches these in a single place (Game.apply_config), which is also where the cross-field rules live
(win length vs. board size, piece count vs. number of cells).
"""

from enum import Enum, auto
from typing import Any, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from src.core.exceptions import InvalidRequestError
from src.core.shared_types import GameProp


class ConfigResult(Enum):
    """Outcome of a configuration change. Only ACCEPTED is truthy."""

    ACCEPTED = auto()
    REJECTED_MATCH_IN_PROGRESS = auto()
    REJECTED_INVALID_VALUE = auto()
    REJECTED_ILLEGAL_STATE = auto()
    UNKNOWN_PROPERTY = auto()

    def __bool__(self) -> bool:
        return self is ConfigResult.ACCEPTED


class _Command(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)


class SetSize(_Command):
    x: int
    y: int


class SetWinLength(_Command):
    length: int = Field(alias="len")


class SetLimitedPieces(_Command):
    is_limited: bool = Field(alias="isLimited")


class SetNumPieces(_Command):
    num: int


class SetFifoOrder(_Command):
    is_fifo: bool = Field(alias="isFifo")


ConfigCommand = SetSize | SetWinLength | SetLimitedPieces | SetNumPieces | SetFifoOrder

COMMAND_TYPES: dict[str, type[_Command]] = {
    GameProp.SIZE: SetSize,
    GameProp.WIN_LENGTH: SetWinLength,
    GameProp.IS_LIMITED_PIECES: SetLimitedPieces,
    GameProp.NUM_PIECES: SetNumPieces,
    GameProp.IS_FIFO_ORDER: SetFifoOrder,
}


def command_from_prop(prop: GameProp | str, args: Mapping[str, Any]) -> Optional[ConfigCommand]:
    """
    Build the command for a property selector and its argument bag, e.g. (GameProp.SIZE, {"x": 4, "y": 5}).

    Returns None for an unknown selector. A bag that does not fit the selector raises InvalidRequestError.
    """
    command_type = COMMAND_TYPES.get(prop)
    if command_type is None:
        return None
    try:
        return command_type.model_validate(args)  # type: ignore[return-value]
    except ValidationError as e:
        raise InvalidRequestError(f"Invalid arguments for {prop!r}: {args!r}") from e
