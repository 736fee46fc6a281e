"""
Exceptions for contract violations.

NOTE: breaking a game rule (occupied square, changing the config during a match, ...) is NOT an exception.
Those are reported by the return value of the call. These errors are for callers that break the contract itself.
"""


class GameError(Exception):
    """Base class for all errors raised by the game layers."""


class InvalidRequestError(GameError):
    """The arguments handed over do not have the expected shape or type."""


class GameStateError(GameError):
    """The request can never make sense for this game, regardless of its current state."""
