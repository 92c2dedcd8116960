"""
Custom exceptions, shared across layers.

Everything the domain layer raises inherits from GameError, so the service (and whatever sits on top of it)
can catch a single type if it does not care about the specifics.
"""


class GameError(Exception):
    """Root of all errors raised by the xiangqi domain."""


# --- BOARD / NOTATION ---
class InvalidSquareError(GameError):
    """Coordinate outside of the 10x9 grid, or a square name that cannot be parsed."""


class InvalidFENError(GameError):
    """String cannot be interpreted as a (xiangqi) FEN."""


# --- MOVES / GAME FLOW ---
class NoPieceAtOriginError(GameError):
    """Attempt to move from an empty square."""


class IllegalMoveError(GameError):
    """The destination is not among the moves generated for the piece."""


class GameStateError(GameError):
    """The game is not in a state that allows the requested action."""


class GameOverError(GameStateError):
    """A General has been captured. No more moves are accepted."""


class NotYourTurnError(GameStateError):
    """The piece selected does not belong to the side to move."""


# --- BOUNDARY ---
class InvalidRequestError(GameError):
    """Incoming request failed validation."""
