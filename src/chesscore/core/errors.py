"""Exceptions raised by the rules engine.

Every error is a :class:`ValueError` subclass, so callers that only care
about "bad input" can keep catching the builtin.  A rejected call never
changes engine state.
"""

from __future__ import annotations


class ChessError(ValueError):
    """Base class for all rules-engine errors."""


class InvalidCoordinateError(ChessError):
    """A coordinate lies outside the 8x8 board or cannot be parsed."""


class IllegalMoveError(ChessError):
    """A requested move is not allowed in the current position."""


class NoPieceAtSourceError(IllegalMoveError):
    """The source square of a move is empty."""


class WrongSideToMoveError(IllegalMoveError):
    """The source square holds a piece of the side not on move."""


class IllegalDestinationError(IllegalMoveError):
    """The destination is not among the legal moves of the source piece."""


class InvalidPromotionError(IllegalMoveError):
    """A promotion choice is missing a target, unsupported or out of place."""


class GameAlreadyOverError(ChessError):
    """A move was submitted after checkmate or stalemate."""
