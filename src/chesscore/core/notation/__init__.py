"""Notation package: FEN / SAN parsing and serialization."""

from chesscore.core.notation.fen import (
    STARTING_FEN,
    castling_rights,
    position_from_fen,
    position_to_fen,
)
from chesscore.core.notation.san import move_to_san

__all__ = [
    "STARTING_FEN",
    "castling_rights",
    "position_from_fen",
    "position_to_fen",
    "move_to_san",
]
