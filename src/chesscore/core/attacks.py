"""Attack detection: who can reach a square, regardless of whose turn it is."""

from __future__ import annotations

from typing import TYPE_CHECKING

from chesscore.core.enums import Color
from chesscore.core.move_generator import attack_targets

if TYPE_CHECKING:
    from chesscore.core.board import Board
    from chesscore.core.piece import Piece
    from chesscore.core.types import Coordinate


def is_square_attacked(board: Board, target: Coordinate, by_color: Color) -> bool:
    """Is *target* attacked by any piece of *by_color*?"""
    for piece in board.pieces(by_color):
        if target in attack_targets(board, piece):
            return True
    return False


def attackers_of(board: Board, target: Coordinate, by_color: Color) -> list[Piece]:
    """All pieces of *by_color* attacking *target*."""
    return [
        piece for piece in board.pieces(by_color) if target in attack_targets(board, piece)
    ]


def is_in_check(board: Board, color: Color) -> bool:
    """Is *color*'s king attacked by the opponent?"""
    return is_square_attacked(board, board.king_coordinate(color), color.opposite)
