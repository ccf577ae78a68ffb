"""Legal move filtering.

Each pseudo-legal candidate is played on a copy of the board and kept only
if the mover's king is not attacked afterwards. Working on a snapshot means
castling's two-piece move and the off-destination en-passant capture never
need to be undone.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from chesscore.core.attacks import is_in_check, is_square_attacked
from chesscore.core.move_generator import pseudo_legal_moves
from chesscore.core.types import Coordinate

if TYPE_CHECKING:
    from chesscore.core.board import Board
    from chesscore.core.enums import Color, PieceType
    from chesscore.core.move import Move
    from chesscore.core.piece import Piece


def simulate(board: Board, move: Move, promotion: PieceType | None = None) -> Board:
    """A copy of *board* with *move* applied; *board* itself is untouched."""
    working = board.copy()
    working.apply_move(move, promotion)
    return working


def is_legal(board: Board, move: Move) -> bool:
    """Does *move* keep the mover's king out of check?

    Castling additionally requires that the king is not in check before
    the move and does not pass over an attacked square.
    """
    piece = board.occupant_at(move.from_sq)
    if piece is None:
        return False
    opponent = piece.color.opposite

    if move.is_castling:
        if is_square_attacked(board, move.from_sq, opponent):
            return False
        transit = Coordinate(move.from_sq.row, (move.from_sq.col + move.to_sq.col) // 2)
        passing = board.copy()
        passing.remove(move.from_sq)
        passing.place(piece, transit)
        if is_square_attacked(passing, transit, opponent):
            return False

    return not is_in_check(simulate(board, move), piece.color)


def legal_moves(
    board: Board, piece: Piece, en_passant: Coordinate | None = None
) -> set[Move]:
    """Strictly legal moves of *piece*."""
    return {
        move
        for move in pseudo_legal_moves(board, piece, en_passant)
        if is_legal(board, move)
    }


def all_legal_moves(
    board: Board, color: Color, en_passant: Coordinate | None = None
) -> set[Move]:
    """Strictly legal moves of every piece of *color*."""
    moves: set[Move] = set()
    for piece in board.pieces(color):
        moves |= legal_moves(board, piece, en_passant)
    return moves


def has_legal_move(
    board: Board, color: Color, en_passant: Coordinate | None = None
) -> bool:
    """Whether *color* has at least one legal move; stops at the first."""
    for piece in board.pieces(color):
        for move in pseudo_legal_moves(board, piece, en_passant):
            if is_legal(board, move):
                return True
    return False
