"""SAN (Standard Algebraic Notation) rendering."""

from __future__ import annotations

from chesscore.core.enums import MoveFlag, PieceType
from chesscore.core.move import Move
from chesscore.core.position import Position
from chesscore.core.types import square_name

_SAN_PIECE: dict[PieceType, str] = {
    PieceType.KNIGHT: "N",
    PieceType.BISHOP: "B",
    PieceType.ROOK: "R",
    PieceType.QUEEN: "Q",
    PieceType.KING: "K",
}


def move_to_san(
    position: Position, move: Move, promotion: PieceType | None = None
) -> str:
    """Convert a legal *move* to SAN given the *position* before the move."""
    board = position.board
    piece = board[move.from_sq]
    if piece is None:
        raise ValueError(f"No piece on {move.from_sq}")

    if move.flag == MoveFlag.CASTLE_KINGSIDE:
        san = "O-O"
    elif move.flag == MoveFlag.CASTLE_QUEENSIDE:
        san = "O-O-O"
    else:
        san = ""
        is_capture = board[move.to_sq] is not None or move.flag == MoveFlag.EN_PASSANT

        if piece.piece_type == PieceType.PAWN:
            if is_capture:
                san += _file_char(move.from_sq.col)
        else:
            san += _SAN_PIECE[piece.piece_type]
            san += _disambiguation(position, move, piece.piece_type)

        if is_capture:
            san += "x"

        san += square_name(move.to_sq)

        if move.flag == MoveFlag.PROMOTION:
            chosen = promotion or move.promotion or PieceType.QUEEN
            san += "=" + _SAN_PIECE[chosen]

    # Check / checkmate suffix
    after, _ = position.play(move, promotion)
    if after.is_in_check():
        san += "+" if after.has_legal_move() else "#"

    return san


def _file_char(col: int) -> str:
    return chr(ord("a") + col)


def _disambiguation(position: Position, move: Move, piece_type: PieceType) -> str:
    board = position.board
    rivals = []
    for other in board.pieces(position.side_to_move):
        if other.piece_type != piece_type or other.coord == move.from_sq:
            continue
        if any(m.to_sq == move.to_sq for m in position.legal_moves_from(other.coord)):
            rivals.append(other.coord)
    if not rivals:
        return ""
    if all(sq.col != move.from_sq.col for sq in rivals):
        return _file_char(move.from_sq.col)
    if all(sq.row != move.from_sq.row for sq in rivals):
        return square_name(move.from_sq)[1]
    return square_name(move.from_sq)
