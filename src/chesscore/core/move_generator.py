"""Pseudo-legal move generation, one pure function per piece variant.

Pseudo-legal moves follow each piece's movement geometry and the occupancy
of the board but ignore whether the mover's own king ends up attacked;
:mod:`chesscore.core.legality` filters those out.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING

from chesscore.core.enums import Color, MoveFlag, PieceType
from chesscore.core.move import Move
from chesscore.core.types import OFF_BOARD, Coordinate

if TYPE_CHECKING:
    from chesscore.core.board import Board
    from chesscore.core.piece import Piece


KNIGHT_OFFSETS: tuple[tuple[int, int], ...] = (
    (-2, -1),
    (-2, 1),
    (-1, -2),
    (-1, 2),
    (1, -2),
    (1, 2),
    (2, -1),
    (2, 1),
)

KING_OFFSETS: tuple[tuple[int, int], ...] = (
    (-1, -1),
    (-1, 0),
    (-1, 1),
    (0, -1),
    (0, 1),
    (1, -1),
    (1, 0),
    (1, 1),
)

BISHOP_DIRS: tuple[tuple[int, int], ...] = ((-1, -1), (-1, 1), (1, -1), (1, 1))
ROOK_DIRS: tuple[tuple[int, int], ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))
QUEEN_DIRS: tuple[tuple[int, int], ...] = BISHOP_DIRS + ROOK_DIRS

# color -> (row step, starting row, promotion row)
_PAWN_GEOMETRY: dict[Color, tuple[int, int, int]] = {
    Color.WHITE: (-1, 6, 0),
    Color.BLACK: (1, 1, 7),
}

_HOME_ROW: dict[Color, int] = {Color.WHITE: 7, Color.BLACK: 0}
_KING_HOME_COL = 4

# flag, rook column, columns that must be empty, king destination column
_CASTLING_SIDES: tuple[tuple[MoveFlag, int, tuple[int, ...], int], ...] = (
    (MoveFlag.CASTLE_KINGSIDE, 7, (5, 6), 6),
    (MoveFlag.CASTLE_QUEENSIDE, 0, (1, 2, 3), 2),
)

_Generator = Callable[["Board", "Piece", "Coordinate | None", "set[Move]"], None]


# -- Public API ----------------------------------------------------------------


def pseudo_legal_moves(
    board: Board, piece: Piece, en_passant: Coordinate | None = None
) -> set[Move]:
    """Every geometrically reachable move of *piece*, ignoring check.

    *en_passant* is the square skipped by the last two-square pawn advance,
    if that advance was the immediately preceding ply.
    """
    moves: set[Move] = set()
    _GENERATORS[piece.piece_type](board, piece, en_passant, moves)
    return moves


def attack_targets(board: Board, piece: Piece) -> set[Coordinate]:
    """Squares *piece* attacks: where it could capture an enemy piece.

    Pawns attack their forward diagonals whether occupied or not and never
    attack with a push. Kings attack their neighbours only; castling is not
    an attack, which keeps king-safety checks free of recursion.
    """
    if piece.piece_type == PieceType.PAWN:
        step, _, _ = _PAWN_GEOMETRY[piece.color]
        targets = (piece.coord.step(step, -1), piece.coord.step(step, 1))
        return {
            sq
            for sq in targets
            if sq != OFF_BOARD and not board.is_occupied_by_color(sq, piece.color)
        }

    moves: set[Move] = set()
    if piece.piece_type == PieceType.KING:
        _gen_offsets(board, piece, KING_OFFSETS, moves)
    else:
        _GENERATORS[piece.piece_type](board, piece, None, moves)
    return {move.to_sq for move in moves}


# -- Shared helpers --------------------------------------------------------------


def _gen_sliding(
    board: Board,
    piece: Piece,
    directions: tuple[tuple[int, int], ...],
    moves: set[Move],
) -> None:
    for drow, dcol in directions:
        sq = piece.coord.step(drow, dcol)
        while sq != OFF_BOARD:
            target = board.occupant_at(sq)
            if target is None:
                moves.add(Move(piece.coord, sq))
                sq = sq.step(drow, dcol)
                continue
            if target.color != piece.color:
                moves.add(Move(piece.coord, sq))
            break


def _gen_offsets(
    board: Board,
    piece: Piece,
    offsets: tuple[tuple[int, int], ...],
    moves: set[Move],
) -> None:
    for drow, dcol in offsets:
        sq = piece.coord.step(drow, dcol)
        if sq != OFF_BOARD and not board.is_occupied_by_color(sq, piece.color):
            moves.add(Move(piece.coord, sq))


# -- Piece-specific generators ---------------------------------------------------


def _gen_pawn(
    board: Board, piece: Piece, en_passant: Coordinate | None, moves: set[Move]
) -> None:
    step, start_row, promotion_row = _PAWN_GEOMETRY[piece.color]
    origin = piece.coord

    one_step = origin.step(step, 0)
    if one_step != OFF_BOARD and board.is_empty(one_step):
        if one_step.row == promotion_row:
            moves.add(Move(origin, one_step, MoveFlag.PROMOTION))
        else:
            moves.add(Move(origin, one_step))
            if origin.row == start_row:
                two_step = one_step.step(step, 0)
                if board.is_empty(two_step):
                    moves.add(Move(origin, two_step, MoveFlag.DOUBLE_PAWN))

    for dcol in (-1, 1):
        cap_sq = origin.step(step, dcol)
        if cap_sq == OFF_BOARD:
            continue
        target = board.occupant_at(cap_sq)
        if target is not None:
            if target.color != piece.color:
                flag = (
                    MoveFlag.PROMOTION
                    if cap_sq.row == promotion_row
                    else MoveFlag.NORMAL
                )
                moves.add(Move(origin, cap_sq, flag))
        elif cap_sq == en_passant:
            victim = board.occupant_at(Coordinate(origin.row, cap_sq.col))
            if (
                victim is not None
                and victim.piece_type == PieceType.PAWN
                and victim.color != piece.color
            ):
                moves.add(Move(origin, cap_sq, MoveFlag.EN_PASSANT))


def _gen_knight(
    board: Board, piece: Piece, en_passant: Coordinate | None, moves: set[Move]
) -> None:
    _gen_offsets(board, piece, KNIGHT_OFFSETS, moves)


def _gen_bishop(
    board: Board, piece: Piece, en_passant: Coordinate | None, moves: set[Move]
) -> None:
    _gen_sliding(board, piece, BISHOP_DIRS, moves)


def _gen_rook(
    board: Board, piece: Piece, en_passant: Coordinate | None, moves: set[Move]
) -> None:
    _gen_sliding(board, piece, ROOK_DIRS, moves)


def _gen_queen(
    board: Board, piece: Piece, en_passant: Coordinate | None, moves: set[Move]
) -> None:
    _gen_sliding(board, piece, QUEEN_DIRS, moves)


def _gen_king(
    board: Board, piece: Piece, en_passant: Coordinate | None, moves: set[Move]
) -> None:
    _gen_offsets(board, piece, KING_OFFSETS, moves)
    _gen_castling(board, piece, moves)


def _gen_castling(board: Board, king: Piece, moves: set[Move]) -> None:
    """Castling candidates; attacked-square rules live in the legality filter."""
    row = _HOME_ROW[king.color]
    if king.has_moved or king.coord != Coordinate(row, _KING_HOME_COL):
        return

    for flag, rook_col, between, dest_col in _CASTLING_SIDES:
        rook = board.occupant_at(Coordinate(row, rook_col))
        if (
            rook is None
            or rook.piece_type != PieceType.ROOK
            or rook.color != king.color
            or rook.has_moved
        ):
            continue
        if all(board.is_empty(Coordinate(row, col)) for col in between):
            moves.add(Move(king.coord, Coordinate(row, dest_col), flag))


_GENERATORS: dict[PieceType, _Generator] = {
    PieceType.PAWN: _gen_pawn,
    PieceType.KNIGHT: _gen_knight,
    PieceType.BISHOP: _gen_bishop,
    PieceType.ROOK: _gen_rook,
    PieceType.QUEEN: _gen_queen,
    PieceType.KING: _gen_king,
}
