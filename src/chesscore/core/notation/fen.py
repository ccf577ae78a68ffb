"""FEN parsing and serialization.

FEN castling rights are mapped onto the ``has_moved`` flags of the king
and the corner rooks: a right is available exactly when both pieces are
unmoved on their home squares. Pawns off their starting rank are marked
as moved.
"""

from __future__ import annotations

from chesscore.core.board import Board
from chesscore.core.enums import Color, PieceType
from chesscore.core.piece import Piece
from chesscore.core.position import Position
from chesscore.core.types import Coordinate, parse_square, square_name

STARTING_FEN = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1"

# FEN castling char -> (color, rook corner)
_CASTLING_CORNERS: dict[str, tuple[Color, Coordinate]] = {
    "K": (Color.WHITE, Coordinate(7, 7)),
    "Q": (Color.WHITE, Coordinate(7, 0)),
    "k": (Color.BLACK, Coordinate(0, 7)),
    "q": (Color.BLACK, Coordinate(0, 0)),
}
_KING_HOMES: dict[Color, Coordinate] = {
    Color.WHITE: Coordinate(7, 4),
    Color.BLACK: Coordinate(0, 4),
}
_PAWN_START_ROWS: dict[Color, int] = {Color.WHITE: 6, Color.BLACK: 1}


def position_from_fen(fen: str) -> Position:
    """Parse a FEN string into a :class:`Position`."""
    parts = fen.split()
    if not (4 <= len(parts) <= 6):
        raise ValueError(f"Invalid FEN (need 4-6 fields): {fen!r}")

    placement, side_part, castling_part, ep_part = parts[:4]

    # 1. Side to move
    if side_part == "w":
        side = Color.WHITE
    elif side_part == "b":
        side = Color.BLACK
    else:
        raise ValueError(f"Invalid FEN side-to-move field: {side_part!r}")

    # 2. Castling
    rights: set[str] = set()
    if castling_part != "-":
        for ch in castling_part:
            if ch not in _CASTLING_CORNERS or ch in rights:
                raise ValueError(f"Invalid FEN castling field: {castling_part!r}")
            rights.add(ch)
    unmoved: set[Coordinate] = set()
    for ch in rights:
        color, corner = _CASTLING_CORNERS[ch]
        unmoved.add(corner)
        unmoved.add(_KING_HOMES[color])

    # 3. Piece placement
    ranks = placement.split("/")
    if len(ranks) != 8:
        raise ValueError(f"Invalid FEN board (must contain 8 ranks): {fen!r}")
    board = Board()
    for row, rank_text in enumerate(ranks):
        col = 0
        for ch in rank_text:
            if ch.isdigit():
                step = int(ch)
                if not (1 <= step <= 8):
                    raise ValueError(f"Invalid FEN digit {ch!r}: {fen!r}")
                col += step
            else:
                if col >= 8:
                    raise ValueError(f"Invalid FEN rank width: {fen!r}")
                coord = Coordinate(row, col)
                piece = Piece.from_char(ch, coord)
                board.place(_with_history(piece, unmoved), coord)
                col += 1
            if col > 8:
                raise ValueError(f"Invalid FEN rank width: {fen!r}")
        if col != 8:
            raise ValueError(f"Invalid FEN rank width: {fen!r}")

    for color in (Color.WHITE, Color.BLACK):
        kings = sum(
            1 for p in board.pieces(color) if p.piece_type == PieceType.KING
        )
        if kings != 1:
            raise ValueError(
                f"Invalid FEN board ({kings} {color.name} kings, need 1): {fen!r}"
            )

    for ch in sorted(rights):
        color, corner = _CASTLING_CORNERS[ch]
        king = board[_KING_HOMES[color]]
        rook = board[corner]
        if (
            king is None
            or king.piece_type != PieceType.KING
            or king.color != color
            or rook is None
            or rook.piece_type != PieceType.ROOK
            or rook.color != color
        ):
            raise ValueError(f"Invalid FEN castling right {ch!r} for board: {fen!r}")

    # 4. En passant
    ep: Coordinate | None = None
    if ep_part != "-":
        ep = parse_square(ep_part)
        expected_row = 2 if side == Color.WHITE else 5
        if ep.row != expected_row:
            raise ValueError(
                f"Invalid FEN en-passant square for side-to-move: {ep_part!r}"
            )

    # 5–6. Clocks (optional)
    if len(parts) > 4:
        halfmove = int(parts[4])
        if halfmove < 0:
            raise ValueError(f"Invalid FEN halfmove clock: {parts[4]!r}")
    else:
        halfmove = 0

    if len(parts) > 5:
        fullmove = int(parts[5])
        if fullmove < 1:
            raise ValueError(f"Invalid FEN fullmove number: {parts[5]!r}")
    else:
        fullmove = 1

    return Position(board, side, ep, halfmove, fullmove)


def _with_history(piece: Piece, unmoved: set[Coordinate]) -> Piece:
    if piece.piece_type == PieceType.PAWN:
        moved = piece.coord.row != _PAWN_START_ROWS[piece.color]
    elif piece.piece_type in (PieceType.KING, PieceType.ROOK):
        moved = piece.coord not in unmoved
    else:
        moved = False
    return Piece(piece.color, piece.piece_type, piece.coord, moved)


def castling_rights(board: Board) -> str:
    """FEN castling field derived from the unmoved kings and rooks."""
    field = ""
    for ch, (color, corner) in _CASTLING_CORNERS.items():
        king = board[_KING_HOMES[color]]
        rook = board[corner]
        if (
            king is not None
            and king.piece_type == PieceType.KING
            and king.color == color
            and not king.has_moved
            and rook is not None
            and rook.piece_type == PieceType.ROOK
            and rook.color == color
            and not rook.has_moved
        ):
            field += ch
    return field or "-"


def position_to_fen(pos: Position) -> str:
    """Serialise a :class:`Position` to FEN."""
    # 1. Board
    rows: list[str] = []
    for row in range(8):
        empty = 0
        text = ""
        for col in range(8):
            piece = pos.board[Coordinate(row, col)]
            if piece is None:
                empty += 1
            else:
                if empty:
                    text += str(empty)
                    empty = 0
                text += str(piece)
        if empty:
            text += str(empty)
        rows.append(text)
    board_str = "/".join(rows)

    # 2. Side
    side_str = "w" if pos.side_to_move == Color.WHITE else "b"

    # 3–4. Castling, en passant
    castling_str = castling_rights(pos.board)
    ep_str = square_name(pos.en_passant) if pos.en_passant is not None else "-"

    return f"{board_str} {side_str} {castling_str} {ep_str} {pos.halfmove_clock} {pos.fullmove_number}"
