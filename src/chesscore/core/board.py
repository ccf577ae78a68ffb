"""Board - piece placement on an 8x8 grid."""

from __future__ import annotations

from chesscore.core.enums import Color, MoveFlag, PieceType
from chesscore.core.errors import InvalidCoordinateError
from chesscore.core.move import Move
from chesscore.core.piece import Piece
from chesscore.core.types import BOARD_SIZE, Coordinate

_BACK_RANK: tuple[PieceType, ...] = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
)


class Board:
    """Mutable 8x8 grid of optional pieces.

    The board knows nothing about turns or legality; it only stores pieces
    and carries out the mechanical side effects of a move.
    """

    __slots__ = ("_grid",)

    def __init__(self) -> None:
        self._grid: list[list[Piece | None]] = [
            [None] * BOARD_SIZE for _ in range(BOARD_SIZE)
        ]

    # -- Element access -----------------------------------------------------

    def __getitem__(self, coord: Coordinate) -> Piece | None:
        return self.occupant_at(coord)

    def __setitem__(self, coord: Coordinate, piece: Piece | None) -> None:
        if piece is None:
            self.remove(coord)
        else:
            self.place(piece, coord)

    def occupant_at(self, coord: Coordinate) -> Piece | None:
        """Piece on *coord*; ``None`` for empty or off-board cells."""
        row, col = coord
        if 0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE:
            return self._grid[row][col]
        return None

    def place(self, piece: Piece, coord: Coordinate) -> None:
        """Put *piece* on *coord*, replacing whatever stood there."""
        coord = self._checked(coord)
        if piece.coord != coord:
            piece = Piece(piece.color, piece.piece_type, coord, piece.has_moved)
        self._grid[coord.row][coord.col] = piece

    def remove(self, coord: Coordinate) -> Piece | None:
        """Clear *coord* and return the piece that stood there."""
        coord = self._checked(coord)
        piece = self._grid[coord.row][coord.col]
        self._grid[coord.row][coord.col] = None
        return piece

    def is_empty(self, coord: Coordinate) -> bool:
        return self.occupant_at(coord) is None

    def color_at(self, coord: Coordinate) -> Color:
        """Color of the occupant, ``Color.UNASSIGNED`` when empty."""
        piece = self.occupant_at(coord)
        return Color.UNASSIGNED if piece is None else piece.color

    def is_occupied_by_color(self, coord: Coordinate, color: Color) -> bool:
        piece = self.occupant_at(coord)
        return piece is not None and piece.color == color

    # -- Query helpers ------------------------------------------------------

    def pieces(self, color: Color | None = None) -> list[Piece]:
        """All pieces (of *color*, if given) in row-major order."""
        return [
            piece
            for row in self._grid
            for piece in row
            if piece is not None and (color is None or piece.color == color)
        ]

    def king_coordinate(self, color: Color) -> Coordinate:
        """Return the single king square for *color*."""
        for piece in self.pieces(color):
            if piece.piece_type == PieceType.KING:
                return piece.coord
        raise ValueError(f"No {color.name} king on board")

    # -- Mutation / copying -------------------------------------------------

    def apply_move(self, move: Move, promotion: PieceType | None = None) -> Piece | None:
        """Carry out *move* mechanically and return the captured piece.

        Handles the off-destination en-passant capture, the rook slide for
        castling and pawn promotion (queen unless *promotion* says otherwise).
        No legality checking is done here.
        """
        piece = self.remove(move.from_sq)
        if piece is None:
            raise ValueError(f"No piece on {move.from_sq}")

        if move.flag == MoveFlag.EN_PASSANT:
            captured = self.remove(Coordinate(move.from_sq.row, move.to_sq.col))
        else:
            captured = self.remove(move.to_sq)

        placed = piece.moved_to(move.to_sq)
        if move.flag == MoveFlag.PROMOTION:
            placed = placed.promoted(promotion or move.promotion or PieceType.QUEEN)
        self.place(placed, move.to_sq)

        if move.flag == MoveFlag.CASTLE_KINGSIDE:
            self._slide_rook(move.from_sq.row, BOARD_SIZE - 1, move.to_sq.col - 1)
        elif move.flag == MoveFlag.CASTLE_QUEENSIDE:
            self._slide_rook(move.from_sq.row, 0, move.to_sq.col + 1)

        return captured

    def _slide_rook(self, row: int, from_col: int, to_col: int) -> None:
        rook = self.remove(Coordinate(row, from_col))
        if rook is None:
            raise ValueError(f"No rook on {Coordinate(row, from_col)} to castle with")
        self.place(rook.moved_to(Coordinate(row, to_col)), Coordinate(row, to_col))

    def copy(self) -> Board:
        b = Board()
        b._grid = [row.copy() for row in self._grid]
        return b

    def clear(self) -> None:
        self._grid = [[None] * BOARD_SIZE for _ in range(BOARD_SIZE)]

    @staticmethod
    def _checked(coord: Coordinate) -> Coordinate:
        row, col = coord
        if not (0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE):
            raise InvalidCoordinateError(
                f"Row {row} and column {col} are not on the board"
            )
        return Coordinate(row, col)

    # -- Factory ------------------------------------------------------------

    @classmethod
    def initial(cls) -> Board:
        """Standard starting position."""
        b = cls()
        for col, pt in enumerate(_BACK_RANK):
            b.place(Piece(Color.BLACK, pt, Coordinate(0, col)), Coordinate(0, col))
            b.place(Piece(Color.BLACK, PieceType.PAWN, Coordinate(1, col)), Coordinate(1, col))
            b.place(Piece(Color.WHITE, PieceType.PAWN, Coordinate(6, col)), Coordinate(6, col))
            b.place(Piece(Color.WHITE, pt, Coordinate(7, col)), Coordinate(7, col))
        return b

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._grid == other._grid

    def __repr__(self) -> str:
        rows: list[str] = []
        for row in range(BOARD_SIZE):
            cells = []
            for col in range(BOARD_SIZE):
                p = self._grid[row][col]
                cells.append(str(p) if p else ".")
            rows.append(f"{BOARD_SIZE - row} {' '.join(cells)}")
        rows.append("  a b c d e f g h")
        return "\n".join(rows)
