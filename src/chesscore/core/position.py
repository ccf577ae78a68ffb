"""Position — board plus the metadata needed to decide legality."""

from __future__ import annotations

from chesscore.core.attacks import is_in_check
from chesscore.core.board import Board
from chesscore.core.enums import Color, MoveFlag, PieceType
from chesscore.core.legality import all_legal_moves, has_legal_move, legal_moves
from chesscore.core.move import Move
from chesscore.core.piece import Piece
from chesscore.core.types import Coordinate


class Position:
    """Full chess position: board + side to move + en passant + clocks.

    Positions are treated as snapshots: :meth:`play` returns a successor and
    leaves the receiver untouched.
    """

    __slots__ = (
        "board",
        "side_to_move",
        "en_passant",
        "halfmove_clock",
        "fullmove_number",
    )

    def __init__(
        self,
        board: Board | None = None,
        side_to_move: Color = Color.WHITE,
        en_passant: Coordinate | None = None,
        halfmove_clock: int = 0,
        fullmove_number: int = 1,
    ) -> None:
        self.board = board if board is not None else Board.initial()
        self.side_to_move = side_to_move
        self.en_passant = en_passant
        self.halfmove_clock = halfmove_clock
        self.fullmove_number = fullmove_number

    # ── Legality queries ─────────────────────────────────────────────────

    def legal_moves(self) -> set[Move]:
        """All strictly legal moves for the side to move."""
        return all_legal_moves(self.board, self.side_to_move, self.en_passant)

    def legal_moves_from(self, coord: Coordinate) -> set[Move]:
        """Legal moves of the piece on *coord* (empty set for an empty square).

        The en-passant window only applies to the side to move.
        """
        piece = self.board.occupant_at(coord)
        if piece is None:
            return set()
        en_passant = self.en_passant if piece.color == self.side_to_move else None
        return legal_moves(self.board, piece, en_passant)

    def has_legal_move(self) -> bool:
        return has_legal_move(self.board, self.side_to_move, self.en_passant)

    def is_in_check(self) -> bool:
        return is_in_check(self.board, self.side_to_move)

    # ── Core move operation ──────────────────────────────────────────────

    def play(
        self, move: Move, promotion: PieceType | None = None
    ) -> tuple[Position, Piece | None]:
        """Successor position after *move*, plus the captured piece.

        No legality checking is done; callers filter through
        :meth:`legal_moves` first.
        """
        board = self.board.copy()
        mover = board.occupant_at(move.from_sq)
        captured = board.apply_move(move, promotion)

        next_en_passant: Coordinate | None = None
        if move.flag == MoveFlag.DOUBLE_PAWN:
            next_en_passant = Coordinate(
                (move.from_sq.row + move.to_sq.row) // 2, move.from_sq.col
            )

        if (mover is not None and mover.piece_type == PieceType.PAWN) or captured:
            halfmove_clock = 0
        else:
            halfmove_clock = self.halfmove_clock + 1

        fullmove_number = self.fullmove_number
        if self.side_to_move == Color.BLACK:
            fullmove_number += 1

        successor = Position(
            board=board,
            side_to_move=self.side_to_move.opposite,
            en_passant=next_en_passant,
            halfmove_clock=halfmove_clock,
            fullmove_number=fullmove_number,
        )
        return successor, captured

    # ── Utilities ────────────────────────────────────────────────────────

    def copy(self) -> Position:
        return Position(
            board=self.board.copy(),
            side_to_move=self.side_to_move,
            en_passant=self.en_passant,
            halfmove_clock=self.halfmove_clock,
            fullmove_number=self.fullmove_number,
        )

    @property
    def ply(self) -> int:
        """Half-moves played since the game's first move."""
        return (self.fullmove_number - 1) * 2 + int(self.side_to_move == Color.BLACK)

    def __repr__(self) -> str:
        return (
            f"Position(side_to_move={self.side_to_move}, "
            f"en_passant={self.en_passant}, ply={self.ply})\n{self.board!r}"
        )
