"""Piece value object."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import TYPE_CHECKING

from chesscore.core.enums import Color, PieceType
from chesscore.core.types import Coordinate

if TYPE_CHECKING:
    from chesscore.core.board import Board

# FEN character ↔ (Color, PieceType)
_CHAR_MAP: dict[str, tuple[Color, PieceType]] = {
    "P": (Color.WHITE, PieceType.PAWN),
    "N": (Color.WHITE, PieceType.KNIGHT),
    "B": (Color.WHITE, PieceType.BISHOP),
    "R": (Color.WHITE, PieceType.ROOK),
    "Q": (Color.WHITE, PieceType.QUEEN),
    "K": (Color.WHITE, PieceType.KING),
    "p": (Color.BLACK, PieceType.PAWN),
    "n": (Color.BLACK, PieceType.KNIGHT),
    "b": (Color.BLACK, PieceType.BISHOP),
    "r": (Color.BLACK, PieceType.ROOK),
    "q": (Color.BLACK, PieceType.QUEEN),
    "k": (Color.BLACK, PieceType.KING),
}

_UNICODE: dict[tuple[Color, PieceType], str] = {
    (Color.WHITE, PieceType.PAWN): "♙",
    (Color.WHITE, PieceType.KNIGHT): "♘",
    (Color.WHITE, PieceType.BISHOP): "♗",
    (Color.WHITE, PieceType.ROOK): "♖",
    (Color.WHITE, PieceType.QUEEN): "♕",
    (Color.WHITE, PieceType.KING): "♔",
    (Color.BLACK, PieceType.PAWN): "♟",
    (Color.BLACK, PieceType.KNIGHT): "♞",
    (Color.BLACK, PieceType.BISHOP): "♝",
    (Color.BLACK, PieceType.ROOK): "♜",
    (Color.BLACK, PieceType.QUEEN): "♛",
    (Color.BLACK, PieceType.KING): "♚",
}

_FEN_CHARS: dict[tuple[Color, PieceType], str] = {v: k for k, v in _CHAR_MAP.items()}


@dataclass(frozen=True, slots=True)
class Piece:
    """Immutable value object for a piece standing on a board cell.

    Moving or promoting a piece yields a new value, so a copied board never
    shares state with the board it was copied from.
    """

    color: Color
    piece_type: PieceType
    coord: Coordinate
    has_moved: bool = False

    def __post_init__(self) -> None:
        if self.color not in (Color.WHITE, Color.BLACK):
            raise ValueError(f"A piece must be WHITE or BLACK, not {self.color.name}")

    # ── Transitions ──────────────────────────────────────────────────────

    def moved_to(self, coord: Coordinate) -> Piece:
        """This piece after a move to *coord*."""
        return replace(self, coord=coord, has_moved=True)

    def promoted(self, piece_type: PieceType) -> Piece:
        """This pawn replaced by *piece_type* on the same square."""
        return replace(self, piece_type=piece_type)

    # ── Move generation ──────────────────────────────────────────────────

    def pseudo_legal_moves(
        self, board: Board, en_passant: Coordinate | None = None
    ) -> set[Coordinate]:
        """Destinations reachable by this piece's geometry, ignoring check."""
        from chesscore.core.move_generator import pseudo_legal_moves

        return {move.to_sq for move in pseudo_legal_moves(board, self, en_passant)}

    # ── Serialisation ────────────────────────────────────────────────────

    def __str__(self) -> str:
        """FEN character (uppercase = white, lowercase = black)."""
        return _FEN_CHARS[(self.color, self.piece_type)]

    @classmethod
    def from_char(cls, char: str, coord: Coordinate, has_moved: bool = False) -> Piece:
        """Create piece from FEN character, e.g. 'N' → white knight."""
        try:
            color, ptype = _CHAR_MAP[char]
        except KeyError:
            raise ValueError(f"Invalid piece character: {char!r}") from None
        return cls(color, ptype, coord, has_moved)

    @property
    def symbol(self) -> str:
        """Unicode chess symbol, e.g. ♞."""
        return _UNICODE[(self.color, self.piece_type)]
