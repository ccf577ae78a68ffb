"""Move value object (UCI-style representation)."""

from __future__ import annotations

from dataclasses import dataclass

from chesscore.core.enums import MoveFlag, PieceType
from chesscore.core.types import Coordinate

_PROMO_CHARS: dict[PieceType, str] = {
    PieceType.KNIGHT: "n",
    PieceType.BISHOP: "b",
    PieceType.ROOK: "r",
    PieceType.QUEEN: "q",
}


@dataclass(frozen=True, slots=True)
class Move:
    """Immutable value object representing a single chess move.

    Generated promotion moves carry ``MoveFlag.PROMOTION`` with no
    ``promotion`` type; the type is chosen when the move is committed.
    """

    from_sq: Coordinate
    to_sq: Coordinate
    flag: MoveFlag = MoveFlag.NORMAL
    promotion: PieceType | None = None

    @property
    def is_castling(self) -> bool:
        return self.flag in (MoveFlag.CASTLE_KINGSIDE, MoveFlag.CASTLE_QUEENSIDE)

    @property
    def is_promotion(self) -> bool:
        return self.flag == MoveFlag.PROMOTION

    # ── Display ──────────────────────────────────────────────────────────

    def __str__(self) -> str:
        base = f"{self.from_sq}{self.to_sq}"
        if self.promotion is not None:
            base += _PROMO_CHARS.get(self.promotion, "")
        return base

    @property
    def uci(self) -> str:
        """UCI long-algebraic notation."""
        return str(self)
