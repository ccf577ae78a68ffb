"""Game configuration."""

from __future__ import annotations

from dataclasses import dataclass

from chesscore.core.enums import PROMOTION_TYPES, PieceType
from chesscore.core.notation import STARTING_FEN


@dataclass(frozen=True, slots=True)
class GameConfig:
    """Immutable settings for a game.

    Args:
        start_fen: Position the game starts from.
        default_promotion: Piece a pawn becomes when no choice is given.
    """

    start_fen: str = STARTING_FEN
    default_promotion: PieceType = PieceType.QUEEN

    def __post_init__(self) -> None:
        if self.default_promotion not in PROMOTION_TYPES:
            raise ValueError(
                f"Cannot promote to {self.default_promotion.name} by default"
            )
