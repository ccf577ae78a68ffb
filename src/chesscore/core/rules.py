"""High-level chess rules: check, checkmate and stalemate detection."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from chesscore.core.enums import Color, StatusKind

if TYPE_CHECKING:
    from chesscore.core.position import Position


@dataclass(frozen=True, slots=True)
class GameStatus:
    """Game state for the side to move.

    ``color`` names the side in check or checkmated, never the side that
    delivered it: after fool's mate the status is ``checkmate(WHITE)`` and
    :attr:`winner` is BLACK. It is ``None`` while the game is simply in
    progress and for stalemate.
    """

    kind: StatusKind
    color: Color | None = None

    @classmethod
    def in_progress(cls) -> GameStatus:
        return cls(StatusKind.IN_PROGRESS)

    @classmethod
    def check(cls, color: Color) -> GameStatus:
        return cls(StatusKind.CHECK, color)

    @classmethod
    def checkmate(cls, color: Color) -> GameStatus:
        return cls(StatusKind.CHECKMATE, color)

    @classmethod
    def stalemate(cls) -> GameStatus:
        return cls(StatusKind.STALEMATE)

    @property
    def is_terminal(self) -> bool:
        return self.kind in (StatusKind.CHECKMATE, StatusKind.STALEMATE)

    @property
    def winner(self) -> Color | None:
        """The side that delivered mate, if any."""
        if self.kind == StatusKind.CHECKMATE and self.color is not None:
            return self.color.opposite
        return None

    def __str__(self) -> str:
        name = self.kind.name.lower().replace("_", " ")
        return f"{name} ({self.color})" if self.color is not None else name


class Rules:
    """Static rule-checker that operates on a :class:`Position`."""

    @staticmethod
    def is_in_check(position: Position) -> bool:
        return position.is_in_check()

    @staticmethod
    def is_checkmate(position: Position) -> bool:
        return position.is_in_check() and not position.has_legal_move()

    @staticmethod
    def is_stalemate(position: Position) -> bool:
        return not position.is_in_check() and not position.has_legal_move()

    @staticmethod
    def status(position: Position) -> GameStatus:
        """Classify *position* from the point of view of the side to move."""
        side = position.side_to_move
        in_check = position.is_in_check()
        can_move = position.has_legal_move()

        if in_check:
            return GameStatus.check(side) if can_move else GameStatus.checkmate(side)
        if not can_move:
            return GameStatus.stalemate()
        return GameStatus.in_progress()
