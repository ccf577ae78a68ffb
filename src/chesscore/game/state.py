"""Game state machine — side to move, status, move history, captures."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace

from chesscore.core.enums import PROMOTION_TYPES, Color, PieceType
from chesscore.core.errors import (
    GameAlreadyOverError,
    IllegalDestinationError,
    InvalidPromotionError,
    NoPieceAtSourceError,
    WrongSideToMoveError,
)
from chesscore.core.move import Move
from chesscore.core.notation import move_to_san, position_from_fen, position_to_fen
from chesscore.core.piece import Piece
from chesscore.core.position import Position
from chesscore.core.rules import GameStatus, Rules
from chesscore.core.types import Coordinate, CoordinateLike, coerce_coordinate
from chesscore.game.config import GameConfig

_LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class MoveRecord:
    """A single entry in the move history."""

    move: Move
    piece: Piece
    san: str
    fen_after: str
    status: GameStatus
    captured: Piece | None = None

    @property
    def was_capture(self) -> bool:
        return self.captured is not None

    @property
    def was_check(self) -> bool:
        return self.status.color is not None


@dataclass
class GameState:
    """Owns one game: position, status, history and captured pieces.

    This is a pure data/logic class — no threading, no UI. Every accepted
    move is committed atomically; a rejected one changes nothing.
    """

    config: GameConfig = field(default_factory=GameConfig)
    position: Position = field(init=False)
    status: GameStatus = field(default_factory=GameStatus.in_progress, init=False)
    move_history: list[MoveRecord] = field(default_factory=list, init=False)
    captured: dict[Color, list[Piece]] = field(default_factory=dict, init=False)
    start_fen: str = field(init=False)

    def __post_init__(self) -> None:
        self.setup()

    # ── Initialisation ───────────────────────────────────────────────────

    def setup(self, fen: str | None = None) -> None:
        """Initialise (or reset) the game.

        Raises ``ValueError`` for a malformed FEN, leaving the game untouched.
        """
        start_fen = fen or self.config.start_fen
        position = position_from_fen(start_fen)
        status = Rules.status(position)

        self.start_fen = start_fen
        self.position = position
        self.status = status
        self.move_history = []
        self.captured = {Color.WHITE: [], Color.BLACK: []}
        _LOGGER.info("New game from %s (%s)", self.start_fen, self.status)

    # ── Move application ─────────────────────────────────────────────────

    def apply_move(
        self,
        from_sq: CoordinateLike,
        to_sq: CoordinateLike,
        promotion: PieceType | None = None,
    ) -> MoveRecord:
        """Validate and commit a move, returning its history record.

        Raises:
            GameAlreadyOverError: the game ended in checkmate or stalemate.
            InvalidCoordinateError: either square is off the board.
            NoPieceAtSourceError: *from_sq* is empty.
            WrongSideToMoveError: *from_sq* holds the opponent's piece.
            IllegalDestinationError: *to_sq* is not a legal destination.
            InvalidPromotionError: the promotion choice does not fit the move.
        """
        if self.status.is_terminal:
            raise GameAlreadyOverError(f"Game is over: {self.status}")

        src = coerce_coordinate(from_sq)
        dst = coerce_coordinate(to_sq)

        position = self.position
        piece = position.board.occupant_at(src)
        if piece is None:
            raise NoPieceAtSourceError(f"No piece on {src}")
        if piece.color != position.side_to_move:
            raise WrongSideToMoveError(
                f"{piece.color} piece on {src}, but {position.side_to_move} is to move"
            )

        move = self._match_legal_move(src, dst)
        move = self._resolve_promotion(move, promotion)

        san = move_to_san(position, move)
        successor, captured = position.play(move)
        status = Rules.status(successor)
        record = MoveRecord(
            move=move,
            piece=piece,
            san=san,
            fen_after=position_to_fen(successor),
            status=status,
            captured=captured,
        )

        self.position = successor
        self.status = status
        self.move_history.append(record)
        if captured is not None:
            self.captured[captured.color].append(captured)

        _LOGGER.debug("Ply %d: %s (%s)", self.ply_count, san, move)
        if status.is_terminal:
            _LOGGER.info("Game over after %s: %s", san, status)
        return record

    def _match_legal_move(self, src: Coordinate, dst: Coordinate) -> Move:
        for move in self.position.legal_moves_from(src):
            if move.to_sq == dst:
                return move
        raise IllegalDestinationError(f"Illegal move {src}{dst}")

    def _resolve_promotion(self, move: Move, promotion: PieceType | None) -> Move:
        if not move.is_promotion:
            if promotion is not None:
                raise InvalidPromotionError(f"Move {move} does not promote a pawn")
            return move
        choice = promotion or self.config.default_promotion
        if choice not in PROMOTION_TYPES:
            raise InvalidPromotionError(f"Cannot promote to {choice.name}")
        return replace(move, promotion=choice)

    # ── Query helpers ────────────────────────────────────────────────────

    @property
    def side_to_move(self) -> Color:
        return self.position.side_to_move

    @property
    def is_game_over(self) -> bool:
        return self.status.is_terminal

    @property
    def ply_count(self) -> int:
        """Number of half-moves played."""
        return len(self.move_history)

    @property
    def fullmove_display(self) -> int:
        """Current full-move number for display."""
        return self.position.fullmove_number

    @property
    def en_passant(self) -> Coordinate | None:
        """Square a pawn may capture onto en passant this ply, if any."""
        return self.position.en_passant

    def occupant_at(self, coord: CoordinateLike) -> Piece | None:
        return self.position.board.occupant_at(coerce_coordinate(coord))

    def legal_moves_from(self, coord: CoordinateLike) -> set[Move]:
        """Legal moves of the piece on *coord*, for move highlighting."""
        return self.position.legal_moves_from(coerce_coordinate(coord))

    def legal_destinations(self, coord: CoordinateLike) -> set[Coordinate]:
        return {move.to_sq for move in self.legal_moves_from(coord)}

    def legal_moves(self) -> set[Move]:
        """Legal moves in the current position."""
        return self.position.legal_moves()

    def fen(self) -> str:
        return position_to_fen(self.position)
