"""GameController — thread-safe facade that publishes game events.

Coordinates: GameState and its listeners. Emits events via simple
callbacks so a UI (board view, move log, captured-piece display) or tests
can subscribe.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable
from dataclasses import dataclass, field

from chesscore.core.enums import Color, PieceType
from chesscore.core.errors import ChessError
from chesscore.core.move import Move
from chesscore.core.piece import Piece
from chesscore.core.rules import GameStatus
from chesscore.core.types import CoordinateLike
from chesscore.game.config import GameConfig
from chesscore.game.state import GameState, MoveRecord

_LOGGER = logging.getLogger(__name__)

# ── Event definitions ────────────────────────────────────────────────────────

MoveCallback = Callable[[MoveRecord], None]
CaptureCallback = Callable[[Piece], None]
GameOverCallback = Callable[[GameStatus], None]


@dataclass
class GameEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_move: list[MoveCallback] = field(default_factory=list)
    on_capture: list[CaptureCallback] = field(default_factory=list)
    on_game_over: list[GameOverCallback] = field(default_factory=list)


# ── Controller ───────────────────────────────────────────────────────────────


class GameController:
    """Serialises access to one game and notifies listeners.

    Thread-safety: every call takes the game's lock, so one move is fully
    committed and announced before the next is examined. Listeners run
    while the lock is held and may query the controller.
    """

    __slots__ = ("_state", "_lock", "events")

    def __init__(self, config: GameConfig | None = None) -> None:
        self._state = GameState(config or GameConfig())
        self._lock = threading.RLock()
        self.events = GameEvents()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def state(self) -> GameState:
        with self._lock:
            return self._state

    @property
    def status(self) -> GameStatus:
        with self._lock:
            return self._state.status

    @property
    def side_to_move(self) -> Color:
        with self._lock:
            return self._state.side_to_move

    # ── Commands ─────────────────────────────────────────────────────────

    def new_game(self, fen: str | None = None) -> None:
        with self._lock:
            self._state.setup(fen)

    def submit_move(
        self,
        from_sq: CoordinateLike,
        to_sq: CoordinateLike,
        promotion: PieceType | None = None,
    ) -> bool:
        """Submit a move. Returns True if legal and applied."""
        with self._lock:
            try:
                record = self._state.apply_move(from_sq, to_sq, promotion)
            except ChessError as exc:
                _LOGGER.info("Rejected move %s -> %s: %s", from_sq, to_sq, exc)
                return False

            self._emit_move(record)
            if record.captured is not None:
                self._emit_capture(record.captured)
            if record.status.is_terminal:
                self._emit_game_over(record.status)
            return True

    # ── Queries ──────────────────────────────────────────────────────────

    def legal_moves_from(self, coord: CoordinateLike) -> set[Move]:
        with self._lock:
            return self._state.legal_moves_from(coord)

    def occupant_at(self, coord: CoordinateLike) -> Piece | None:
        with self._lock:
            return self._state.occupant_at(coord)

    # ── Internal helpers ─────────────────────────────────────────────────

    def _emit_move(self, record: MoveRecord) -> None:
        for cb in self.events.on_move:
            cb(record)

    def _emit_capture(self, piece: Piece) -> None:
        for cb in self.events.on_capture:
            cb(piece)

    def _emit_game_over(self, status: GameStatus) -> None:
        for cb in self.events.on_game_over:
            cb(status)
