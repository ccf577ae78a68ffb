"""Tests for GameController — the thread-safe facade."""

import threading

import pytest

from chesscore.core.enums import Color, PieceType
from chesscore.core.notation import STARTING_FEN
from chesscore.core.piece import Piece
from chesscore.core.rules import GameStatus
from chesscore.core.types import D5, E2, E4, E5
from chesscore.game.config import GameConfig
from chesscore.game.controller import GameController
from chesscore.game.state import MoveRecord

FOOLS_MATE_LINE = [((6, 5), (5, 5)), ((1, 4), (3, 4)), ((6, 6), (4, 6)), ((0, 3), (4, 7))]


class TestNewGame:
    def test_white_moves_first(self) -> None:
        ctrl = GameController()
        assert ctrl.side_to_move == Color.WHITE
        assert ctrl.status == GameStatus.in_progress()

    def test_custom_fen(self) -> None:
        fen = "rnbqkbnr/pppppppp/8/8/4P3/8/PPPP1PPP/RNBQKBNR b KQkq e3 0 1"
        ctrl = GameController(GameConfig(start_fen=fen))
        assert ctrl.side_to_move == Color.BLACK

    def test_new_game_resets(self) -> None:
        ctrl = GameController()
        assert ctrl.submit_move(E2, E4)
        ctrl.new_game()
        assert ctrl.state.ply_count == 0
        assert ctrl.occupant_at(E2) is not None

    def test_new_game_without_king_rejected(self) -> None:
        ctrl = GameController()
        assert ctrl.submit_move(E2, E4)
        with pytest.raises(ValueError, match="BLACK kings"):
            ctrl.new_game("8/8/8/8/8/8/8/4K3 w - - 0 1")
        assert ctrl.state.start_fen == STARTING_FEN
        assert ctrl.state.ply_count == 1
        assert ctrl.submit_move((1, 4), (3, 4))


class TestSubmitMove:
    def test_legal_move_accepted(self) -> None:
        ctrl = GameController()
        assert ctrl.submit_move(E2, E4)
        assert ctrl.side_to_move == Color.BLACK

    def test_illegal_move_rejected(self) -> None:
        ctrl = GameController()
        assert not ctrl.submit_move(E2, E5)
        assert ctrl.side_to_move == Color.WHITE
        assert ctrl.state.ply_count == 0

    def test_bad_coordinate_rejected(self) -> None:
        ctrl = GameController()
        assert not ctrl.submit_move("z9", E4)

    def test_legal_moves_from(self) -> None:
        ctrl = GameController()
        assert {m.to_sq for m in ctrl.legal_moves_from(E2)} == {(5, 4), E4}


class TestEvents:
    def test_move_event(self) -> None:
        ctrl = GameController()
        records: list[MoveRecord] = []
        ctrl.events.on_move.append(records.append)
        ctrl.submit_move(E2, E4)
        assert [r.san for r in records] == ["e4"]

    def test_no_event_for_rejected_move(self) -> None:
        ctrl = GameController()
        records: list[MoveRecord] = []
        ctrl.events.on_move.append(records.append)
        ctrl.submit_move(E2, E5)
        assert records == []

    def test_capture_event(self) -> None:
        ctrl = GameController()
        captured: list[Piece] = []
        ctrl.events.on_capture.append(captured.append)
        ctrl.submit_move(E2, E4)
        ctrl.submit_move((1, 3), D5)
        assert captured == []
        ctrl.submit_move(E4, D5)
        assert len(captured) == 1
        assert captured[0].color == Color.BLACK
        assert captured[0].piece_type == PieceType.PAWN

    def test_game_over_event(self) -> None:
        ctrl = GameController()
        results: list[GameStatus] = []
        ctrl.events.on_game_over.append(results.append)
        for src, dst in FOOLS_MATE_LINE:
            assert ctrl.submit_move(src, dst)
        assert results == [GameStatus.checkmate(Color.WHITE)]

    def test_submit_after_game_over_rejected(self) -> None:
        ctrl = GameController()
        for src, dst in FOOLS_MATE_LINE:
            ctrl.submit_move(src, dst)
        assert not ctrl.submit_move(E2, (5, 4))

    def test_listener_may_query_controller(self) -> None:
        ctrl = GameController()
        seen: list[Color] = []
        ctrl.events.on_move.append(lambda _record: seen.append(ctrl.side_to_move))
        ctrl.submit_move(E2, E4)
        assert seen == [Color.BLACK]


class TestConcurrency:
    def test_same_move_from_two_threads(self) -> None:
        ctrl = GameController()
        barrier = threading.Barrier(2)
        results: list[bool] = []
        results_lock = threading.Lock()

        def submit() -> None:
            barrier.wait()
            ok = ctrl.submit_move(E2, E4)
            with results_lock:
                results.append(ok)

        threads = [threading.Thread(target=submit) for _ in range(2)]
        for t in threads:
            t.start()
        for t in threads:
            t.join(timeout=5)

        assert sorted(results) == [False, True]
        assert ctrl.state.ply_count == 1
        assert ctrl.side_to_move == Color.BLACK

    def test_status_read_waits_for_lock(self) -> None:
        ctrl = GameController()
        seen: list[GameStatus] = []
        reader = threading.Thread(target=lambda: seen.append(ctrl.status))
        with ctrl._lock:
            reader.start()
            reader.join(timeout=0.1)
            assert seen == []
        reader.join(timeout=5)
        assert seen == [GameStatus.in_progress()]
