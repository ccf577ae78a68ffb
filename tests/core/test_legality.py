"""Tests for the legality filter."""

from chesscore.core.attacks import is_in_check
from chesscore.core.enums import Color, MoveFlag
from chesscore.core.legality import (
    all_legal_moves,
    has_legal_move,
    is_legal,
    legal_moves,
    simulate,
)
from chesscore.core.move import Move
from chesscore.core.move_generator import pseudo_legal_moves
from chesscore.core.notation import STARTING_FEN, position_from_fen, position_to_fen
from chesscore.core.types import C1, D6, E1, E2, E5, E6, G1


def _king_moves(fen: str) -> set[Move]:
    pos = position_from_fen(fen)
    king = pos.board[E1]
    assert king is not None
    return legal_moves(pos.board, king, pos.en_passant)


class TestPins:
    def test_pinned_bishop_cannot_move(self) -> None:
        pos = position_from_fen("k3r3/8/8/8/8/8/4B3/4K3 w - - 0 1")
        bishop = pos.board[E2]
        assert bishop is not None
        assert bishop.pseudo_legal_moves(pos.board)
        assert legal_moves(pos.board, bishop) == set()

    def test_pinned_rook_slides_along_pin(self) -> None:
        pos = position_from_fen("k3r3/8/8/8/8/8/4R3/4K3 w - - 0 1")
        rook = pos.board[E2]
        assert rook is not None
        destinations = {m.to_sq for m in legal_moves(pos.board, rook)}
        assert destinations == {(r, 4) for r in range(0, 6)}

    def test_king_cannot_capture_defended_piece(self) -> None:
        pos = position_from_fen("k3r3/8/8/8/8/8/4q3/4K3 w - - 0 1")
        king = pos.board[E1]
        assert king is not None
        assert Move(E1, E2) in pseudo_legal_moves(pos.board, king)
        assert legal_moves(pos.board, king) == set()


class TestCastlingLegality:
    def test_clear_and_unattacked(self) -> None:
        moves = _king_moves("r3k2r/8/8/8/8/8/8/R3K2R w KQkq - 0 1")
        assert Move(E1, G1, MoveFlag.CASTLE_KINGSIDE) in moves
        assert Move(E1, C1, MoveFlag.CASTLE_QUEENSIDE) in moves

    def test_cannot_castle_through_check(self) -> None:
        moves = _king_moves("4kr2/8/8/8/8/8/8/R3K2R w KQ - 0 1")
        assert Move(E1, G1, MoveFlag.CASTLE_KINGSIDE) not in moves
        assert Move(E1, C1, MoveFlag.CASTLE_QUEENSIDE) in moves

    def test_cannot_castle_into_check(self) -> None:
        moves = _king_moves("6rk/8/8/8/8/8/8/R3K2R w KQ - 0 1")
        assert Move(E1, G1, MoveFlag.CASTLE_KINGSIDE) not in moves

    def test_cannot_castle_out_of_check(self) -> None:
        moves = _king_moves("4r2k/8/8/8/8/8/8/R3K2R w KQ - 0 1")
        assert not any(m.is_castling for m in moves)

    def test_attacked_b_file_does_not_block_queenside(self) -> None:
        moves = _king_moves("1r5k/8/8/8/8/8/8/R3K2R w KQ - 0 1")
        assert Move(E1, C1, MoveFlag.CASTLE_QUEENSIDE) in moves


class TestEnPassantLegality:
    def test_plain_en_passant(self) -> None:
        pos = position_from_fen("4k3/8/8/3pP3/8/8/8/4K3 w - d6 0 1")
        pawn = pos.board[E5]
        assert pawn is not None
        assert Move(E5, D6, MoveFlag.EN_PASSANT) in legal_moves(
            pos.board, pawn, pos.en_passant
        )

    def test_en_passant_exposing_king_on_rank(self) -> None:
        pos = position_from_fen("8/8/8/K2pP2r/8/8/8/7k w - d6 0 1")
        pawn = pos.board[E5]
        assert pawn is not None
        assert {m.to_sq for m in legal_moves(pos.board, pawn, pos.en_passant)} == {E6}


class TestKingSafetyProperty:
    def test_no_legal_move_leaves_king_attacked(self) -> None:
        fens = [
            STARTING_FEN,
            "r3k2r/p1ppqpb1/bn2pnp1/3PN3/1p2P3/2N2Q1p/PPPBBPPP/R3K2R w KQkq - 0 1",
            "8/2p5/3p4/KP5r/1R3p1k/8/4P1P1/8 w - - 0 1",
            "r3k2r/Pppp1ppp/1b3nbN/nP6/BBP1P3/q4N2/Pp1P2PP/R2Q1RK1 w kq - 0 1",
        ]
        for fen in fens:
            pos = position_from_fen(fen)
            color = pos.side_to_move
            for move in all_legal_moves(pos.board, color, pos.en_passant):
                assert is_legal(pos.board, move)
                assert not is_in_check(simulate(pos.board, move), color), str(move)

    def test_simulation_leaves_board_untouched(self) -> None:
        pos = position_from_fen(STARTING_FEN)
        before = position_to_fen(pos)
        for move in all_legal_moves(pos.board, Color.WHITE):
            simulate(pos.board, move)
        assert position_to_fen(pos) == before


class TestHasLegalMove:
    def test_start(self) -> None:
        pos = position_from_fen(STARTING_FEN)
        assert has_legal_move(pos.board, Color.WHITE)
        assert len(all_legal_moves(pos.board, Color.WHITE)) == 20

    def test_stalemated_side(self) -> None:
        pos = position_from_fen("7k/8/5KQ1/8/8/8/8/8 b - - 0 1")
        assert not has_legal_move(pos.board, Color.BLACK)
        assert all_legal_moves(pos.board, Color.BLACK) == set()
