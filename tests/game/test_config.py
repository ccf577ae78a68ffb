"""Tests for GameConfig."""

import dataclasses

import pytest

from chesscore.core.enums import PieceType
from chesscore.core.notation import STARTING_FEN
from chesscore.game.config import GameConfig


class TestGameConfig:
    def test_defaults(self) -> None:
        cfg = GameConfig()
        assert cfg.start_fen == STARTING_FEN
        assert cfg.default_promotion == PieceType.QUEEN

    def test_frozen(self) -> None:
        with pytest.raises(dataclasses.FrozenInstanceError):
            GameConfig().start_fen = "8/8/8/8/8/8/8/8 w - - 0 1"  # type: ignore[misc]

    @pytest.mark.parametrize("pt", [PieceType.KING, PieceType.PAWN])
    def test_invalid_default_promotion(self, pt: PieceType) -> None:
        with pytest.raises(ValueError, match="Cannot promote"):
            GameConfig(default_promotion=pt)

    def test_underpromotion_default_allowed(self) -> None:
        assert GameConfig(default_promotion=PieceType.KNIGHT).default_promotion == PieceType.KNIGHT
