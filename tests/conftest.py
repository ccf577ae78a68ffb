"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

from collections.abc import Callable

import pytest

from chesscore.core.notation import position_from_fen
from chesscore.core.position import Position
from chesscore.game.state import GameState


@pytest.fixture
def game() -> GameState:
    """A fresh game from the standard starting position."""
    return GameState()


@pytest.fixture
def position_at() -> Callable[[str], Position]:
    """Factory building a :class:`Position` from FEN."""
    return position_from_fen
