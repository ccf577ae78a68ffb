"""Coordinate type and board-geometry helpers.

Board layout (row-major, Black at the top):
    row 0 = rank 8:  a8=(0, 0), b8=(0, 1), ..., h8=(0, 7)
    ...
    row 7 = rank 1:  a1=(7, 0), b1=(7, 1), ..., h1=(7, 7)

White pawns advance toward row 0, Black pawns toward row 7.
"""

from __future__ import annotations

from typing import NamedTuple, TypeAlias

from chesscore.core.errors import InvalidCoordinateError

BOARD_SIZE = 8


class Coordinate(NamedTuple):
    """A ``(row, col)`` board cell."""

    row: int
    col: int

    @property
    def on_board(self) -> bool:
        return 0 <= self.row < BOARD_SIZE and 0 <= self.col < BOARD_SIZE

    def step(self, drow: int, dcol: int) -> Coordinate:
        """Neighbouring cell, or :data:`OFF_BOARD` past the edge."""
        row = self.row + drow
        col = self.col + dcol
        if 0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE:
            return Coordinate(row, col)
        return OFF_BOARD

    def __str__(self) -> str:
        if not self.on_board:
            return "-"
        return square_name(self)


OFF_BOARD = Coordinate(-1, -1)

CoordinateLike: TypeAlias = Coordinate | tuple[int, int] | str


def square_name(coord: Coordinate) -> str:
    """Algebraic name, e.g. (7, 0) → 'a1', (0, 7) → 'h8'."""
    row, col = coord
    return chr(ord("a") + col) + str(BOARD_SIZE - row)


def parse_square(name: str) -> Coordinate:
    """Parse an algebraic square name, e.g. 'e4' → (4, 4)."""
    if len(name) != 2 or name[0] not in "abcdefgh" or name[1] not in "12345678":
        raise InvalidCoordinateError(f"Invalid square name: {name!r}")
    return Coordinate(BOARD_SIZE - int(name[1]), ord(name[0]) - ord("a"))


def coerce_coordinate(value: CoordinateLike) -> Coordinate:
    """Normalise *value* to an on-board :class:`Coordinate`.

    Accepts a :class:`Coordinate`, a plain ``(row, col)`` pair, or an
    algebraic square name.
    """
    if isinstance(value, str):
        return parse_square(value)
    try:
        row, col = value
    except (TypeError, ValueError):
        raise InvalidCoordinateError(f"Not a coordinate: {value!r}") from None
    if not isinstance(row, int) or not isinstance(col, int):
        raise InvalidCoordinateError(f"Coordinate components must be int: {value!r}")
    coord = Coordinate(row, col)
    if not coord.on_board:
        raise InvalidCoordinateError(f"Coordinate off the board: ({row}, {col})")
    return coord


def all_coordinates() -> list[Coordinate]:
    """Every board cell, row by row from a8 to h1."""
    return [Coordinate(r, c) for r in range(BOARD_SIZE) for c in range(BOARD_SIZE)]


# ── Named square constants ──────────────────────────────────────────────────

A8, B8, C8, D8, E8, F8, G8, H8 = (Coordinate(0, c) for c in range(8))
A7, B7, C7, D7, E7, F7, G7, H7 = (Coordinate(1, c) for c in range(8))
A6, B6, C6, D6, E6, F6, G6, H6 = (Coordinate(2, c) for c in range(8))
A5, B5, C5, D5, E5, F5, G5, H5 = (Coordinate(3, c) for c in range(8))
A4, B4, C4, D4, E4, F4, G4, H4 = (Coordinate(4, c) for c in range(8))
A3, B3, C3, D3, E3, F3, G3, H3 = (Coordinate(5, c) for c in range(8))
A2, B2, C2, D2, E2, F2, G2, H2 = (Coordinate(6, c) for c in range(8))
A1, B1, C1, D1, E1, F1, G1, H1 = (Coordinate(7, c) for c in range(8))
