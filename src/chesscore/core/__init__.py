"""Core domain layer — pure chess rules with zero external dependencies.

Quick start::

    from chesscore.core import Position, Rules, position_from_fen, STARTING_FEN

    pos = position_from_fen(STARTING_FEN)
    for move in pos.legal_moves():
        print(move)
    print(Rules.status(pos))
"""

from chesscore.core.attacks import attackers_of, is_in_check, is_square_attacked
from chesscore.core.board import Board
from chesscore.core.enums import PROMOTION_TYPES, Color, MoveFlag, PieceType, StatusKind
from chesscore.core.errors import (
    ChessError,
    GameAlreadyOverError,
    IllegalDestinationError,
    IllegalMoveError,
    InvalidCoordinateError,
    InvalidPromotionError,
    NoPieceAtSourceError,
    WrongSideToMoveError,
)
from chesscore.core.legality import all_legal_moves, has_legal_move, legal_moves
from chesscore.core.move import Move
from chesscore.core.move_generator import attack_targets, pseudo_legal_moves
from chesscore.core.notation import (
    STARTING_FEN,
    move_to_san,
    position_from_fen,
    position_to_fen,
)
from chesscore.core.piece import Piece
from chesscore.core.position import Position
from chesscore.core.rules import GameStatus, Rules
from chesscore.core.types import (
    OFF_BOARD,
    Coordinate,
    CoordinateLike,
    coerce_coordinate,
    parse_square,
    square_name,
)

__all__ = [
    # Enums / flags
    "Color",
    "MoveFlag",
    "PieceType",
    "PROMOTION_TYPES",
    "StatusKind",
    # Types / helpers
    "OFF_BOARD",
    "Coordinate",
    "CoordinateLike",
    "coerce_coordinate",
    "parse_square",
    "square_name",
    # Errors
    "ChessError",
    "GameAlreadyOverError",
    "IllegalDestinationError",
    "IllegalMoveError",
    "InvalidCoordinateError",
    "InvalidPromotionError",
    "NoPieceAtSourceError",
    "WrongSideToMoveError",
    # Domain objects
    "Board",
    "GameStatus",
    "Move",
    "Piece",
    "Position",
    "Rules",
    # Move generation / legality
    "all_legal_moves",
    "attack_targets",
    "attackers_of",
    "has_legal_move",
    "is_in_check",
    "is_square_attacked",
    "legal_moves",
    "pseudo_legal_moves",
    # Notation
    "STARTING_FEN",
    "move_to_san",
    "position_from_fen",
    "position_to_fen",
]
