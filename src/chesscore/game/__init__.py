"""Game management layer — state machine, configuration, event facade.

Quick start::

    from chesscore.game import GameController

    ctrl = GameController()
    ctrl.events.on_game_over.append(print)
    ctrl.submit_move("f2", "f3")
"""

from chesscore.game.config import GameConfig
from chesscore.game.controller import GameController, GameEvents
from chesscore.game.state import GameState, MoveRecord

__all__ = [
    "GameConfig",
    "GameController",
    "GameEvents",
    "GameState",
    "MoveRecord",
]
