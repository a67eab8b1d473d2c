"""Game management layer - configuration and the move-execution controller.

Quick start::

    from chess2d.game import GameController
    from chess2d.core import Side

    ctrl = GameController()
    ctrl.setup(Side.WHITE)
    pawn = ctrl.piece_at((4, 1))
    ctrl.attempt_move(pawn, (4, 3))
"""

from chess2d.game.config import GameConfig
from chess2d.game.controller import BACK_RANKS, PAWN_RANKS, GameController, MoveRecord

__all__ = [
    "BACK_RANKS",
    "GameConfig",
    "GameController",
    "MoveRecord",
    "PAWN_RANKS",
]
