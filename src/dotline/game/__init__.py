"""Game management layer — controller, state machine, turn timer, text.

Quick start::

    from dotline.core import Point
    from dotline.game import GameController

    ctrl = GameController(4, 4)
    ctrl.reset_game(notify=False)
    ctrl.add_move(Point(0, 0))   # VALID_START_NODE
    ctrl.add_move(Point(1, 1))   # VALID_END_NODE
"""

from dotline.game.controller import GameController, GameEvents
from dotline.game.interfaces import GamePhase, IGameController, ITurnTimer
from dotline.game.state import GameState, MoveResponse, StateUpdate
from dotline.game.timer import TurnTimer

__all__ = [
    # Interfaces / enums
    "GamePhase",
    "IGameController",
    "ITurnTimer",
    # Concrete
    "GameController",
    "GameEvents",
    "GameState",
    "MoveResponse",
    "StateUpdate",
    "TurnTimer",
]
