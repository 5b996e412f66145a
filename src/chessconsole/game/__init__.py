"""Game management layer — turn controller, state, collaborator interfaces.

Quick start::

    from chessconsole.game import GameController

    ctrl = GameController()
    ctrl.new_game()
    ctrl.submit_move(parse_square("e2"), parse_square("e4"))
"""

from chessconsole.game.controller import GameController, GameEvents
from chessconsole.game.interfaces import GamePhase, IMoveInput, IRenderer
from chessconsole.game.state import NO_MOVE, GameState

__all__ = [
    # Interfaces
    "GamePhase",
    "IMoveInput",
    "IRenderer",
    # Concrete
    "GameController",
    "GameEvents",
    "GameState",
    "NO_MOVE",
]
