"""Game management layer — controller, players, batch matches.

Quick start::

    from varichess.core import Team
    from varichess.game import AIPlayer, GameController, RandomPlayer

    ctrl = GameController(AIPlayer(Team.WHITE), RandomPlayer(Team.BLACK, seed=1))
    result = ctrl.play()
"""

from varichess.game.controller import GameController, GameEvents, MoveRecord
from varichess.game.interfaces import IPlayer
from varichess.game.match import MatchTally, PlayerFactory, run_match
from varichess.game.player import (
    AIPlayer,
    CapturePlayer,
    HumanPlayer,
    KingCapturePlayer,
    RandomPlayer,
)

__all__ = [
    # Interfaces
    "IPlayer",
    "PlayerFactory",
    # Concrete
    "AIPlayer",
    "CapturePlayer",
    "GameController",
    "GameEvents",
    "HumanPlayer",
    "KingCapturePlayer",
    "MatchTally",
    "MoveRecord",
    "RandomPlayer",
    "run_match",
]
