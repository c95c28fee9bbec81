"""Game management layer: controller, players, strategy and state.

Quick start::

    from chessrules.core import Color
    from chessrules.game import ComputerPlayer, GameController, HumanPlayer

    ctrl = GameController()
    ctrl.new_game(
        white=HumanPlayer(Color.WHITE, "Alice"),
        black=ComputerPlayer(Color.BLACK),
    )
"""

from chessrules.game.controller import GameController, GameEvents
from chessrules.game.interfaces import GamePhase, IPlayer
from chessrules.game.player import ComputerPlayer, HumanPlayer
from chessrules.game.state import GameState, MoveRecord
from chessrules.game.strategy import RandomStrategy, StrategyConfig, is_safe_to_move

__all__ = [
    # Interfaces
    "GamePhase",
    "IPlayer",
    # Concrete
    "ComputerPlayer",
    "GameController",
    "GameEvents",
    "GameState",
    "HumanPlayer",
    "MoveRecord",
    "RandomStrategy",
    "StrategyConfig",
    "is_safe_to_move",
]
