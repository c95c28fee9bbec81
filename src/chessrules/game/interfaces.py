"""Abstract interfaces for the game layer.

The controller depends on these, not on concrete player implementations.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import IntEnum, auto
from typing import TYPE_CHECKING

from chessrules.core.enums import Color

if TYPE_CHECKING:
    from chessrules.core.board import Board
    from chessrules.core.move import Move


class GamePhase(IntEnum):
    """Finite-state-machine states for a chess game."""

    NOT_STARTED = auto()
    AWAITING_MOVE = auto()
    THINKING = auto()  # computer is choosing
    GAME_OVER = auto()


class IPlayer(ABC):
    """Interface for a game participant (human or computer)."""

    @property
    @abstractmethod
    def color(self) -> Color: ...

    @property
    @abstractmethod
    def name(self) -> str: ...

    @property
    @abstractmethod
    def is_human(self) -> bool: ...

    @abstractmethod
    def request_move(self, board: Board) -> Move | None:
        """Ask the player for a move on *board*.

        Humans return ``None``; their moves arrive through the controller.
        Computers return their choice, or ``None`` when they have no move.
        """
