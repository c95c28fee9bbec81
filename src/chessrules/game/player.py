"""Concrete player implementations."""

from __future__ import annotations

from typing import TYPE_CHECKING

from chessrules.core.enums import Color
from chessrules.game.interfaces import IPlayer
from chessrules.game.strategy import RandomStrategy

if TYPE_CHECKING:
    from chessrules.core.board import Board
    from chessrules.core.move import Move


class HumanPlayer(IPlayer):
    """A human participant whose moves come from the presentation layer.

    ``request_move`` returns ``None`` because humans select moves interactively.
    """

    __slots__ = ("_color", "_name")

    def __init__(self, color: Color, name: str = "") -> None:
        self._color = color
        self._name = name or f"Player ({color})"

    @property
    def color(self) -> Color:
        return self._color

    @property
    def name(self) -> str:
        return self._name

    @property
    def is_human(self) -> bool:
        return True

    def request_move(self, board: Board) -> Move | None:
        return None  # Human moves arrive via controller.submit_move()


class ComputerPlayer(IPlayer):
    """A computer participant backed by a :class:`RandomStrategy`."""

    __slots__ = ("_color", "_name", "_strategy")

    def __init__(
        self,
        color: Color,
        name: str = "Computer",
        strategy: RandomStrategy | None = None,
    ) -> None:
        self._color = color
        self._name = name
        self._strategy = strategy or RandomStrategy()

    @property
    def color(self) -> Color:
        return self._color

    @property
    def name(self) -> str:
        return self._name

    @property
    def is_human(self) -> bool:
        return False

    @property
    def strategy(self) -> RandomStrategy:
        return self._strategy

    def request_move(self, board: Board) -> Move | None:
        return self._strategy.pick_move(board, self._color)
