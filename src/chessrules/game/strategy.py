"""One-ply random move selection.

Picks uniformly among a preferred subset of the legal moves:

1. captures that are acceptable trades,
2. otherwise non-king moves that land on an unattacked square,
3. otherwise any legal move.
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import TYPE_CHECKING

from chessrules.core.enums import PieceKind
from chessrules.core.executor import simulate
from chessrules.core.move_generator import MoveGenerator

if TYPE_CHECKING:
    from chessrules.core.board import Board
    from chessrules.core.enums import Color
    from chessrules.core.move import Move

_LOGGER = logging.getLogger(__name__)


@dataclass(slots=True, frozen=True)
class StrategyConfig:
    """Tuning knobs for :class:`RandomStrategy`."""

    prefer_captures: bool = True
    prefer_safe_moves: bool = True
    seed: int | None = None


def is_safe_to_move(board: Board, move: Move) -> bool:
    """After *move*, is the moved piece's destination free from attack?"""
    piece = board[move.from_sq]
    if piece is None:
        return False
    gen = MoveGenerator(board)
    with simulate(board, move):
        return not gen.is_square_attacked(move.to_sq, piece.color.opposite)


class RandomStrategy:
    """Chooses among legal moves at random, with simple preferences."""

    __slots__ = ("_config", "_rng")

    def __init__(self, config: StrategyConfig | None = None) -> None:
        self._config = config or StrategyConfig()
        self._rng = random.Random(self._config.seed)

    @property
    def config(self) -> StrategyConfig:
        return self._config

    def pick_move(self, board: Board, color: Color) -> Move | None:
        """Choose a legal move for *color*, or ``None`` if there is none."""
        legal = MoveGenerator(board).all_legal_moves(color)
        if not legal:
            _LOGGER.warning("No legal move for %s", color)
            return None

        if self._config.prefer_captures:
            captures = self.capturing_moves(board, legal)
            if captures:
                return self._choose(captures, "capture")

        if self._config.prefer_safe_moves:
            safe = self.safe_moves(board, legal)
            if safe:
                return self._choose(safe, "safe")

        return self._choose(legal, "any")

    @staticmethod
    def capturing_moves(board: Board, legal: list[Move]) -> list[Move]:
        """Captures worth making: by the king, onto a safe square, or an even-or-better trade."""
        result: list[Move] = []
        for move in legal:
            mover = board[move.from_sq]
            victim = board[move.to_sq]
            if mover is None or victim is None or victim.color == mover.color:
                continue
            if (
                mover.kind == PieceKind.KING
                or mover.kind <= victim.kind
                or is_safe_to_move(board, move)
            ):
                result.append(move)
        return result

    @staticmethod
    def safe_moves(board: Board, legal: list[Move]) -> list[Move]:
        """Non-king moves whose destination is not attacked afterwards."""
        result: list[Move] = []
        for move in legal:
            mover = board[move.from_sq]
            if mover is None or mover.kind == PieceKind.KING:
                continue
            if is_safe_to_move(board, move):
                result.append(move)
        return result

    def _choose(self, moves: list[Move], pool: str) -> Move:
        move = self._rng.choice(moves)
        _LOGGER.debug("Picked %s from %d %s move(s)", move, len(moves), pool)
        return move
