"""High-level chess rules: move application, check, checkmate, stalemate."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from chessrules.core.enums import Color, GameResult, MoveOutcome
from chessrules.core.executor import execute_move
from chessrules.core.move_generator import MoveGenerator
from chessrules.core.types import Coordinate

if TYPE_CHECKING:
    from chessrules.core.board import Board

_LOGGER = logging.getLogger(__name__)


class Rules:
    """Static rule-checker that operates on a :class:`Board`."""

    @staticmethod
    def apply_move(
        board: Board, turn: Color, from_sq: Coordinate, to_sq: Coordinate
    ) -> MoveOutcome:
        """Validate and apply ``from_sq → to_sq`` for the side *turn*.

        Rejections leave the board untouched; a side without a king has no
        legal move and gets ``ILLEGAL``. On success the move is executed and
        the en-passant clock advanced by one ply; flipping the side to move
        is the caller's job (see ``GameState.play``).
        """
        piece = board.lookup(from_sq)
        if piece is None:
            _LOGGER.debug("Rejected %s -> %s: no piece on cell", from_sq, to_sq)
            return MoveOutcome.NO_PIECE_ON_CELL
        if piece.color != turn:
            _LOGGER.debug("Rejected %s -> %s: not %s's piece", from_sq, to_sq, turn)
            return MoveOutcome.NOT_YOUR_TURN
        if not board.has_king(turn):
            _LOGGER.debug("Rejected %s -> %s: no %s king on board", from_sq, to_sq, turn)
            return MoveOutcome.ILLEGAL

        gen = MoveGenerator(board)
        for move in gen.legal_move_objects(from_sq, turn):
            if move.to_sq == to_sq:
                execute_move(board, move)
                board.age_passant()
                return MoveOutcome.OK

        _LOGGER.debug("Rejected %s -> %s: illegal", from_sq, to_sq)
        return MoveOutcome.ILLEGAL

    @staticmethod
    def is_in_check(board: Board, color: Color) -> bool:
        """Is *color*'s king attacked?"""
        return MoveGenerator(board).is_in_check(color)

    @staticmethod
    def is_checkmated(board: Board, color: Color) -> bool:
        """Is *color*'s king checkmated?

        True when *color* is in check and none of its pieces has a legal move.
        *color* is always the side that may be mated, never the side that
        just moved.
        """
        gen = MoveGenerator(board)
        if not gen.is_in_check(color):
            return False
        return not gen.has_legal_move(color)

    @staticmethod
    def is_stalemated(board: Board, color: Color) -> bool:
        """*color* is not in check but has no legal move."""
        gen = MoveGenerator(board)
        if gen.is_in_check(color):
            return False
        return not gen.has_legal_move(color)

    @staticmethod
    def game_result(board: Board, side_to_move: Color) -> GameResult:
        """Determine the result with *side_to_move* about to play."""
        gen = MoveGenerator(board)
        if gen.has_legal_move(side_to_move):
            return GameResult.IN_PROGRESS
        if gen.is_in_check(side_to_move):
            return GameResult.win_for(side_to_move.opposite)
        return GameResult.DRAW  # stalemate
