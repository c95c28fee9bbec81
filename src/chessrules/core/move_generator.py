"""Legal move generation: pseudo-legal moves filtered by king safety."""

from __future__ import annotations

from typing import TYPE_CHECKING

from chessrules.core.enums import Color, MoveKind
from chessrules.core.executor import simulate
from chessrules.core.move import Move, classify_move
from chessrules.core.selector import MoveSelector
from chessrules.core.types import Coordinate

if TYPE_CHECKING:
    from chessrules.core.board import Board


class MoveGenerator:
    """Generates legal moves for pieces on a :class:`Board`.

    Candidates are tested by simulating them on the board itself and
    rewinding before the next one, so the board must not be used by anyone
    else while a query runs.
    """

    __slots__ = ("_board", "_selector")

    def __init__(self, board: Board) -> None:
        self._board = board
        self._selector = MoveSelector(board)

    # -- Public API ---------------------------------------------------------

    def legal_moves(self, pos: Coordinate, turn: Color) -> list[Coordinate]:
        """Legal destinations of the piece on *pos* when *turn* is to move.

        Empty when *pos* is empty or off the board, or holds a piece that
        does not belong to *turn*.
        """
        return [move.to_sq for move in self.legal_move_objects(pos, turn)]

    def legal_move_objects(self, pos: Coordinate, turn: Color) -> list[Move]:
        """Like :meth:`legal_moves` but returns classified :class:`Move` objects."""
        board = self._board
        piece = board.lookup(pos)
        if piece is None or piece.color != turn:
            return []

        color = piece.color
        legal: list[Move] = []
        accepted: set[Coordinate] = set()

        for to_sq in self._selector.destinations(pos):
            kind = classify_move(piece, board[to_sq], pos, to_sq)

            if kind == MoveKind.CASTLE:
                toward_rook = 1 if to_sq.file > pos.file else -1
                transit = Coordinate(pos.rank, pos.file + toward_rook)
                if self.is_in_check(color) or transit not in accepted:
                    continue

            move = Move(pos, to_sq, kind)
            with simulate(board, move):
                safe = not self.is_in_check(color)
            if safe:
                legal.append(move)
                accepted.add(to_sq)
        return legal

    def all_legal_moves(self, color: Color) -> list[Move]:
        """Every legal move of every *color* piece."""
        moves: list[Move] = []
        for sq in self._board.pieces_of_color(color):
            moves.extend(self.legal_move_objects(sq, color))
        return moves

    def has_legal_move(self, color: Color) -> bool:
        return any(
            self.legal_move_objects(sq, color)
            for sq in self._board.pieces_of_color(color)
        )

    # -- Attack detection (public) -----------------------------------------

    def is_in_check(self, color: Color) -> bool:
        """Is *color*'s king attacked by the opponent?"""
        king_sq = self._board.king_square(color)
        return self._selector.is_square_attacked(king_sq, color.opposite)

    def is_square_attacked(self, sq: Coordinate, by_color: Color) -> bool:
        """Is *sq* attacked by any piece of *by_color*?"""
        return self._selector.is_square_attacked(sq, by_color)
