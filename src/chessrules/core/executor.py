"""Committing moves to a board, and reversible move simulation."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from typing import TYPE_CHECKING

from chessrules.core.enums import MoveKind, PieceKind
from chessrules.core.move import Move, castle_rook_squares, passant_victim_square
from chessrules.core.piece import Piece
from chessrules.core.types import Coordinate

if TYPE_CHECKING:
    from chessrules.core.board import Board

_LOGGER = logging.getLogger(__name__)


def execute_move(board: Board, move: Move) -> None:
    """Apply a classified *move* to the authoritative *board*.

    Precondition: the move was produced by the legality filter for the
    current board. Nothing is re-validated; a missing mover or castling
    rook trips an assertion instead of corrupting the board.
    """
    piece = board[move.from_sq]
    assert piece is not None, f"No piece on {move.from_sq}"

    if move.kind == MoveKind.CASTLE:
        rook_from, rook_to = castle_rook_squares(move.from_sq, move.to_sq)
        rook = board[rook_from]
        assert rook is not None and rook.kind == PieceKind.ROOK, "Castle without rook"
        _relocate(board, move.from_sq, move.to_sq)
        _relocate(board, rook_from, rook_to)
    elif move.kind == MoveKind.PROMOTION:
        board[move.from_sq] = None
        board[move.to_sq] = Piece(PieceKind.QUEEN, piece.color)
    elif move.kind == MoveKind.EN_PASSANT:
        _relocate(board, move.from_sq, move.to_sq)
        board[passant_victim_square(move.from_sq, move.to_sq)] = None
        board.clear_passant()
    else:
        _relocate(board, move.from_sq, move.to_sq)
        if (
            piece.kind == PieceKind.PAWN
            and abs(move.to_sq.rank - move.from_sq.rank) == 2
        ):
            skipped = Coordinate(
                (move.from_sq.rank + move.to_sq.rank) // 2, move.from_sq.file
            )
            board.set_passant(skipped)

    _LOGGER.debug("Executed %s move %s", move.kind.name.lower(), move)


def _relocate(board: Board, from_sq: Coordinate, to_sq: Coordinate) -> None:
    piece = board[from_sq]
    assert piece is not None
    board[from_sq] = None
    board[to_sq] = piece
    piece.mark_moved()


@contextmanager
def simulate(board: Board, move: Move) -> Iterator[None]:
    """Temporarily place the mover on its destination.

    Every write is recorded as ``(square, prior piece)`` and rewound in
    reverse on exit, so the board is identical afterwards. For en passant the
    captured pawn is lifted too. The rook of a castle and promotion are not
    simulated; neither changes whether the mover's king is attacked.
    ``moved`` flags and en-passant state are never touched.
    """
    undo_log: list[tuple[Coordinate, Piece | None]] = []

    def put(sq: Coordinate, piece: Piece | None) -> None:
        undo_log.append((sq, board[sq]))
        board[sq] = piece

    try:
        mover = board[move.from_sq]
        put(move.from_sq, None)
        put(move.to_sq, mover)
        if move.kind == MoveKind.EN_PASSANT:
            put(passant_victim_square(move.from_sq, move.to_sq), None)
        yield
    finally:
        for sq, prior in reversed(undo_log):
            board[sq] = prior
