"""Move value object and move classification."""

from __future__ import annotations

from dataclasses import dataclass

from chessrules.core.enums import MoveKind, PieceKind
from chessrules.core.piece import Piece
from chessrules.core.types import MAX_INDEX, Coordinate


@dataclass(frozen=True, slots=True)
class Move:
    """A source/destination pair together with its classification."""

    from_sq: Coordinate
    to_sq: Coordinate
    kind: MoveKind = MoveKind.REGULAR

    def __str__(self) -> str:
        return f"{self.from_sq}{self.to_sq}"


def classify_move(
    piece: Piece,
    target: Piece | None,
    from_sq: Coordinate,
    to_sq: Coordinate,
) -> MoveKind:
    """Classify a move that is assumed to be pseudo-legal.

    *target* is the current occupant of *to_sq*. The first matching rule
    wins: castle, promotion, en passant, regular.
    """
    if piece.kind == PieceKind.KING and abs(from_sq.file - to_sq.file) > 1:
        return MoveKind.CASTLE
    if piece.kind == PieceKind.PAWN:
        if to_sq.adaptive(piece.color).rank == MAX_INDEX:
            return MoveKind.PROMOTION
        if target is None and from_sq.file != to_sq.file:
            return MoveKind.EN_PASSANT
    return MoveKind.REGULAR


def passant_victim_square(from_sq: Coordinate, to_sq: Coordinate) -> Coordinate:
    """Square of the pawn removed by an en-passant capture."""
    return Coordinate(from_sq.rank, to_sq.file)


def castle_rook_squares(
    from_sq: Coordinate, to_sq: Coordinate
) -> tuple[Coordinate, Coordinate]:
    """``(rook_from, rook_to)`` for a castle of the king *from_sq* → *to_sq*."""
    if to_sq.file > from_sq.file:
        return Coordinate(from_sq.rank, MAX_INDEX), Coordinate(from_sq.rank, to_sq.file - 1)
    return Coordinate(from_sq.rank, 0), Coordinate(from_sq.rank, to_sq.file + 1)
