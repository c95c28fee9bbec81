"""Core enumerations for the chess domain."""

from __future__ import annotations

from enum import IntEnum


class Color(IntEnum):
    """Side color."""

    WHITE = 0
    BLACK = 1

    @property
    def opposite(self) -> Color:
        return Color(1 - self.value)

    def __str__(self) -> str:
        return self.name.lower()


class PieceKind(IntEnum):
    """Chess piece kinds ordered by conventional value.

    Only the move-selection strategy compares kinds; the rules never do.
    """

    PAWN = 1
    KNIGHT = 2
    BISHOP = 3
    ROOK = 4
    QUEEN = 5
    KING = 6


class MoveKind(IntEnum):
    """Classification of a move that is already known to be legal."""

    REGULAR = 0
    PROMOTION = 1
    EN_PASSANT = 2
    CASTLE = 3


class MoveOutcome(IntEnum):
    """Result of asking the engine to apply a move."""

    OK = 0
    NOT_YOUR_TURN = 1
    NO_PIECE_ON_CELL = 2
    ILLEGAL = 3

    @property
    def ok(self) -> bool:
        return self == MoveOutcome.OK


class GameResult(IntEnum):
    """Outcome of a game."""

    IN_PROGRESS = 0
    WHITE_WINS = 1
    BLACK_WINS = 2
    DRAW = 3

    @classmethod
    def win_for(cls, color: Color) -> GameResult:
        return cls.WHITE_WINS if color == Color.WHITE else cls.BLACK_WINS
