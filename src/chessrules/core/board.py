"""Board - piece placement plus en-passant bookkeeping."""

from __future__ import annotations

from collections.abc import Iterator, Mapping

from chessrules.core.enums import Color, PieceKind
from chessrules.core.errors import KingNotFoundError
from chessrules.core.piece import Piece
from chessrules.core.types import ALL_SQUARES, BOARD_SIZE, Coordinate

_COLOR_COUNT = 2

_BACK_RANK: tuple[PieceKind, ...] = (
    PieceKind.ROOK,
    PieceKind.KNIGHT,
    PieceKind.BISHOP,
    PieceKind.QUEEN,
    PieceKind.KING,
    PieceKind.BISHOP,
    PieceKind.KNIGHT,
    PieceKind.ROOK,
)


class Board:
    """Mutable 8x8 board.

    Squares live in a flat 64-slot list indexed by :attr:`Coordinate.index`.
    King squares are cached and kept in sync by every write.
    """

    __slots__ = ("_squares", "_king_squares", "passant_target", "passant_lifetime")

    def __init__(self) -> None:
        self._squares: list[Piece | None] = [None] * 64
        # [color] -> king square cache (None if king missing).
        self._king_squares: list[Coordinate | None] = [None] * _COLOR_COUNT
        # Square skipped by the last double-stepping pawn.
        self.passant_target: Coordinate | None = None
        # Plies survived by passant_target; 0 means "set this ply".
        self.passant_lifetime = 0

    # -- Element access -----------------------------------------------------

    def __getitem__(self, pos: Coordinate) -> Piece | None:
        return self._squares[self._slot(pos)]

    def __setitem__(self, pos: Coordinate, piece: Piece | None) -> None:
        slot = self._slot(pos)
        old_piece = self._squares[slot]
        if old_piece is not None and old_piece.kind == PieceKind.KING:
            color_idx = int(old_piece.color)
            if self._king_squares[color_idx] == pos:
                self._king_squares[color_idx] = None

        self._squares[slot] = piece

        if piece is not None and piece.kind == PieceKind.KING:
            self._king_squares[int(piece.color)] = Coordinate(pos.rank, pos.file)

    @staticmethod
    def _slot(pos: Coordinate) -> int:
        if not (0 <= pos.rank < BOARD_SIZE and 0 <= pos.file < BOARD_SIZE):
            raise IndexError(f"Square off the board: {tuple(pos)}")
        return pos.rank * BOARD_SIZE + pos.file

    @staticmethod
    def is_on_board(pos: Coordinate) -> bool:
        return 0 <= pos.rank < BOARD_SIZE and 0 <= pos.file < BOARD_SIZE

    def lookup(self, pos: Coordinate) -> Piece | None:
        """Piece on *pos*; ``None`` for empty or off-board squares."""
        if not self.is_on_board(pos):
            return None
        return self._squares[pos.rank * BOARD_SIZE + pos.file]

    def is_empty(self, pos: Coordinate) -> bool:
        return self[pos] is None

    # -- Query helpers ------------------------------------------------------

    def occupied(self) -> Iterator[tuple[Coordinate, Piece]]:
        """``(square, piece)`` for every occupied square, a1 → h8."""
        for sq, piece in zip(ALL_SQUARES, self._squares):
            if piece is not None:
                yield sq, piece

    def pieces_of_color(self, color: Color) -> list[Coordinate]:
        """All squares occupied by *color*, a1 → h8."""
        return [sq for sq, piece in self.occupied() if piece.color == color]

    def pieces(self, color: Color, kind: PieceKind) -> list[Coordinate]:
        """Squares occupied by *color*'s *kind*."""
        return [
            sq
            for sq, piece in self.occupied()
            if piece.color == color and piece.kind == kind
        ]

    def has_king(self, color: Color) -> bool:
        return self._king_squares[int(color)] is not None

    def king_square(self, color: Color) -> Coordinate:
        """Return the king square for *color*."""
        sq = self._king_squares[int(color)]
        if sq is None:
            raise KingNotFoundError(f"No {color.name} king on board")
        return sq

    # -- En passant bookkeeping --------------------------------------------

    @property
    def passant_victim(self) -> Coordinate | None:
        """Square of the pawn that created :attr:`passant_target`."""
        target = self.passant_target
        if target is None:
            return None
        # The target is one rank behind the pawn, relative to the pawn's colour.
        return Coordinate(4 if target.rank == 5 else 3, target.file)

    def set_passant(self, target: Coordinate) -> None:
        self.passant_target = target
        self.passant_lifetime = 0

    def clear_passant(self) -> None:
        self.passant_target = None
        self.passant_lifetime = 0

    def age_passant(self) -> None:
        """Advance the en-passant clock by one completed ply.

        A target set during the ply that just finished survives exactly one
        more ply; an older one is dropped.
        """
        if self.passant_target is None:
            return
        if self.passant_lifetime >= 1:
            self.clear_passant()
        else:
            self.passant_lifetime += 1

    # -- Mutation / copying -------------------------------------------------

    def copy(self) -> Board:
        b = Board()
        b._squares = [p.copy() if p is not None else None for p in self._squares]
        b._king_squares = self._king_squares.copy()
        b.passant_target = self.passant_target
        b.passant_lifetime = self.passant_lifetime
        return b

    def clear(self) -> None:
        self._squares = [None] * 64
        self._king_squares = [None] * _COLOR_COUNT
        self.clear_passant()

    # -- Factory ------------------------------------------------------------

    @classmethod
    def from_layout(cls, layout: Mapping[Coordinate, Piece | None]) -> Board:
        """Build a board from an explicit square → piece mapping."""
        b = cls()
        for pos, piece in layout.items():
            if not b.is_on_board(pos):
                raise ValueError(f"Layout square off the board: {tuple(pos)}")
            b[Coordinate(pos.rank, pos.file)] = piece
        return b

    @classmethod
    def initial(cls) -> Board:
        """Standard starting position."""
        b = cls()
        for f in range(8):
            b[Coordinate(1, f)] = Piece(PieceKind.PAWN, Color.WHITE)
            b[Coordinate(6, f)] = Piece(PieceKind.PAWN, Color.BLACK)
        for f, kind in enumerate(_BACK_RANK):
            b[Coordinate(0, f)] = Piece(kind, Color.WHITE)
            b[Coordinate(7, f)] = Piece(kind, Color.BLACK)
        return b

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return (
            self._squares == other._squares
            and self.passant_target == other.passant_target
            and self.passant_lifetime == other.passant_lifetime
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        rows: list[str] = []
        for rank in range(7, -1, -1):
            row = []
            for file in range(8):
                p = self[Coordinate(rank, file)]
                row.append(str(p) if p else ".")
            rows.append(f"{rank + 1} {' '.join(row)}")
        rows.append("  a b c d e f g h")
        return "\n".join(rows)
