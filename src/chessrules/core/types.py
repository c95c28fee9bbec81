"""Coordinate type and square helpers.

Coordinates are ``(rank, file)`` pairs:
    a1=(0, 0), b1=(0, 1), ..., h1=(0, 7)
    ...
    a8=(7, 0), ..., h8=(7, 7)

Arithmetic may produce off-board coordinates; check :attr:`is_valid`
before using one to index a board.
"""

from __future__ import annotations

from typing import NamedTuple

from chessrules.core.enums import Color

BOARD_SIZE = 8
MAX_INDEX = BOARD_SIZE - 1


class Coordinate(NamedTuple):
    """A board coordinate, rank first."""

    rank: int
    file: int

    @classmethod
    def checked(cls, rank: int, file: int) -> Coordinate:
        """Create a coordinate, rejecting anything off the board."""
        if not (0 <= rank <= MAX_INDEX and 0 <= file <= MAX_INDEX):
            raise ValueError(f"Coordinate out of range: ({rank}, {file})")
        return cls(rank, file)

    @property
    def is_valid(self) -> bool:
        return 0 <= self.rank <= MAX_INDEX and 0 <= self.file <= MAX_INDEX

    @property
    def index(self) -> int:
        """Slot index 0–63 (a1=0, h8=63)."""
        return self.rank * BOARD_SIZE + self.file

    def shifted(self, d_rank: int, d_file: int) -> Coordinate:
        """Offset by ``(d_rank, d_file)``; the result may be off-board."""
        return Coordinate(self.rank + d_rank, self.file + d_file)

    def adaptive(self, color: Color) -> Coordinate:
        """Colour-adaptive view: as-is for White, rank-mirrored for Black.

        Lets "forward" always mean +1 rank and the promotion rank always be 7.
        The transform is its own inverse.
        """
        if color == Color.WHITE:
            return self
        return Coordinate(MAX_INDEX - self.rank, self.file)

    def __str__(self) -> str:
        return square_name(self)


def from_index(index: int) -> Coordinate:
    """Inverse of :attr:`Coordinate.index`."""
    return Coordinate(index >> 3, index & 7)


def square_name(pos: Coordinate) -> str:
    """Human-readable name, e.g. (0, 4) → 'e1'."""
    if not pos.is_valid:
        return f"({pos.rank}, {pos.file})"
    return chr(ord("a") + pos.file) + str(pos.rank + 1)


def parse_square(name: str) -> Coordinate:
    """Parse square name, e.g. 'e4' → (3, 4)."""
    if len(name) != 2 or name[0] not in "abcdefgh" or name[1] not in "12345678":
        raise ValueError(f"Invalid square name: {name!r}")
    return Coordinate(int(name[1]) - 1, ord(name[0]) - ord("a"))


ALL_SQUARES: tuple[Coordinate, ...] = tuple(from_index(i) for i in range(64))

# ── Named square constants ──────────────────────────────────────────────────

A1, B1, C1, D1, E1, F1, G1, H1 = ALL_SQUARES[0:8]
A2, B2, C2, D2, E2, F2, G2, H2 = ALL_SQUARES[8:16]
A3, B3, C3, D3, E3, F3, G3, H3 = ALL_SQUARES[16:24]
A4, B4, C4, D4, E4, F4, G4, H4 = ALL_SQUARES[24:32]
A5, B5, C5, D5, E5, F5, G5, H5 = ALL_SQUARES[32:40]
A6, B6, C6, D6, E6, F6, G6, H6 = ALL_SQUARES[40:48]
A7, B7, C7, D7, E7, F7, G7, H7 = ALL_SQUARES[48:56]
A8, B8, C8, D8, E8, F8, G8, H8 = ALL_SQUARES[56:64]
