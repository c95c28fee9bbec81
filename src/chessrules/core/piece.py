"""Piece value object."""

from __future__ import annotations

from dataclasses import dataclass

from chessrules.core.enums import Color, PieceKind

# Placement character ↔ (Color, PieceKind)
_CHAR_MAP: dict[str, tuple[Color, PieceKind]] = {
    "P": (Color.WHITE, PieceKind.PAWN),
    "N": (Color.WHITE, PieceKind.KNIGHT),
    "B": (Color.WHITE, PieceKind.BISHOP),
    "R": (Color.WHITE, PieceKind.ROOK),
    "Q": (Color.WHITE, PieceKind.QUEEN),
    "K": (Color.WHITE, PieceKind.KING),
    "p": (Color.BLACK, PieceKind.PAWN),
    "n": (Color.BLACK, PieceKind.KNIGHT),
    "b": (Color.BLACK, PieceKind.BISHOP),
    "r": (Color.BLACK, PieceKind.ROOK),
    "q": (Color.BLACK, PieceKind.QUEEN),
    "k": (Color.BLACK, PieceKind.KING),
}

_PLACEMENT_CHARS: dict[tuple[Color, PieceKind], str] = {
    v: k for k, v in _CHAR_MAP.items()
}


@dataclass(slots=True)
class Piece:
    """A chess piece.

    ``moved`` is sticky: the executor sets it on the first move and nothing
    resets it. It gates castling and the pawn double step.
    """

    kind: PieceKind
    color: Color
    moved: bool = False

    def mark_moved(self) -> None:
        self.moved = True

    def copy(self) -> Piece:
        return Piece(self.kind, self.color, self.moved)

    # ── Serialisation ────────────────────────────────────────────────────

    def __str__(self) -> str:
        """Placement character (uppercase = white, lowercase = black)."""
        return _PLACEMENT_CHARS[(self.color, self.kind)]

    @classmethod
    def from_char(cls, char: str) -> Piece:
        """Create piece from placement character, e.g. 'N' → white knight."""
        try:
            color, kind = _CHAR_MAP[char]
        except KeyError:
            raise ValueError(f"Invalid piece character: {char!r}") from None
        return cls(kind, color)
