"""Piece-placement strings: the board field of FEN.

Only the placement is read. Side to move, castling rights and en passant
belong to the caller; castling follows from the pieces' ``moved`` flags.
"""

from __future__ import annotations

from chessrules.core.board import Board
from chessrules.core.errors import PlacementError
from chessrules.core.piece import Piece
from chessrules.core.types import Coordinate

STARTING_PLACEMENT = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR"


def board_from_placement(text: str) -> Board:
    """Parse a placement string into a :class:`Board`.

    Ranks are separated by ``/``, top rank first. Letters ``kqrbnp`` are
    pieces (uppercase White), digits 1–8 are runs of empty squares. Any
    trailing whitespace-separated fields are ignored.
    """
    parts = text.split()
    if not parts:
        raise PlacementError("Empty placement string")
    placement = parts[0]

    ranks = placement.split("/")
    if len(ranks) != 8:
        raise PlacementError(f"Placement must contain 8 ranks: {placement!r}")

    board = Board()
    for rank_idx, rank_text in enumerate(ranks):
        rank = 7 - rank_idx
        file = 0
        for ch in rank_text:
            if ch.isascii() and ch.isdigit():
                step = int(ch)
                if not (1 <= step <= 8):
                    raise PlacementError(f"Invalid placement digit {ch!r}: {placement!r}")
                file += step
            else:
                if file >= 8:
                    raise PlacementError(f"Rank overflow: {placement!r}")
                try:
                    board[Coordinate(rank, file)] = Piece.from_char(ch)
                except ValueError:
                    raise PlacementError(
                        f"Invalid placement character {ch!r}: {placement!r}"
                    ) from None
                file += 1
            if file > 8:
                raise PlacementError(f"Rank overflow: {placement!r}")
        if file != 8:
            raise PlacementError(f"Rank {rank + 1} is {file} squares wide: {placement!r}")

    return board


def board_to_placement(board: Board) -> str:
    """Serialise the pieces of *board* as a placement string."""
    rows: list[str] = []
    for rank in range(7, -1, -1):
        empty = 0
        row = ""
        for file in range(8):
            piece = board[Coordinate(rank, file)]
            if piece is None:
                empty += 1
            else:
                if empty:
                    row += str(empty)
                    empty = 0
                row += str(piece)
        if empty:
            row += str(empty)
        rows.append(row)
    return "/".join(rows)
