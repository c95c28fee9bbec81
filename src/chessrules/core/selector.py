"""Pseudo-legal destination selection and attack detection."""

from __future__ import annotations

from typing import TYPE_CHECKING

from chessrules.core.enums import Color, PieceKind
from chessrules.core.types import ALL_SQUARES, MAX_INDEX, Coordinate

if TYPE_CHECKING:
    from chessrules.core.board import Board
    from chessrules.core.piece import Piece


KNIGHT_OFFSETS: tuple[tuple[int, int], ...] = (
    (2, 1),
    (2, -1),
    (-2, 1),
    (-2, -1),
    (1, 2),
    (1, -2),
    (-1, 2),
    (-1, -2),
)

KING_OFFSETS: tuple[tuple[int, int], ...] = (
    (0, 1),
    (0, -1),
    (1, 0),
    (-1, 0),
    (1, 1),
    (1, -1),
    (-1, 1),
    (-1, -1),
)

ROOK_DIRS: tuple[tuple[int, int], ...] = ((1, 0), (-1, 0), (0, 1), (0, -1))
BISHOP_DIRS: tuple[tuple[int, int], ...] = ((1, 1), (-1, -1), (1, -1), (-1, 1))
QUEEN_DIRS: tuple[tuple[int, int], ...] = ROOK_DIRS + BISHOP_DIRS


# -- Precomputed lookup tables ---------------------------------------------


def _build_targets(
    offsets: tuple[tuple[int, int], ...],
) -> tuple[tuple[Coordinate, ...], ...]:
    targets: list[tuple[Coordinate, ...]] = []
    for sq in ALL_SQUARES:
        moves = [sq.shifted(dr, df) for dr, df in offsets]
        targets.append(tuple(m for m in moves if m.is_valid))
    return tuple(targets)


def _build_rays(
    directions: tuple[tuple[int, int], ...],
) -> tuple[tuple[tuple[Coordinate, ...], ...], ...]:
    rays_per_square: list[tuple[tuple[Coordinate, ...], ...]] = []
    for sq in ALL_SQUARES:
        square_rays: list[tuple[Coordinate, ...]] = []
        for dr, df in directions:
            ray: list[Coordinate] = []
            step = sq.shifted(dr, df)
            while step.is_valid:
                ray.append(step)
                step = step.shifted(dr, df)
            square_rays.append(tuple(ray))
        rays_per_square.append(tuple(square_rays))
    return tuple(rays_per_square)


_KNIGHT_TARGETS = _build_targets(KNIGHT_OFFSETS)
_KING_TARGETS = _build_targets(KING_OFFSETS)

_ROOK_RAYS = _build_rays(ROOK_DIRS)
_BISHOP_RAYS = _build_rays(BISHOP_DIRS)
_QUEEN_RAYS = _build_rays(QUEEN_DIRS)

_RAYS_BY_KIND = {
    PieceKind.ROOK: _ROOK_RAYS,
    PieceKind.BISHOP: _BISHOP_RAYS,
    PieceKind.QUEEN: _QUEEN_RAYS,
}


class MoveSelector:
    """Enumerates pseudo-legal destinations for the piece on a square.

    Pseudo-legal means consistent with the piece's movement pattern and the
    board's occupancy, ignoring whether the mover's own king ends up attacked.
    """

    __slots__ = ("_board",)

    def __init__(self, board: Board) -> None:
        self._board = board

    # -- Public API ---------------------------------------------------------

    def destinations(self, pos: Coordinate) -> list[Coordinate]:
        """Pseudo-legal destinations of the piece on *pos* (``[]`` if none)."""
        piece = self._board.lookup(pos)
        if piece is None:
            return []

        moves: list[Coordinate] = []
        kind = piece.kind
        if kind == PieceKind.PAWN:
            self._gen_pawn(pos, piece, moves)
        elif kind == PieceKind.KNIGHT:
            self._gen_leaper(_KNIGHT_TARGETS[pos.index], piece.color, moves)
        elif kind == PieceKind.KING:
            self._gen_leaper(_KING_TARGETS[pos.index], piece.color, moves)
            self._gen_castling(pos, piece, moves)
        else:
            self._gen_sliding(_RAYS_BY_KIND[kind][pos.index], piece.color, moves)
        return moves

    def is_square_attacked(self, sq: Coordinate, by_color: Color) -> bool:
        """Could a *by_color* piece capture on *sq*?

        Own-king safety of the attacker is ignored. For squares held by the
        other side this matches membership in the attacker's pseudo-legal
        destinations.
        """
        board = self._board

        # A pawn attacks diagonally forward, so look diagonally backward.
        back = -1 if by_color == Color.WHITE else 1
        for df in (-1, 1):
            p = board.lookup(sq.shifted(back, df))
            if p is not None and p.color == by_color and p.kind == PieceKind.PAWN:
                return True

        for to_sq in _KNIGHT_TARGETS[sq.index]:
            p = board[to_sq]
            if p is not None and p.color == by_color and p.kind == PieceKind.KNIGHT:
                return True

        for to_sq in _KING_TARGETS[sq.index]:
            p = board[to_sq]
            if p is not None and p.color == by_color and p.kind == PieceKind.KING:
                return True

        for rays, slider in (
            (_BISHOP_RAYS[sq.index], PieceKind.BISHOP),
            (_ROOK_RAYS[sq.index], PieceKind.ROOK),
        ):
            for ray in rays:
                for to_sq in ray:
                    p = board[to_sq]
                    if p is None:
                        continue
                    if p.color == by_color and p.kind in (slider, PieceKind.QUEEN):
                        return True
                    break

        return False

    # -- Piece-specific generators (private) -------------------------------

    def _gen_sliding(
        self,
        rays: tuple[tuple[Coordinate, ...], ...],
        color: Color,
        moves: list[Coordinate],
    ) -> None:
        board = self._board
        for ray in rays:
            for to_sq in ray:
                target = board[to_sq]
                if target is None:
                    moves.append(to_sq)
                    continue
                if target.color != color:
                    moves.append(to_sq)
                break

    def _gen_leaper(
        self,
        targets: tuple[Coordinate, ...],
        color: Color,
        moves: list[Coordinate],
    ) -> None:
        board = self._board
        for to_sq in targets:
            target = board[to_sq]
            if target is None or target.color != color:
                moves.append(to_sq)

    def _gen_castling(self, pos: Coordinate, king: Piece, moves: list[Coordinate]) -> None:
        # Occupancy only; attacked squares are rejected by the legality filter.
        # The destination must lie strictly between the king and the rook.
        if king.moved:
            return

        board = self._board
        for rook_file, step in ((MAX_INDEX, 1), (0, -1)):
            rook = board[Coordinate(pos.rank, rook_file)]
            if (
                rook is None
                or rook.kind != PieceKind.ROOK
                or rook.color != king.color
                or rook.moved
            ):
                continue
            between = range(pos.file + step, rook_file, step)
            if len(between) < 2:
                continue
            if all(board[Coordinate(pos.rank, f)] is None for f in between):
                moves.append(Coordinate(pos.rank, pos.file + 2 * step))

    def _gen_pawn(self, pos: Coordinate, pawn: Piece, moves: list[Coordinate]) -> None:
        board = self._board
        color = pawn.color
        # Work in the adaptive frame: forward is always +1 rank.
        local = pos.adaptive(color)

        one_step = local.shifted(1, 0).adaptive(color)
        if one_step.is_valid and board[one_step] is None:
            moves.append(one_step)
            two_step = local.shifted(2, 0).adaptive(color)
            if not pawn.moved and local.rank == 1 and board[two_step] is None:
                moves.append(two_step)

        for df in (1, -1):
            cap_sq = local.shifted(1, df).adaptive(color)
            target = board.lookup(cap_sq)
            if target is not None and target.color != color:
                moves.append(cap_sq)

        target_sq = board.passant_target
        if target_sq is None:
            return
        victim_sq = board.passant_victim
        if victim_sq is None or victim_sq.rank != pos.rank:
            return
        if abs(victim_sq.file - pos.file) != 1:
            return
        victim = board[victim_sq]
        if (
            victim is not None
            and victim.kind == PieceKind.PAWN
            and victim.color != color
            and target_sq == local.shifted(1, victim_sq.file - pos.file).adaptive(color)
        ):
            moves.append(target_sq)
