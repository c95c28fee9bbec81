"""Tests for pseudo-legal destination selection and attack detection."""

from chessrules.core.board import Board
from chessrules.core.enums import Color, PieceKind
from chessrules.core.piece import Piece
from chessrules.core.placement import board_from_placement
from chessrules.core.selector import MoveSelector
from chessrules.core.types import (
    A1, A4, B1, B2, B3, B4, C1, C2, C4, D1, D2, D3, D4, D5, D6, D8,
    E1, E2, E3, E4, E5, E6, E7, E8, F1, F4, F5, G1, G4, G8, H1, H2, H8,
    Coordinate,
)


def _board(layout: dict[Coordinate, Piece]) -> Board:
    return Board.from_layout(layout)


def _w(kind: PieceKind) -> Piece:
    return Piece(kind, Color.WHITE)


def _b(kind: PieceKind) -> Piece:
    return Piece(kind, Color.BLACK)


class TestRayPieces:
    def test_rook_on_empty_board(self) -> None:
        board = _board({A1: _w(PieceKind.ROOK)})
        assert len(MoveSelector(board).destinations(A1)) == 14

    def test_queen_on_empty_board(self) -> None:
        board = _board({D4: _w(PieceKind.QUEEN)})
        assert len(MoveSelector(board).destinations(D4)) == 27

    def test_bishop_on_empty_board(self) -> None:
        board = _board({D4: _w(PieceKind.BISHOP)})
        assert len(MoveSelector(board).destinations(D4)) == 13

    def test_rook_collisions(self) -> None:
        board = _board(
            {
                D4: _w(PieceKind.ROOK),
                D6: _w(PieceKind.PAWN),
                F4: _b(PieceKind.PAWN),
            }
        )
        moves = set(MoveSelector(board).destinations(D4))
        assert moves == {D5, E4, F4, C4, B4, A4, D3, D2, D1}
        assert D6 not in moves  # friendly piece stops the ray before it
        assert G4 not in moves  # enemy piece stops the ray after it

    def test_bishop_blocked_in_corner(self) -> None:
        board = _board({A1: _w(PieceKind.BISHOP), B2: _w(PieceKind.PAWN)})
        assert MoveSelector(board).destinations(A1) == []

    def test_bishop_captures_adjacent_enemy(self) -> None:
        board = _board({A1: _w(PieceKind.BISHOP), B2: _b(PieceKind.PAWN)})
        assert MoveSelector(board).destinations(A1) == [B2]


class TestLeapers:
    def test_knight_in_corner(self) -> None:
        board = _board({A1: _w(PieceKind.KNIGHT)})
        assert set(MoveSelector(board).destinations(A1)) == {B3, C2}

    def test_knight_jumps_over_pieces(self) -> None:
        board = Board.initial()
        assert set(MoveSelector(board).destinations(G1)) == {
            Coordinate(2, 5),
            Coordinate(2, 7),
        }

    def test_knight_friendly_target_excluded(self) -> None:
        board = _board({A1: _w(PieceKind.KNIGHT), C2: _w(PieceKind.PAWN)})
        assert MoveSelector(board).destinations(A1) == [B3]

    def test_knight_enemy_target_included(self) -> None:
        board = _board({A1: _w(PieceKind.KNIGHT), C2: _b(PieceKind.PAWN)})
        assert set(MoveSelector(board).destinations(A1)) == {B3, C2}

    def test_king_in_middle(self) -> None:
        king = _w(PieceKind.KING)
        king.mark_moved()
        board = _board({D4: king})
        assert len(MoveSelector(board).destinations(D4)) == 8

    def test_empty_square_has_no_destinations(self) -> None:
        assert MoveSelector(Board()).destinations(E4) == []

    def test_off_board_square_has_no_destinations(self) -> None:
        assert MoveSelector(Board.initial()).destinations(Coordinate(-1, 4)) == []


class TestPawn:
    def test_initial_single_and_double(self) -> None:
        board = Board.initial()
        assert MoveSelector(board).destinations(E2) == [E3, E4]

    def test_black_moves_down_the_board(self) -> None:
        board = Board.initial()
        assert MoveSelector(board).destinations(E7) == [E6, E5]

    def test_blocked_pawn(self) -> None:
        board = _board({E2: _w(PieceKind.PAWN), E3: _b(PieceKind.KNIGHT)})
        assert MoveSelector(board).destinations(E2) == []

    def test_double_step_blocked_on_second_square(self) -> None:
        board = _board({E2: _w(PieceKind.PAWN), E4: _b(PieceKind.KNIGHT)})
        assert MoveSelector(board).destinations(E2) == [E3]

    def test_moved_pawn_has_no_double_step(self) -> None:
        pawn = _w(PieceKind.PAWN)
        pawn.mark_moved()
        board = _board({E2: pawn})
        assert MoveSelector(board).destinations(E2) == [E3]

    def test_no_double_step_off_start_rank(self) -> None:
        board = _board({E3: _w(PieceKind.PAWN)})
        assert MoveSelector(board).destinations(E3) == [E4]

    def test_captures_only_enemies(self) -> None:
        board = _board(
            {
                E4: _w(PieceKind.PAWN),
                D5: _b(PieceKind.PAWN),
                F5: _w(PieceKind.KNIGHT),
            }
        )
        assert set(MoveSelector(board).destinations(E4)) == {E5, D5}

    def test_black_capture(self) -> None:
        board = _board({D5: _b(PieceKind.PAWN), E4: _w(PieceKind.PAWN)})
        assert set(MoveSelector(board).destinations(D5)) == {Coordinate(3, 3), E4}

    def test_en_passant_candidate(self) -> None:
        board = board_from_placement("4k3/8/8/3pP3/8/8/8/4K3")
        board.set_passant(D6)
        assert set(MoveSelector(board).destinations(E5)) == {E6, D6}

    def test_en_passant_needs_adjacent_victim(self) -> None:
        board = board_from_placement("4k3/8/8/3p3P/8/8/8/4K3")
        board.set_passant(D6)
        assert D6 not in MoveSelector(board).destinations(Coordinate(4, 7))

    def test_en_passant_not_for_own_colour(self) -> None:
        board = board_from_placement("4k3/8/8/8/3PP3/8/8/4K3")
        board.set_passant(E3)
        assert E3 not in MoveSelector(board).destinations(D4)


class TestCastlingCandidates:
    def test_kingside_candidate(self) -> None:
        board = _board({E1: _w(PieceKind.KING), H1: _w(PieceKind.ROOK)})
        assert G1 in MoveSelector(board).destinations(E1)

    def test_queenside_candidate(self) -> None:
        board = _board({E1: _w(PieceKind.KING), A1: _w(PieceKind.ROOK)})
        assert C1 in MoveSelector(board).destinations(E1)

    def test_castle_listed_after_adjacent_moves(self) -> None:
        board = _board({E1: _w(PieceKind.KING), H1: _w(PieceKind.ROOK)})
        moves = MoveSelector(board).destinations(E1)
        assert moves[-1] == G1
        assert moves.index(F1) < moves.index(G1)

    def test_black_kingside_candidate(self) -> None:
        board = _board({E8: _b(PieceKind.KING), H8: _b(PieceKind.ROOK)})
        assert G8 in MoveSelector(board).destinations(E8)

    def test_blocked_path(self) -> None:
        board = _board(
            {E1: _w(PieceKind.KING), A1: _w(PieceKind.ROOK), B1: _w(PieceKind.KNIGHT)}
        )
        assert C1 not in MoveSelector(board).destinations(E1)

    def test_moved_rook(self) -> None:
        rook = _w(PieceKind.ROOK)
        rook.mark_moved()
        board = _board({E1: _w(PieceKind.KING), H1: rook})
        assert G1 not in MoveSelector(board).destinations(E1)

    def test_moved_king(self) -> None:
        king = _w(PieceKind.KING)
        king.mark_moved()
        board = _board({E1: king, H1: _w(PieceKind.ROOK)})
        assert G1 not in MoveSelector(board).destinations(E1)

    def test_enemy_rook_in_corner(self) -> None:
        board = _board({E1: _w(PieceKind.KING), H1: _b(PieceKind.ROOK)})
        assert G1 not in MoveSelector(board).destinations(E1)

    def test_king_off_e_file(self) -> None:
        board = _board(
            {D1: _w(PieceKind.KING), H1: _w(PieceKind.ROOK), A1: _w(PieceKind.ROOK)}
        )
        moves = MoveSelector(board).destinations(D1)
        assert F1 in moves
        assert B1 in moves

    def test_king_too_close_to_rook(self) -> None:
        board = _board(
            {G1: _w(PieceKind.KING), H1: _w(PieceKind.ROOK), A1: _w(PieceKind.ROOK)}
        )
        moves = MoveSelector(board).destinations(G1)
        assert Coordinate(0, 8) not in moves
        assert E1 in moves

    def test_destination_never_on_rook(self) -> None:
        board = _board({C1: _w(PieceKind.KING), A1: _w(PieceKind.ROOK)})
        moves = MoveSelector(board).destinations(C1)
        assert A1 not in moves
        assert moves == [D1, B1, C2, D2, B2]

    def test_candidate_ignores_attacks(self) -> None:
        # Occupancy only: the rook on f8 is the legality filter's business.
        board = _board(
            {E1: _w(PieceKind.KING), H1: _w(PieceKind.ROOK), Coordinate(7, 5): _b(PieceKind.ROOK)}
        )
        assert G1 in MoveSelector(board).destinations(E1)


class TestAttacks:
    def test_pawn_attacks_diagonally_only(self) -> None:
        board = _board({E4: _w(PieceKind.PAWN)})
        sel = MoveSelector(board)
        assert sel.is_square_attacked(D5, Color.WHITE)
        assert sel.is_square_attacked(F5, Color.WHITE)
        assert not sel.is_square_attacked(E5, Color.WHITE)
        assert not sel.is_square_attacked(D3, Color.WHITE)

    def test_black_pawn_attacks_downward(self) -> None:
        board = _board({D5: _b(PieceKind.PAWN)})
        sel = MoveSelector(board)
        assert sel.is_square_attacked(E4, Color.BLACK)
        assert sel.is_square_attacked(C4, Color.BLACK)
        assert not sel.is_square_attacked(E6, Color.BLACK)

    def test_knight_attack(self) -> None:
        board = _board({A1: _b(PieceKind.KNIGHT)})
        sel = MoveSelector(board)
        assert sel.is_square_attacked(C2, Color.BLACK)
        assert not sel.is_square_attacked(C2, Color.WHITE)

    def test_ray_blocked(self) -> None:
        board = _board({D1: _b(PieceKind.ROOK), D4: _w(PieceKind.PAWN)})
        sel = MoveSelector(board)
        assert sel.is_square_attacked(D4, Color.BLACK)
        assert not sel.is_square_attacked(D5, Color.BLACK)

    def test_queen_diagonal(self) -> None:
        board = _board({A1: _b(PieceKind.QUEEN)})
        assert MoveSelector(board).is_square_attacked(H8, Color.BLACK)

    def test_king_attack(self) -> None:
        board = _board({E1: _w(PieceKind.KING)})
        sel = MoveSelector(board)
        assert sel.is_square_attacked(E2, Color.WHITE)
        assert not sel.is_square_attacked(E3, Color.WHITE)

    def test_initial_position(self) -> None:
        sel = MoveSelector(Board.initial())
        assert sel.is_square_attacked(Coordinate(2, 4), Color.WHITE)
        assert not sel.is_square_attacked(E4, Color.WHITE)
        assert not sel.is_square_attacked(D8, Color.WHITE)
