"""Tests for Coordinate and square helpers."""

import pytest

from chessrules.core.enums import Color
from chessrules.core.types import (
    A1, E2, E4, E7, H8,
    Coordinate,
    from_index,
    parse_square,
    square_name,
)


class TestCoordinate:
    def test_rank_comes_first(self) -> None:
        assert E2 == Coordinate(1, 4)
        assert E2.rank == 1
        assert E2.file == 4

    def test_named_corners(self) -> None:
        assert A1 == Coordinate(0, 0)
        assert H8 == Coordinate(7, 7)

    def test_index_round_trip(self) -> None:
        for i in range(64):
            assert from_index(i).index == i

    def test_shifted_may_leave_board(self) -> None:
        off = A1.shifted(-1, 0)
        assert off == Coordinate(-1, 0)
        assert not off.is_valid
        assert H8.shifted(-1, -1).is_valid

    def test_checked_rejects_out_of_range(self) -> None:
        with pytest.raises(ValueError, match="out of range"):
            Coordinate.checked(8, 0)
        with pytest.raises(ValueError):
            Coordinate.checked(0, -1)
        assert Coordinate.checked(3, 4) == E4


class TestAdaptive:
    def test_white_is_identity(self) -> None:
        assert E2.adaptive(Color.WHITE) == E2

    def test_black_mirrors_rank(self) -> None:
        assert E7.adaptive(Color.BLACK) == E2
        assert Coordinate(1, 4).adaptive(Color.BLACK) == Coordinate(6, 4)

    def test_black_transform_is_involution(self) -> None:
        for i in range(64):
            sq = from_index(i)
            assert sq.adaptive(Color.BLACK).adaptive(Color.BLACK) == sq


class TestSquareNames:
    def test_parse(self) -> None:
        assert parse_square("e4") == E4
        assert parse_square("a1") == A1

    def test_name(self) -> None:
        assert square_name(E4) == "e4"
        assert str(H8) == "h8"

    def test_off_board_name(self) -> None:
        assert square_name(Coordinate(8, 0)) == "(8, 0)"

    @pytest.mark.parametrize("text", ["", "e", "e9", "i1", "E4", "e44"])
    def test_parse_invalid(self, text: str) -> None:
        with pytest.raises(ValueError, match="Invalid square name"):
            parse_square(text)
