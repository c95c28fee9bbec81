"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

from collections.abc import Callable

import pytest

from chessrules.core.board import Board
from chessrules.core.placement import board_from_placement


@pytest.fixture
def start_board() -> Board:
    """A fresh standard starting position."""
    return Board.initial()


@pytest.fixture
def place() -> Callable[[str], Board]:
    """Build a board from a placement string."""
    return board_from_placement
