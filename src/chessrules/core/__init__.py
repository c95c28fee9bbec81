"""Core domain layer: pure chess rules with no external dependencies.

Quick start::

    from chessrules.core import Color, MoveGenerator, Rules, parse_square
    from chessrules.core import STARTING_PLACEMENT, board_from_placement

    board = board_from_placement(STARTING_PLACEMENT)
    e2, e4 = parse_square("e2"), parse_square("e4")
    MoveGenerator(board).legal_moves(e2, Color.WHITE)   # [e3, e4]
    Rules.apply_move(board, Color.WHITE, e2, e4)        # MoveOutcome.OK
"""

from chessrules.core.board import Board
from chessrules.core.enums import Color, GameResult, MoveKind, MoveOutcome, PieceKind
from chessrules.core.errors import ChessError, KingNotFoundError, PlacementError
from chessrules.core.move import Move, classify_move
from chessrules.core.move_generator import MoveGenerator
from chessrules.core.piece import Piece
from chessrules.core.placement import (
    STARTING_PLACEMENT,
    board_from_placement,
    board_to_placement,
)
from chessrules.core.rules import Rules
from chessrules.core.selector import MoveSelector
from chessrules.core.types import Coordinate, parse_square, square_name

__all__ = [
    # Enums
    "Color",
    "GameResult",
    "MoveKind",
    "MoveOutcome",
    "PieceKind",
    # Errors
    "ChessError",
    "KingNotFoundError",
    "PlacementError",
    # Types / helpers
    "Coordinate",
    "parse_square",
    "square_name",
    # Domain objects
    "Board",
    "Move",
    "MoveGenerator",
    "MoveSelector",
    "Piece",
    "Rules",
    "classify_move",
    # Placement strings
    "STARTING_PLACEMENT",
    "board_from_placement",
    "board_to_placement",
]
