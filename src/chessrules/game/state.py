"""Game state machine. Tracks turn, phase transitions and move history."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from chessrules.core.board import Board
from chessrules.core.enums import Color, GameResult, MoveKind, MoveOutcome
from chessrules.core.move import classify_move
from chessrules.core.move_generator import MoveGenerator
from chessrules.core.placement import STARTING_PLACEMENT, board_from_placement
from chessrules.core.rules import Rules
from chessrules.core.types import Coordinate
from chessrules.game.interfaces import GamePhase

_LOGGER = logging.getLogger(__name__)


@dataclass
class MoveRecord:
    """A single entry in the move history."""

    color: Color
    from_sq: Coordinate
    to_sq: Coordinate
    kind: MoveKind
    was_capture: bool = False
    was_check: bool = False


@dataclass
class GameState:
    """Owns the board and the side to move for one game.

    Pure data and logic; no threading, no UI.
    """

    board: Board = field(default_factory=Board.initial, init=False)
    side_to_move: Color = field(default=Color.WHITE, init=False)
    phase: GamePhase = field(default=GamePhase.NOT_STARTED, init=False)
    result: GameResult = field(default=GameResult.IN_PROGRESS, init=False)
    move_history: list[MoveRecord] = field(default_factory=list, init=False)

    # ── Initialisation ───────────────────────────────────────────────────

    def setup(
        self,
        placement: str | None = None,
        side_to_move: Color = Color.WHITE,
        board: Board | None = None,
    ) -> None:
        """Initialise (or reset) the game from a board or placement string."""
        if board is not None:
            self.board = board
        else:
            self.board = board_from_placement(placement or STARTING_PLACEMENT)
        self.side_to_move = side_to_move
        self.phase = GamePhase.AWAITING_MOVE
        self.result = GameResult.IN_PROGRESS
        self.move_history.clear()
        self._check_game_over()

    # ── Move application ─────────────────────────────────────────────────

    def play(self, from_sq: Coordinate, to_sq: Coordinate) -> MoveOutcome:
        """Play ``from_sq → to_sq`` for the side to move.

        On success the turn passes to the other side and the move is recorded.
        """
        if self.is_game_over:
            return MoveOutcome.ILLEGAL

        mover = self.side_to_move
        piece = self.board.lookup(from_sq)
        target = self.board.lookup(to_sq)
        kind = (
            classify_move(piece, target, from_sq, to_sq)
            if piece is not None
            else MoveKind.REGULAR
        )
        was_capture = target is not None or kind == MoveKind.EN_PASSANT

        outcome = Rules.apply_move(self.board, mover, from_sq, to_sq)
        if not outcome.ok:
            return outcome

        self.side_to_move = mover.opposite
        record = MoveRecord(
            color=mover,
            from_sq=from_sq,
            to_sq=to_sq,
            kind=kind,
            was_capture=was_capture,
            was_check=Rules.is_in_check(self.board, self.side_to_move),
        )
        self.move_history.append(record)
        self._check_game_over()
        return outcome

    # ── Resignation ──────────────────────────────────────────────────────

    def resign(self, color: Color) -> None:
        self.result = GameResult.win_for(color.opposite)
        self.phase = GamePhase.GAME_OVER

    # ── Query helpers ────────────────────────────────────────────────────

    @property
    def is_game_over(self) -> bool:
        return self.phase == GamePhase.GAME_OVER

    @property
    def ply_count(self) -> int:
        """Number of half-moves played."""
        return len(self.move_history)

    def legal_moves(self, pos: Coordinate) -> list[Coordinate]:
        """Legal destinations of the piece on *pos* for the side to move."""
        return MoveGenerator(self.board).legal_moves(pos, self.side_to_move)

    # ── Internal ─────────────────────────────────────────────────────────

    def _check_game_over(self) -> None:
        result = Rules.game_result(self.board, self.side_to_move)
        if result != GameResult.IN_PROGRESS:
            self.result = result
            self.phase = GamePhase.GAME_OVER
            _LOGGER.info("Game over: %s", result.name)
