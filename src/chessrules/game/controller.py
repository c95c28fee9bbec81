"""GameController: the central orchestrator of a chess game.

Coordinates: Players, GameState, Rules.
Emits events via simple callbacks so the UI / tests can subscribe.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from chessrules.core.board import Board
from chessrules.core.enums import Color, GameResult, MoveOutcome
from chessrules.core.types import Coordinate
from chessrules.game.interfaces import GamePhase, IPlayer
from chessrules.game.state import GameState, MoveRecord

_LOGGER = logging.getLogger(__name__)

DEFAULT_MAX_PLIES = 400

# ── Event definitions ────────────────────────────────────────────────────────

MoveCallback = Callable[[MoveRecord, "GameState"], None]
GameOverCallback = Callable[[GameResult], None]
PhaseCallback = Callable[[GamePhase], None]


@dataclass
class GameEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_move: list[MoveCallback] = field(default_factory=list)
    on_game_over: list[GameOverCallback] = field(default_factory=list)
    on_phase_changed: list[PhaseCallback] = field(default_factory=list)


# ── Controller ───────────────────────────────────────────────────────────────


class GameController:
    """Orchestrates a full chess game: validates moves, switches turns,
    asks computer players for moves, notifies listeners.

    Methods are designed to be called from a single thread. Computer players
    move only when :meth:`advance` (or :meth:`play_until_over`) is called, so
    a UI can redraw between plies.
    """

    __slots__ = ("_state", "_players", "events")

    def __init__(self) -> None:
        self._state = GameState()
        self._players: dict[Color, IPlayer] = {}
        self.events = GameEvents()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def current_player(self) -> IPlayer | None:
        return self._players.get(self._state.side_to_move)

    def player(self, color: Color) -> IPlayer | None:
        return self._players.get(color)

    # ── Game lifecycle ───────────────────────────────────────────────────

    def new_game(
        self,
        white: IPlayer,
        black: IPlayer,
        placement: str | None = None,
        side_to_move: Color = Color.WHITE,
        board: Board | None = None,
    ) -> None:
        self._players = {Color.WHITE: white, Color.BLACK: black}
        self._state = GameState()
        self._state.setup(placement, side_to_move, board)
        _LOGGER.debug("New game: %s vs %s", white.name, black.name)

        if self._state.is_game_over:
            self._emit_game_over(self._state.result)
            return
        self._update_phase()

    def submit_move(self, from_sq: Coordinate, to_sq: Coordinate) -> MoveOutcome:
        """Play a move for the side to move; the board is unchanged on rejection."""
        if self._state.is_game_over or self._state.phase == GamePhase.NOT_STARTED:
            return MoveOutcome.ILLEGAL

        outcome = self._state.play(from_sq, to_sq)
        if not outcome.ok:
            return outcome

        self._emit_move(self._state.move_history[-1])

        if self._state.is_game_over:
            self._emit_game_over(self._state.result)
        else:
            self._update_phase()
        return outcome

    def advance(self) -> MoveOutcome | None:
        """Let the current computer player make one move.

        Returns ``None`` when it is a human's turn or the game is over.
        """
        cp = self.current_player
        if self._state.is_game_over or cp is None or cp.is_human:
            return None

        move = cp.request_move(self._state.board)
        if move is None:
            return None
        return self.submit_move(move.from_sq, move.to_sq)

    def play_until_over(self, max_plies: int = DEFAULT_MAX_PLIES) -> GameResult:
        """Run computer turns until the game ends, a human must move, or
        *max_plies* half-moves have been played in total.
        """
        while self._state.ply_count < max_plies:
            if self.advance() is None:
                break
        return self._state.result

    def resign(self, color: Color) -> None:
        if self._state.is_game_over:
            return
        self._state.resign(color)
        self._emit_game_over(self._state.result)

    # ── Internal helpers ─────────────────────────────────────────────────

    def _update_phase(self) -> None:
        cp = self.current_player
        phase = (
            GamePhase.THINKING
            if cp is not None and not cp.is_human
            else GamePhase.AWAITING_MOVE
        )
        self._state.phase = phase
        self._emit_phase(phase)

    def _emit_move(self, record: MoveRecord) -> None:
        for cb in self.events.on_move:
            cb(record, self._state)

    def _emit_game_over(self, result: GameResult) -> None:
        _LOGGER.info("Game over after %d plies: %s", self._state.ply_count, result.name)
        self._emit_phase(GamePhase.GAME_OVER)
        for cb in self.events.on_game_over:
            cb(result)

    def _emit_phase(self, phase: GamePhase) -> None:
        for cb in self.events.on_phase_changed:
            cb(phase)
