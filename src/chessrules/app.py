"""Console entry point: play a computer-vs-computer game and print it."""

from __future__ import annotations

import argparse
import logging
import sys

from chessrules.core.enums import Color, GameResult
from chessrules.core.errors import ChessError
from chessrules.core.placement import STARTING_PLACEMENT
from chessrules.game.controller import DEFAULT_MAX_PLIES, GameController
from chessrules.game.player import ComputerPlayer
from chessrules.game.state import GameState, MoveRecord
from chessrules.game.strategy import RandomStrategy, StrategyConfig

_LOGGER = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Self-play with the random strategy")
    parser.add_argument(
        "--placement", default=STARTING_PLACEMENT, help="Piece placement string"
    )
    parser.add_argument(
        "--black-first", action="store_true", help="Black moves first"
    )
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    parser.add_argument(
        "--max-plies", type=int, default=DEFAULT_MAX_PLIES, help="Half-move cap"
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="WARNING",
        help="Logging level",
    )
    return parser


def _print_move(record: MoveRecord, state: GameState) -> None:
    suffix = "+" if record.was_check else ""
    print(f"{state.ply_count:>3}. {record.color}: {record.from_sq}{record.to_sq}{suffix}")


def main(argv: list[str] | None = None) -> int:
    """Run one self-play game; returns the process exit code."""
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=args.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    seed = args.seed
    white = ComputerPlayer(
        Color.WHITE, "White", RandomStrategy(StrategyConfig(seed=seed))
    )
    black = ComputerPlayer(
        Color.BLACK,
        "Black",
        RandomStrategy(StrategyConfig(seed=None if seed is None else seed + 1)),
    )

    ctrl = GameController()
    ctrl.events.on_move.append(_print_move)
    try:
        ctrl.new_game(
            white,
            black,
            placement=args.placement,
            side_to_move=Color.BLACK if args.black_first else Color.WHITE,
        )
    except ChessError as exc:
        _LOGGER.error("Cannot start game: %s", exc)
        return 2

    result = ctrl.play_until_over(args.max_plies)
    print(repr(ctrl.state.board))
    if result == GameResult.IN_PROGRESS:
        print(f"Stopped after {ctrl.state.ply_count} plies")
    else:
        print(f"Result: {result.name}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
