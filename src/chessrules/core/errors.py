"""Exceptions raised by the rules engine.

Recoverable move rejections are reported as :class:`MoveOutcome` values,
not exceptions.
"""

from __future__ import annotations


class ChessError(Exception):
    """Base class for engine errors."""


class KingNotFoundError(ChessError, ValueError):
    """A king-safety query was made for a colour with no king on the board."""


class PlacementError(ChessError, ValueError):
    """A piece-placement string could not be parsed."""
