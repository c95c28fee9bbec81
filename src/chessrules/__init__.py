"""chessrules: a chess rules engine with a minimal game layer."""

__version__ = "0.1.0"
