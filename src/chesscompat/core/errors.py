"""Exceptions raised at the parsing and construction edges of chesscompat.

The translation functions themselves are total; these are only raised when
external input (square names, compact codes, python-chess moves) is turned
into the internal value types.
"""


class CompatError(ValueError):
    """Base exception for chesscompat input errors."""

    pass


class InvalidSquareError(CompatError):
    """Raised when a square index or algebraic name is out of range."""

    pass


class InvalidMoveError(CompatError):
    """Raised when a move cannot be represented as a well-formed Move."""

    pass


class CharPairDecodeError(CompatError):
    """Raised when a compact 2-character move code cannot be decoded."""

    pass
