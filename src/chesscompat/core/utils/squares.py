"""Chess square utilities for board indexing.

This module converts between algebraic notation (e.g., "e4") and the square
indices used throughout chesscompat.

Board indexing convention (rank-major from a1, same as python-chess):
    a1=0,  b1=1,  c1=2,  d1=3,  e1=4,  f1=5,  g1=6,  h1=7
    a2=8,  b2=9,  ...
    ...
    a8=56, b8=57, c8=58, d8=59, e8=60, f8=61, g8=62, h8=63
"""

from chesscompat.core.errors import InvalidSquareError

# File letters and rank numbers for square parsing
FILES = "abcdefgh"
RANKS = "12345678"


def square_file(index: int) -> int:
    """File index 0-7 (a-h) of a square."""
    return index % 8


def square_rank(index: int) -> int:
    """Rank index 0-7 (1-8) of a square."""
    return index // 8


def make_square(file: int, rank: int) -> int:
    """Build a square index from file (0-7) and rank (0-7)."""
    return rank * 8 + file


def is_valid_square(index: int) -> bool:
    """Check whether an integer is a valid square index."""
    return 0 <= index < 64


def square_name(index: int) -> str:
    """Convert a square index to algebraic notation.

    Args:
        index: Square index (0-63, rank-major from a1).

    Returns:
        Algebraic notation for the square (e.g., 'a1', 'h8').

    Raises:
        InvalidSquareError: If the index is out of range.
    """
    if not is_valid_square(index):
        msg = f"Invalid square index: {index}"
        raise InvalidSquareError(msg)

    return FILES[square_file(index)] + RANKS[square_rank(index)]


def parse_square(square: str) -> int:
    """Convert algebraic notation to a square index.

    Args:
        square: Algebraic notation for a square (e.g., 'a1', 'h8').

    Returns:
        Square index (0-63, rank-major from a1).

    Raises:
        InvalidSquareError: If the square notation is invalid.
    """
    if len(square) != 2:
        msg = f"Invalid square notation: {square!r}"
        raise InvalidSquareError(msg)

    file_char, rank_char = square[0].lower(), square[1]

    if file_char not in FILES or rank_char not in RANKS:
        msg = f"Invalid square notation: {square!r}"
        raise InvalidSquareError(msg)

    return make_square(FILES.index(file_char), RANKS.index(rank_char))
