"""Shared utilities for chesscompat."""

from chesscompat.core.utils.squares import (
    FILES,
    RANKS,
    is_valid_square,
    make_square,
    parse_square,
    square_file,
    square_name,
    square_rank,
)

__all__ = [
    "FILES",
    "RANKS",
    "is_valid_square",
    "make_square",
    "parse_square",
    "square_file",
    "square_name",
    "square_rank",
]
