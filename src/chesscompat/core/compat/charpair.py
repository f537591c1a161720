"""Compact 2-character move codes, as used by scalachess.

Each move becomes two characters whose code points encode it:

    drop:       (35 + to,   35 + 64 + 40 + drop_index(role))
    normal:     (35 + from, 35 + to)
    promotion:  (35 + from, 35 + 64 + 8 * promotion_index(role) + file(to))

The offset of 35 keeps every code point printable. The second code point
falls in one of three disjoint ranges, which identifies the move kind:

    PLAIN_RANGE      35..98
    PROMOTION_RANGE  99..138
    DROP_RANGE       139..143

Decoding reads the kind from the second character. A promotion only stores
the destination file; the destination rank is the promotion rank next to
the origin (7th rank to 8th, 2nd rank to 1st).
"""

from enum import StrEnum
from typing import assert_never

from chesscompat.core.chess.types import DropMove, Move, NormalMove, Role
from chesscompat.core.errors import CharPairDecodeError
from chesscompat.core.utils.squares import make_square, square_file, square_rank

CHAR_OFFSET = 35
PROMOTION_OFFSET = CHAR_OFFSET + 64
DROP_OFFSET = PROMOTION_OFFSET + 8 * 5

# Index order is part of the wire format.
PROMOTION_ROLES = (Role.QUEEN, Role.ROOK, Role.BISHOP, Role.KNIGHT, Role.KING)
DROP_ROLES = (Role.QUEEN, Role.ROOK, Role.BISHOP, Role.KNIGHT, Role.PAWN)

SQUARE_RANGE = range(CHAR_OFFSET, CHAR_OFFSET + 64)
PLAIN_RANGE = SQUARE_RANGE
PROMOTION_RANGE = range(PROMOTION_OFFSET, PROMOTION_OFFSET + 8 * len(PROMOTION_ROLES))
DROP_RANGE = range(DROP_OFFSET, DROP_OFFSET + len(DROP_ROLES))


class MoveKind(StrEnum):
    """Move kind recoverable from a char pair's second code point."""

    NORMAL = "normal"
    PROMOTION = "promotion"
    DROP = "drop"


def encode_char_pair(move: Move) -> str:
    """Encode a move as a 2-character string.

    Args:
        move: A well-formed drop or normal move.

    Returns:
        Two characters whose code points encode the move (see module docs).
    """
    match move:
        case DropMove(role=role, to_square=to_square):
            return chr(CHAR_OFFSET + to_square) + chr(DROP_OFFSET + DROP_ROLES.index(role))
        case NormalMove(from_square=from_square, to_square=to_square, promotion=None):
            return chr(CHAR_OFFSET + from_square) + chr(CHAR_OFFSET + to_square)
        case NormalMove(from_square=from_square, to_square=to_square, promotion=promotion):
            second = PROMOTION_OFFSET + 8 * PROMOTION_ROLES.index(promotion) + square_file(to_square)
            return chr(CHAR_OFFSET + from_square) + chr(second)
        case _:
            assert_never(move)


def char_pair_kind(code: str) -> MoveKind:
    """Classify a char pair by the range of its second code point.

    Raises:
        CharPairDecodeError: If the code is not two characters long or the
            second code point is outside all three ranges.
    """
    _check_length(code)
    point = ord(code[1])
    if point in PLAIN_RANGE:
        return MoveKind.NORMAL
    if point in PROMOTION_RANGE:
        return MoveKind.PROMOTION
    if point in DROP_RANGE:
        return MoveKind.DROP
    msg = f"Second code point {point} is outside every move range"
    raise CharPairDecodeError(msg)


def decode_char_pair(code: str) -> Move:
    """Decode a 2-character string produced by :func:`encode_char_pair`.

    Args:
        code: Two-character move code.

    Returns:
        The decoded move.

    Raises:
        CharPairDecodeError: If the code is malformed, or a promotion does
            not start on the 2nd or 7th rank.
    """
    kind = char_pair_kind(code)
    first = ord(code[0])
    if first not in SQUARE_RANGE:
        msg = f"First code point {first} is not a square (expected {SQUARE_RANGE.start}..{SQUARE_RANGE.stop - 1})"
        raise CharPairDecodeError(msg)

    square = first - CHAR_OFFSET
    second = ord(code[1])

    if kind is MoveKind.DROP:
        return DropMove(role=DROP_ROLES[second - DROP_OFFSET], to_square=square)

    if kind is MoveKind.NORMAL:
        return NormalMove(from_square=square, to_square=second - CHAR_OFFSET)

    role_index, to_file = divmod(second - PROMOTION_OFFSET, 8)
    return NormalMove(
        from_square=square,
        to_square=make_square(to_file, _promotion_rank(square)),
        promotion=PROMOTION_ROLES[role_index],
    )


def _check_length(code: str) -> None:
    if len(code) != 2:
        msg = f"Char pair must be exactly 2 characters (got {len(code)}: {code!r})"
        raise CharPairDecodeError(msg)


def _promotion_rank(from_square: int) -> int:
    rank = square_rank(from_square)
    if rank == 6:
        return 7
    if rank == 1:
        return 0
    msg = f"Promotion from rank {rank + 1} cannot reach a promotion rank in one move"
    raise CharPairDecodeError(msg)
