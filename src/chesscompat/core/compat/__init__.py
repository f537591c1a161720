"""Conversions to the formats used by chessground, scalachess and lichess."""

from chesscompat.core.compat.charpair import (
    DROP_RANGE,
    PLAIN_RANGE,
    PROMOTION_RANGE,
    MoveKind,
    char_pair_kind,
    decode_char_pair,
    encode_char_pair,
)
from chesscompat.core.compat.dests import chessground_dests
from chesscompat.core.compat.moves import chessground_move
from chesscompat.core.compat.variants import lichess_rules, lichess_variant

__all__ = [
    "DROP_RANGE",
    "PLAIN_RANGE",
    "PROMOTION_RANGE",
    "MoveKind",
    "char_pair_kind",
    "chessground_dests",
    "chessground_move",
    "decode_char_pair",
    "encode_char_pair",
    "lichess_rules",
    "lichess_variant",
]
