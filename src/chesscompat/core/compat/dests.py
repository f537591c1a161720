"""Legal move destinations in the format used by chessground.

Chessground renders castling either as dragging the king onto its own rook
or as moving the king two squares, depending on its ``rookCastles``
setting. Positions enumerate castling as king-takes-rook; outside chess960
the two-square destinations are appended as well so the widget can filter
by its own setting without re-deriving legality.
"""

from chesscompat.core.chess.types import Position, PositionContext
from chesscompat.core.utils.squares import square_file, square_name

# Rook corner -> king destination, queenside then kingside.
# Only the first hit of each pair is used.
_QUEENSIDE_CASTLING_DESTS = ((0, "c1"), (56, "c8"))
_KINGSIDE_CASTLING_DESTS = ((7, "g1"), (63, "g8"))

_KING_FILE = 4  # e-file


def chessground_dests(
    pos: Position,
    ctx: PositionContext | None = None,
    *,
    chess960: bool = False,
) -> dict[str, list[str]]:
    """Compute the per-origin destination map consumed by chessground.

    Args:
        pos: Position exposing ``ctx()`` and ``all_dests(ctx)``.
        ctx: Context of ``pos``. Computed from ``pos`` if not given.
        chess960: Disable the two-square castling destinations.

    Returns:
        Mapping from origin square name to destination square names, in the
        position's enumeration order. Origins without destinations are
        omitted. For the side-to-move king on the e-file, ``c1``/``c8`` and
        ``g1``/``g8`` are appended after the regular destinations when the
        matching rook corner is a destination.
    """
    if ctx is None:
        ctx = pos.ctx()

    result: dict[str, list[str]] = {}
    for from_square, squares in pos.all_dests(ctx):
        raw = list(squares)
        if not raw:
            continue

        dests = [square_name(sq) for sq in raw]
        if not chess960 and from_square == ctx.king and square_file(from_square) == _KING_FILE:
            dests.extend(_castling_dests(frozenset(raw)))

        result[square_name(from_square)] = dests

    return result


def _castling_dests(squares: frozenset[int]) -> list[str]:
    extra = []
    for corners in (_QUEENSIDE_CASTLING_DESTS, _KINGSIDE_CASTLING_DESTS):
        for rook_square, king_dest in corners:
            if rook_square in squares:
                extra.append(king_dest)
                break
    return extra
