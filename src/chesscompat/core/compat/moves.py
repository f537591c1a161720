"""Move conversion to chessground's square-list format."""

from typing import assert_never

from chesscompat.core.chess.types import DropMove, Move, NormalMove
from chesscompat.core.utils.squares import square_name


def chessground_move(move: Move) -> list[str]:
    """Convert a move to the list of squares chessground highlights.

    Drops give ``[to]``, other moves ``[from, to]``. Promotion roles are not
    part of the output; read them from the move itself.
    """
    match move:
        case DropMove(to_square=to_square):
            return [square_name(to_square)]
        case NormalMove(from_square=from_square, to_square=to_square):
            return [square_name(from_square), square_name(to_square)]
        case _:
            assert_never(move)
