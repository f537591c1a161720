"""Move and position types, and the python-chess position adapter."""

from chesscompat.core.chess.position import (
    BoardContext,
    BoardPosition,
    board_for_ruleset,
    move_from_chess,
    move_to_chess,
    piece_type_from_role,
    role_from_piece_type,
)
from chesscompat.core.chess.types import (
    DropMove,
    Move,
    NormalMove,
    Position,
    PositionContext,
    Role,
    RulesetTag,
    Square,
    VariantLabel,
)

__all__ = [
    "BoardContext",
    "BoardPosition",
    "DropMove",
    "Move",
    "NormalMove",
    "Position",
    "PositionContext",
    "Role",
    "RulesetTag",
    "Square",
    "VariantLabel",
    "board_for_ruleset",
    "move_from_chess",
    "move_to_chess",
    "piece_type_from_role",
    "role_from_piece_type",
]
