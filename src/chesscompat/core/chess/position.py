"""python-chess adapter for the read-only position interface.

Move generation, legality and variant rules come from python-chess. This
module only exposes a board through the ``ctx()`` / ``all_dests()`` queries
and converts moves between ``chess.Move`` and the internal move types.

Boards are always built in chess960 mode: python-chess then enumerates
castling as the king moving onto its own rook, which is the representation
the destination map expects for every variant.
"""

from collections.abc import Iterator
from dataclasses import dataclass

import chess
import chess.variant
from loguru import logger

from chesscompat.core.chess.types import DropMove, Move, NormalMove, Role, RulesetTag, Square
from chesscompat.core.errors import InvalidMoveError

_BOARD_CLASSES: dict[RulesetTag, type[chess.Board]] = {
    RulesetTag.CHESS: chess.Board,
    RulesetTag.THREE_CHECK: chess.variant.ThreeCheckBoard,
    RulesetTag.KING_OF_THE_HILL: chess.variant.KingOfTheHillBoard,
    RulesetTag.RACING_KINGS: chess.variant.RacingKingsBoard,
    RulesetTag.ANTICHESS: chess.variant.AntichessBoard,
    RulesetTag.ATOMIC: chess.variant.AtomicBoard,
    RulesetTag.HORDE: chess.variant.HordeBoard,
    RulesetTag.CRAZYHOUSE: chess.variant.CrazyhouseBoard,
}

_ROLE_TO_PIECE_TYPE: dict[Role, chess.PieceType] = {
    Role.PAWN: chess.PAWN,
    Role.KNIGHT: chess.KNIGHT,
    Role.BISHOP: chess.BISHOP,
    Role.ROOK: chess.ROOK,
    Role.QUEEN: chess.QUEEN,
    Role.KING: chess.KING,
}
_PIECE_TYPE_TO_ROLE: dict[chess.PieceType, Role] = {v: k for k, v in _ROLE_TO_PIECE_TYPE.items()}


def role_from_piece_type(piece_type: chess.PieceType) -> Role:
    """Convert a python-chess piece type to a role."""
    return _PIECE_TYPE_TO_ROLE[piece_type]


def piece_type_from_role(role: Role) -> chess.PieceType:
    """Convert a role to a python-chess piece type."""
    return _ROLE_TO_PIECE_TYPE[role]


def move_from_chess(move: chess.Move) -> Move:
    """Convert a ``chess.Move`` to the internal move union.

    Raises:
        InvalidMoveError: For the null move, or a king drop.
    """
    if not move:
        raise InvalidMoveError("The null move has no square representation")

    if move.drop is not None:
        return DropMove(role=role_from_piece_type(move.drop), to_square=move.to_square)

    promotion = role_from_piece_type(move.promotion) if move.promotion is not None else None
    return NormalMove(from_square=move.from_square, to_square=move.to_square, promotion=promotion)


def move_to_chess(move: Move) -> chess.Move:
    """Convert an internal move to a ``chess.Move``."""
    if isinstance(move, DropMove):
        return chess.Move(move.to_square, move.to_square, drop=piece_type_from_role(move.role))

    promotion = piece_type_from_role(move.promotion) if move.promotion is not None else None
    return chess.Move(move.from_square, move.to_square, promotion=promotion)


def board_for_ruleset(ruleset: RulesetTag | str = RulesetTag.CHESS, fen: str | None = None) -> chess.Board:
    """Create a python-chess board playing by the given rule set.

    Args:
        ruleset: Rule-set tag (or its string value).
        fen: Position to set up. Defaults to the variant's starting position.

    Returns:
        A board in chess960 castling mode.

    Raises:
        ValueError: If the tag is unknown or the FEN is malformed.
    """
    board_cls = _BOARD_CLASSES[RulesetTag(ruleset)]
    return board_cls(fen if fen is not None else board_cls.starting_fen, chess960=True)


@dataclass(frozen=True)
class BoardContext:
    """Context derived from a board for the side to move."""

    king: Square | None


class BoardPosition:
    """Read-only position view over a python-chess board.

    Origins and destinations are enumerated in ascending square order.
    Drops are not part of the destination map.
    """

    def __init__(self, board: chess.Board) -> None:
        """Wrap a board.

        Args:
            board: Board to query. Build it with :func:`board_for_ruleset`
                (or ``chess960=True``) so castling targets the rook square.
        """
        self.board = board

    @classmethod
    def from_fen(cls, fen: str | None = None, ruleset: RulesetTag | str = RulesetTag.CHESS) -> "BoardPosition":
        """Build a position from a FEN string and rule set."""
        board = board_for_ruleset(ruleset, fen)
        logger.debug(f"Loaded {RulesetTag(ruleset)} position: {board.fen()}")
        return cls(board)

    def ctx(self) -> BoardContext:
        """Return the context for the side to move."""
        return BoardContext(king=self.board.king(self.board.turn))

    def all_dests(self, ctx: BoardContext) -> Iterator[tuple[Square, list[Square]]]:
        """Yield each origin square with its sorted legal destinations."""
        dests: dict[Square, set[Square]] = {}
        for move in self.board.legal_moves:
            if move.drop is not None:
                continue
            dests.setdefault(move.from_square, set()).add(move.to_square)

        for from_square in sorted(dests):
            yield from_square, sorted(dests[from_square])

    def legal_moves(self) -> list[Move]:
        """Return all legal moves, drops included, as internal moves."""
        return [move_from_chess(move) for move in self.board.legal_moves]
