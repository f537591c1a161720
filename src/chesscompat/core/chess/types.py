"""Value types shared by the translation functions.

A move is a tagged union of :class:`NormalMove` and :class:`DropMove`.
Consumers dispatch with ``match`` and close the match with
``assert_never`` so that a new move kind fails type checking everywhere it
is consumed.
"""

from collections.abc import Iterable
from dataclasses import dataclass
from enum import StrEnum
from typing import Protocol, TypeAlias

from chesscompat.core.errors import InvalidMoveError
from chesscompat.core.utils.squares import is_valid_square

Square: TypeAlias = int  # 0-63, rank-major from a1


class Role(StrEnum):
    """Piece role, independent of colour."""

    PAWN = "pawn"
    KNIGHT = "knight"
    BISHOP = "bishop"
    ROOK = "rook"
    QUEEN = "queen"
    KING = "king"


class RulesetTag(StrEnum):
    """Internal rule-set identifier for a chess variant."""

    CHESS = "chess"
    THREE_CHECK = "3check"
    KING_OF_THE_HILL = "kingofthehill"
    RACING_KINGS = "racingkings"
    ANTICHESS = "antichess"
    ATOMIC = "atomic"
    HORDE = "horde"
    CRAZYHOUSE = "crazyhouse"


class VariantLabel(StrEnum):
    """External variant name, as used by lichess."""

    STANDARD = "standard"
    CHESS960 = "chess960"
    ANTICHESS = "antichess"
    FROM_POSITION = "fromPosition"
    KING_OF_THE_HILL = "kingOfTheHill"
    THREE_CHECK = "threeCheck"
    ATOMIC = "atomic"
    HORDE = "horde"
    RACING_KINGS = "racingKings"
    CRAZYHOUSE = "crazyhouse"


def _check_square(value: int, field_name: str) -> None:
    if not is_valid_square(value):
        msg = f"{field_name} must be a square index in 0..63 (got {value!r})"
        raise InvalidMoveError(msg)


@dataclass(frozen=True)
class NormalMove:
    """A piece moving from one square to another, optionally promoting."""

    from_square: Square
    to_square: Square
    promotion: Role | None = None

    def __post_init__(self) -> None:
        """Validate squares and promotion role."""
        _check_square(self.from_square, "from_square")
        _check_square(self.to_square, "to_square")
        if self.promotion is Role.PAWN:
            raise InvalidMoveError("Cannot promote to a pawn")


@dataclass(frozen=True)
class DropMove:
    """A piece placed from the reserve; has no origin square."""

    role: Role
    to_square: Square

    def __post_init__(self) -> None:
        """Validate square and dropped role."""
        _check_square(self.to_square, "to_square")
        if self.role is Role.KING:
            raise InvalidMoveError("Kings cannot be dropped")


Move: TypeAlias = NormalMove | DropMove


class PositionContext(Protocol):
    """Facts derived from a position, computed once per query."""

    @property
    def king(self) -> Square | None: ...


class Position(Protocol):
    """Read-only view of a position provided by a rules engine.

    ``all_dests`` yields each origin square with its legal destination
    squares. The enumeration order of both is kept by consumers.
    """

    def ctx(self) -> PositionContext: ...

    def all_dests(self, ctx: PositionContext) -> Iterable[tuple[Square, Iterable[Square]]]: ...
