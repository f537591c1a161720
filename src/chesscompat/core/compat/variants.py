"""Mapping between lichess variant labels and internal rule-set tags.

``standard``, ``chess960`` and ``fromPosition`` all play by the ``chess``
rule set. Mapping back picks ``standard``, so the other two cannot be
recovered from a tag. Callers that need to keep chess960 must carry the
label alongside the tag.
"""

from typing import assert_never

from chesscompat.core.chess.types import RulesetTag, VariantLabel


def lichess_rules(variant: VariantLabel | str) -> RulesetTag:
    """Convert a lichess variant label to a rule-set tag.

    Args:
        variant: Variant label, or its string value (e.g. "threeCheck").

    Returns:
        The rule set the variant is played with.

    Raises:
        ValueError: If a string is not a known variant label.
    """
    match VariantLabel(variant):
        case VariantLabel.STANDARD | VariantLabel.CHESS960 | VariantLabel.FROM_POSITION:
            return RulesetTag.CHESS
        case VariantLabel.THREE_CHECK:
            return RulesetTag.THREE_CHECK
        case VariantLabel.KING_OF_THE_HILL:
            return RulesetTag.KING_OF_THE_HILL
        case VariantLabel.RACING_KINGS:
            return RulesetTag.RACING_KINGS
        case VariantLabel.ANTICHESS:
            return RulesetTag.ANTICHESS
        case VariantLabel.ATOMIC:
            return RulesetTag.ATOMIC
        case VariantLabel.HORDE:
            return RulesetTag.HORDE
        case VariantLabel.CRAZYHOUSE:
            return RulesetTag.CRAZYHOUSE
        case unreachable:
            assert_never(unreachable)


def lichess_variant(rules: RulesetTag | str) -> VariantLabel:
    """Convert a rule-set tag to its canonical lichess variant label.

    ``chess`` always maps to ``standard``.

    Raises:
        ValueError: If a string is not a known rule-set tag.
    """
    match RulesetTag(rules):
        case RulesetTag.CHESS:
            return VariantLabel.STANDARD
        case RulesetTag.THREE_CHECK:
            return VariantLabel.THREE_CHECK
        case RulesetTag.KING_OF_THE_HILL:
            return VariantLabel.KING_OF_THE_HILL
        case RulesetTag.RACING_KINGS:
            return VariantLabel.RACING_KINGS
        case RulesetTag.ANTICHESS:
            return VariantLabel.ANTICHESS
        case RulesetTag.ATOMIC:
            return VariantLabel.ATOMIC
        case RulesetTag.HORDE:
            return VariantLabel.HORDE
        case RulesetTag.CRAZYHOUSE:
            return VariantLabel.CRAZYHOUSE
        case unreachable:
            assert_never(unreachable)
