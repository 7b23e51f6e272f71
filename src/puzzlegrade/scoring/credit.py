"""Per-ply credit values and solution maxima."""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable
from fractions import Fraction

from puzzlegrade.config import DEFAULT_CONFIG, ScoringConfig
from puzzlegrade.core.tree import MoveNode

logger = logging.getLogger(__name__)

# N is an integer, a decimal or a fraction of integers
_SCORE_COMMAND_RE = re.compile(r"\[%score\s+(\d+(?:\.\d+)?|\d+/\d+)\s*\]")
_ANY_SCORE_COMMAND_RE = re.compile(r"\[%score\b[^\]]*\]")


def explicit_credit(comment: str) -> Fraction | None:
    """Value of a ``[%score N]`` command inside *comment*, if present.

    A malformed command is logged and ignored, leaving the ply on its
    ordinary credit.
    """
    match = _SCORE_COMMAND_RE.search(comment)
    if match is None:
        malformed = _ANY_SCORE_COMMAND_RE.search(comment)
        if malformed is not None:
            logger.warning("Ignoring malformed score command %s", malformed.group(0))
        return None
    try:
        return Fraction(match.group(1))
    except ZeroDivisionError:
        logger.warning("Ignoring score command with zero denominator %s", match.group(0))
        return None


def ply_credit(node: MoveNode, config: ScoringConfig = DEFAULT_CONFIG) -> Fraction:
    """Maximum credit a solution node is worth.

    Priority: explicit ``[%score]`` command, informational glyph (zero),
    bonus glyph, first move of an alternate variation, default value.
    """
    explicit = explicit_credit(node.comment)
    if explicit is not None:
        return explicit
    nags = set(node.nags)
    if nags & config.informational_nags:
        return Fraction(0)
    if nags & config.bonus_nags:
        return config.bonus_glyph_value
    if node.is_alternate:
        return config.alternate_variation_value
    return config.default_move_value


def compute_max_score(
    mainline: Iterable[MoveNode], config: ScoringConfig = DEFAULT_CONFIG
) -> Fraction:
    """Sum of ply maxima over a solution mainline."""
    return sum((ply_credit(node, config) for node in mainline), Fraction(0))
