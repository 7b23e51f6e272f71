"""Score candidate move trees against solution trees."""

from __future__ import annotations

import logging
from fractions import Fraction

from puzzlegrade.config import DEFAULT_CONFIG, ScoringConfig
from puzzlegrade.core.tree import MoveTree
from puzzlegrade.scoring.alignment import align
from puzzlegrade.scoring.credit import compute_max_score, ply_credit
from puzzlegrade.scoring.models import MatchKind, ScoreEntry, ScorePair

logger = logging.getLogger(__name__)


def score_entries(
    solution: MoveTree,
    candidate: MoveTree,
    config: ScoringConfig = DEFAULT_CONFIG,
    *,
    start_index: int = 0,
) -> tuple[ScoreEntry, ...]:
    """One :class:`ScoreEntry` per solution mainline ply from *start_index*.

    A mainline (or transposed) match earns the ply's full maximum.  An
    alternate match earns the alternate node's own credit, never more than
    the mainline ply is worth.
    """
    entries: list[ScoreEntry] = []
    for step in align(solution, candidate, start_index=start_index):
        maximum = ply_credit(solution.node(step.solution_node), config)
        if step.kind in (MatchKind.MAINLINE, MatchKind.TRANSPOSITION):
            awarded = maximum
        elif step.kind is MatchKind.ALTERNATE:
            assert step.matched_node is not None
            awarded = min(ply_credit(solution.node(step.matched_node), config), maximum)
        else:
            awarded = Fraction(0)

        played_san = None
        if step.candidate_node is not None:
            played_san = candidate.node(step.candidate_node).san
        entries.append(
            ScoreEntry(
                move_index=step.move_index,
                awarded=awarded,
                max=maximum,
                matched=step.matched,
                kind=step.kind,
                played_san=played_san,
            )
        )
    return tuple(entries)


def score_variation(
    solution: MoveTree,
    start_index: int,
    candidate: MoveTree,
    config: ScoringConfig = DEFAULT_CONFIG,
) -> Fraction:
    """Total credit *candidate* earns against *solution* from *start_index*."""
    entries = score_entries(solution, candidate, config, start_index=start_index)
    return sum((entry.awarded for entry in entries), Fraction(0))


def score_problem(
    solution: MoveTree,
    candidate: MoveTree,
    config: ScoringConfig = DEFAULT_CONFIG,
    *,
    start_index: int = 0,
) -> ScorePair:
    """User and maximum points for one problem."""
    mainline = solution.mainline()[start_index:]
    pair = ScorePair(
        user=score_variation(solution, start_index, candidate, config),
        solution=compute_max_score(mainline, config),
    )
    logger.debug("Scored problem: %s / %s", pair.user, pair.solution)
    return pair
