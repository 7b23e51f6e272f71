"""Scoring APIs: alignment, credit, scores and review merging."""

from puzzlegrade.scoring.alignment import align
from puzzlegrade.scoring.credit import compute_max_score, explicit_credit, ply_credit
from puzzlegrade.scoring.merge import build_review_tree, merge_candidate_into_solution
from puzzlegrade.scoring.models import (
    AlignmentStep,
    MatchKind,
    ScoreEntry,
    ScorePair,
    Scores,
    format_points,
)
from puzzlegrade.scoring.service import score_entries, score_problem, score_variation

__all__ = [
    "AlignmentStep",
    "MatchKind",
    "ScoreEntry",
    "ScorePair",
    "Scores",
    "align",
    "build_review_tree",
    "compute_max_score",
    "explicit_credit",
    "format_points",
    "merge_candidate_into_solution",
    "ply_credit",
    "score_entries",
    "score_problem",
    "score_variation",
]
