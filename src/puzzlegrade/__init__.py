"""puzzlegrade: tactics-exam scoring over chess move trees.

Quick start::

    from puzzlegrade import MoveTree, score_problem, build_review_tree

    solution = MoveTree.from_sans(["e4", "e5", "Nf3"])
    answer = MoveTree.from_sans(["e4", "e5", "Nc3"])
    score_problem(solution, answer)            # ScorePair(user=2, solution=3)
    review = build_review_tree(solution, answer)
"""

from puzzlegrade.config import DEFAULT_CONFIG, ScoringConfig, load_scoring_config
from puzzlegrade.core import (
    ROOT_ID,
    MoveNode,
    MoveTree,
    NodeOrigin,
    Orientation,
    parse_pgn_or_empty,
    parse_pgn_tree,
    tree_to_pgn,
)
from puzzlegrade.errors import (
    ConfigurationError,
    ExamFormatError,
    IllegalMoveError,
    MergeError,
    PgnParseError,
    PuzzleGradeError,
)
from puzzlegrade.exam import Exam, ExamGrader, ExamProblem, load_exam
from puzzlegrade.scoring import (
    MatchKind,
    ScoreEntry,
    ScorePair,
    Scores,
    align,
    build_review_tree,
    compute_max_score,
    format_points,
    merge_candidate_into_solution,
    score_entries,
    score_problem,
    score_variation,
)

__version__ = "0.1.0"

__all__ = [
    # Config
    "DEFAULT_CONFIG",
    "ScoringConfig",
    "load_scoring_config",
    # Trees
    "ROOT_ID",
    "MoveNode",
    "MoveTree",
    "NodeOrigin",
    "Orientation",
    "parse_pgn_or_empty",
    "parse_pgn_tree",
    "tree_to_pgn",
    # Scoring
    "MatchKind",
    "ScoreEntry",
    "ScorePair",
    "Scores",
    "align",
    "build_review_tree",
    "compute_max_score",
    "format_points",
    "merge_candidate_into_solution",
    "score_entries",
    "score_problem",
    "score_variation",
    # Exams
    "Exam",
    "ExamGrader",
    "ExamProblem",
    "load_exam",
    # Errors
    "ConfigurationError",
    "ExamFormatError",
    "IllegalMoveError",
    "MergeError",
    "PgnParseError",
    "PuzzleGradeError",
]
