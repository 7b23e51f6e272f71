"""Command line entry point.

Usage::

    # Score answer PGNs (one file per problem, in order)
    puzzlegrade grade exam.json p1.pgn p2.pgn p3.pgn

    # Print the review PGN for problem 2
    puzzlegrade review exam.json --problem 2 p2.pgn
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence
from pathlib import Path

from puzzlegrade.config import DEFAULT_CONFIG, ScoringConfig, load_scoring_config
from puzzlegrade.errors import PuzzleGradeError
from puzzlegrade.exam import ExamGrader, load_exam
from puzzlegrade.scoring import format_points

logger = logging.getLogger(__name__)


def _read_answer(path: str) -> str:
    """Answer text for *path*; ``-`` stands for an unanswered problem."""
    if path == "-":
        return ""
    try:
        return Path(path).read_text(encoding="utf-8")
    except OSError as exc:
        raise PuzzleGradeError(f"Cannot read answer file {path}: {exc}") from exc


def _config_from_args(args: argparse.Namespace) -> ScoringConfig:
    if args.config is None:
        return DEFAULT_CONFIG
    return load_scoring_config(args.config)


def cmd_grade(args: argparse.Namespace) -> int:
    """Print per-problem and total points."""
    exam = load_exam(args.exam)
    answers = [_read_answer(path) for path in args.answers]
    grader = ExamGrader(_config_from_args(args))
    scores = grader.grade(exam, answers)

    for index, (problem, pair) in enumerate(zip(exam.problems, scores.problems), 1):
        label = problem.title or f"Problem {index}"
        print(f"{label}: {format_points(pair.user)} / {format_points(pair.solution)}")
    total = scores.total
    print(
        f"Total: {format_points(total.user)} / {format_points(total.solution)}"
        f" ({format_points(total.ratio * 100)}%)"
    )
    return 0


def cmd_review(args: argparse.Namespace) -> int:
    """Print the solution PGN with the answer merged in."""
    exam = load_exam(args.exam)
    if not 1 <= args.problem <= len(exam):
        raise PuzzleGradeError(
            f"Problem {args.problem} out of range (exam has {len(exam)} problems)"
        )
    grader = ExamGrader(_config_from_args(args))
    print(grader.review_pgn(exam.problem(args.problem - 1), _read_answer(args.answer)))
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="puzzlegrade",
        description="Score tactics-exam answers against solution move trees.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    parser.add_argument("--config", type=Path, help="Scoring TOML file")
    subparsers = parser.add_subparsers(dest="command", required=True)

    grade = subparsers.add_parser("grade", help="Score answers for every problem")
    grade.add_argument("exam", type=Path, help="Exam JSON file")
    grade.add_argument("answers", nargs="*", help="Answer PGN files ('-' = no answer)")
    grade.set_defaults(func=cmd_grade)

    review = subparsers.add_parser("review", help="Print a review PGN for one problem")
    review.add_argument("exam", type=Path, help="Exam JSON file")
    review.add_argument("answer", help="Answer PGN file ('-' = no answer)")
    review.add_argument("--problem", type=int, default=1, help="1-based problem number")
    review.set_defaults(func=cmd_review)

    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    try:
        return args.func(args)
    except (PuzzleGradeError, ValueError) as exc:
        logger.debug("Command failed", exc_info=True)
        print(f"error: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
