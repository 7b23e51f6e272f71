"""Grade a whole exam and build per-problem review trees."""

from __future__ import annotations

import io
import logging
from collections.abc import Iterable, Sequence

import chess.pgn

from puzzlegrade.config import DEFAULT_CONFIG, ScoringConfig
from puzzlegrade.core.notation import parse_pgn_or_empty, parse_pgn_tree, tree_to_pgn
from puzzlegrade.core.tree import MoveTree
from puzzlegrade.errors import ExamFormatError, PgnParseError
from puzzlegrade.exam.models import Exam, ExamProblem
from puzzlegrade.scoring import (
    ScoreEntry,
    ScorePair,
    Scores,
    build_review_tree,
    score_entries,
    score_problem,
)

logger = logging.getLogger(__name__)


def _with_start_position(pgn_text: str, fen: str) -> str:
    """Prefix FEN/SetUp headers unless *pgn_text* already declares a FEN."""
    headers = chess.pgn.read_headers(io.StringIO(pgn_text))
    if headers is not None and "FEN" in headers:
        return pgn_text
    body = pgn_text.lstrip()
    # A blank line would end the tag section before the answer's own tags.
    separator = "\n" if body.startswith("[") else "\n\n"
    return f'[FEN "{fen}"]\n[SetUp "1"]{separator}{body}'


class ExamGrader:
    """Scores answer PGNs against an exam's solutions.

    Solution trees are parsed fresh for every call, so one grader can serve
    any number of users without sharing state between them.
    """

    __slots__ = ("_config",)

    def __init__(self, config: ScoringConfig | None = None) -> None:
        self._config = config or DEFAULT_CONFIG

    @property
    def config(self) -> ScoringConfig:
        return self._config

    # ── Trees ────────────────────────────────────────────────────────────

    def solution_tree(self, problem: ExamProblem) -> MoveTree:
        """Parse the solution; a broken solution is an exam authoring error."""
        try:
            tree = parse_pgn_tree(_with_start_position(problem.solution, problem.fen))
        except PgnParseError as exc:
            raise ExamFormatError(
                f"Invalid solution for {problem.title or problem.fen}: {exc}"
            ) from exc
        if tree.root.position != MoveTree(problem.fen).root.position:
            raise ExamFormatError(
                f"Solution for {problem.title or problem.fen} starts from {tree.start_fen}"
            )
        return tree

    def answer_tree(self, problem: ExamProblem, answer_pgn: str) -> MoveTree:
        """Parse an answer, substituting an empty tree when it is unusable."""
        if not answer_pgn.strip():
            return MoveTree(problem.fen)
        tree = parse_pgn_or_empty(
            _with_start_position(answer_pgn, problem.fen), fen=problem.fen
        )
        if tree.root.position != MoveTree(problem.fen).root.position:
            logger.warning(
                "Answer for %s starts from %s; treating it as empty",
                problem.title or problem.fen,
                tree.start_fen,
            )
            return MoveTree(problem.fen)
        return tree

    # ── Scoring ──────────────────────────────────────────────────────────

    def grade_problem(self, problem: ExamProblem, answer_pgn: str) -> ScorePair:
        return score_problem(
            self.solution_tree(problem),
            self.answer_tree(problem, answer_pgn),
            self._config,
        )

    def problem_entries(
        self, problem: ExamProblem, answer_pgn: str
    ) -> tuple[ScoreEntry, ...]:
        """Per-ply breakdown for one answer."""
        return score_entries(
            self.solution_tree(problem),
            self.answer_tree(problem, answer_pgn),
            self._config,
        )

    def grade(
        self,
        exam: Exam | Iterable[ExamProblem],
        answers: Sequence[str],
    ) -> Scores:
        """Score every problem; missing answers count as empty."""
        problems = exam.problems if isinstance(exam, Exam) else tuple(exam)
        if len(answers) > len(problems):
            raise ValueError(
                f"Got {len(answers)} answers for an exam of {len(problems)} problems"
            )

        pairs: list[ScorePair] = []
        for index, problem in enumerate(problems):
            answer = answers[index] if index < len(answers) else ""
            pairs.append(self.grade_problem(problem, answer))

        scores = Scores.from_problems(pairs)
        logger.info(
            "Graded %d problems: %s / %s",
            len(pairs),
            scores.total.user,
            scores.total.solution,
        )
        return scores

    # ── Review ───────────────────────────────────────────────────────────

    def review_tree(self, problem: ExamProblem, answer_pgn: str) -> MoveTree:
        """Solution tree with the answer's lines merged in as variations."""
        return build_review_tree(
            self.solution_tree(problem),
            self.answer_tree(problem, answer_pgn),
        )

    def review_pgn(self, problem: ExamProblem, answer_pgn: str) -> str:
        return tree_to_pgn(self.review_tree(problem, answer_pgn))
