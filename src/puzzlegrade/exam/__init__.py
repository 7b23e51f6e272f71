"""Exam layer: problem sets, answer grading and review trees.

Quick start::

    from puzzlegrade.exam import ExamGrader, load_exam

    exam = load_exam("weekly.json")
    scores = ExamGrader().grade(exam, answers)
    print(scores.total.user, "/", scores.total.solution)
"""

from puzzlegrade.exam.grader import ExamGrader
from puzzlegrade.exam.loader import exam_from_mapping, load_exam
from puzzlegrade.exam.models import (
    DEFAULT_DURATION_SECONDS,
    Exam,
    ExamProblem,
    orientation_for,
)

__all__ = [
    "DEFAULT_DURATION_SECONDS",
    "Exam",
    "ExamGrader",
    "ExamProblem",
    "exam_from_mapping",
    "load_exam",
    "orientation_for",
]
