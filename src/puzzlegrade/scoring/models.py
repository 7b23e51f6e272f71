"""Data models produced by move-tree scoring."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from enum import StrEnum
from fractions import Fraction

_ONE_PLACE = Decimal("0.1")


class MatchKind(StrEnum):
    """How a candidate move lined up with a solution ply."""

    MAINLINE = "mainline"
    ALTERNATE = "alternate"
    TRANSPOSITION = "transposition"
    NONE = "none"

    @property
    def matched(self) -> bool:
        return self is not MatchKind.NONE


@dataclass(slots=True, frozen=True)
class AlignmentStep:
    """Outcome of comparing one solution mainline index."""

    move_index: int
    kind: MatchKind
    solution_node: int
    matched_node: int | None = None
    candidate_node: int | None = None

    @property
    def matched(self) -> bool:
        return self.kind.matched


@dataclass(slots=True, frozen=True)
class ScoreEntry:
    """Credit for a single solution mainline ply."""

    move_index: int
    awarded: Fraction
    max: Fraction
    matched: bool
    kind: MatchKind = MatchKind.NONE
    played_san: str | None = None


@dataclass(slots=True, frozen=True)
class ScorePair:
    """Points the user earned against points available."""

    user: Fraction
    solution: Fraction

    @property
    def ratio(self) -> Fraction:
        if self.solution == 0:
            return Fraction(0)
        return self.user / self.solution

    @property
    def is_perfect(self) -> bool:
        return self.user == self.solution


@dataclass(slots=True, frozen=True)
class Scores:
    """Exam-wide totals plus the per-problem breakdown."""

    total: ScorePair
    problems: tuple[ScorePair, ...]

    @classmethod
    def from_problems(cls, problems: Iterable[ScorePair]) -> Scores:
        items = tuple(problems)
        total = ScorePair(
            user=sum((p.user for p in items), Fraction(0)),
            solution=sum((p.solution for p in items), Fraction(0)),
        )
        return cls(total=total, problems=items)


def format_points(value: Fraction) -> str:
    """Render a point value with one decimal place, halves rounded up."""
    exact = Decimal(value.numerator) / Decimal(value.denominator)
    return str(exact.quantize(_ONE_PLACE, rounding=ROUND_HALF_UP))
