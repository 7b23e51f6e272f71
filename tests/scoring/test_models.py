"""Tests for scoring result models."""

from fractions import Fraction

import pytest

from puzzlegrade.scoring import ScorePair, format_points


class TestFormatPoints:
    @pytest.mark.parametrize(
        "value,expected",
        [
            (Fraction(0), "0.0"),
            (Fraction(1, 4), "0.3"),
            (Fraction(1, 2), "0.5"),
            (Fraction(3, 4), "0.8"),
            (Fraction(1), "1.0"),
            (Fraction(1, 3), "0.3"),
            (Fraction(1, 20), "0.1"),
            (Fraction(45, 2), "22.5"),
        ],
    )
    def test_rounds_halves_up(self, value: Fraction, expected: str) -> None:
        assert format_points(value) == expected

    def test_quarters_round_consistently(self) -> None:
        quarters = [format_points(Fraction(n, 4)) for n in range(5)]
        assert quarters == ["0.0", "0.3", "0.5", "0.8", "1.0"]


class TestScorePair:
    def test_ratio(self) -> None:
        assert ScorePair(Fraction(1), Fraction(4)).ratio == Fraction(1, 4)

    def test_ratio_of_empty_solution(self) -> None:
        assert ScorePair(Fraction(0), Fraction(0)).ratio == 0
