"""Tests for per-ply credit and solution maxima."""

import logging
from fractions import Fraction

import pytest

from puzzlegrade.config import ScoringConfig
from puzzlegrade.core import ROOT_ID, MoveTree, parse_pgn_tree
from puzzlegrade.scoring import compute_max_score, explicit_credit, ply_credit


class TestExplicitCredit:
    @pytest.mark.parametrize(
        "comment,expected",
        [
            ("[%score 3]", Fraction(3)),
            ("Key move [%score 1.5] here", Fraction(3, 2)),
            ("[%score 1/3]", Fraction(1, 3)),
            ("no command", None),
            ("[%score 1/0]", None),
            ("[%score 1.5/2]", None),
            ("[%score -1]", None),
        ],
    )
    def test_parses_score_command(self, comment: str, expected: Fraction | None) -> None:
        assert explicit_credit(comment) == expected

    def test_malformed_command_is_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING, logger="puzzlegrade.scoring.credit"):
            assert explicit_credit("Nice [%score 1.5/2]") is None
        assert "[%score 1.5/2]" in caplog.text

    def test_malformed_command_falls_back_to_default(self) -> None:
        tree = parse_pgn_tree("1. e4 { [%score 1.5/2] } *")
        assert ply_credit(tree.mainline()[0]) == 1

    def test_plain_comment_is_not_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING, logger="puzzlegrade.scoring.credit"):
            assert explicit_credit("score this later") is None
        assert caplog.text == ""


class TestPlyCredit:
    def test_default_move(self) -> None:
        tree = MoveTree.from_sans(["e4"])
        assert ply_credit(tree.mainline()[0]) == 1

    def test_bonus_glyph(self) -> None:
        tree = parse_pgn_tree("1. e4!! *")
        assert ply_credit(tree.mainline()[0]) == 2

    def test_informational_glyph_beats_bonus(self) -> None:
        config = ScoringConfig(informational_nags=[7])
        tree = MoveTree()
        node = tree.add_move(ROOT_ID, "e4", nags=[3, 7])
        assert ply_credit(node, config) == 0

    def test_explicit_command_wins(self) -> None:
        tree = parse_pgn_tree("1. e4!! {[%score 5]} *")
        assert ply_credit(tree.mainline()[0]) == 5

    def test_alternate_first_move(self) -> None:
        config = ScoringConfig(alternate_variation_value=Fraction(1, 2))
        tree = parse_pgn_tree("1. e4 (1. d4 d5) *")
        d4 = tree.variations_at(0)[0]
        d5 = tree.line_from(d4.id)[1]
        assert ply_credit(d4, config) == Fraction(1, 2)
        assert ply_credit(d5, config) == 1

    def test_custom_values(self) -> None:
        config = ScoringConfig(default_move_value=3, bonus_glyph_value=10)
        tree = parse_pgn_tree("1. e4 e5!! *")
        e4, e5 = tree.mainline()
        assert ply_credit(e4, config) == 3
        assert ply_credit(e5, config) == 10


class TestComputeMaxScore:
    def test_sums_mainline(self) -> None:
        tree = MoveTree.from_sans(["e4", "e5", "Nf3"])
        assert compute_max_score(tree.mainline()) == 3

    def test_ignores_alternates(self) -> None:
        tree = parse_pgn_tree("1. e4 e5 2. Nf3 (2. Bc4) Nc6 *")
        assert compute_max_score(tree.mainline()) == 4

    def test_mixed_values(self) -> None:
        config = ScoringConfig(informational_nags=[7])
        tree = parse_pgn_tree("1. e4 e5 $7 2. Nf3!! {[%score 1/2]} Nc6!! *")
        assert compute_max_score(tree.mainline(), config) == Fraction(7, 2)

    def test_empty_solution(self) -> None:
        assert compute_max_score(MoveTree().mainline()) == 0
