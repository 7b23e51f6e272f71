"""Tests for exam file loading."""

import json
from pathlib import Path

import chess
import pytest

from puzzlegrade.core import Orientation
from puzzlegrade.errors import ExamFormatError
from puzzlegrade.exam import (
    DEFAULT_DURATION_SECONDS,
    exam_from_mapping,
    load_exam,
    orientation_for,
)


class TestLoadExam:
    def test_loads_problems(self, exam_file: Path) -> None:
        exam = load_exam(exam_file)
        assert exam.title == "Weekly tactics"
        assert exam.duration_seconds == 1800
        assert len(exam) == 2
        assert exam.problem(0).title == "Opening"
        assert exam.problem(0).orientation == Orientation.WHITE

    def test_orientation_defaults_to_side_to_move(self) -> None:
        exam = exam_from_mapping(
            {
                "problems": [
                    {
                        "fen": "rnbqkbnr/pppppppp/8/8/4P3/8/PPPP1PPP/RNBQKBNR b KQkq - 0 1",
                        "solution": "1... e5 *",
                    }
                ]
            }
        )
        assert exam.problem(0).orientation == Orientation.BLACK
        assert exam.duration_seconds == DEFAULT_DURATION_SECONDS

    def test_fen_defaults_to_start(self) -> None:
        exam = exam_from_mapping({"problems": [{"solution": "1. e4 *"}]})
        assert exam.problem(0).fen == chess.STARTING_FEN

    def test_null_titles_become_empty(self) -> None:
        exam = exam_from_mapping(
            {"title": None, "problems": [{"title": None, "solution": "1. e4 *"}]}
        )
        assert exam.title == ""
        assert exam.problem(0).title == ""

    def test_orientation_is_case_insensitive(self) -> None:
        exam = exam_from_mapping(
            {"problems": [{"solution": "1. e4 *", "orientation": "Black"}]}
        )
        assert exam.problem(0).orientation == Orientation.BLACK

    def test_fen_is_normalised(self) -> None:
        problem = {"solution": "1. Ra8# *", "fen": "6k1/5ppp/8/8/8/8/5PPP/R5K1 w"}
        exam = exam_from_mapping({"problems": [problem]})
        assert exam.problem(0).fen == "6k1/5ppp/8/8/8/8/5PPP/R5K1 w - - 0 1"

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(ExamFormatError):
            load_exam(tmp_path / "absent.json")

    def test_invalid_json(self, tmp_path: Path) -> None:
        path = tmp_path / "exam.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(ExamFormatError):
            load_exam(path)

    def test_top_level_must_be_object(self, tmp_path: Path) -> None:
        path = tmp_path / "exam.json"
        path.write_text(json.dumps([1, 2]), encoding="utf-8")
        with pytest.raises(ExamFormatError):
            load_exam(path)

    @pytest.mark.parametrize(
        "data",
        [
            {},
            {"problems": []},
            {"problems": ["1. e4"]},
            {"problems": [{"fen": chess.STARTING_FEN}]},
            {"problems": [{"solution": "1. e4 *", "fen": "not a fen"}]},
            {"problems": [{"solution": "1. e4 *", "orientation": "sideways"}]},
            {"problems": [{"solution": "1. e4 *"}], "duration_seconds": 0},
            {"problems": [{"solution": "1. e4 *"}], "duration_seconds": True},
            {"problems": [{"solution": "   "}]},
            {"problems": [{"solution": "1. e4 *", "fen": 7}]},
        ],
    )
    def test_malformed_exam(self, data: dict[str, object]) -> None:
        with pytest.raises(ExamFormatError):
            exam_from_mapping(data)


def test_orientation_for() -> None:
    assert orientation_for(chess.STARTING_FEN) == Orientation.WHITE
