"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from puzzlegrade.core import MoveTree, parse_pgn_tree

BACK_RANK_FEN = "6k1/5ppp/8/8/8/8/5PPP/R5K1 w - - 0 1"


@pytest.fixture
def open_game() -> MoveTree:
    """Solution ``1. e4 e5 2. Nf3``, one point per ply."""
    return MoveTree.from_sans(["e4", "e5", "Nf3"])


@pytest.fixture
def with_alternate() -> MoveTree:
    """Solution whose third ply accepts 2. Bc4 as an alternate."""
    return parse_pgn_tree("1. e4 e5 2. Nf3 (2. Bc4) Nc6 *")


@pytest.fixture
def exam_data() -> dict[str, object]:
    return {
        "title": "Weekly tactics",
        "duration_seconds": 1800,
        "problems": [
            {
                "title": "Opening",
                "fen": "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1",
                "solution": "1. e4 e5 2. Nf3 *",
                "orientation": "white",
            },
            {
                "title": "Back rank",
                "fen": BACK_RANK_FEN,
                "solution": "1. Ra8# *",
            },
        ],
    }


@pytest.fixture
def exam_file(tmp_path: Path, exam_data: dict[str, object]) -> Path:
    path = tmp_path / "exam.json"
    path.write_text(json.dumps(exam_data), encoding="utf-8")
    return path
