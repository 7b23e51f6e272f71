"""Exam and problem definitions, validated as they are loaded."""

from __future__ import annotations

from typing import Any

import chess
from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from puzzlegrade.core.enums import Orientation

DEFAULT_DURATION_SECONDS = 3600


def orientation_for(fen: str) -> Orientation:
    """Orientation of the side to move in *fen*."""
    board = chess.Board(fen)
    return Orientation.WHITE if board.turn == chess.WHITE else Orientation.BLACK


class ExamProblem(BaseModel):
    """One tactics problem: start position plus solution PGN.

    The FEN is normalised through python-chess. A missing orientation
    defaults to the side to move.
    """

    model_config = ConfigDict(frozen=True)

    fen: str = chess.STARTING_FEN
    solution: str
    orientation: Orientation = Orientation.WHITE
    title: str = ""

    @model_validator(mode="before")
    @classmethod
    def _default_orientation(cls, data: Any) -> Any:
        if not isinstance(data, dict) or data.get("orientation") is not None:
            return data
        fen = data.get("fen", chess.STARTING_FEN)
        try:
            orientation = orientation_for(fen) if isinstance(fen, str) else None
        except ValueError:
            # reported by the fen validator
            orientation = None
        data = {key: value for key, value in data.items() if key != "orientation"}
        if orientation is not None:
            data["orientation"] = orientation
        return data

    @field_validator("fen")
    @classmethod
    def _normalise_fen(cls, value: str) -> str:
        return chess.Board(value).fen()

    @field_validator("solution")
    @classmethod
    def _solution_present(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("solution PGN is empty")
        return value

    @field_validator("orientation", mode="before")
    @classmethod
    def _lower_orientation(cls, value: Any) -> Any:
        return value.lower() if isinstance(value, str) else value

    @field_validator("title", mode="before")
    @classmethod
    def _null_title(cls, value: Any) -> Any:
        return "" if value is None else value


class Exam(BaseModel):
    """An ordered set of problems solved under one time limit."""

    model_config = ConfigDict(frozen=True)

    problems: tuple[ExamProblem, ...] = Field(min_length=1)
    title: str = ""
    duration_seconds: int = Field(default=DEFAULT_DURATION_SECONDS, gt=0, strict=True)

    @field_validator("title", mode="before")
    @classmethod
    def _null_title(cls, value: Any) -> Any:
        return "" if value is None else value

    def __len__(self) -> int:
        return len(self.problems)

    def problem(self, index: int) -> ExamProblem:
        return self.problems[index]
