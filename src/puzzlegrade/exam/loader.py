"""Load exams from JSON files."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from puzzlegrade.errors import ExamFormatError
from puzzlegrade.exam.models import Exam

logger = logging.getLogger(__name__)


def exam_from_mapping(data: Mapping[str, Any]) -> Exam:
    """Build an :class:`Exam` from decoded JSON."""
    try:
        return Exam.model_validate(data)
    except ValidationError as exc:
        raise ExamFormatError(f"Invalid exam: {exc}") from exc


def load_exam(path: str | Path) -> Exam:
    """Read an exam JSON file."""
    exam_path = Path(path)
    try:
        text = exam_path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ExamFormatError(f"Cannot read exam file {exam_path}: {exc}") from exc
    try:
        exam = Exam.model_validate_json(text)
    except ValidationError as exc:
        raise ExamFormatError(f"Invalid exam file {exam_path}: {exc}") from exc

    logger.info("Loaded exam %r with %d problems", exam.title, len(exam))
    return exam
