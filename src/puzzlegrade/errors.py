"""Exception hierarchy for puzzlegrade.

All library exceptions inherit from :class:`PuzzleGradeError` so callers can
catch them in one place::

    from puzzlegrade.errors import PgnParseError

    try:
        tree = parse_pgn_tree(text)
    except PgnParseError as exc:
        logger.warning("Unreadable answer: %s", exc)
"""

from __future__ import annotations

__all__ = [
    "ConfigurationError",
    "ExamFormatError",
    "IllegalMoveError",
    "MergeError",
    "PgnParseError",
    "PuzzleGradeError",
]


class PuzzleGradeError(Exception):
    """Base class for every error raised by puzzlegrade."""


class PgnParseError(PuzzleGradeError, ValueError):
    """Raised when PGN text cannot be turned into a move tree."""


class IllegalMoveError(PuzzleGradeError, ValueError):
    """Raised when a move cannot be played from its parent position."""

    def __init__(self, move: str, fen: str) -> None:
        super().__init__(f"Illegal move {move!r} in position {fen}")
        self.move = move
        self.fen = fen


class MergeError(PuzzleGradeError):
    """Raised when a candidate tree cannot be attached to a solution tree."""


class ConfigurationError(PuzzleGradeError):
    """Raised for invalid scoring configuration values."""


class ExamFormatError(PuzzleGradeError):
    """Raised when an exam file is missing fields or malformed."""
