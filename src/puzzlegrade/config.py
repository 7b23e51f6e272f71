"""Scoring configuration: point values per move kind and glyph."""

from __future__ import annotations

import logging
import tomllib
from collections.abc import Mapping
from fractions import Fraction
from pathlib import Path
from typing import Annotated, Any

import chess.pgn
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from puzzlegrade.errors import ConfigurationError

logger = logging.getLogger(__name__)

# bool is an int subclass; a NAG list of ``true`` is a typo, not glyph 1
Nag = Annotated[int, Field(strict=True, ge=0)]


def to_points(value: Any) -> Fraction:
    """Convert an int / float / ``"a/b"`` string to an exact point value."""
    if isinstance(value, bool):
        raise ValueError(f"point value must be a number, got {value!r}")
    if isinstance(value, Fraction):
        return value
    if isinstance(value, int):
        return Fraction(value)
    if isinstance(value, (float, str)):
        # str() keeps 0.1 as 1/10 instead of its binary expansion
        try:
            return Fraction(str(value).strip())
        except ZeroDivisionError as exc:
            raise ValueError(f"invalid point value {value!r}") from exc
    raise ValueError(f"point value must be a number, got {value!r}")


class ScoringConfig(BaseModel):
    """Point values used when crediting solution plies.

    Args:
        default_move_value: Maximum for an ordinary solution move.
        bonus_glyph_value: Maximum for a move carrying one of *bonus_nags*.
        alternate_variation_value: Maximum for the first move of an
            alternate (non-mainline) solution variation.
        bonus_nags: NAGs that mark a bonus-scored move (``$3`` = ``!!``).
        informational_nags: NAGs that mark a move worth nothing.
    """

    model_config = ConfigDict(frozen=True, extra="forbid", arbitrary_types_allowed=True)

    default_move_value: Fraction = Fraction(1)
    bonus_glyph_value: Fraction = Fraction(2)
    alternate_variation_value: Fraction = Fraction(1)
    bonus_nags: frozenset[Nag] = Field(
        default_factory=lambda: frozenset({chess.pgn.NAG_BRILLIANT_MOVE})
    )
    informational_nags: frozenset[Nag] = Field(default_factory=frozenset)

    @field_validator(
        "default_move_value",
        "bonus_glyph_value",
        "alternate_variation_value",
        mode="before",
    )
    @classmethod
    def _exact_points(cls, value: Any) -> Fraction:
        points = to_points(value)
        if points < 0:
            raise ValueError(f"must be non-negative, got {points}")
        return points

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> ScoringConfig:
        """Build a config from a plain mapping, e.g. a TOML table."""
        try:
            return cls.model_validate(dict(data))
        except ValidationError as exc:
            raise ConfigurationError(f"Invalid scoring options: {exc}") from exc


DEFAULT_CONFIG = ScoringConfig()


def load_scoring_config(path: str | Path) -> ScoringConfig:
    """Read the ``[scoring]`` table of a TOML file.

    A file without a ``[scoring]`` table yields the defaults.
    """
    config_path = Path(path)
    try:
        with config_path.open("rb") as fh:
            document = tomllib.load(fh)
    except OSError as exc:
        raise ConfigurationError(f"Cannot read config file {config_path}: {exc}") from exc
    except tomllib.TOMLDecodeError as exc:
        raise ConfigurationError(f"Invalid TOML in {config_path}: {exc}") from exc

    table = document.get("scoring", {})
    if not isinstance(table, dict):
        raise ConfigurationError("[scoring] must be a table")
    config = ScoringConfig.from_mapping(table)
    logger.debug("Loaded scoring config from %s: %s", config_path, config)
    return config
