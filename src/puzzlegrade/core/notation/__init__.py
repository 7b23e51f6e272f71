"""Notation package: PGN import/export for move trees."""

from puzzlegrade.core.notation.pgn import (
    parse_pgn_or_empty,
    parse_pgn_tree,
    tree_to_game,
    tree_to_pgn,
)

__all__ = [
    "parse_pgn_or_empty",
    "parse_pgn_tree",
    "tree_to_game",
    "tree_to_pgn",
]
