"""Core move-tree layer.

Quick start::

    from puzzlegrade.core import MoveTree, parse_pgn_tree

    tree = parse_pgn_tree("1. e4 e5 (1... c5 2. Nf3) 2. Nf3 *")
    for node in tree.mainline():
        print(node.san, tree.siblings_of(node))
"""

from puzzlegrade.core.enums import NodeOrigin, Orientation
from puzzlegrade.core.notation import (
    parse_pgn_or_empty,
    parse_pgn_tree,
    tree_to_game,
    tree_to_pgn,
)
from puzzlegrade.core.tree import ROOT_ID, MoveNode, MoveTree

__all__ = [
    # Enums
    "NodeOrigin",
    "Orientation",
    # Tree
    "ROOT_ID",
    "MoveNode",
    "MoveTree",
    # Notation
    "parse_pgn_or_empty",
    "parse_pgn_tree",
    "tree_to_game",
    "tree_to_pgn",
]
