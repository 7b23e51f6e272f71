"""Splice candidate lines into a solution tree for review."""

from __future__ import annotations

import logging

import chess

from puzzlegrade.core.enums import NodeOrigin
from puzzlegrade.core.tree import ROOT_ID, MoveTree
from puzzlegrade.errors import MergeError

logger = logging.getLogger(__name__)


def merge_candidate_into_solution(
    candidate: MoveTree, start_index: int, solution: MoveTree
) -> None:
    """Merge every line of *candidate* into *solution* in place.

    The candidate root is anchored at solution mainline move
    ``start_index - 1`` (the solution root when *start_index* is 0).  Each
    candidate move reuses an existing solution child reaching the same
    position; otherwise it is appended as a new variation, tagged
    :attr:`NodeOrigin.CANDIDATE`.  Existing solution nodes keep their SAN,
    glyphs and comments, and only ever gain children.

    Call this on a copy (see :func:`build_review_tree`) unless the caller
    owns *solution*.
    """
    mainline = solution.mainline()
    if not 0 <= start_index <= len(mainline):
        raise MergeError(
            f"start_index {start_index} outside solution mainline of {len(mainline)} moves"
        )
    anchor = solution.node(ROOT_ID if start_index == 0 else mainline[start_index - 1].id)
    if candidate.root.position != anchor.position:
        raise MergeError(
            f"Candidate starts from {candidate.start_fen!r}, "
            f"solution index {start_index} is {anchor.fen!r}"
        )

    added = 0
    stack = [(child_id, anchor.id) for child_id in reversed(candidate.root.children)]
    while stack:
        candidate_id, parent_id = stack.pop()
        move = candidate.node(candidate_id)
        target = solution.find_child(parent_id, move.position)
        if target is None:
            target = solution.add_move(
                parent_id,
                chess.Move.from_uci(move.uci),
                nags=move.nags,
                comment=move.comment,
                origin=NodeOrigin.CANDIDATE,
            )
            added += 1
        stack.extend((child_id, target.id) for child_id in reversed(move.children))

    logger.debug("Merged candidate into solution: %d new moves", added)


def build_review_tree(
    solution: MoveTree, candidate: MoveTree, *, start_index: int = 0
) -> MoveTree:
    """Copy of *solution* with *candidate* merged in; *solution* is untouched."""
    review = solution.copy()
    merge_candidate_into_solution(candidate, start_index, review)
    return review
