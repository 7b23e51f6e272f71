"""Align a candidate mainline against a solution tree, ply by ply."""

from __future__ import annotations

import logging

from puzzlegrade.core.tree import MoveNode, MoveTree
from puzzlegrade.scoring.models import AlignmentStep, MatchKind

logger = logging.getLogger(__name__)


def _options(
    solution: MoveTree, expected: MoveNode | None, main_node: MoveNode
) -> list[tuple[MoveNode, MatchKind]]:
    """Solution nodes a candidate move may match at one index, in priority order."""
    options: list[tuple[MoveNode, MatchKind]] = []
    if expected is not None:
        on_mainline = expected.id == main_node.id
        options.append((expected, MatchKind.MAINLINE if on_mainline else MatchKind.ALTERNATE))
        options.extend((alt, MatchKind.ALTERNATE) for alt in solution.siblings_of(expected))
    if expected is None or expected.id != main_node.id:
        options.append((main_node, MatchKind.TRANSPOSITION))
    return options


def _match(
    solution: MoveTree,
    expected: MoveNode | None,
    main_node: MoveNode,
    played: MoveNode,
) -> tuple[MoveNode, MatchKind] | None:
    hits = [
        (node, kind)
        for node, kind in _options(solution, expected, main_node)
        if node.position == played.position
    ]
    if not hits:
        return None
    alternates = [node for node, kind in hits if kind is MatchKind.ALTERNATE]
    if len(alternates) > 1:
        logger.warning(
            "Ply %d: %d alternate variations reach the same position (%s); "
            "using the first listed",
            main_node.ply,
            len(alternates),
            ", ".join(node.san for node in alternates),
        )
    return hits[0]


def align(
    solution: MoveTree,
    candidate: MoveTree,
    *,
    start_index: int = 0,
) -> tuple[AlignmentStep, ...]:
    """Compare *candidate*'s mainline with *solution* from *start_index* on.

    Candidate move ``k`` is compared with solution mainline index
    ``start_index + k`` by resulting position.  The expected move is tried
    first, then its sibling variations in listed order; while following an
    alternate line the mainline move at the same index is tried last, which
    lets a candidate transpose back.  After the first miss every remaining
    index is unmatched.
    """
    if start_index < 0:
        raise ValueError(f"start_index must be non-negative, got {start_index}")

    mainline = solution.mainline()
    played = candidate.mainline()
    steps: list[AlignmentStep] = []
    expected: MoveNode | None = mainline[start_index] if start_index < len(mainline) else None
    diverged = False

    for index in range(start_index, len(mainline)):
        main_node = mainline[index]
        offset = index - start_index
        if diverged or offset >= len(played):
            steps.append(AlignmentStep(index, MatchKind.NONE, main_node.id))
            diverged = True
            continue

        move = played[offset]
        hit = _match(solution, expected, main_node, move)
        if hit is None:
            logger.debug(
                "Candidate left the solution at index %d: played %s, expected %s",
                index,
                move.san,
                main_node.san,
            )
            steps.append(
                AlignmentStep(index, MatchKind.NONE, main_node.id, candidate_node=move.id)
            )
            diverged = True
            continue

        node, kind = hit
        steps.append(
            AlignmentStep(
                index,
                kind,
                main_node.id,
                matched_node=node.id,
                candidate_node=move.id,
            )
        )
        next_id = node.mainline_child
        expected = solution.node(next_id) if next_id is not None else None

    return tuple(steps)
