"""PGN <-> MoveTree conversion on top of python-chess."""

from __future__ import annotations

import io
import logging

import chess
import chess.pgn

from puzzlegrade.core.tree import ROOT_ID, MoveTree
from puzzlegrade.errors import IllegalMoveError, PgnParseError

logger = logging.getLogger(__name__)

_SETUP_HEADERS = frozenset({"FEN", "SetUp"})


def _clean_comment(comment: str) -> str:
    return " ".join(comment.split())


def parse_pgn_tree(pgn_text: str) -> MoveTree:
    """Parse the first game of *pgn_text* into a :class:`MoveTree`.

    Variations, NAGs and move comments are kept.  Raises
    :class:`PgnParseError` when the text holds no game or any move in it is
    illegal or unreadable.
    """
    try:
        game = chess.pgn.read_game(io.StringIO(pgn_text))
    except ValueError as exc:
        raise PgnParseError(f"Unreadable PGN: {exc}") from exc
    if game is None:
        raise PgnParseError("PGN text contains no game")
    if game.errors:
        raise PgnParseError(f"Invalid PGN movetext: {game.errors[0]}")

    try:
        tree = MoveTree(game.board().fen(), headers=dict(game.headers))
    except ValueError as exc:
        raise PgnParseError(f"Invalid FEN header: {exc}") from exc

    # (python-chess node, tree parent id) pairs; children pushed reversed so
    # node ids follow depth-first PGN order.
    stack: list[tuple[chess.pgn.GameNode, int]] = [
        (child, ROOT_ID) for child in reversed(game.variations)
    ]
    while stack:
        game_node, parent_id = stack.pop()
        try:
            node = tree.add_move(
                parent_id,
                game_node.move,
                nags=sorted(game_node.nags),
                comment=_clean_comment(game_node.comment),
            )
        except IllegalMoveError as exc:
            raise PgnParseError(str(exc)) from exc
        stack.extend((child, node.id) for child in reversed(game_node.variations))

    logger.debug("Parsed PGN tree with %d moves", len(tree))
    return tree


def parse_pgn_or_empty(pgn_text: str, *, fen: str = chess.STARTING_FEN) -> MoveTree:
    """Parse *pgn_text*, falling back to an empty tree rooted at *fen*.

    Blank text and unparsable text both yield the empty tree; the latter is
    logged as a warning.
    """
    if not pgn_text.strip():
        return MoveTree(fen)
    try:
        return parse_pgn_tree(pgn_text)
    except PgnParseError as exc:
        logger.warning("Substituting empty tree for unparsable PGN: %s", exc)
        return MoveTree(fen)


def tree_to_game(tree: MoveTree) -> chess.pgn.Game:
    """Rebuild a python-chess game (with all variations) from *tree*."""
    game = chess.pgn.Game()
    standard_start = tree.start_fen == chess.STARTING_FEN
    for key, value in tree.headers.items():
        if standard_start and key in _SETUP_HEADERS:
            continue
        game.headers[key] = value
    if not standard_start:
        game.setup(tree.start_fen)

    stack: list[tuple[int, chess.pgn.GameNode]] = [(ROOT_ID, game)]
    while stack:
        node_id, game_node = stack.pop()
        for child_id in tree.node(node_id).children:
            child = tree.node(child_id)
            game_child = game_node.add_variation(
                chess.Move.from_uci(child.uci),
                comment=child.comment,
                nags=child.nags,
            )
            stack.append((child_id, game_child))
    return game


def tree_to_pgn(tree: MoveTree) -> str:
    """Export *tree* as PGN text, variations included."""
    exporter = chess.pgn.StringExporter(headers=True, variations=True, comments=True)
    return tree_to_game(tree).accept(exporter)
