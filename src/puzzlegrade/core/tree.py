"""MoveTree: arena-backed game tree with variations.

Nodes live in a flat list and refer to each other by integer id, so a node's
parent is an O(1) lookup and copying a tree never has to untangle reference
cycles.  Id ``0`` is always the root, which holds the starting position and
no move.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field, replace

import chess

from puzzlegrade.core.enums import NodeOrigin
from puzzlegrade.errors import IllegalMoveError

ROOT_ID = 0


@dataclass(slots=True)
class MoveNode:
    """One ply of a move tree (or the root, which has no move)."""

    id: int
    san: str
    uci: str
    fen: str
    position: str
    parent: int | None
    ply: int
    variation_index: int = 0
    nags: tuple[int, ...] = ()
    comment: str = ""
    origin: NodeOrigin = NodeOrigin.SOLUTION
    children: list[int] = field(default_factory=list)

    @property
    def is_root(self) -> bool:
        return self.parent is None

    @property
    def is_alternate(self) -> bool:
        """True for the first move of a non-mainline variation."""
        return self.variation_index > 0

    @property
    def mainline_child(self) -> int | None:
        return self.children[0] if self.children else None


class MoveTree:
    """A game tree rooted at a starting position.

    The first child of every node is its mainline continuation; further
    children start sibling variations in the order they were added.
    """

    __slots__ = ("_nodes", "headers")

    def __init__(
        self,
        start_fen: str = chess.STARTING_FEN,
        headers: dict[str, str] | None = None,
    ) -> None:
        board = chess.Board(start_fen)
        root = MoveNode(
            id=ROOT_ID,
            san="",
            uci="",
            fen=board.fen(),
            position=board.epd(),
            parent=None,
            ply=0,
        )
        self._nodes: list[MoveNode] = [root]
        self.headers: dict[str, str] = dict(headers or {})

    @classmethod
    def from_sans(
        cls, sans: Iterable[str], start_fen: str = chess.STARTING_FEN
    ) -> MoveTree:
        """Build a single-line tree from SAN moves."""
        tree = cls(start_fen)
        parent = ROOT_ID
        for san in sans:
            parent = tree.add_move(parent, san).id
        return tree

    # ── Inspection ───────────────────────────────────────────────────────

    def __len__(self) -> int:
        """Number of moves (the root is not counted)."""
        return len(self._nodes) - 1

    def __iter__(self) -> Iterator[MoveNode]:
        """Iterate over move nodes depth-first, mainline child first."""
        stack = list(reversed(self.root.children))
        while stack:
            node = self._nodes[stack.pop()]
            yield node
            stack.extend(reversed(node.children))

    @property
    def root(self) -> MoveNode:
        return self._nodes[ROOT_ID]

    @property
    def start_fen(self) -> str:
        return self.root.fen

    @property
    def is_empty(self) -> bool:
        return not self.root.children

    def node(self, node_id: int) -> MoveNode:
        if not 0 <= node_id < len(self._nodes):
            raise KeyError(node_id)
        return self._nodes[node_id]

    def parent_of(self, node: MoveNode) -> MoveNode | None:
        if node.parent is None:
            return None
        return self._nodes[node.parent]

    def siblings_of(self, node: MoveNode) -> list[MoveNode]:
        """Other children of *node*'s parent, in listed order."""
        parent = self.parent_of(node)
        if parent is None:
            return []
        return [self._nodes[i] for i in parent.children if i != node.id]

    def board_at(self, node_id: int) -> chess.Board:
        return chess.Board(self.node(node_id).fen)

    def line_from(self, node_id: int) -> list[MoveNode]:
        """*node_id* followed by its first-child continuation."""
        line: list[MoveNode] = []
        current: int | None = node_id
        while current is not None:
            node = self.node(current)
            line.append(node)
            current = node.mainline_child
        return line

    def mainline(self) -> list[MoveNode]:
        """Mainline moves from the root, excluding the root itself."""
        return self.line_from(ROOT_ID)[1:]

    def mainline_sans(self) -> list[str]:
        return [node.san for node in self.mainline()]

    def variations_at(self, index: int) -> list[MoveNode]:
        """First moves of the alternates to mainline move *index*."""
        if index < 0:
            raise IndexError(index)
        mainline = self.mainline()
        if index >= len(mainline):
            return []
        return self.siblings_of(mainline[index])

    def position_at(self, index: int) -> str:
        """Position key after mainline move *index* (-1 = start)."""
        if index == -1:
            return self.root.position
        return self.mainline()[index].position

    def find_child(self, parent_id: int, position: str) -> MoveNode | None:
        """First child of *parent_id* whose resulting position is *position*."""
        for child_id in self.node(parent_id).children:
            child = self._nodes[child_id]
            if child.position == position:
                return child
        return None

    # ── Mutation ─────────────────────────────────────────────────────────

    def add_move(
        self,
        parent_id: int,
        move: chess.Move | str,
        *,
        nags: Iterable[int] = (),
        comment: str = "",
        origin: NodeOrigin = NodeOrigin.SOLUTION,
    ) -> MoveNode:
        """Append *move* as a new child of *parent_id*.

        The first child becomes the mainline continuation; later children are
        sibling variations.  *move* may be a :class:`chess.Move` or SAN text.
        """
        parent = self.node(parent_id)
        board = chess.Board(parent.fen)
        if isinstance(move, str):
            try:
                move = board.parse_san(move)
            except ValueError as exc:
                raise IllegalMoveError(str(move), parent.fen) from exc
        elif not board.is_legal(move):
            raise IllegalMoveError(move.uci(), parent.fen)

        san = board.san(move)
        board.push(move)
        node = MoveNode(
            id=len(self._nodes),
            san=san,
            uci=move.uci(),
            fen=board.fen(),
            position=board.epd(),
            parent=parent.id,
            ply=parent.ply + 1,
            variation_index=len(parent.children),
            nags=tuple(dict.fromkeys(nags)),
            comment=comment,
            origin=origin,
        )
        self._nodes.append(node)
        parent.children.append(node.id)
        return node

    def copy(self) -> MoveTree:
        """Independent copy; mutating it never touches this tree."""
        clone = MoveTree.__new__(MoveTree)
        clone._nodes = [replace(node, children=list(node.children)) for node in self._nodes]
        clone.headers = dict(self.headers)
        return clone
