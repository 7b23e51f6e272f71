"""Enumerations shared across the move-tree layer."""

from __future__ import annotations

from enum import StrEnum


class NodeOrigin(StrEnum):
    """Which tree a node was first written into."""

    SOLUTION = "solution"
    CANDIDATE = "candidate"


class Orientation(StrEnum):
    """Board orientation a problem is presented from."""

    WHITE = "white"
    BLACK = "black"
