"""Cell kinds and coordinates -- the vocabulary of the maze grid.

A ``CellKind`` is pure data: a traversal cost and a display symbol.  New
terrain only needs a new member here; generation, special-cell placement
and routing all iterate the enum instead of naming members.
"""

from __future__ import annotations

from enum import Enum
from typing import NamedTuple


class CellKind(Enum):
    """Terrain of a single grid cell.

    Each member's value is ``(cost, symbol)``.  ``cost`` is the price paid
    for stepping *into* the cell, or ``None`` for impassable terrain.
    """

    WALL = (None, "#")
    ROAD = (2, ".")
    SWAMP = (3, "~")
    ACCELERATED_PATH = (1, ">")

    def __init__(self, cost: int | None, symbol: str) -> None:
        self.cost = cost
        self.symbol = symbol

    @property
    def is_passable(self) -> bool:
        """Return True if the cell can be walked through."""
        return self.cost is not None


class Coordinate(NamedTuple):
    """An ``(x, y)`` grid position, also used as a graph node id."""

    x: int
    y: int

    def manhattan(self, other: Coordinate) -> int:
        """Return the axis-aligned distance to ``other``."""
        return abs(self.x - other.x) + abs(self.y - other.y)
