"""Shared scaffolding for maze generators.

Every generator works on a stride-2 lattice: cells whose ``x`` and ``y``
are both odd are *rooms*, and the single cell between two rooms is a
connector.  Carving a passage between two rooms two steps apart turns
both rooms and their connector into ROAD.

For an even dimension the last index is odd, so the last row or column
holds rooms and may be carved; the maze then has no outer wall on that
side.  A dimension of 1 has no rooms at all and the grid stays solid.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field

import numpy as np
from numpy.random import Generator

from minotaur.grid.cell import CellKind, Coordinate
from minotaur.grid.grid import Grid

logger = logging.getLogger(__name__)

STEP = 2


def lattice_indices(size: int) -> range:
    """Return the room indices (odd values below ``size``) of one axis."""
    return range(1, size, STEP)


def lattice_points(grid: Grid) -> list[Coordinate]:
    """Return every room of ``grid`` in row-major order."""
    return [
        Coordinate(x, y)
        for x in lattice_indices(grid.width)
        for y in lattice_indices(grid.height)
    ]


def carve_passage(grid: Grid, a: Coordinate, b: Coordinate) -> None:
    """Open rooms ``a`` and ``b`` and the connector between them.

    Args:
        grid: Grid to carve into.
        a: First room.
        b: Second room, exactly two cells from ``a`` along one axis.
    """
    mid = Coordinate((a.x + b.x) // 2, (a.y + b.y) // 2)
    for cell in (a, mid, b):
        grid.set_kind(cell.x, cell.y, CellKind.ROAD)


@dataclass
class MazeGenerator(ABC):
    """Base class for maze generation algorithms.

    Attributes:
        rng: Random source for every choice the algorithm makes.  Pass a
            seeded generator for reproducible mazes.
    """

    rng: Generator = field(default_factory=np.random.default_rng)

    def generate(self, width: int, height: int) -> Grid:
        """Create a ``width`` x ``height`` maze.

        Args:
            width: Extent of the ``x`` axis (must be >= 1).
            height: Extent of the ``y`` axis (must be >= 1).

        Returns:
            A fully populated Grid in which every ROAD cell is reachable
            from every other ROAD cell.

        Raises:
            ValueError: If either dimension is smaller than 1.
        """
        grid = Grid(width=width, height=height)
        if lattice_indices(width) and lattice_indices(height):
            self._carve(grid)
        logger.debug(
            "%s carved %d road cells in a %dx%d grid",
            type(self).__name__,
            grid.count(CellKind.ROAD),
            width,
            height,
        )
        return grid

    def _random_room(self, grid: Grid) -> Coordinate:
        """Pick a uniformly random room of ``grid``."""
        xs = lattice_indices(grid.width)
        ys = lattice_indices(grid.height)
        return Coordinate(
            xs[int(self.rng.integers(len(xs)))],
            ys[int(self.rng.integers(len(ys)))],
        )

    @abstractmethod
    def _carve(self, grid: Grid) -> None:
        """Carve passages into an all-wall grid that has at least one room."""
