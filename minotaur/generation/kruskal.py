"""Randomized Kruskal's algorithm.

Treats every pair of rooms two steps apart as a candidate edge, visits
the edges in a uniformly random order, and carves each one that joins
two not-yet-connected components.  The result is a uniform-ish random
spanning tree over the room lattice.
"""

from __future__ import annotations

from minotaur.generation.base import (
    STEP,
    MazeGenerator,
    carve_passage,
    lattice_points,
)
from minotaur.generation.disjoint_set import DisjointSet
from minotaur.grid.cell import CellKind, Coordinate
from minotaur.grid.grid import Grid


class KruskalGenerator(MazeGenerator):
    """Maze generator based on randomized Kruskal's algorithm."""

    def _carve(self, grid: Grid) -> None:
        rooms = lattice_points(grid)
        for room in rooms:
            grid.set_kind(room.x, room.y, CellKind.ROAD)

        edges = self.candidate_edges(grid)
        components = DisjointSet(grid.width * grid.height)
        for index in self.rng.permutation(len(edges)):
            a, b = edges[index]
            if components.union(self._cell_id(grid, a), self._cell_id(grid, b)):
                carve_passage(grid, a, b)

    @staticmethod
    def candidate_edges(grid: Grid) -> list[tuple[Coordinate, Coordinate]]:
        """Return every room pair two steps apart, right and down only."""
        edges: list[tuple[Coordinate, Coordinate]] = []
        for room in lattice_points(grid):
            if room.x + STEP < grid.width:
                edges.append((room, Coordinate(room.x + STEP, room.y)))
            if room.y + STEP < grid.height:
                edges.append((room, Coordinate(room.x, room.y + STEP)))
        return edges

    @staticmethod
    def _cell_id(grid: Grid, cell: Coordinate) -> int:
        return cell.x * grid.height + cell.y
