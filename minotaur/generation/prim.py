"""Randomized Prim's algorithm.

Grows a single passage tree outward from a random room.  The frontier
holds wall rooms two steps from the tree; each iteration attaches one of
them, picked uniformly, to a random tree room beside it.  The result has
many short dead ends and little directional bias.
"""

from __future__ import annotations

from minotaur.generation.base import STEP, MazeGenerator, carve_passage
from minotaur.grid.cell import CellKind, Coordinate
from minotaur.grid.grid import Grid


class PrimGenerator(MazeGenerator):
    """Maze generator based on randomized Prim's algorithm."""

    def _carve(self, grid: Grid) -> None:
        start = self._random_room(grid)
        grid.set_kind(start.x, start.y, CellKind.ROAD)

        # List for O(1) uniform picks, set for O(1) membership.
        frontier: list[Coordinate] = []
        in_frontier: set[Coordinate] = set()
        self._extend_frontier(grid, start, frontier, in_frontier)

        while frontier:
            index = int(self.rng.integers(len(frontier)))
            frontier[index], frontier[-1] = frontier[-1], frontier[index]
            cell = frontier.pop()
            in_frontier.discard(cell)

            carved = [
                n
                for n in grid.neighbours(cell.x, cell.y, step=STEP)
                if grid.cells[n.x][n.y] is not CellKind.WALL
            ]
            if carved:
                target = carved[int(self.rng.integers(len(carved)))]
                carve_passage(grid, cell, target)
            self._extend_frontier(grid, cell, frontier, in_frontier)

    @staticmethod
    def _extend_frontier(
        grid: Grid,
        cell: Coordinate,
        frontier: list[Coordinate],
        in_frontier: set[Coordinate],
    ) -> None:
        """Queue the still-wall rooms two steps from ``cell``."""
        for n in grid.neighbours(cell.x, cell.y, step=STEP):
            if grid.cells[n.x][n.y] is CellKind.WALL and n not in in_frontier:
                frontier.append(n)
                in_frontier.add(n)
