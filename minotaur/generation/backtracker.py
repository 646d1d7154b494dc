"""Recursive backtracker (randomized depth-first search).

Walks from a random room into random unvisited neighbouring rooms,
carving as it goes, and backs up along its own trail on dead ends.  An
explicit stack replaces recursion so large grids cannot overflow the
interpreter stack.  Produces long winding corridors with few branches.
"""

from __future__ import annotations

from minotaur.generation.base import STEP, MazeGenerator, carve_passage
from minotaur.grid.cell import CellKind, Coordinate
from minotaur.grid.grid import Grid


class BacktrackerGenerator(MazeGenerator):
    """Maze generator based on iterative depth-first backtracking."""

    def _carve(self, grid: Grid) -> None:
        start = self._random_room(grid)
        grid.set_kind(start.x, start.y, CellKind.ROAD)
        stack: list[Coordinate] = [start]

        while stack:
            current = stack[-1]
            unvisited = [
                n
                for n in grid.neighbours(current.x, current.y, step=STEP)
                if grid.cells[n.x][n.y] is CellKind.WALL
            ]
            if not unvisited:
                stack.pop()
                continue
            target = unvisited[int(self.rng.integers(len(unvisited)))]
            carve_passage(grid, current, target)
            stack.append(target)
