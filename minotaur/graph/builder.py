"""Graph construction -- from a cell grid to a weighted adjacency map.

Each non-wall cell becomes a node.  Each orthogonal non-wall neighbour
becomes a directed edge whose weight is the *destination* cell's cost,
so stepping from a road into a swamp costs more than the reverse step.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, NamedTuple

from minotaur.grid.cell import Coordinate
from minotaur.grid.grid import ORTHOGONAL

if TYPE_CHECKING:
    from minotaur.grid.grid import Grid


class Edge(NamedTuple):
    """A directed, weighted step to ``target``."""

    target: Coordinate
    weight: int


Graph = dict[Coordinate, list[Edge]]


def build_graph(grid: Grid) -> Graph:
    """Build the adjacency map of every passable cell in ``grid``.

    Nodes without passable neighbours are still present, with an empty
    edge list.  Neighbours are listed in up, down, left, right order.

    Args:
        grid: The maze grid.  Not modified.

    Returns:
        Mapping from each passable coordinate to its outgoing edges.
    """
    graph: Graph = {}
    for x, row in enumerate(grid.cells):
        for y, kind in enumerate(row):
            if not kind.is_passable:
                continue
            edges: list[Edge] = []
            for dx, dy in ORTHOGONAL:
                nx, ny = x + dx, y + dy
                if grid.is_passable(nx, ny):
                    edges.append(Edge(Coordinate(nx, ny), grid.cells[nx][ny].cost))
            graph[Coordinate(x, y)] = edges
    return graph
