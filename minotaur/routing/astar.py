"""A* search with a Manhattan-distance heuristic.

Moves are axis-aligned and every edge weighs at least 1, so the
Manhattan distance never overestimates the remaining cost.  The
heuristic is also consistent, which means the first expansion of a node
is already optimal: expanded nodes go to a closed set and are never
revisited.

Queue entries are ``(f, h, seq, node)``: lowest ``f`` first, then the
node closer to the goal, then insertion order.
"""

from __future__ import annotations

import heapq
import itertools
from math import inf
from typing import TYPE_CHECKING

from minotaur.routing.base import Pathfinder, Previous

if TYPE_CHECKING:
    from minotaur.graph.builder import Graph
    from minotaur.grid.cell import Coordinate


class AStarPathfinder(Pathfinder):
    """Shortest paths guided by Manhattan distance to the goal."""

    name = "astar"

    @staticmethod
    def heuristic(node: Coordinate, goal: Coordinate) -> int:
        """Admissible estimate of the cost from ``node`` to ``goal``."""
        return node.manhattan(goal)

    def _search(
        self,
        graph: Graph,
        start: Coordinate,
        end: Coordinate,
    ) -> Previous | None:
        g_score: dict[Coordinate, int] = {start: 0}
        previous: Previous = {}
        closed: set[Coordinate] = set()
        seq = itertools.count()
        h0 = self.heuristic(start, end)
        open_pq: list[tuple[int, int, int, Coordinate]] = [(h0, h0, next(seq), start)]

        while open_pq:
            _, _, _, node = heapq.heappop(open_pq)
            if node in closed:
                continue
            if node == end:
                return previous
            closed.add(node)

            g_node = g_score[node]
            for target, weight in graph.get(node, ()):
                if target in closed:
                    continue
                tentative = g_node + weight
                if tentative < g_score.get(target, inf):
                    g_score[target] = tentative
                    previous[target] = node
                    h = self.heuristic(target, end)
                    heapq.heappush(open_pq, (tentative + h, h, next(seq), target))

        return None
