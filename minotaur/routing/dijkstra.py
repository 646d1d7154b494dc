"""Dijkstra's uniform-cost search.

The priority queue may hold several entries for one node; only the first
pop of a node counts; that pop settles it and later duplicates are
skipped.  The search stops the moment ``end`` is settled.
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


class DijkstraPathfinder(Pathfinder):
    """Shortest paths by cost-so-far ordering, no heuristic."""

    name = "dijkstra"

    def _search(
        self,
        graph: Graph,
        start: Coordinate,
        end: Coordinate,
    ) -> Previous | None:
        dist: dict[Coordinate, int] = {start: 0}
        previous: Previous = {}
        settled: set[Coordinate] = set()
        # (distance, seq, node); seq keeps pops FIFO among equal distances
        seq = itertools.count()
        queue: list[tuple[int, int, Coordinate]] = [(0, next(seq), start)]

        while queue:
            d, _, node = heapq.heappop(queue)
            if node in settled:
                continue
            settled.add(node)
            if node == end:
                return previous

            for target, weight in graph.get(node, ()):
                alt = d + weight
                if alt < dist.get(target, inf):
                    dist[target] = alt
                    previous[target] = node
                    heapq.heappush(queue, (alt, next(seq), target))

        return None
