"""Pathfinder interface and helpers shared by the search algorithms."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, ClassVar

from minotaur.grid.cell import Coordinate

if TYPE_CHECKING:
    from collections.abc import Sequence

    from minotaur.graph.builder import Graph

Previous = dict[Coordinate, Coordinate]


class Pathfinder(ABC):
    """Shortest-path search over a weighted adjacency map.

    Subclasses implement ``_search``; this class handles the trivial
    ``start == end`` case and turns back-pointers into a path.
    """

    name: ClassVar[str]

    def find_path(
        self,
        graph: Graph,
        start: Coordinate,
        end: Coordinate,
    ) -> list[Coordinate]:
        """Find a minimum-cost route from ``start`` to ``end``.

        Args:
            graph: Adjacency map produced by ``build_graph``.
            start: First cell of the route.
            end: Last cell of the route.

        Returns:
            The coordinates from ``start`` to ``end`` inclusive,
            ``[start]`` when they coincide, or an empty list when ``end``
            cannot be reached (including when either endpoint is not a
            node of ``graph``).
        """
        if start == end:
            return [start]
        previous = self._search(graph, start, end)
        if previous is None:
            return []
        return reconstruct_path(previous, start, end)

    @abstractmethod
    def _search(
        self,
        graph: Graph,
        start: Coordinate,
        end: Coordinate,
    ) -> Previous | None:
        """Run the search and return back-pointers, or None if unreachable."""


def reconstruct_path(
    previous: Previous,
    start: Coordinate,
    end: Coordinate,
) -> list[Coordinate]:
    """Walk back-pointers from ``end`` to ``start`` and reverse them.

    Returns an empty list if the chain breaks before reaching ``start``.
    """
    path = [end]
    current = end
    while current != start:
        if current not in previous:
            return []
        current = previous[current]
        path.append(current)
    path.reverse()
    return path


def path_cost(graph: Graph, path: Sequence[Coordinate]) -> int:
    """Return the total edge weight along ``path``.

    Raises:
        ValueError: If two consecutive cells are not joined by an edge.
    """
    total = 0
    for a, b in zip(path, path[1:]):
        for edge in graph.get(a, ()):
            if edge.target == b:
                total += edge.weight
                break
        else:
            msg = f"no edge from {tuple(a)} to {tuple(b)}"
            raise ValueError(msg)
    return total
