"""Name-based lookup of pathfinders."""

from __future__ import annotations

from minotaur.routing.astar import AStarPathfinder
from minotaur.routing.base import Pathfinder
from minotaur.routing.dijkstra import DijkstraPathfinder

PATHFINDERS: dict[str, type[Pathfinder]] = {
    DijkstraPathfinder.name: DijkstraPathfinder,
    AStarPathfinder.name: AStarPathfinder,
}


def create_pathfinder(name: str) -> Pathfinder:
    """Instantiate the pathfinder registered under ``name``.

    Args:
        name: One of the keys of ``PATHFINDERS`` (case-insensitive).

    Raises:
        ValueError: If ``name`` is not a registered pathfinder.
    """
    try:
        cls = PATHFINDERS[name.lower()]
    except KeyError:
        valid = ", ".join(PATHFINDERS)
        msg = f"unknown pathfinder {name!r}; expected one of: {valid}"
        raise ValueError(msg) from None
    return cls()
