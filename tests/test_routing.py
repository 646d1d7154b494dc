"""Tests for minotaur.routing -- Dijkstra, A* and path helpers."""

from __future__ import annotations

from collections import Counter

import numpy as np
import pytest
from numpy.random import Generator

from minotaur.generation.registry import GENERATORS
from minotaur.generation.special_cells import distribute_special_cells
from minotaur.graph.builder import Graph, build_graph
from minotaur.grid.cell import CellKind, Coordinate
from minotaur.grid.grid import Grid
from minotaur.routing.astar import AStarPathfinder
from minotaur.routing.base import Pathfinder, path_cost, reconstruct_path
from minotaur.routing.dijkstra import DijkstraPathfinder
from minotaur.routing.registry import PATHFINDERS, create_pathfinder

R = CellKind.ROAD
W = CellKind.WALL
S = CellKind.SWAMP
A = CellKind.ACCELERATED_PATH

PATHFINDER_CLASSES = [DijkstraPathfinder, AStarPathfinder]


def assert_valid_path(graph: Graph, path: list[Coordinate]) -> None:
    """Every consecutive pair of ``path`` must be an edge of ``graph``."""
    for a, b in zip(path, path[1:]):
        assert b in {edge.target for edge in graph[a]}, f"{a} -> {b} is not an edge"


@pytest.fixture(params=PATHFINDER_CLASSES, ids=lambda cls: cls.name)
def finder(request: pytest.FixtureRequest) -> Pathfinder:
    """Each pathfinder implementation in turn."""
    return request.param()


class TestFindPath:
    """Contract shared by every pathfinder."""

    def test_example_route(self, finder: Pathfinder, sample_graph: Graph) -> None:
        start, end = Coordinate(2, 2), Coordinate(0, 3)
        path = finder.find_path(sample_graph, start, end)
        assert path[0] == start
        assert path[-1] == end
        assert len(path) == 4
        assert path_cost(sample_graph, path) == 6
        assert_valid_path(sample_graph, path)

    def test_isolated_start(self, finder: Pathfinder, sample_graph: Graph) -> None:
        assert finder.find_path(sample_graph, Coordinate(0, 0), Coordinate(2, 1)) == []

    def test_same_start_and_end(self, finder: Pathfinder, sample_graph: Graph) -> None:
        p = Coordinate(0, 0)
        assert finder.find_path(sample_graph, p, p) == [p]

    def test_same_start_and_end_outside_graph(
        self,
        finder: Pathfinder,
        sample_graph: Graph,
    ) -> None:
        p = Coordinate(1, 1)
        assert finder.find_path(sample_graph, p, p) == [p]

    def test_wall_end(self, finder: Pathfinder, sample_graph: Graph) -> None:
        assert finder.find_path(sample_graph, Coordinate(2, 2), Coordinate(1, 1)) == []

    def test_wall_start(self, finder: Pathfinder, sample_graph: Graph) -> None:
        assert finder.find_path(sample_graph, Coordinate(1, 0), Coordinate(2, 2)) == []

    def test_unreachable_end(self, finder: Pathfinder, sample_graph: Graph) -> None:
        assert finder.find_path(sample_graph, Coordinate(2, 2), Coordinate(3, 0)) == []

    def test_all_wall_grid(self, finder: Pathfinder, wall_grid: Grid) -> None:
        graph = build_graph(wall_grid)
        assert finder.find_path(graph, Coordinate(0, 0), Coordinate(3, 3)) == []
        assert finder.find_path(graph, Coordinate(1, 2), Coordinate(2, 1)) == []

    def test_unique_shortest_path(self, finder: Pathfinder) -> None:
        grid = Grid.from_kinds(
            [
                [R, R, R],
                [S, W, A],
                [R, R, R],
            ],
        )
        path = finder.find_path(build_graph(grid), Coordinate(0, 0), Coordinate(2, 0))
        assert path == [Coordinate(0, 0), Coordinate(1, 0), Coordinate(2, 0)]

    def test_prefers_cheap_detour(self, finder: Pathfinder) -> None:
        grid = Grid.from_kinds(
            [
                [R, S, S, S, R],
                [A, W, W, W, A],
                [A, A, A, A, A],
            ],
        )
        graph = build_graph(grid)
        path = finder.find_path(graph, Coordinate(0, 0), Coordinate(0, 4))
        assert len(path) == 9
        assert path_cost(graph, path) == 9
        assert Coordinate(2, 2) in path


class TestAlgorithmsAgree:
    """Dijkstra and A* must find routes of equal cost on real mazes."""

    @pytest.mark.parametrize("generator", sorted(GENERATORS))
    @pytest.mark.parametrize("fraction", [0.0, 0.3, 1.0])
    def test_equal_costs(self, generator: str, fraction: float, rng: Generator) -> None:
        grid = GENERATORS[generator](rng=rng).generate(17, 23)
        distribute_special_cells(grid, fraction, rng)
        graph = build_graph(grid)
        passable = grid.passable_positions()
        dijkstra, astar = DijkstraPathfinder(), AStarPathfinder()

        for _ in range(10):
            i, j = rng.integers(len(passable), size=2)
            start, end = passable[int(i)], passable[int(j)]
            path_d = dijkstra.find_path(graph, start, end)
            path_a = astar.find_path(graph, start, end)

            # Generated mazes are connected, so a route always exists.
            assert path_d[0] == path_a[0] == start
            assert path_d[-1] == path_a[-1] == end
            assert_valid_path(graph, path_d)
            assert_valid_path(graph, path_a)
            assert path_cost(graph, path_d) == path_cost(graph, path_a)


class RecordingGraph(dict):
    """Adjacency map that remembers which nodes had their edges read."""

    def __init__(self, graph: Graph) -> None:
        super().__init__(graph)
        self.expanded: list[Coordinate] = []

    def get(self, key: Coordinate, default: list | None = None) -> list | None:
        self.expanded.append(key)
        return super().get(key, default)


class TestSearchEffort:
    """How much of the graph each search touches."""

    def test_dijkstra_stops_when_end_is_settled(self) -> None:
        # A 1x30 corridor: the end sits next to the start, the rest lies beyond.
        grid = Grid(width=1, height=30, fill=CellKind.ROAD)
        graph = RecordingGraph(build_graph(grid))
        path = DijkstraPathfinder().find_path(graph, Coordinate(0, 0), Coordinate(0, 1))
        assert path == [Coordinate(0, 0), Coordinate(0, 1)]
        assert graph.expanded == [Coordinate(0, 0)]

    def test_dijkstra_never_expands_past_the_end_distance(self) -> None:
        grid = Grid(width=1, height=30, fill=CellKind.ROAD)
        graph = RecordingGraph(build_graph(grid))
        DijkstraPathfinder().find_path(graph, Coordinate(0, 10), Coordinate(0, 12))
        assert Coordinate(0, 12) not in graph.expanded
        assert all(abs(node.y - 10) <= 2 for node in graph.expanded)

    @pytest.mark.parametrize("seed", [1, 2, 3])
    def test_nodes_are_expanded_at_most_once(
        self,
        finder: Pathfinder,
        seed: int,
    ) -> None:
        rng = np.random.default_rng(seed)
        grid = Grid(width=15, height=15, fill=CellKind.ROAD)
        distribute_special_cells(grid, 0.8, rng)
        for start, end in [((0, 0), (14, 14)), ((14, 0), (0, 14)), ((7, 0), (7, 14))]:
            graph = RecordingGraph(build_graph(grid))
            path = finder.find_path(graph, Coordinate(*start), Coordinate(*end))
            assert path
            counts = Counter(graph.expanded)
            assert max(counts.values()) == 1


class TestHelpers:
    """Tests for path reconstruction, costing and lookup."""

    def test_reconstruct_path(self) -> None:
        a, b, c = Coordinate(0, 0), Coordinate(0, 1), Coordinate(0, 2)
        assert reconstruct_path({b: a, c: b}, a, c) == [a, b, c]

    def test_reconstruct_broken_chain(self) -> None:
        a, b, c = Coordinate(0, 0), Coordinate(0, 1), Coordinate(0, 2)
        assert reconstruct_path({c: b}, a, c) == []

    def test_path_cost_of_trivial_paths(self, sample_graph: Graph) -> None:
        assert path_cost(sample_graph, []) == 0
        assert path_cost(sample_graph, [Coordinate(0, 0)]) == 0

    def test_path_cost_rejects_non_edge(self, sample_graph: Graph) -> None:
        with pytest.raises(ValueError, match="no edge"):
            path_cost(sample_graph, [Coordinate(0, 2), Coordinate(2, 2)])

    def test_heuristic_is_manhattan(self) -> None:
        assert AStarPathfinder.heuristic(Coordinate(1, 5), Coordinate(4, 1)) == 7

    def test_registry(self) -> None:
        for name, cls in PATHFINDERS.items():
            assert isinstance(create_pathfinder(name), cls)
        assert isinstance(create_pathfinder("AStar"), AStarPathfinder)
        with pytest.raises(ValueError, match="unknown pathfinder"):
            create_pathfinder("bfs")
