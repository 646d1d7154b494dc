"""Shared fixtures for the Minotaur test suite."""

from __future__ import annotations

import numpy as np
import pytest
from numpy.random import Generator

from minotaur.graph.builder import Graph, build_graph
from minotaur.grid.cell import CellKind
from minotaur.grid.grid import Grid
from minotaur.session.config import MazeConfig

R = CellKind.ROAD
W = CellKind.WALL
S = CellKind.SWAMP
A = CellKind.ACCELERATED_PATH


@pytest.fixture
def rng() -> Generator:
    """A deterministic random generator for reproducible tests."""
    return np.random.default_rng(seed=12345)


@pytest.fixture
def sample_grid() -> Grid:
    """A 4x4 mixed-terrain grid; each inner list is one ``x`` row."""
    return Grid.from_kinds(
        [
            [R, W, R, R],
            [W, W, R, R],
            [W, R, R, S],
            [A, W, W, R],
        ],
    )


@pytest.fixture
def sample_graph(sample_grid: Grid) -> Graph:
    """Adjacency map of ``sample_grid``."""
    return build_graph(sample_grid)


@pytest.fixture
def wall_grid() -> Grid:
    """A 4x4 grid with no passable cell."""
    return Grid(width=4, height=4)


@pytest.fixture
def small_config() -> MazeConfig:
    """A seeded 11x11 session config (no YAML file needed)."""
    return MazeConfig(seed=777, width=11, height=11)
