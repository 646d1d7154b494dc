"""MazeSession -- runs the generate / distribute / route pipeline.

Owns the seeded RNG and the current grid, and drives the stages in
order:

1. Generate the maze with the configured generator
2. Convert a share of roads into special cells (when requested)
3. Build a fresh graph from the grid
4. Search it with the configured pathfinder

Argument checking happens here, at the boundary; the algorithms below
assume valid input.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

import numpy as np
from numpy.random import Generator

from minotaur.generation.registry import GENERATORS, create_generator
from minotaur.generation.special_cells import distribute_special_cells
from minotaur.graph.builder import build_graph
from minotaur.grid.cell import Coordinate
from minotaur.grid.grid import Grid
from minotaur.routing.base import path_cost
from minotaur.routing.registry import PATHFINDERS, create_pathfinder
from minotaur.session.config import MazeConfig

logger = logging.getLogger(__name__)


@dataclass
class SolveResult:
    """Outcome of one route search.

    Attributes:
        start: Requested start cell.
        end: Requested end cell.
        path: Cells from start to end inclusive; empty if unreachable.
        cost: Total edge weight along ``path`` (0 when empty).
    """

    start: Coordinate
    end: Coordinate
    path: list[Coordinate]
    cost: int

    @property
    def found(self) -> bool:
        """Return True if a route exists."""
        return bool(self.path)


@dataclass
class MazeSession:
    """Drives maze generation and routing for one configuration.

    Attributes:
        config: Validated session configuration.
        rng: Master seeded random generator.
        grid: The current maze, or None before ``generate`` runs.
    """

    config: MazeConfig
    rng: Generator = field(init=False)
    grid: Grid | None = field(init=False, default=None)

    def __post_init__(self) -> None:
        """Validate the config and seed the RNG.

        Raises:
            ValueError: If any config value is out of range or unknown.
        """
        validate_config(self.config)
        self.rng = np.random.default_rng(self.config.seed)

    def generate(self) -> Grid:
        """Generate a new maze and optionally sprinkle special cells.

        Returns:
            The new grid, also stored on the session.
        """
        generator = create_generator(self.config.generator, self.rng)
        grid = generator.generate(self.config.width, self.config.height)
        if self.config.special_fraction > 0:
            distribute_special_cells(grid, self.config.special_fraction, self.rng)
        logger.info(
            "Generated %dx%d maze with %s (%d passable cells)",
            grid.width,
            grid.height,
            self.config.generator,
            len(grid.passable_positions()),
        )
        self.grid = grid
        return grid

    def default_endpoints(self) -> tuple[Coordinate, Coordinate] | None:
        """Return the first and last passable cells, or None if all walls."""
        grid = self._require_grid()
        passable = grid.passable_positions()
        if not passable:
            return None
        return passable[0], passable[-1]

    def solve(
        self,
        start: tuple[int, int] | None = None,
        end: tuple[int, int] | None = None,
        pathfinder: str | None = None,
    ) -> SolveResult:
        """Find a route through the current maze.

        Endpoints default to the config values, then to
        ``default_endpoints``.  A wall endpoint is not an error; it
        simply yields an empty path.

        Args:
            start: Route start; overrides ``config.start``.
            end: Route end; overrides ``config.end``.
            pathfinder: Registered pathfinder name; overrides the config.

        Returns:
            The route and its cost.

        Raises:
            ValueError: If an endpoint lies outside the grid, the grid
                has no passable cell to default to, or the pathfinder
                name is unknown.
        """
        grid = self._require_grid()
        start = start if start is not None else self.config.start
        end = end if end is not None else self.config.end
        if start is None or end is None:
            defaults = self.default_endpoints()
            if defaults is None:
                msg = "maze has no passable cells to route between"
                raise ValueError(msg)
            start = start if start is not None else defaults[0]
            end = end if end is not None else defaults[1]

        start, end = Coordinate(*start), Coordinate(*end)
        for label, point in (("start", start), ("end", end)):
            if not grid.in_bounds(point.x, point.y):
                msg = (
                    f"{label} {tuple(point)} is outside the "
                    f"{grid.width}x{grid.height} grid"
                )
                raise ValueError(msg)

        finder = create_pathfinder(pathfinder or self.config.pathfinder)
        graph = build_graph(grid)
        path = finder.find_path(graph, start, end)
        if path:
            cost = path_cost(graph, path)
            logger.info(
                "%s found a %d-cell route %s -> %s costing %d",
                finder.name,
                len(path),
                tuple(start),
                tuple(end),
                cost,
            )
        else:
            cost = 0
            logger.warning(
                "%s found no route %s -> %s",
                finder.name,
                tuple(start),
                tuple(end),
            )
        return SolveResult(start=start, end=end, path=path, cost=cost)

    def _require_grid(self) -> Grid:
        """Return the current grid, generating one on first use."""
        if self.grid is None:
            return self.generate()
        return self.grid


def validate_config(config: MazeConfig) -> None:
    """Reject configurations the pipeline cannot run.

    Raises:
        ValueError: On non-positive dimensions, unknown algorithm names,
            or a special-cell fraction outside ``[0, 1]``.
    """
    if config.width < 1 or config.height < 1:
        msg = (
            f"maze dimensions must be positive, got {config.width}x{config.height}"
        )
        raise ValueError(msg)
    if config.generator.lower() not in GENERATORS:
        valid = ", ".join(GENERATORS)
        msg = f"unknown generator {config.generator!r}; expected one of: {valid}"
        raise ValueError(msg)
    if config.pathfinder.lower() not in PATHFINDERS:
        valid = ", ".join(PATHFINDERS)
        msg = f"unknown pathfinder {config.pathfinder!r}; expected one of: {valid}"
        raise ValueError(msg)
    if not 0.0 <= config.special_fraction <= 1.0:
        msg = (
            "special-cell fraction must be within [0, 1], "
            f"got {config.special_fraction}"
        )
        raise ValueError(msg)
