"""Special-cell distribution -- sprinkling swamps and fast lanes over roads.

Runs after generation and rewrites a fraction of the ROAD cells in place.
The number of cells converted is bounded by the road count, so the
maze's wall layout and connectivity never change; only traversal costs
do.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import numpy as np

from minotaur.grid.cell import CellKind, Coordinate

if TYPE_CHECKING:
    from numpy.random import Generator

    from minotaur.grid.grid import Grid

logger = logging.getLogger(__name__)


def special_kinds() -> list[CellKind]:
    """Return every cell kind other than WALL and ROAD, in enum order."""
    return [k for k in CellKind if k not in (CellKind.WALL, CellKind.ROAD)]


def distribute_special_cells(
    grid: Grid,
    fraction: float,
    rng: Generator | None = None,
) -> dict[CellKind, int]:
    """Convert a fraction of ROAD cells into special kinds.

    ``floor(roads * fraction)`` cells are split evenly between the special
    kinds (any remainder is dropped).  Each placement draws uniformly
    random cells until it hits a ROAD.  If a placement misses
    ``width * height`` times in a row, it picks directly from the
    remaining ROAD positions instead; if no ROAD is left the
    distribution stops early.

    Args:
        grid: Grid to modify in place.
        fraction: Share of current ROAD cells to convert, in ``[0, 1]``.
        rng: Random source; a fresh unseeded generator when omitted.

    Returns:
        Number of cells placed per special kind.

    Raises:
        ValueError: If ``fraction`` lies outside ``[0, 1]``.
    """
    if not 0.0 <= fraction <= 1.0:
        msg = f"special-cell fraction must be within [0, 1], got {fraction}"
        raise ValueError(msg)

    if rng is None:
        rng = np.random.default_rng()
    roads = grid.count(CellKind.ROAD)
    kinds = special_kinds()
    per_kind = int(roads * fraction) // len(kinds) if kinds else 0
    placed = dict.fromkeys(kinds, 0)
    max_misses = grid.width * grid.height

    for kind in kinds:
        for _ in range(per_kind):
            if roads == 0:
                logger.info("No ROAD cells left; stopping special-cell placement")
                return placed
            target = _draw_road(grid, rng, max_misses)
            grid.set_kind(target.x, target.y, kind)
            placed[kind] += 1
            roads -= 1

    logger.debug("Placed special cells: %s", {k.name: n for k, n in placed.items()})
    return placed


def _draw_road(grid: Grid, rng: Generator, max_misses: int) -> Coordinate:
    """Return a uniformly random ROAD position of a grid that has one."""
    for _ in range(max_misses):
        x = int(rng.integers(grid.width))
        y = int(rng.integers(grid.height))
        if grid.cells[x][y] is CellKind.ROAD:
            return Coordinate(x, y)

    logger.info("Random probing missed %d times; sampling remaining roads", max_misses)
    remaining = list(grid.positions(CellKind.ROAD))
    return remaining[int(rng.integers(len(remaining)))]
