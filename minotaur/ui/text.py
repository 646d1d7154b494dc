"""Plain-text rendering of mazes, routes and the symbol legend.

One output line per ``x`` value, cell symbols separated by spaces.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from minotaur.grid.cell import CellKind

if TYPE_CHECKING:
    from collections.abc import Iterable

    from minotaur.grid.cell import Coordinate
    from minotaur.grid.grid import Grid

PATH_SYMBOL = "o"
START_SYMBOL = "A"
END_SYMBOL = "B"

_MARKERS: dict[str, str] = {
    "PATH": PATH_SYMBOL,
    "START": START_SYMBOL,
    "END": END_SYMBOL,
}


def render_maze(
    grid: Grid,
    path: Iterable[Coordinate] = (),
    start: Coordinate | None = None,
    end: Coordinate | None = None,
) -> str:
    """Draw ``grid`` as text, overlaying an optional route.

    Start and end markers take precedence over path markers.
    """
    on_path = set(path)
    lines: list[str] = []
    for x, row in enumerate(grid.cells):
        symbols: list[str] = []
        for y, kind in enumerate(row):
            point = (x, y)
            if start is not None and point == tuple(start):
                symbols.append(START_SYMBOL)
            elif end is not None and point == tuple(end):
                symbols.append(END_SYMBOL)
            elif point in on_path:
                symbols.append(PATH_SYMBOL)
            else:
                symbols.append(kind.symbol)
        lines.append(" ".join(symbols))
    return "\n".join(lines)


def render_legend() -> str:
    """Describe every cell and route symbol, one per line."""
    lines = ["Legend:", "Cell symbols:"]
    for kind in CellKind:
        cost = "impassable" if kind.cost is None else f"cost {kind.cost}"
        lines.append(f"{kind.symbol} - {kind.name} ({cost})")
    lines.append("Path symbols:")
    for name, symbol in _MARKERS.items():
        lines.append(f"{symbol} - {name}")
    return "\n".join(lines)
