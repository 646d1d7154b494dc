"""Grid -- the rectangular cell store shared by every pipeline stage.

Generators fill it, the special-cell distributor rewrites some of its
roads, and the graph builder reads it.  The grid itself has no behaviour
beyond storage, bounds checks and a few spatial queries.
"""

from __future__ import annotations

from collections import Counter
from dataclasses import InitVar, dataclass, field
from typing import TYPE_CHECKING

from minotaur.grid.cell import CellKind, Coordinate

if TYPE_CHECKING:
    from collections.abc import Iterator, Sequence

# Orthogonal unit offsets in a fixed order: up, down, left, right.
ORTHOGONAL: tuple[tuple[int, int], ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))


@dataclass
class Grid:
    """A 2D maze grid.

    Attributes:
        width: Extent of the ``x`` axis (rows in text renderings).
        height: Extent of the ``y`` axis (columns in text renderings).
        cells: 2D list of CellKind indexed as ``cells[x][y]``.
    """

    width: int
    height: int
    fill: InitVar[CellKind] = CellKind.WALL
    cells: list[list[CellKind]] = field(init=False, repr=False)

    def __post_init__(self, fill: CellKind) -> None:
        """Fill the grid with ``fill``, one independent list per row.

        Raises:
            ValueError: If either dimension is smaller than 1.
        """
        if self.width < 1 or self.height < 1:
            msg = f"grid dimensions must be positive, got {self.width}x{self.height}"
            raise ValueError(msg)
        self.cells = [[fill] * self.height for _ in range(self.width)]

    @classmethod
    def from_kinds(cls, kinds: Sequence[Sequence[CellKind]]) -> Grid:
        """Build a grid from nested rows where ``kinds[x][y]`` is a cell.

        Args:
            kinds: Equal-length rows of cell kinds.

        Returns:
            A new Grid holding a copy of ``kinds``.

        Raises:
            ValueError: If ``kinds`` is empty or ragged.
        """
        if not kinds or not kinds[0]:
            msg = "cannot build a grid from an empty layout"
            raise ValueError(msg)
        height = len(kinds[0])
        if any(len(row) != height for row in kinds):
            msg = "all rows of a grid layout must have the same length"
            raise ValueError(msg)
        grid = cls(width=len(kinds), height=height)
        grid.cells = [list(row) for row in kinds]
        return grid

    def in_bounds(self, x: int, y: int) -> bool:
        """Return True if ``(x, y)`` lies inside the grid."""
        return 0 <= x < self.width and 0 <= y < self.height

    def kind_at(self, x: int, y: int) -> CellKind:
        """Return the kind of the cell at ``(x, y)``.

        Raises:
            IndexError: If coordinates are out of bounds.
        """
        if not self.in_bounds(x, y):
            msg = f"({x}, {y}) out of bounds for {self.width}x{self.height}"
            raise IndexError(msg)
        return self.cells[x][y]

    def set_kind(self, x: int, y: int, kind: CellKind) -> None:
        """Overwrite the cell at ``(x, y)``.

        Raises:
            IndexError: If coordinates are out of bounds.
        """
        if not self.in_bounds(x, y):
            msg = f"({x}, {y}) out of bounds for {self.width}x{self.height}"
            raise IndexError(msg)
        self.cells[x][y] = kind

    def is_passable(self, x: int, y: int) -> bool:
        """Return True if ``(x, y)`` is in bounds and not a wall."""
        return self.in_bounds(x, y) and self.cells[x][y].is_passable

    def neighbours(self, x: int, y: int, *, step: int = 1) -> list[Coordinate]:
        """Return in-bounds orthogonal positions ``step`` cells away.

        Args:
            x: Row index.
            y: Column index.
            step: Distance along each axis (2 for lattice neighbours).

        Returns:
            Coordinates in up, down, left, right order, out-of-bounds
            positions omitted.
        """
        result: list[Coordinate] = []
        for dx, dy in ORTHOGONAL:
            nx, ny = x + dx * step, y + dy * step
            if self.in_bounds(nx, ny):
                result.append(Coordinate(nx, ny))
        return result

    def positions(self, kind: CellKind | None = None) -> Iterator[Coordinate]:
        """Yield coordinates in row-major order, optionally of one kind."""
        for x, row in enumerate(self.cells):
            for y, cell in enumerate(row):
                if kind is None or cell is kind:
                    yield Coordinate(x, y)

    def passable_positions(self) -> list[Coordinate]:
        """Return every non-wall coordinate in row-major order."""
        return [
            Coordinate(x, y)
            for x, row in enumerate(self.cells)
            for y, cell in enumerate(row)
            if cell.is_passable
        ]

    def count(self, kind: CellKind) -> int:
        """Return how many cells are of ``kind``."""
        return sum(row.count(kind) for row in self.cells)

    def kind_counts(self) -> Counter[CellKind]:
        """Return a tally of every kind present in the grid."""
        counts: Counter[CellKind] = Counter()
        for row in self.cells:
            counts.update(row)
        return counts
