"""Pygame 2D view of a generated maze and its route.

Draws the grid with one colour per cell kind, the route as an overlay,
and a side panel with the run's statistics.  The picture is static: it
only changes when the user toggles the route overlay.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import pygame

if TYPE_CHECKING:
    from minotaur.grid.grid import Grid
    from minotaur.session.engine import SolveResult

from minotaur.grid.cell import CellKind

# Colour palette
_BG = (20, 20, 24)
_PANEL_TEXT = (200, 200, 200)
_PATH = (240, 80, 60)
_START = (60, 200, 90)
_END = (70, 140, 255)

_KIND_COLOURS: dict[CellKind, tuple[int, int, int]] = {
    CellKind.WALL: (35, 30, 30),
    CellKind.ROAD: (200, 190, 170),
    CellKind.SWAMP: (80, 110, 60),
    CellKind.ACCELERATED_PATH: (240, 210, 90),
}


class MazeRenderer:
    """Renders a grid and an optional route into a Pygame window.

    Cell ``(x, y)`` is drawn at row ``x`` and column ``y``, matching the
    text renderer.

    Attributes:
        grid: The maze to draw.
        result: Route search outcome, or None to draw the bare maze.
        cell_size: Pixel size of each grid cell.
        screen: The Pygame display surface.
    """

    def __init__(
        self,
        grid: Grid,
        result: SolveResult | None = None,
        cell_size: int = 16,
        title: str = "Minotaur",
    ) -> None:
        """Initialise the renderer.

        Args:
            grid: The maze to render.
            result: Route to overlay on the maze.
            cell_size: Pixel width/height per grid cell.
            title: Window caption.
        """
        self.grid = grid
        self.result = result
        self.cell_size = cell_size
        self.show_path = True

        self._panel_width = 220
        self._win_w = grid.height * cell_size + self._panel_width
        self._win_h = max(grid.width * cell_size, 200)

        pygame.init()
        self.screen = pygame.display.set_mode((self._win_w, self._win_h))
        pygame.display.set_caption(title)
        self.clock = pygame.time.Clock()
        self.font = pygame.font.SysFont("monospace", 14)
        self.running = True

    def run(self, fps: int = 30) -> None:
        """Main loop: handle events and redraw until closed.

        Args:
            fps: Target frames per second.
        """
        while self.running:
            self.clock.tick(fps)
            self._handle_events()
            self._draw()

        pygame.quit()

    def _handle_events(self) -> None:
        """Process Pygame input events."""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    self.running = False
                elif event.key == pygame.K_SPACE:
                    self.show_path = not self.show_path

    def _draw(self) -> None:
        """Render one frame."""
        self.screen.fill(_BG)
        self._draw_cells()
        if self.show_path:
            self._draw_route()
        self._draw_info_panel()
        pygame.display.flip()

    def _cell_rect(self, x: int, y: int) -> tuple[int, int, int, int]:
        cs = self.cell_size
        return (y * cs, x * cs, cs, cs)

    def _draw_cells(self) -> None:
        """Fill every cell with its kind's colour."""
        for x, row in enumerate(self.grid.cells):
            for y, kind in enumerate(row):
                pygame.draw.rect(self.screen, _KIND_COLOURS[kind], self._cell_rect(x, y))

    def _draw_route(self) -> None:
        """Draw the route as dots and mark both endpoints."""
        if self.result is None:
            return
        cs = self.cell_size
        radius = max(2, cs // 4)
        for x, y in self.result.path:
            centre = (y * cs + cs // 2, x * cs + cs // 2)
            pygame.draw.circle(self.screen, _PATH, centre, radius)
        for point, colour in ((self.result.start, _START), (self.result.end, _END)):
            pygame.draw.rect(self.screen, colour, self._cell_rect(point.x, point.y))

    def _draw_info_panel(self) -> None:
        """Draw a stats panel on the right side of the window."""
        panel_x = self.grid.height * self.cell_size + 10
        y = 10

        counts = self.grid.kind_counts()
        lines = [
            f"Size: {self.grid.width}x{self.grid.height}",
            "",
            "--- Cells ---",
        ]
        lines += [f"{kind.name}: {counts.get(kind, 0)}" for kind in CellKind]

        if self.result is not None:
            lines += [
                "",
                "--- Route ---",
                f"Start: {tuple(self.result.start)}",
                f"End: {tuple(self.result.end)}",
            ]
            if self.result.found:
                lines += [
                    f"Length: {len(self.result.path)}",
                    f"Cost: {self.result.cost}",
                ]
            else:
                lines.append("No path")

        lines += [
            "",
            "--- Controls ---",
            "SPACE: toggle route",
            "ESC: quit",
        ]

        for line in lines:
            surf = self.font.render(line, True, _PANEL_TEXT)
            self.screen.blit(surf, (panel_x, y))
            y += 18
