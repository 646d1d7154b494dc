"""Entry point for ``python -m minotaur``.

Loads the YAML config, applies command-line overrides, generates a maze,
routes between two cells and prints the result.  ``--gui`` additionally
opens a Pygame window showing the maze and route.
"""

from __future__ import annotations

import argparse
import dataclasses
import logging
import pathlib

from minotaur.generation.registry import GENERATORS
from minotaur.routing.registry import PATHFINDERS
from minotaur.session.config import MazeConfig
from minotaur.session.engine import MazeSession
from minotaur.ui.text import render_legend, render_maze

_DEFAULT_CONFIG = (
    pathlib.Path(__file__).resolve().parent.parent / "config" / "default.yaml"
)

GENERATOR_DESCRIPTIONS: dict[str, str] = {
    "prim": "Prim's Algorithm",
    "kruskal": "Kruskal's Algorithm",
    "backtracker": "Recursive Backtracking",
}

PATHFINDER_DESCRIPTIONS: dict[str, str] = {
    "dijkstra": "Dijkstra's Algorithm",
    "astar": "A* Search (Manhattan heuristic)",
}


def build_parser() -> argparse.ArgumentParser:
    """Create the command-line parser."""
    generators = ", ".join(
        f"{name} ({GENERATOR_DESCRIPTIONS.get(name, name)})" for name in GENERATORS
    )
    pathfinders = ", ".join(
        f"{name} ({PATHFINDER_DESCRIPTIONS.get(name, name)})" for name in PATHFINDERS
    )
    parser = argparse.ArgumentParser(
        prog="minotaur",
        description="Minotaur - maze generator and weighted route finder",
    )
    parser.add_argument(
        "-c",
        "--config",
        type=pathlib.Path,
        default=None,
        help="Path to YAML config file (default: config/default.yaml if present)",
    )
    parser.add_argument("--width", type=int, help="Grid extent along x (rows)")
    parser.add_argument("--height", type=int, help="Grid extent along y (columns)")
    parser.add_argument(
        "--generator",
        choices=sorted(GENERATORS),
        help=f"Maze generation algorithm: {generators}",
    )
    parser.add_argument(
        "--pathfinder",
        choices=sorted(PATHFINDERS),
        help=f"Route search algorithm: {pathfinders}",
    )
    parser.add_argument(
        "--special",
        type=float,
        dest="special_fraction",
        help="Share of road cells turned into special cells, 0..1",
    )
    parser.add_argument("--seed", type=int, help="RNG seed for a reproducible maze")
    parser.add_argument(
        "--start",
        type=int,
        nargs=2,
        metavar=("X", "Y"),
        help="Route start (default: first passable cell)",
    )
    parser.add_argument(
        "--end",
        type=int,
        nargs=2,
        metavar=("X", "Y"),
        help="Route end (default: last passable cell)",
    )
    parser.add_argument(
        "--gui",
        action="store_true",
        help="Show the maze in a Pygame window",
    )
    parser.add_argument(
        "--cell-size",
        type=int,
        default=16,
        help="Pixel size per grid cell in the window (default: 16)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log debug output",
    )
    return parser


def load_config(args: argparse.Namespace) -> MazeConfig:
    """Read the YAML config, then apply command-line overrides."""
    if args.config is not None:
        config = MazeConfig.from_yaml(args.config)
    elif _DEFAULT_CONFIG.exists():
        config = MazeConfig.from_yaml(_DEFAULT_CONFIG)
    else:
        config = MazeConfig()

    overrides = {
        name: getattr(args, name)
        for name in (
            "width",
            "height",
            "generator",
            "pathfinder",
            "special_fraction",
            "seed",
            "start",
            "end",
        )
        if getattr(args, name) is not None
    }
    for name in ("start", "end"):
        if name in overrides:
            overrides[name] = tuple(overrides[name])
    return dataclasses.replace(config, **overrides)


def main(argv: list[str] | None = None) -> None:
    """Parse CLI args, generate and solve a maze, print or show it."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )

    try:
        session = MazeSession(config=load_config(args))
        grid = session.generate()
        result = session.solve()
    except ValueError as exc:
        parser.error(str(exc))

    print(render_maze(grid, result.path, result.start, result.end))
    print()
    print(render_legend())
    print()
    if result.found:
        route = " -> ".join(str(tuple(p)) for p in result.path)
        print(f"Path found ({len(result.path)} cells, cost {result.cost}): {route}")
    else:
        print(f"Path not found from {tuple(result.start)} to {tuple(result.end)}.")

    if args.gui:
        from minotaur.ui.pygame_client import MazeRenderer

        MazeRenderer(grid, result, cell_size=args.cell_size).run()


if __name__ == "__main__":
    main()
