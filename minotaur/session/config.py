"""Config -- load maze session parameters from YAML files.

Grid size, algorithm choices, the special-cell fraction and the route
endpoints live in YAML and are parsed into a typed dataclass here, so a
maze run can be reproduced from a single file.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml


@dataclass
class MazeConfig:
    """Top-level session configuration.

    Attributes:
        seed: RNG seed for deterministic replay, or None for fresh entropy.
        width: Extent of the grid's ``x`` axis.
        height: Extent of the grid's ``y`` axis.
        generator: Registered name of the maze generator.
        pathfinder: Registered name of the pathfinder.
        special_fraction: Share of road cells turned into special cells
            (0.0 disables the step).
        start: Route start as ``(x, y)``, or None for the first passable
            cell in row-major order.
        end: Route end as ``(x, y)``, or None for the last passable cell.
    """

    seed: int | None = None
    width: int = 21
    height: int = 21
    generator: str = "prim"
    pathfinder: str = "dijkstra"
    special_fraction: float = 0.0
    start: tuple[int, int] | None = None
    end: tuple[int, int] | None = None

    @classmethod
    def from_yaml(cls, path: str | Path) -> MazeConfig:
        """Load configuration from a YAML file.

        Missing keys fall back to the field defaults.  Numbers written as
        strings (``width: '9'``) are converted.

        Args:
            path: Path to the YAML config file.

        Returns:
            A populated MazeConfig instance.

        Raises:
            FileNotFoundError: If the config file does not exist.
            ValueError: If the file is not a mapping or a value has the
                wrong type.
        """
        path = Path(path)
        with path.open("r") as f:
            data = yaml.safe_load(f) or {}
        if not isinstance(data, dict):
            msg = f"{path}: expected a mapping of settings, got {type(data).__name__}"
            raise ValueError(msg)

        try:
            seed = data.get("seed")
            return cls(
                seed=None if seed is None else int(seed),
                width=int(data.get("width", cls.width)),
                height=int(data.get("height", cls.height)),
                generator=_as_name(data.get("generator", cls.generator), "generator"),
                pathfinder=_as_name(
                    data.get("pathfinder", cls.pathfinder),
                    "pathfinder",
                ),
                special_fraction=float(
                    data.get("special_fraction", cls.special_fraction),
                ),
                start=_as_point(data.get("start"), "start"),
                end=_as_point(data.get("end"), "end"),
            )
        except (TypeError, ValueError) as exc:
            msg = f"{path}: invalid setting: {exc}"
            raise ValueError(msg) from exc


def _as_name(value: Any, key: str) -> str:
    """Return an algorithm name, rejecting non-string values such as a blank key."""
    if not isinstance(value, str):
        msg = f"{key} must be a name, got {value!r}"
        raise ValueError(msg)
    return value


def _as_point(value: Any, key: str) -> tuple[int, int] | None:
    """Convert a YAML ``[x, y]`` list into a tuple."""
    if value is None:
        return None
    if not isinstance(value, (list, tuple)) or len(value) != 2:
        msg = f"{key} must be an [x, y] pair, got {value!r}"
        raise ValueError(msg)
    x, y = value
    return int(x), int(y)
