"""Name-based lookup of maze generators."""

from __future__ import annotations

from typing import TYPE_CHECKING

from minotaur.generation.backtracker import BacktrackerGenerator
from minotaur.generation.kruskal import KruskalGenerator
from minotaur.generation.prim import PrimGenerator

if TYPE_CHECKING:
    from numpy.random import Generator

    from minotaur.generation.base import MazeGenerator

GENERATORS: dict[str, type[MazeGenerator]] = {
    "prim": PrimGenerator,
    "kruskal": KruskalGenerator,
    "backtracker": BacktrackerGenerator,
}


def create_generator(name: str, rng: Generator) -> MazeGenerator:
    """Instantiate the generator registered under ``name``.

    Args:
        name: One of the keys of ``GENERATORS`` (case-insensitive).
        rng: Random source handed to the generator.

    Raises:
        ValueError: If ``name`` is not a registered generator.
    """
    try:
        cls = GENERATORS[name.lower()]
    except KeyError:
        valid = ", ".join(GENERATORS)
        msg = f"unknown generator {name!r}; expected one of: {valid}"
        raise ValueError(msg) from None
    return cls(rng=rng)
