"""Maze aggregate and generation entry points.

A :class:`Maze` is built once from a passage graph plus start/end cells. The
render grid, solvability, shortest path and metrics are derived in
``__post_init__`` and nothing is mutated afterwards; a new maze is always a
new value.

Public contract consumed elsewhere:
    generate_dfs(height, width, seed=None) -> Maze
    generate_kruskal(height, width, seed=None) -> Maze
    generate_maze(MazeConfig) -> Maze   (bounded regeneration until solvable)
    Attributes: graph, start, end, arr, solvable, shortest_path, distance, metrics
"""

from __future__ import annotations

import random
import time
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Callable, Dict, List, Mapping, Optional, Tuple

from ..logging_utils import get_logger
from . import dfs, kruskal
from .config import DFS, KRUSKAL, MazeConfig, normalize_algorithm
from .errors import GenerationFailedError
from .graph import PassageGraph
from .metrics import collect_metrics
from .render import RenderGrid, build_render_grid
from .solver import solve
from .topology import DIRECTIONS, OPPOSITE, Coord, in_bounds, parse_direction

log = get_logger("mazegame.maze")

GeneratorFn = Callable[[int, int, Optional[random.Random]], Tuple[PassageGraph, Coord, Coord]]

ALGORITHMS: Dict[str, GeneratorFn] = {
    DFS: dfs.generate,
    KRUSKAL: kruskal.generate,
}

SEED_MAX = 2**31 - 1


@dataclass(frozen=True)
class Maze:
    graph: PassageGraph
    start: Coord
    end: Coord
    algorithm: str = "custom"
    seed: Optional[int] = None
    base_seed: Optional[int] = None
    attempt: int = 1
    generation_ms: float = field(default=0.0, compare=False, repr=False)
    arr: RenderGrid = field(init=False, repr=False, compare=False)
    solvable: bool = field(init=False)
    shortest_path: Optional[Tuple[Coord, ...]] = field(init=False, repr=False)
    distance: Optional[int] = field(init=False, repr=False)
    metrics: Mapping[str, int | float] = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        t0 = time.perf_counter()
        h, w = self.graph.height, self.graph.width
        for name, cell in (("start", self.start), ("end", self.end)):
            if not in_bounds(cell[0], cell[1], w, h):
                raise ValueError(f"{name} {cell} is outside a {w}x{h} maze")
        broken = self.graph.asymmetric_edges()
        if broken:
            raise ValueError(f"passage graph has one-way edges: {broken[:4]}")
        object.__setattr__(self, "start", tuple(self.start))
        object.__setattr__(self, "end", tuple(self.end))
        object.__setattr__(self, "arr", build_render_grid(self.graph, self.start, self.end))
        result = solve(self.graph, self.start, self.end)
        object.__setattr__(self, "solvable", result.solvable)
        object.__setattr__(self, "shortest_path", result.path)
        object.__setattr__(self, "distance", result.distance)
        metrics = collect_metrics(self.graph, self.start, result)
        metrics["runtime_ms"] = round(self.generation_ms + (time.perf_counter() - t0) * 1000.0, 3)
        object.__setattr__(self, "metrics", MappingProxyType(metrics))

    @property
    def height(self) -> int:
        return self.graph.height

    @property
    def width(self) -> int:
        return self.graph.width

    def can_move(self, cell: Coord, direction: str) -> bool:
        """True iff a passage leads out of ``cell`` in ``direction``."""
        if not isinstance(direction, str):
            return False
        d = direction if direction in OPPOSITE else parse_direction(direction)
        if d is None:
            return False
        try:
            x, y = cell
        except (TypeError, ValueError):
            return False
        if not in_bounds(x, y, self.width, self.height):
            return False
        return self.graph.has_passage((x, y), d)

    def exits(self, cell: Coord) -> List[str]:
        return [d for d in DIRECTIONS if self.can_move(cell, d)]

    def to_dict(self) -> dict:
        return {
            "algorithm": self.algorithm,
            "seed": self.seed,
            "base_seed": self.base_seed,
            "attempt": self.attempt,
            "height": self.height,
            "width": self.width,
            "start": list(self.start),
            "end": list(self.end),
            "solvable": self.solvable,
            "shortest_path": [list(c) for c in self.shortest_path] if self.shortest_path else None,
            "metrics": dict(self.metrics),
        }


def _build(
    algorithm: str,
    height: int,
    width: int,
    seed: Optional[int],
    rng: Optional[random.Random],
    base_seed: Optional[int] = None,
    attempt: int = 1,
) -> Maze:
    if rng is None:
        if seed is None:
            seed = random.randint(0, SEED_MAX)
        rng = random.Random(seed)
    t0 = time.perf_counter()
    graph, start, end = ALGORITHMS[algorithm](height, width, rng)
    elapsed = (time.perf_counter() - t0) * 1000.0
    return Maze(
        graph,
        start,
        end,
        algorithm=algorithm,
        seed=seed,
        base_seed=seed if base_seed is None else base_seed,
        attempt=attempt,
        generation_ms=elapsed,
    )


def generate_dfs(height: int, width: int, *, seed: Optional[int] = None, rng: Optional[random.Random] = None) -> Maze:
    return _build(DFS, height, width, seed, rng)


def generate_kruskal(
    height: int, width: int, *, seed: Optional[int] = None, rng: Optional[random.Random] = None
) -> Maze:
    """Single Kruskal attempt; check ``solvable`` before handing it to a player."""
    return _build(KRUSKAL, height, width, seed, rng)


def generate_maze(config: MazeConfig) -> Maze:
    """Generate a maze for ``config``, regenerating up to ``max_attempts`` times if required.

    Attempt ``n`` (1-based) uses seed ``base_seed + n - 1`` so the accepted maze
    can be reproduced from the base seed alone.
    """
    algorithm = normalize_algorithm(config.algorithm)
    base_seed = config.seed if config.seed is not None else random.randint(0, SEED_MAX)
    attempts = config.max_attempts if config.require_solvable else 1
    for attempt in range(1, attempts + 1):
        seed = base_seed + attempt - 1
        maze = _build(algorithm, config.height, config.width, seed, None, base_seed=base_seed, attempt=attempt)
        if maze.solvable or not config.require_solvable:
            log.info(
                event="maze_generated",
                algorithm=algorithm,
                height=config.height,
                width=config.width,
                seed=seed,
                attempt=attempt,
                solvable=maze.solvable,
                path_length=maze.metrics["path_length"],
            )
            return maze
        log.debug(event="maze_rejected", algorithm=algorithm, seed=seed, attempt=attempt, components=maze.metrics["components"])
    log.warn(event="maze_generation_failed", algorithm=algorithm, base_seed=base_seed, attempts=attempts)
    raise GenerationFailedError(algorithm, attempts, base_seed)


__all__ = ["Maze", "ALGORITHMS", "generate_dfs", "generate_kruskal", "generate_maze"]
