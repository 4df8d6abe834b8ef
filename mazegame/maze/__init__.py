"""Public maze package interface."""

from .config import ALGORITHM_NAMES, DFS, KRUSKAL, MazeConfig, normalize_algorithm  # noqa: F401
from .errors import (  # noqa: F401
    GenerationFailedError,
    InvalidDimensionError,
    MazeError,
    UnknownAlgorithmError,
)
from .graph import GraphBuilder, PassageGraph  # noqa: F401
from .maze import ALGORITHMS, Maze, generate_dfs, generate_kruskal, generate_maze  # noqa: F401
from .render import CLOSED, END, OPEN, START, build_render_grid, dump_directions, dump_grid, render, render_text  # noqa: F401
from .solver import SolveResult, distances, solve  # noqa: F401
from .topology import DIRECTIONS, DOWN, LEFT, RIGHT, UP, delta, in_bounds, opposite, parse_direction  # noqa: F401

__all__ = [
    "ALGORITHM_NAMES",
    "ALGORITHMS",
    "DFS",
    "KRUSKAL",
    "MazeConfig",
    "normalize_algorithm",
    "MazeError",
    "InvalidDimensionError",
    "UnknownAlgorithmError",
    "GenerationFailedError",
    "GraphBuilder",
    "PassageGraph",
    "Maze",
    "generate_dfs",
    "generate_kruskal",
    "generate_maze",
    "CLOSED",
    "OPEN",
    "START",
    "END",
    "build_render_grid",
    "render",
    "render_text",
    "dump_directions",
    "dump_grid",
    "SolveResult",
    "solve",
    "distances",
    "DIRECTIONS",
    "UP",
    "DOWN",
    "LEFT",
    "RIGHT",
    "delta",
    "in_bounds",
    "opposite",
    "parse_direction",
]
