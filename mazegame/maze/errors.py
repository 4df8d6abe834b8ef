"""Maze error types.

Only genuinely invalid requests raise. An unsolvable maze is a normal
outcome and is reported through ``Maze.solvable`` instead.
"""


class MazeError(Exception):
    """Base class for maze generation errors."""


class InvalidDimensionError(MazeError, ValueError):
    def __init__(self, field: str, value):
        super().__init__(f"{field} must be an integer >= 1 (got {value!r})")
        self.field = field
        self.value = value


class UnknownAlgorithmError(MazeError, ValueError):
    def __init__(self, name, known):
        super().__init__(f"unknown maze algorithm {name!r}; expected one of {', '.join(sorted(known))}")
        self.name = name
        self.known = tuple(sorted(known))


class GenerationFailedError(MazeError, RuntimeError):
    """Raised when no solvable maze was produced within the attempt budget."""

    def __init__(self, algorithm: str, attempts: int, base_seed: int):
        super().__init__(f"{algorithm} produced no solvable maze in {attempts} attempts (base seed {base_seed})")
        self.algorithm = algorithm
        self.attempts = attempts
        self.base_seed = base_seed


def check_dimensions(height, width) -> None:
    for field, value in (("height", height), ("width", width)):
        if isinstance(value, bool) or not isinstance(value, int) or value < 1:
            raise InvalidDimensionError(field, value)


__all__ = [
    "MazeError",
    "InvalidDimensionError",
    "UnknownAlgorithmError",
    "GenerationFailedError",
    "check_dimensions",
]
