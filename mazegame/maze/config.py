import os
from dataclasses import dataclass
from typing import Optional

from .errors import UnknownAlgorithmError, check_dimensions

DFS = "dfs"
KRUSKAL = "kruskal"
ALGORITHM_NAMES = (DFS, KRUSKAL)

_ALGORITHM_ALIASES = {
    "dfs": DFS,
    "rdfs": DFS,
    "backtracker": DFS,
    "kruskal": KRUSKAL,
    "rkruskal": KRUSKAL,
}


def normalize_algorithm(name) -> str:
    key = str(name or "").strip().lower().replace("-", "").replace("_", "")
    try:
        return _ALGORITHM_ALIASES[key]
    except KeyError:
        raise UnknownAlgorithmError(name, ALGORITHM_NAMES) from None


@dataclass
class MazeConfig:
    height: int = 10
    width: int = 10
    algorithm: str = DFS
    seed: Optional[int] = None
    # regeneration budget when require_solvable is set
    max_attempts: int = 25
    require_solvable: bool = True

    def __post_init__(self):
        check_dimensions(self.height, self.width)
        self.algorithm = normalize_algorithm(self.algorithm)
        if isinstance(self.max_attempts, bool) or not isinstance(self.max_attempts, int) or self.max_attempts < 1:
            raise ValueError(f"max_attempts must be an integer >= 1 (got {self.max_attempts!r})")

    @classmethod
    def from_env(cls, **overrides) -> "MazeConfig":
        """Build a config from MAZE_* environment variables; explicit overrides win."""
        values = {
            "height": int(os.getenv("MAZE_HEIGHT", "10")),
            "width": int(os.getenv("MAZE_WIDTH", "10")),
            "algorithm": os.getenv("MAZE_ALGORITHM", DFS),
            "max_attempts": int(os.getenv("MAZE_MAX_ATTEMPTS", "25")),
        }
        env_seed = os.getenv("MAZE_SEED")
        if env_seed not in (None, ""):
            values["seed"] = int(env_seed)
        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**values)


__all__ = ["MazeConfig", "DFS", "KRUSKAL", "ALGORITHM_NAMES", "normalize_algorithm"]
