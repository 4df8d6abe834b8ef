"""Grid geometry shared by the generators, solver and renderer.

Directions are single-character constants (``"u"``, ``"d"``, ``"l"``, ``"r"``)
so they can be stored in frozensets, logged and sent over JSON without any
conversion. Coordinates are ``(x, y)`` tuples with ``y`` growing downwards.
"""

from __future__ import annotations

from typing import Iterator, Optional, Tuple

Coord = Tuple[int, int]

UP = "u"
DOWN = "d"
LEFT = "l"
RIGHT = "r"

# Fixed order; generators and the solver enumerate neighbours in this order.
DIRECTIONS = (UP, DOWN, LEFT, RIGHT)

OPPOSITE = {UP: DOWN, DOWN: UP, LEFT: RIGHT, RIGHT: LEFT}
DELTAS = {UP: (0, -1), DOWN: (0, 1), LEFT: (-1, 0), RIGHT: (1, 0)}

_ALIASES = {
    UP: ("u", "up", "n", "north"),
    DOWN: ("d", "down", "s", "south"),
    LEFT: ("l", "left", "w", "west"),
    RIGHT: ("r", "right", "e", "east"),
}
_ALIAS_LOOKUP = {alias: d for d, aliases in _ALIASES.items() for alias in aliases}


def opposite(direction: str) -> str:
    return OPPOSITE[direction]


def delta(direction: str) -> Coord:
    return DELTAS[direction]


def in_bounds(x: int, y: int, width: int, height: int) -> bool:
    return 0 <= x < width and 0 <= y < height


def neighbor(cell: Coord, direction: str) -> Coord:
    dx, dy = DELTAS[direction]
    return (cell[0] + dx, cell[1] + dy)


def neighbors(cell: Coord, width: int, height: int) -> Iterator[Tuple[str, Coord]]:
    """Yield ``(direction, cell)`` for every in-bounds orthogonal neighbour."""
    x, y = cell
    for d in DIRECTIONS:
        dx, dy = DELTAS[d]
        nx, ny = x + dx, y + dy
        if 0 <= nx < width and 0 <= ny < height:
            yield d, (nx, ny)


def parse_direction(text) -> Optional[str]:
    """Map player input (``"n"``, ``"up"``, ``"north"`` ...) to a direction or None."""
    if not isinstance(text, str):
        return None
    return _ALIAS_LOOKUP.get(text.strip().lower())


__all__ = [
    "Coord",
    "UP",
    "DOWN",
    "LEFT",
    "RIGHT",
    "DIRECTIONS",
    "OPPOSITE",
    "DELTAS",
    "opposite",
    "delta",
    "in_bounds",
    "neighbor",
    "neighbors",
    "parse_direction",
]
