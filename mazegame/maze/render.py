"""Graph to text rendering.

The render grid doubles the maze resolution: for an ``h x w`` maze it is
``(2h+1) x (2w+1)``. Even/even positions are wall junctions, even/odd and
odd/even positions are wall segments (open when a passage crosses them) and
odd/odd positions are cell interiors.
"""

from __future__ import annotations

from typing import Iterable, List, Optional, Sequence, Tuple

from .graph import PassageGraph
from .topology import DOWN, LEFT, RIGHT, UP, Coord

CLOSED = 0
OPEN = 1
START = 2
END = 3

JUNCTION = "+"
WALL_H = "-"
WALL_V = "|"
SPACE = " "
START_GLYPH = "S"
END_GLYPH = "E"
FOOTSTEP = "."
PLAYER = "@"

RenderGrid = Tuple[Tuple[int, ...], ...]

# passage direction -> (row offset, col offset) from the cell's top-left junction
_WALL_SLOT = {UP: (0, 1), DOWN: (2, 1), LEFT: (1, 0), RIGHT: (1, 2)}


def build_render_grid(graph: PassageGraph, start: Coord, end: Coord) -> RenderGrid:
    rows = graph.height * 2 + 1
    cols = graph.width * 2 + 1
    arr = [[CLOSED] * cols for _ in range(rows)]
    for x, y in graph.cells():
        arr[y * 2 + 1][x * 2 + 1] = OPEN
        for d in graph.directions((x, y)):
            dr, dc = _WALL_SLOT[d]
            arr[y * 2 + dr][x * 2 + dc] = OPEN
    ex, ey = end
    arr[ey * 2 + 1][ex * 2 + 1] = END
    # start wins when start == end
    sx, sy = start
    arr[sy * 2 + 1][sx * 2 + 1] = START
    return tuple(tuple(row) for row in arr)


def _interior_slots(cells: Optional[Iterable[Coord]], rows: int, cols: int) -> set:
    slots = set()
    for cell in cells or ():
        try:
            x, y = cell
        except (TypeError, ValueError):
            continue
        if not (isinstance(x, int) and isinstance(y, int)):
            continue
        r, c = y * 2 + 1, x * 2 + 1
        if 0 < r < rows and 0 < c < cols:
            slots.add((r, c))
    return slots


def render(maze, overlay_path: Optional[Iterable[Coord]] = None, highlight: Optional[Coord] = None) -> List[str]:
    """Return one printable line per render-grid row, each ending in a newline.

    ``maze`` is a ``Maze`` or a bare render grid. Overlay and highlight
    coordinates outside the maze are ignored.
    """
    arr: Sequence[Sequence[int]] = getattr(maze, "arr", maze)
    rows = len(arr)
    cols = len(arr[0]) if rows else 0
    footsteps = _interior_slots(overlay_path, rows, cols)
    player = _interior_slots([highlight] if highlight is not None else None, rows, cols)

    lines = []
    for r in range(rows):
        out = []
        for c in range(cols):
            state = arr[r][c]
            if r % 2 == 0:
                if c % 2 == 0:
                    out.append(JUNCTION)
                else:
                    out.append(WALL_H if state == CLOSED else SPACE)
            elif c % 2 == 0:
                out.append(WALL_V if state == CLOSED else SPACE)
            elif (r, c) in player:
                out.append(PLAYER)
            elif state == START:
                out.append(START_GLYPH)
            elif state == END:
                out.append(END_GLYPH)
            elif (r, c) in footsteps:
                out.append(FOOTSTEP)
            else:
                out.append(SPACE)
        lines.append("".join(out) + "\n")
    return lines


def render_text(maze, overlay_path=None, highlight=None) -> str:
    return "".join(render(maze, overlay_path, highlight))


def dump_directions(graph: PassageGraph) -> List[str]:
    """One line per cell, row-major: ``(x, y): u r``."""
    dirs = graph.as_dict()
    return [f"({x}, {y}): {' '.join(dirs[(x, y)])}".rstrip() + "\n" for x, y in graph.cells()]


def dump_grid(maze) -> List[str]:
    """Raw render-grid states, space separated, one line per row."""
    arr = getattr(maze, "arr", maze)
    return [" ".join(str(v) for v in row) + "\n" for row in arr]


__all__ = [
    "CLOSED",
    "OPEN",
    "START",
    "END",
    "JUNCTION",
    "WALL_H",
    "WALL_V",
    "SPACE",
    "START_GLYPH",
    "END_GLYPH",
    "FOOTSTEP",
    "PLAYER",
    "RenderGrid",
    "build_render_grid",
    "render",
    "render_text",
    "dump_directions",
    "dump_grid",
]
