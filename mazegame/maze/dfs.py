"""Randomized depth-first search (recursive backtracker) with an explicit stack."""

from __future__ import annotations

import random
from typing import List, Optional, Set, Tuple

from .endpoints import pick_end, pick_start
from .errors import check_dimensions
from .graph import GraphBuilder, PassageGraph
from .topology import Coord, neighbors


def generate(height: int, width: int, rng: Optional[random.Random] = None) -> Tuple[PassageGraph, Coord, Coord]:
    """Carve a perfect maze; every cell ends up reachable from every other.

    Returns ``(graph, start, end)``. ``rng`` is the only source of randomness.
    """
    check_dimensions(height, width)
    rng = rng or random.Random()
    builder = GraphBuilder(height, width)

    start = pick_start(height, width, rng)
    stack: List[Coord] = [start]
    visited: Set[Coord] = {start}

    while stack:
        cur = stack.pop()
        unvisited = [(d, n) for d, n in neighbors(cur, width, height) if n not in visited]
        if not unvisited:
            # dead end: leave it popped so the walk backtracks
            continue
        stack.append(cur)
        direction, nxt = rng.choice(unvisited)
        builder.carve(cur, direction)
        visited.add(nxt)
        stack.append(nxt)

    end = pick_end(height, width, rng)
    return builder.freeze(), start, end


__all__ = ["generate"]
