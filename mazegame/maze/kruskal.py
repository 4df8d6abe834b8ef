"""Randomized Kruskal-style generator backed by a disjoint-set forest.

Each cell is visited once in shuffled order and tries to join exactly one
randomly chosen neighbour. A passage is only carved when the two cells are
in different sets, so the result is always a forest, but nothing forces it
to become a single tree: start and end may land on separate islands.
"""

from __future__ import annotations

import random
from typing import List, Optional, Tuple

from .endpoints import pick_end, pick_start
from .errors import check_dimensions
from .graph import GraphBuilder, PassageGraph
from .topology import Coord, neighbors


class DisjointSet:
    """Union-find over ``0..size-1`` with union by size and path halving."""

    def __init__(self, size: int):
        self.parent: List[int] = list(range(size))
        self.size: List[int] = [1] * size
        self.count = size

    def find(self, a: int) -> int:
        parent = self.parent
        while parent[a] != a:
            parent[a] = parent[parent[a]]
            a = parent[a]
        return a

    def union(self, a: int, b: int) -> bool:
        """Merge the sets holding ``a`` and ``b``; False if they were already joined."""
        ra, rb = self.find(a), self.find(b)
        if ra == rb:
            return False
        if self.size[ra] < self.size[rb]:
            ra, rb = rb, ra
        self.parent[rb] = ra
        self.size[ra] += self.size[rb]
        self.count -= 1
        return True

    def connected(self, a: int, b: int) -> bool:
        return self.find(a) == self.find(b)


def generate(height: int, width: int, rng: Optional[random.Random] = None) -> Tuple[PassageGraph, Coord, Coord]:
    check_dimensions(height, width)
    rng = rng or random.Random()
    builder = GraphBuilder(height, width)
    sets = DisjointSet(height * width)

    def index(cell: Coord) -> int:
        return cell[1] * width + cell[0]

    worklist = [(x, y) for y in range(height) for x in range(width)]
    rng.shuffle(worklist)
    for cell in worklist:
        candidates = [(d, n) for d, n in neighbors(cell, width, height) if not builder.has_passage(cell, d)]
        if not candidates:
            continue
        direction, other = rng.choice(candidates)
        if sets.union(index(cell), index(other)):
            builder.carve(cell, direction)

    start = pick_start(height, width, rng)
    end = pick_end(height, width, rng)
    return builder.freeze(), start, end


__all__ = ["DisjointSet", "generate"]
