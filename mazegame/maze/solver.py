"""Shortest path over a passage graph.

Every passage costs one step, so a FIFO breadth-first search settles cells
in non-decreasing distance order and each cell's first recorded predecessor
already lies on a shortest path.
"""

from __future__ import annotations

from collections import deque
from typing import Dict, NamedTuple, Optional, Tuple

from .graph import PassageGraph
from .topology import Coord


class SolveResult(NamedTuple):
    solvable: bool
    path: Optional[Tuple[Coord, ...]]
    distance: Optional[int]


def _search(graph: PassageGraph, start: Coord, stop: Optional[Coord] = None):
    dist: Dict[Coord, int] = {start: 0}
    prev: Dict[Coord, Optional[Coord]] = {start: None}
    queue: deque[Coord] = deque([start])
    while queue:
        cur = queue.popleft()
        if cur == stop:
            break
        step = dist[cur] + 1
        for _d, nxt in graph.open_neighbors(cur):
            if nxt not in dist:
                dist[nxt] = step
                prev[nxt] = cur
                queue.append(nxt)
    return dist, prev


def distances(graph: PassageGraph, start: Coord) -> Dict[Coord, int]:
    """Step count from ``start`` to every reachable cell (unreachable cells absent)."""
    dist, _prev = _search(graph, start)
    return dist


def solve(graph: PassageGraph, start: Coord, end: Coord) -> SolveResult:
    dist, prev = _search(graph, start, stop=end)
    if end not in prev:
        return SolveResult(False, None, None)
    path = []
    node: Optional[Coord] = end
    while node is not None:
        path.append(node)
        node = prev[node]
    path.reverse()
    return SolveResult(True, tuple(path), dist[end])


__all__ = ["SolveResult", "solve", "distances"]
