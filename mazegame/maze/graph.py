"""Passage graph: which directions are open from each cell.

Generators carve into a :class:`GraphBuilder`, which always inserts both
half-edges of a passage, then call :meth:`GraphBuilder.freeze` to obtain the
read-only :class:`PassageGraph` owned by a ``Maze``.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Dict, FrozenSet, Iterator, List, Mapping, Set, Tuple

from .topology import DIRECTIONS, Coord, in_bounds, neighbor, opposite


class GraphBuilder:
    """Mutable adjacency used while a generator is running."""

    def __init__(self, height: int, width: int):
        self.height = height
        self.width = width
        self._dirs: Dict[Coord, Set[str]] = {(x, y): set() for y in range(height) for x in range(width)}

    def carve(self, cell: Coord, direction: str) -> Coord:
        """Open the wall between ``cell`` and its neighbour in ``direction``; return the neighbour."""
        other = neighbor(cell, direction)
        if not in_bounds(other[0], other[1], self.width, self.height):
            raise ValueError(f"cannot carve {direction!r} from {cell}: neighbour {other} is outside the grid")
        self._dirs[cell].add(direction)
        self._dirs[other].add(opposite(direction))
        return other

    def has_passage(self, cell: Coord, direction: str) -> bool:
        return direction in self._dirs.get(cell, ())

    def freeze(self) -> "PassageGraph":
        return PassageGraph(self.height, self.width, {c: frozenset(d) for c, d in self._dirs.items()})


class PassageGraph:
    """Immutable mapping ``(x, y) -> frozenset of open directions``."""

    __slots__ = ("height", "width", "_dirs")

    def __init__(self, height: int, width: int, dirs: Mapping[Coord, FrozenSet[str]]):
        self.height = height
        self.width = width
        self._dirs = MappingProxyType(dict(dirs))

    @classmethod
    def from_dict(cls, height: int, width: int, dirs: Mapping[Coord, object]) -> "PassageGraph":
        """Build a graph from a plain ``{(x, y): iterable_of_directions}`` mapping.

        Cells missing from ``dirs`` get no passages. Does not repair asymmetric
        input; use :meth:`asymmetric_edges` to check it.
        """
        full = {(x, y): frozenset(dirs.get((x, y), ())) for y in range(height) for x in range(width)}
        return cls(height, width, full)

    def directions(self, cell: Coord) -> FrozenSet[str]:
        return self._dirs.get(cell, frozenset())

    def has_passage(self, cell: Coord, direction: str) -> bool:
        return direction in self._dirs.get(cell, ())

    def open_neighbors(self, cell: Coord) -> Iterator[Tuple[str, Coord]]:
        dirs = self._dirs.get(cell, ())
        for d in DIRECTIONS:
            if d in dirs:
                yield d, neighbor(cell, d)

    def cells(self) -> Iterator[Coord]:
        for y in range(self.height):
            for x in range(self.width):
                yield (x, y)

    def edge_count(self) -> int:
        return sum(len(d) for d in self._dirs.values()) // 2

    def asymmetric_edges(self) -> List[Tuple[Coord, str]]:
        """Half-edges without a matching reverse half-edge (empty for a valid graph)."""
        bad = []
        for cell in self.cells():
            for d, other in self.open_neighbors(cell):
                if not in_bounds(other[0], other[1], self.width, self.height):
                    bad.append((cell, d))
                elif opposite(d) not in self._dirs.get(other, ()):
                    bad.append((cell, d))
        return bad

    def as_dict(self) -> Dict[Coord, List[str]]:
        return {c: [d for d in DIRECTIONS if d in dirs] for c, dirs in self._dirs.items()}

    def __eq__(self, other):
        if not isinstance(other, PassageGraph):
            return NotImplemented
        return (self.height, self.width) == (other.height, other.width) and dict(self._dirs) == dict(other._dirs)

    def __hash__(self):
        return hash((self.height, self.width, frozenset(self._dirs.items())))

    def __repr__(self):
        return f"PassageGraph(height={self.height}, width={self.width}, passages={self.edge_count()})"


__all__ = ["GraphBuilder", "PassageGraph"]
