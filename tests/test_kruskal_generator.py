import random

import pytest

from mazegame.maze import InvalidDimensionError, kruskal
from mazegame.maze.kruskal import DisjointSet
from tests.maze_test_utils import all_cells, assert_symmetric, bfs_distances


def test_disjoint_set_union_and_find():
    ds = DisjointSet(6)
    assert ds.count == 6
    assert ds.union(0, 1)
    assert ds.union(2, 3)
    assert ds.union(1, 3)
    assert not ds.union(0, 2)  # already joined transitively
    assert ds.connected(0, 3)
    assert not ds.connected(0, 4)
    assert ds.count == 3
    assert ds.size[ds.find(0)] == 4


@pytest.mark.parametrize("height,width", [(1, 1), (2, 2), (1, 9), (6, 6), (10, 15)])
def test_kruskal_passages_are_symmetric(height, width):
    for seed in range(5):
        graph, _start, _end = kruskal.generate(height, width, random.Random(seed))
        assert_symmetric(graph)


def test_kruskal_never_creates_a_cycle():
    # A forest with c components over n cells has exactly n - c edges.
    for seed in range(10):
        graph, _s, _e = kruskal.generate(8, 8, random.Random(seed))
        seen = set()
        components = 0
        for cell in all_cells(8, 8):
            if cell not in seen:
                components += 1
                seen.update(bfs_distances(graph, cell))
        assert graph.edge_count() == 64 - components


def test_kruskal_may_leave_islands():
    # Each cell attempts one join, so larger grids routinely end up with several components.
    fragmented = 0
    for seed in range(10):
        graph, _s, _e = kruskal.generate(10, 10, random.Random(seed))
        if graph.edge_count() < 99:
            fragmented += 1
    assert fragmented > 0


def test_kruskal_endpoints_in_bounds_and_deterministic():
    for seed in range(15):
        g1, s1, e1 = kruskal.generate(5, 7, random.Random(seed))
        g2, s2, e2 = kruskal.generate(5, 7, random.Random(seed))
        assert (g1, s1, e1) == (g2, s2, e2)
        assert 0 <= s1[0] < 3 and 0 <= s1[1] < 2
        assert 3 <= e1[0] < 7 and 2 <= e1[1] < 5


def test_kruskal_rejects_invalid_dimensions():
    with pytest.raises(InvalidDimensionError) as exc:
        kruskal.generate(3, 0)
    assert exc.value.field == "width"
