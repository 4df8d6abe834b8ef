import pytest

from mazegame.maze.topology import (
    DIRECTIONS,
    DOWN,
    LEFT,
    RIGHT,
    UP,
    delta,
    in_bounds,
    neighbor,
    neighbors,
    opposite,
    parse_direction,
)


def test_opposite_is_an_involution():
    for d in DIRECTIONS:
        assert opposite(d) != d
        assert opposite(opposite(d)) == d
    assert len({opposite(d) for d in DIRECTIONS}) == 4


def test_deltas_are_unit_and_cancel_out():
    for d in DIRECTIONS:
        dx, dy = delta(d)
        assert abs(dx) + abs(dy) == 1
        ox, oy = delta(opposite(d))
        assert (dx + ox, dy + oy) == (0, 0)
    assert delta(UP) == (0, -1)
    assert delta(RIGHT) == (1, 0)


@pytest.mark.parametrize(
    "x,y,expected",
    [(0, 0, True), (2, 1, True), (3, 0, False), (0, 2, False), (-1, 0, False), (0, -1, False)],
)
def test_in_bounds(x, y, expected):
    assert in_bounds(x, y, 3, 2) is expected


def test_neighbors_respect_bounds_and_order():
    assert list(neighbors((0, 0), 3, 3)) == [(DOWN, (0, 1)), (RIGHT, (1, 0))]
    assert [d for d, _ in neighbors((1, 1), 3, 3)] == [UP, DOWN, LEFT, RIGHT]
    assert list(neighbors((0, 0), 1, 1)) == []
    assert neighbor((1, 1), LEFT) == (0, 1)


@pytest.mark.parametrize(
    "text,expected",
    [
        ("u", UP),
        ("UP", UP),
        (" north ", UP),
        ("s", DOWN),
        ("w", LEFT),
        ("west", LEFT),
        ("e", RIGHT),
        ("r", RIGHT),
        ("zzz", None),
        ("", None),
        (None, None),
        (3, None),
    ],
)
def test_parse_direction(text, expected):
    assert parse_direction(text) == expected
