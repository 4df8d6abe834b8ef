import unittest

from mazegame.maze import (
    CLOSED,
    END,
    OPEN,
    START,
    Maze,
    PassageGraph,
    build_render_grid,
    dump_directions,
    dump_grid,
    render,
    render_text,
)


def _two_by_two_maze():
    graph = PassageGraph.from_dict(
        2, 2, {(0, 0): ["r", "d"], (1, 0): ["l"], (0, 1): ["u", "r"], (1, 1): ["l"]}
    )
    return Maze(graph, (0, 0), (1, 1))


class TestRenderGrid(unittest.TestCase):
    def test_grid_dimensions_and_passage_slots(self):
        maze = _two_by_two_maze()
        arr = maze.arr
        self.assertEqual(len(arr), 5)
        self.assertTrue(all(len(row) == 5 for row in arr))
        self.assertEqual(arr[1][2], OPEN)  # (0,0) -> (1,0)
        self.assertEqual(arr[2][1], OPEN)  # (0,0) -> (0,1)
        self.assertEqual(arr[2][3], CLOSED)  # (1,0) / (1,1)
        self.assertEqual(arr[3][2], OPEN)  # (0,1) -> (1,1)
        self.assertEqual(arr[1][1], START)
        self.assertEqual(arr[3][3], END)
        self.assertEqual(arr[0][0], CLOSED)

    def test_start_wins_over_end_on_shared_cell(self):
        g = PassageGraph.from_dict(1, 1, {})
        arr = build_render_grid(g, (0, 0), (0, 0))
        self.assertEqual(arr[1][1], START)


class TestRenderText(unittest.TestCase):
    def test_plain_render(self):
        lines = render(_two_by_two_maze())
        self.assertEqual(lines, ["+-+-+\n", "|S  |\n", "+ +-+\n", "|  E|\n", "+-+-+\n"])

    def test_overlay_only_touches_cell_interiors(self):
        maze = _two_by_two_maze()
        lines = render(maze, maze.shortest_path)
        self.assertEqual(lines, ["+-+-+\n", "|S  |\n", "+ +-+\n", "|. E|\n", "+-+-+\n"])

    def test_highlight_beats_start_and_end(self):
        maze = _two_by_two_maze()
        self.assertEqual(render(maze, None, (0, 0))[1], "|@  |\n")
        self.assertEqual(render(maze, [(1, 1)], (1, 1))[3], "|  @|\n")
        self.assertEqual(render(maze, None, (1, 0))[1], "|S @|\n")

    def test_out_of_bounds_overlay_and_highlight_ignored(self):
        maze = _two_by_two_maze()
        plain = render(maze)
        self.assertEqual(render(maze, [(-1, 0), (2, 0), (0, 5), "junk", (0, 1)], (9, 9))[3], "|. E|\n")
        self.assertEqual(render(maze, None, (-1, -1)), plain)
        self.assertEqual(render(maze, [(2, 2)], (2, 0)), plain)

    def test_single_cell_start_equals_end(self):
        maze = Maze(PassageGraph.from_dict(1, 1, {}), (0, 0), (0, 0))
        self.assertEqual(render(maze), ["+-+\n", "|S|\n", "+-+\n"])
        self.assertEqual(render(maze, None, (0, 0)), ["+-+\n", "|@|\n", "+-+\n"])

    def test_render_is_idempotent_and_accepts_bare_grid(self):
        maze = _two_by_two_maze()
        first = render(maze, maze.shortest_path, (0, 1))
        second = render(maze, maze.shortest_path, (0, 1))
        self.assertEqual(first, second)
        self.assertEqual(render(maze.arr), render(maze))
        self.assertEqual(render_text(maze), "".join(render(maze)))

    def test_line_width(self):
        maze = Maze(PassageGraph.from_dict(3, 4, {}), (0, 0), (3, 2))
        lines = render(maze)
        self.assertEqual(len(lines), 7)
        for line in lines:
            self.assertTrue(line.endswith("\n"))
            self.assertEqual(len(line.rstrip("\n")), 9)

    def test_debug_dumps(self):
        maze = _two_by_two_maze()
        self.assertEqual(
            dump_directions(maze.graph),
            ["(0, 0): d r\n", "(1, 0): l\n", "(0, 1): u r\n", "(1, 1): l\n"],
        )
        grid = dump_grid(maze)
        self.assertEqual(len(grid), 5)
        self.assertEqual(grid[1], "0 2 1 1 0\n")
        self.assertEqual(grid[3], "0 1 1 3 0\n")
        self.assertEqual(dump_grid(maze.arr), grid)


if __name__ == "__main__":
    unittest.main()
