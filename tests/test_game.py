import pytest

from mazegame.game import (
    GameState,
    is_won,
    move,
    new_game,
    restart,
    score_line,
    start_game,
    state_lines,
    toggle_solution,
)
from mazegame.maze import Maze, MazeConfig


@pytest.fixture
def game(two_by_two_graph):
    return start_game(Maze(two_by_two_graph, (0, 0), (1, 1)))


def test_start_game_places_player_on_start(game):
    assert game.position == (0, 0)
    assert game.footsteps == ((0, 0),)
    assert game.moves == 0
    assert not game.won


def test_move_returns_new_state(game):
    after, moved = move(game, "d")
    assert moved is True
    assert after.position == (0, 1)
    assert after.footsteps == ((0, 0), (0, 1))
    assert after.moves == 1
    # original state untouched
    assert game.position == (0, 0)
    assert game.moves == 0


@pytest.mark.parametrize("direction", ["u", "l", "zzz", "", None])
def test_blocked_or_invalid_move_keeps_state(game, direction):
    after, moved = move(game, direction)
    assert moved is False
    assert after is game


def test_direction_aliases(game):
    after, moved = move(game, "South")
    assert moved and after.position == (0, 1)
    after, moved = move(after, "east")
    assert moved and after.position == (1, 1)


def test_reaching_end_wins_and_freezes(game):
    state, _ = move(game, "d")
    state, _ = move(state, "r")
    assert is_won(state)
    assert state.won
    same, moved = move(state, "l")
    assert moved is False
    assert same is state
    assert score_line(state) == "Solved in 2 moves: a shortest path!"


def test_score_line_for_detour(game):
    state, _ = move(game, "r")
    state, _ = move(state, "l")
    state, _ = move(state, "d")
    state, _ = move(state, "r")
    assert state.won
    assert score_line(state) == "Solved in 4 moves (shortest possible: 2)."


def test_restart_and_toggle(game):
    state, _ = move(game, "d")
    fresh = restart(state)
    assert fresh.position == (0, 0)
    assert fresh.moves == 0
    toggled = toggle_solution(fresh)
    assert toggled.show_solution is True
    assert toggle_solution(toggled).show_solution is False


def test_state_lines_overlay_and_player(game):
    state, _ = move(game, "d")
    assert state_lines(state) == ["+-+-+\n", "|S  |\n", "+ +-+\n", "|@ E|\n", "+-+-+\n"]
    solved = toggle_solution(restart(state))
    assert solved.position == (0, 0)
    assert state_lines(solved) == ["+-+-+\n", "|@  |\n", "+ +-+\n", "|. E|\n", "+-+-+\n"]


def test_new_game_from_config():
    state = new_game(MazeConfig(height=4, width=4, seed=9))
    assert isinstance(state, GameState)
    assert state.position == state.maze.start
    assert state.maze.solvable
