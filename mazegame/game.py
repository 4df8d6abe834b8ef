"""Player session state as explicit values.

Every operation takes a :class:`GameState` and returns a new one; nothing
here holds a "current maze". Starting a new maze means calling
:func:`new_game` again and dropping the old state.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import List, Optional, Tuple

from mazegame.maze import Maze, MazeConfig, generate_maze, render
from mazegame.maze.topology import Coord, neighbor, parse_direction


@dataclass(frozen=True)
class GameState:
    maze: Maze
    position: Coord
    footsteps: Tuple[Coord, ...] = ()
    moves: int = 0
    show_solution: bool = False

    @property
    def won(self) -> bool:
        return self.position == self.maze.end


def new_game(config: Optional[MazeConfig] = None) -> GameState:
    maze = generate_maze(config or MazeConfig())
    return start_game(maze)


def start_game(maze: Maze) -> GameState:
    return GameState(maze=maze, position=maze.start, footsteps=(maze.start,))


def move(state: GameState, direction: str) -> Tuple[GameState, bool]:
    """Try one step; returns the (possibly unchanged) state and whether it moved."""
    d = parse_direction(direction)
    if d is None or state.won or not state.maze.can_move(state.position, d):
        return state, False
    pos = neighbor(state.position, d)
    return replace(state, position=pos, footsteps=state.footsteps + (pos,), moves=state.moves + 1), True


def restart(state: GameState) -> GameState:
    return start_game(state.maze)


def toggle_solution(state: GameState) -> GameState:
    return replace(state, show_solution=not state.show_solution)


def is_won(state: GameState) -> bool:
    return state.won


def state_lines(state: GameState) -> List[str]:
    overlay = state.maze.shortest_path if state.show_solution else state.footsteps
    return render(state.maze, overlay, state.position)


def score_line(state: GameState) -> str:
    best = state.maze.distance or 0
    if state.moves == best:
        return f"Solved in {state.moves} moves: a shortest path!"
    return f"Solved in {state.moves} moves (shortest possible: {best})."


__all__ = [
    "GameState",
    "new_game",
    "start_game",
    "move",
    "restart",
    "toggle_solution",
    "is_won",
    "state_lines",
    "score_line",
]
