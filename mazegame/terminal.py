"""Terminal output and the interactive play loop.

Rendering stays in ``mazegame.maze.render``; this module only decides where
lines go on screen, how they are coloured, and how player commands map to
``mazegame.game`` operations.
"""

from __future__ import annotations

import shutil
import sys
import time
from typing import Callable, Iterable, List, Optional

from colorama import Fore, Style

from mazegame.game import GameState, is_won, move, new_game, restart, score_line, state_lines, toggle_solution
from mazegame.logging_utils import get_logger
from mazegame.maze import MazeConfig, MazeError
from mazegame.maze.render import END_GLYPH, FOOTSTEP, PLAYER, START_GLYPH

log = get_logger("mazegame.terminal")

GLYPH_COLORS = {
    START_GLYPH: Fore.GREEN + Style.BRIGHT,
    END_GLYPH: Fore.RED + Style.BRIGHT,
    FOOTSTEP: Fore.YELLOW,
    PLAYER: Fore.CYAN + Style.BRIGHT,
}

_WORDS = {"up", "down", "left", "right", "north", "south", "west", "east"}

HELP_TEXT = """Commands:
  u / d / l / r        move up / down / left / right (also n/s/w/e or "up", "left" ...)
  ddrr                 several steps at once
  solve                show or hide the shortest path
  restart              back to the start of this maze
  new                  generate a new maze
  help                 show this help
  quit                 leave the game
"""


def terminal_width() -> int:
    cols = shutil.get_terminal_size(fallback=(80, 24)).columns
    return cols if cols > 0 else 80


def color_supported(stream) -> bool:
    try:
        return bool(stream.isatty())
    except Exception:  # pragma: no cover - exotic streams
        return False


def colorize(line: str) -> str:
    out = []
    for ch in line:
        color = GLYPH_COLORS.get(ch)
        out.append(f"{color}{ch}{Style.RESET_ALL}" if color else ch)
    return "".join(out)


def f_print(
    lines: Iterable[str],
    delay: float = 0.0,
    align: bool = False,
    out=None,
    width: Optional[int] = None,
    color: bool = False,
    center: bool = True,
) -> None:
    """Print lines centred in the terminal.

    With ``align`` every line gets the padding computed from the first one,
    which keeps maze columns lined up; otherwise each line is centred on its
    own. ``center=False`` prints flush left. ``delay`` seconds are slept after
    each line.
    """
    out = out or sys.stdout
    lines = list(lines)
    if not lines:
        return
    w = width or terminal_width()
    fixed = max(0, (w - len(lines[0].rstrip("\n"))) // 2)
    for line in lines:
        text = line.rstrip("\n")
        if not center:
            pad = 0
        else:
            pad = fixed if align else max(0, (w - len(text)) // 2)
        out.write(" " * pad + (colorize(text) if color else text) + "\n")
        if delay:
            out.flush()
            time.sleep(float(delay))


def _draw(state: GameState, out, color: bool, center: bool) -> None:
    f_print(state_lines(state), align=True, out=out, color=color, center=center)
    out.write(f"moves: {state.moves}   position: {state.position}   goal: {state.maze.end}\n")


def play(
    config: Optional[MazeConfig] = None,
    input_fn: Callable[[str], str] = input,
    out=None,
    color: Optional[bool] = None,
    center: bool = True,
) -> GameState:
    """Run the interactive loop until the player quits or input ends; returns the last state."""
    out = out or sys.stdout
    config = config or MazeConfig()
    if color is None:
        color = color_supported(out)
    state = new_game(config)
    log.info(event="game_start", algorithm=state.maze.algorithm, seed=state.maze.seed)
    out.write(HELP_TEXT)
    _draw(state, out, color, center)
    while True:
        try:
            raw = input_fn("> ")
        except (EOFError, KeyboardInterrupt):
            out.write("\n")
            break
        cmd = raw.strip().lower()
        if not cmd:
            continue
        if cmd in ("q", "quit", "exit"):
            break
        if cmd in ("h", "?", "help"):
            out.write(HELP_TEXT)
            continue
        if cmd == "solve":
            state = toggle_solution(state)
        elif cmd == "restart":
            state = restart(state)
        elif cmd == "new":
            next_config = MazeConfig(
                height=config.height,
                width=config.width,
                algorithm=config.algorithm,
                max_attempts=config.max_attempts,
            )
            try:
                state = new_game(next_config)
            except MazeError as e:
                out.write(f"Could not build a new maze: {e}\n")
                continue
        else:
            # multi-step input such as "ddss" moves one step per character
            steps: List[str] = [cmd] if cmd in _WORDS else list(cmd)
            for step in steps:
                state, moved = move(state, step)
                if not moved:
                    out.write(f"You can't go '{step}' from here.\n")
                    break
                if is_won(state):
                    break
        _draw(state, out, color, center)
        if is_won(state):
            out.write("You found the exit! " + score_line(state) + "\n")
            log.info(event="game_won", seed=state.maze.seed, moves=state.moves, best=state.maze.distance)
            break
    return state
