"""mazegame CLI entry point.

Subcommands print a maze, play one interactively, run the HTTP API, or
report generation statistics. Accepts configuration via flags and MAZE_*
environment variables, with optional .env loading.

Run `python run.py --help` for details.
"""

import argparse
import os
import signal
import sys
from textwrap import dedent

from colorama import Fore, Style
from colorama import init as _color_init
from dotenv import load_dotenv

# Disable colors if output is not a real terminal (e.g., during pytest capture)
try:
    _COLOR_ENABLED = sys.stdout.isatty()
except Exception:  # pragma: no cover
    _COLOR_ENABLED = False


def _load_version() -> str:
    try:
        with open(os.path.join(os.path.dirname(os.path.abspath(__file__)), "VERSION"), "r", encoding="utf-8") as f:
            return f.read().strip()
    except OSError:
        from mazegame import __version__ as pkg_version

        return pkg_version


__version__ = _load_version()


def _add_maze_args(p: argparse.ArgumentParser) -> None:
    p.add_argument("--height", type=int, default=None, help="Maze height in cells (default: env MAZE_HEIGHT or 10)")
    p.add_argument("--width", type=int, default=None, help="Maze width in cells (default: env MAZE_WIDTH or 10)")
    p.add_argument(
        "--algorithm",
        "-a",
        default=None,
        help="Generator: dfs or kruskal (default: env MAZE_ALGORITHM or dfs)",
    )
    p.add_argument("--seed", type=int, default=None, help="Base seed for reproducible mazes")
    p.add_argument(
        "--max-attempts",
        dest="max_attempts",
        type=int,
        default=None,
        help="Regeneration budget until a solvable maze appears (default: 25)",
    )


_TOP_LEVEL_FLAGS = ("-h", "--help", "--version", "--env-file")


def parse_args(argv: list[str]) -> argparse.Namespace:
    description = """
    mazegame

    Generate rectangular mazes with randomized depth-first search or
    randomized Kruskal, solve them, and print or play them in the terminal.
    """

    epilog = dedent(
        """
        Environment variables:
          MAZE_HEIGHT / MAZE_WIDTH   Default maze size (default: 10 x 10)
          MAZE_ALGORITHM             dfs or kruskal (default: dfs)
          MAZE_SEED                  Default base seed
          MAZE_MAX_ATTEMPTS          Regeneration budget (default: 25)
          MAZEGAME_LOG_LEVEL         debug / info / warn / error (default: warn)
          HOST / PORT                Bind address for the HTTP API (default: 0.0.0.0:5000)

        Examples:
          # Print a 12x20 maze with its shortest path
          python run.py show --height 12 --width 20 --solution

          # Reproducible Kruskal maze
          python run.py show -a kruskal --seed 42

          # Play in the terminal
          python run.py play --height 8 --width 8

          # Run the HTTP API on a custom port
          python run.py server --port 8080

          # Solvability report for 200 Kruskal mazes
          python run.py stats -a kruskal --count 200
        """
    )

    parser = argparse.ArgumentParser(
        prog="mazegame",
        description=dedent(description),
        epilog=epilog,
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.add_argument(
        "--env-file",
        dest="env_file",
        help="Path to a .env file to load before processing flags",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"mazegame {__version__}",
    )

    subparsers = parser.add_subparsers(dest="command")

    show_parser = subparsers.add_parser(
        "show",
        help="Generate and print a maze",
        formatter_class=argparse.RawTextHelpFormatter,
    )
    _add_maze_args(show_parser)
    show_parser.add_argument("--solution", action="store_true", help="Overlay the shortest path")
    show_parser.add_argument("--delay", type=float, default=0.0, help="Seconds to pause after each printed line")
    show_parser.add_argument("--no-center", dest="center", action="store_false", help="Print flush left")
    show_parser.add_argument(
        "--debug",
        action="store_true",
        help="Also dump each cell's passage directions and the raw render grid",
    )
    show_parser.set_defaults(command="show")

    play_parser = subparsers.add_parser(
        "play",
        help="Play a maze interactively in the terminal",
        formatter_class=argparse.RawTextHelpFormatter,
    )
    _add_maze_args(play_parser)
    play_parser.add_argument("--no-center", dest="center", action="store_false", help="Print flush left")
    play_parser.set_defaults(command="play")

    server_parser = subparsers.add_parser(
        "server",
        help="Run the maze HTTP API",
        formatter_class=argparse.RawTextHelpFormatter,
    )
    server_parser.add_argument("--host", default=None, help="Host interface to bind (default: env HOST or 0.0.0.0)")
    server_parser.add_argument("--port", type=int, default=None, help="Port to listen on (default: env PORT or 5000)")
    server_parser.add_argument("--debug", action="store_true", help="Enable Flask debug mode")
    server_parser.set_defaults(command="server")

    stats_parser = subparsers.add_parser(
        "stats",
        help="Report solvability rate and path lengths over a seed range",
        formatter_class=argparse.RawTextHelpFormatter,
    )
    _add_maze_args(stats_parser)
    stats_parser.add_argument("--count", type=int, default=100, help="Number of seeds to sample (default: 100)")
    stats_parser.add_argument("--json", dest="as_json", action="store_true", help="Print the report as JSON")
    stats_parser.set_defaults(command="stats")

    # If no subcommand provided, default to show (top-level flags stay in front)
    argv = list(argv)
    head = 0
    while head < len(argv) and argv[head].split("=", 1)[0] in _TOP_LEVEL_FLAGS:
        head += 1 if "=" in argv[head] or argv[head] != "--env-file" else 2
    if head >= len(argv) or argv[head] not in subparsers.choices:
        argv = argv[:head] + ["show"] + argv[head:]

    return parser.parse_args(argv)


def _maze_config(args, require_solvable: bool = True):
    from mazegame.maze import MazeConfig

    return MazeConfig.from_env(
        height=getattr(args, "height", None),
        width=getattr(args, "width", None),
        algorithm=getattr(args, "algorithm", None),
        seed=getattr(args, "seed", None),
        max_attempts=getattr(args, "max_attempts", None),
        require_solvable=require_solvable,
    )


def _error(msg: str) -> int:
    prefix = f"{Fore.RED}[ERROR]{Style.RESET_ALL}" if _COLOR_ENABLED else "[ERROR]"
    print(f"{prefix} {msg}", file=sys.stderr)
    return 1


def cmd_show(args) -> int:
    from mazegame.maze import dump_directions, dump_grid, generate_maze, render
    from mazegame.terminal import f_print

    maze = generate_maze(_maze_config(args))
    lines = render(maze, maze.shortest_path if args.solution else None)
    f_print(lines, delay=args.delay, align=True, center=args.center, color=_COLOR_ENABLED)
    print(
        f"algorithm={maze.algorithm} seed={maze.seed} attempt={maze.attempt} "
        f"start={maze.start} end={maze.end} path_length={maze.metrics['path_length']}"
    )
    if args.debug:
        sys.stdout.write("".join(dump_directions(maze.graph)))
        sys.stdout.write("".join(dump_grid(maze)))
    return 0


def cmd_play(args) -> int:
    from mazegame.terminal import play

    play(_maze_config(args), color=_COLOR_ENABLED, center=args.center)
    return 0


def cmd_stats(args) -> int:
    import json

    from mazegame.maze import generate_maze

    config = _maze_config(args, require_solvable=False)
    if args.count < 1:
        return _error("--count must be >= 1")
    base = config.seed if config.seed is not None else 0
    solvable = 0
    path_lengths = []
    components = []
    for i in range(args.count):
        config.seed = base + i
        maze = generate_maze(config)
        components.append(maze.metrics["components"])
        if maze.solvable:
            solvable += 1
            path_lengths.append(maze.metrics["path_length"])
    report = {
        "algorithm": config.algorithm,
        "height": config.height,
        "width": config.width,
        "seeds": [base, base + args.count - 1],
        "solvable": solvable,
        "solvable_rate": round(solvable / args.count, 4),
        "avg_path_length": round(sum(path_lengths) / len(path_lengths), 2) if path_lengths else 0,
        "avg_components": round(sum(components) / len(components), 2),
    }
    if args.as_json:
        print(json.dumps(report, indent=2))
    else:
        for k, v in report.items():
            print(f"  {k + ':':18} {v}")
    return 0


def main(argv: list[str]) -> int:
    args = parse_args(argv)
    if _COLOR_ENABLED:
        _color_init()
    if getattr(args, "env_file", None):
        load_dotenv(args.env_file)
    else:
        # Load default .env if present (no error if missing)
        load_dotenv()

    def handle_sigint(sig, frame):
        print("\n[INFO] Interrupted.")
        sys.exit(0)

    signal.signal(signal.SIGINT, handle_sigint)

    from mazegame.logging_utils import log
    from mazegame.maze import MazeError

    mode = (getattr(args, "command", None) or "show").lower()
    log.info(event="startup", mode=mode, version=__version__)

    try:
        if mode == "show":
            return cmd_show(args)
        if mode == "play":
            return cmd_play(args)
        if mode == "stats":
            return cmd_stats(args)
    except (MazeError, ValueError) as e:
        return _error(str(e))

    host = getattr(args, "host", None) or os.getenv("HOST", "0.0.0.0")
    port = int(getattr(args, "port", None) or os.getenv("PORT", "5000"))
    debug = bool(getattr(args, "debug", False) or os.getenv("FLASK_DEBUG") == "1")

    title = f"{Fore.CYAN}{Style.BRIGHT}Maze API Server{Style.RESET_ALL}" if _COLOR_ENABLED else "Maze API Server"

    def label(text: str) -> str:
        return f"{Fore.YELLOW}{text}{Style.RESET_ALL}" if _COLOR_ENABLED else text

    def value(val) -> str:
        return f"{Fore.GREEN}{val}{Style.RESET_ALL}" if _COLOR_ENABLED else str(val)

    divider = (Fore.MAGENTA + "=" * 40 + Style.RESET_ALL) if _COLOR_ENABLED else "=" * 40
    print(
        "\n".join(
            [
                divider,
                f"  {title}",
                divider,
                f"  {label('Host:'):12} {value(host)}",
                f"  {label('Port:'):12} {value(port)}",
                f"  {label('Debug:'):12} {value('YES' if debug else 'NO')}",
                divider,
                "",
            ]
        )
    )
    from mazegame.server import start_server

    log.info(event="listen", host=host, port=port, debug=debug)
    start_server(host=host, port=port, debug=debug)
    return 0


def _console_main() -> int:
    return main(sys.argv[1:])


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))
