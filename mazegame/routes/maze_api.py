"""
project: mazegame
module: maze_api.py
License: MIT

Maze generation, rendering and movement API routes.

The API is stateless: a maze is identified by (algorithm, height, width,
seed) and regenerated on demand, so clients keep their own position and
footsteps and the server never stores a "current maze".
"""

import hashlib
import os
import random
import threading

from flask import Blueprint, current_app, jsonify, request

from mazegame import __version__
from mazegame.logging_utils import get_logger
from mazegame.maze import (
    GenerationFailedError,
    MazeConfig,
    MazeError,
    generate_maze,
    parse_direction,
    render,
)
from mazegame.maze.topology import neighbor
from mazegame.validation import MAZE_IDENTITY, MAZE_MOVE, MAZE_RENDER, ValidationError, validate

log = get_logger("mazegame.api")

bp_maze = Blueprint("maze_api", __name__)

SEED_MAX = 2**31 - 1


def _coerce_seed(payload_seed):
    """Convert provided seed (int or str) into a bounded non-negative int."""
    if payload_seed is None:
        return random.randint(0, SEED_MAX)
    if isinstance(payload_seed, int):
        return payload_seed % SEED_MAX
    s = str(payload_seed).strip()
    if not s:
        return random.randint(0, SEED_MAX)
    digits = s[1:] if s.startswith("-") else s
    if digits.isdecimal():
        return int(s) % SEED_MAX
    h = hashlib.sha256(s.encode("utf-8")).digest()
    return int.from_bytes(h[:8], "big") % SEED_MAX


# Small in-process cache (algorithm, h, w, seed, attempts) -> Maze. Mazes are immutable so
# sharing them between requests is safe; the lock only guards the dict itself.
_maze_cache = {}
_maze_cache_lock = threading.Lock()


def get_cached_maze(config: MazeConfig):
    if os.environ.get("MAZE_DISABLE_CACHE") == "1":
        return generate_maze(config)
    key = (config.algorithm, config.height, config.width, config.seed, config.max_attempts)
    with _maze_cache_lock:
        maze = _maze_cache.get(key)
    if maze is not None:
        return maze
    maze = generate_maze(config)
    cache_max = current_app.config.get("MAZE_CACHE_MAX", 8)
    with _maze_cache_lock:
        _maze_cache[key] = maze
        while len(_maze_cache) > max(1, cache_max):
            _maze_cache.pop(next(iter(_maze_cache)))
    return maze


def _parse(payload, schema):
    ok, data = validate(payload, schema)
    if not ok:
        raise ValidationError(data["field"], data["error"], data["code"])
    limit = current_app.config["MAZE_MAX_DIMENSION"]
    for field in ("height", "width"):
        if data[field] > limit:
            raise ValidationError(field, f"must be <= {limit}", "max")
    return data


def _config_from(data) -> MazeConfig:
    return MazeConfig(
        height=data["height"],
        width=data["width"],
        algorithm=data["algorithm"],
        seed=_coerce_seed(data.get("seed")),
        max_attempts=current_app.config["MAZE_MAX_ATTEMPTS"],
    )


@bp_maze.errorhandler(ValidationError)
def _validation_error(e: ValidationError):
    return jsonify(e.to_dict()), 400


@bp_maze.errorhandler(GenerationFailedError)
def _generation_failed(e: GenerationFailedError):
    log.warn(event="api_generation_failed", algorithm=e.algorithm, attempts=e.attempts, base_seed=e.base_seed)
    return jsonify({"error": str(e), "code": "generation_failed", "attempts": e.attempts}), 503


@bp_maze.errorhandler(MazeError)
def _maze_error(e: MazeError):
    field = getattr(e, "field", None) or ("algorithm" if hasattr(e, "known") else "__root__")
    return jsonify({"field": field, "error": str(e), "code": "invalid"}), 400


@bp_maze.route("/api/health")
def health():
    return jsonify({"status": "ok", "version": __version__})


@bp_maze.route("/api/maze")
def maze_get():
    """
    Generate (or fetch from cache) a solvable maze.
    Query: height, width, algorithm, seed, solution=0|1
    Response: maze summary plus rendered 'lines'.
    """
    data = _parse(request.args.to_dict(), MAZE_IDENTITY)
    maze = get_cached_maze(_config_from(data))
    show_solution = request.args.get("solution", "0") in ("1", "true", "yes", "on")
    payload = maze.to_dict()
    payload["lines"] = render(maze, maze.shortest_path if show_solution else None)
    return jsonify(payload)


@bp_maze.route("/api/maze/render", methods=["POST"])
def maze_render():
    """Render a maze with an optional footstep overlay and highlighted cell."""
    data = _parse(request.get_json(silent=True) or {}, MAZE_RENDER)
    maze = get_cached_maze(_config_from(data))
    lines = render(maze, data.get("path"), data.get("highlight"))
    return jsonify({"seed": maze.base_seed, "lines": lines})


@bp_maze.route("/api/maze/move", methods=["POST"])
def maze_move():
    """
    Validate a single move from 'pos' in direction 'dir'.
    Response: { 'pos': [x, y], 'moved': bool, 'won': bool, 'exits': [...] }
    Unknown or blocked directions leave the position unchanged.
    """
    data = _parse(request.get_json(silent=True) or {}, MAZE_MOVE)
    maze = get_cached_maze(_config_from(data))
    pos = data["pos"]
    direction = parse_direction(data["dir"])
    moved = direction is not None and maze.can_move(pos, direction)
    if moved:
        pos = neighbor(pos, direction)
    log.debug(event="api_move", seed=maze.base_seed, dir=data["dir"], moved=moved, x=pos[0], y=pos[1])
    return jsonify(
        {
            "pos": list(pos),
            "moved": moved,
            "won": tuple(pos) == maze.end,
            "exits": maze.exits(pos),
        }
    )
