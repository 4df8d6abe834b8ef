"""
project: mazegame
module: __init__.py
License: MIT

Flask application factory for the maze HTTP API.

Configuration is sourced from environment variables (optionally loaded from
a .env file) with defaults suitable for local development. The maze core in
``mazegame.maze`` has no Flask dependency of its own.
"""

import logging
import os
import uuid

from dotenv import load_dotenv
from flask import Flask, jsonify

__version__ = "0.2.0"

# Load .env if present so MAZE_* settings can be supplied without exporting shell variables.
load_dotenv()


def _env_int(name: str, default: int) -> int:
    try:
        return int(os.getenv(name, str(default)))
    except ValueError:
        return default


def create_app(config: dict | None = None) -> Flask:
    """Build a configured Flask app with the maze blueprint registered."""
    app = Flask(__name__, instance_relative_config=True)
    try:
        os.makedirs(app.instance_path, exist_ok=True)
    except OSError:
        pass

    app.config.update(
        SECRET_KEY=os.getenv("SECRET_KEY", "dev-secret-change-me"),
        MAZE_MAX_DIMENSION=_env_int("MAZE_MAX_DIMENSION", 60),
        MAZE_MAX_ATTEMPTS=_env_int("MAZE_MAX_ATTEMPTS", 25),
        MAZE_CACHE_MAX=_env_int("MAZE_CACHE_MAX", 8),
    )
    if config:
        app.config.update(config)

    from mazegame.routes.maze_api import bp_maze

    app.register_blueprint(bp_maze)

    @app.errorhandler(404)
    def not_found(e):
        return jsonify({"error": "not found"}), 404

    # In non-debug mode return a small JSON body and log details under an error id
    @app.errorhandler(500)
    def internal_error(e):
        error_id = uuid.uuid4().hex[:8]
        logging.exception("Unhandled exception (id=%s)", error_id)
        return jsonify({"error": "internal server error", "error_id": error_id}), 500

    return app
