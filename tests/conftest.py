import os
import sys

import pytest

# Ensure repository root importable early
ROOT_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT_DIR not in sys.path:
    sys.path.insert(0, ROOT_DIR)

from mazegame import create_app  # noqa: E402
from mazegame.maze import PassageGraph  # noqa: E402


@pytest.fixture(scope="session")
def test_app():
    app = create_app({"TESTING": True, "MAZE_MAX_DIMENSION": 40, "MAZE_MAX_ATTEMPTS": 25})
    return app


@pytest.fixture()
def client(test_app):
    return test_app.test_client()


@pytest.fixture(autouse=True)
def _clear_maze_cache():
    """Keep cached mazes from leaking between API tests."""
    from mazegame.routes.maze_api import _maze_cache, _maze_cache_lock

    with _maze_cache_lock:
        _maze_cache.clear()
    yield


@pytest.fixture
def two_by_two_graph():
    """Fully carved 2x2 spanning tree: right and down out of (0,0), then right along the bottom."""
    return PassageGraph.from_dict(
        2,
        2,
        {
            (0, 0): ["r", "d"],
            (1, 0): ["l"],
            (0, 1): ["u", "r"],
            (1, 1): ["l"],
        },
    )


@pytest.fixture
def split_graph():
    """2x2 graph with two islands: the left column and the two unconnected right cells."""
    return PassageGraph.from_dict(2, 2, {(0, 0): ["d"], (1, 0): [], (0, 1): ["u"], (1, 1): []})


def pytest_configure(config):  # register custom marker
    config.addinivalue_line("markers", "performance: generation time guardrails")
