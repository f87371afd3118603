"""Shared pytest fixtures.

Test directories have no ``__init__.py``; keep test module names unique.
"""

import pytest

from hypermaze.core.grid import Direction
from hypermaze.core.maze import build_maze
from hypermaze.core.settings import MazeSettings
from hypermaze.core.store import InMemoryMazeStore, InMemorySessionStore
from hypermaze.server.controller import MazeController

N, S, E, W = Direction.NORTH, Direction.SOUTH, Direction.EAST, Direction.WEST


@pytest.fixture
def corridor_maze():
    """2x1: start (0,0), end (1,0), open east wall."""
    return build_maze(2, 1, [(0, 0, E)], maze_id="corridor")


@pytest.fixture
def dead_end_maze():
    """2x2 with a dead end south of the start.

    (0,0) -S-> (0,1) dead end; (0,0) -E-> (1,0) -S-> (1,1) end.
    """
    return build_maze(2, 2, [(0, 0, S), (0, 0, E), (1, 0, S)], maze_id="dead-end")


@pytest.fixture
def maze_settings():
    settings = MazeSettings()
    settings.seed = 42
    return settings


@pytest.fixture
def controller(maze_settings):
    return MazeController(
        settings=maze_settings,
        maze_store=InMemoryMazeStore(),
        session_store=InMemorySessionStore(),
    )


@pytest.fixture
def install_maze(controller):
    """Put a hand-built maze into the controller's store."""

    def _install(maze):
        controller.maze_store.save(maze)
        return controller.get_maze(maze.id)

    return _install
