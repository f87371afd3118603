"""Tests for the HTTP and in-process maze clients."""

from unittest.mock import MagicMock

import pytest
import requests
from fastapi.testclient import TestClient

from hypermaze.core.grid import Direction
from hypermaze.server.api import create_app
from hypermaze.solver.client_base import MazeClientError
from hypermaze.solver.client_http import MazeApiClient
from hypermaze.solver.client_local import LocalMazeClient
from hypermaze.solver.solver import Solver
from hypermaze.solver.strategy_dfs import DepthFirstStrategy

MAZE_JSON = {
    "id": "m1",
    "width": 5,
    "height": 4,
    "start": {"x": 0, "y": 0},
    "end": {"x": 4, "y": 3},
    "createdAt": "2026-03-01T12:00:00Z",
    "_links": {
        "self": {"href": "/api/mazes/m1", "rel": "self", "method": "GET"},
        "start": {"href": "/api/mazes/m1/sessions", "rel": "start", "method": "POST"},
    },
}

SESSION_JSON = {
    "id": "s1",
    "mazeId": "m1",
    "currentPosition": {"x": 0, "y": 0},
    "state": "InProgress",
    "moveCount": 0,
    "_links": {
        "self": {"href": "/api/mazes/m1/sessions/s1", "rel": "self", "method": "GET"},
        "east": {"href": "/api/mazes/m1/sessions/s1/move/east", "rel": "move", "method": "POST"},
    },
}


@pytest.fixture
def http():
    return MagicMock()


@pytest.fixture
def api_client(http):
    return MazeApiClient("http://localhost:8080", http=http, timeout=3)


def respond_with(http, body):
    http.request.return_value.json.return_value = body
    return http.request.return_value


class TestMazeApiClient:
    def test_create_maze(self, http, api_client):
        response = respond_with(http, MAZE_JSON)
        maze = api_client.create_maze(5, 4)
        http.request.assert_called_once_with(
            "POST", "http://localhost:8080/api/mazes", json={"width": 5, "height": 4}, timeout=3
        )
        response.raise_for_status.assert_called_once()
        assert maze.id == "m1"
        assert maze.links["start"].href == "/api/mazes/m1/sessions"

    def test_start_session_follows_start_link(self, http, api_client):
        respond_with(http, MAZE_JSON)
        maze = api_client.create_maze(5, 4)
        respond_with(http, SESSION_JSON)
        session = api_client.start_session(maze)
        http.request.assert_called_with(
            "POST", "http://localhost:8080/api/mazes/m1/sessions", json=None, timeout=3
        )
        assert session.maze_id == "m1"
        assert set(session.links) == {"self", "east"}

    def test_move_follows_direction_link(self, http, api_client):
        session = _session(http, api_client)
        respond_with(http, {**SESSION_JSON, "currentPosition": {"x": 1, "y": 0}, "moveCount": 1})
        moved = api_client.move(session, Direction.EAST)
        http.request.assert_called_with(
            "POST", "http://localhost:8080/api/mazes/m1/sessions/s1/move/east", json=None, timeout=3
        )
        assert moved.move_count == 1

    def test_missing_link_never_hits_the_network(self, http, api_client):
        session = _session(http, api_client)
        http.request.reset_mock()
        with pytest.raises(MazeClientError):
            api_client.move(session, Direction.NORTH)
        http.request.assert_not_called()

    def test_http_errors_propagate(self, http, api_client):
        respond_with(http, {}).raise_for_status.side_effect = requests.HTTPError("500")
        with pytest.raises(requests.HTTPError):
            api_client.create_maze(5, 4)

    def test_base_url_trailing_slash(self, http):
        respond_with(http, MAZE_JSON)
        MazeApiClient("http://maze:9000/", http=http).create_maze(2, 2)
        assert http.request.call_args.args[1] == "http://maze:9000/api/mazes"

    def test_solves_against_the_real_app(self, controller):
        client = MazeApiClient("http://testserver", http=TestClient(create_app(controller)))
        maze = client.create_maze(6, 6)
        result = Solver(client, DepthFirstStrategy()).solve(maze)
        assert result.success
        assert controller.session_store.get(result.session_id).is_completed


def _maze(http, api_client):
    respond_with(http, MAZE_JSON)
    maze = api_client.create_maze(5, 4)
    respond_with(http, SESSION_JSON)
    return maze


def _session(http, api_client):
    maze = _maze(http, api_client)
    return api_client.start_session(maze)


class TestLocalMazeClient:
    def test_invalid_size_is_a_client_error(self, controller):
        with pytest.raises(MazeClientError, match="Width must be a positive integer"):
            LocalMazeClient(controller).create_maze(0, 5)

    def test_only_offered_links_can_be_followed(self, controller, install_maze, corridor_maze):
        client = LocalMazeClient(controller)
        session = client.start_session(install_maze(corridor_maze))
        with pytest.raises(MazeClientError):
            client.move(session, Direction.NORTH)
        assert controller.session_store.get(session.id).move_count == 0

    def test_move(self, controller, install_maze, corridor_maze):
        client = LocalMazeClient(controller)
        session = client.start_session(install_maze(corridor_maze))
        assert client.move(session, Direction.EAST).is_completed
