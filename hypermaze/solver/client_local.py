"""In-process client that drives a MazeController directly."""

from ..core.grid import Direction
from ..core.models import MazeResponse, SessionResponse
from ..server.controller import ApiError, MazeController
from .client_base import MazeClient, MazeClientError


class LocalMazeClient(MazeClient):
    """Same contract as the HTTP client without a network hop.

    Moves are still only issued through links present in the last response.
    """

    def __init__(self, controller: MazeController):
        self.controller = controller

    def create_maze(self, width: int, height: int) -> MazeResponse:
        try:
            return self.controller.create_maze(width, height)
        except ApiError as exc:
            raise MazeClientError(str(exc)) from exc

    def start_session(self, maze: MazeResponse) -> SessionResponse:
        self.require_link(maze.links, "start")
        try:
            return self.controller.create_session(maze.id)
        except ApiError as exc:
            raise MazeClientError(str(exc)) from exc

    def move(self, session: SessionResponse, direction: Direction) -> SessionResponse:
        self.require_link(session.links, direction.value)
        try:
            return self.controller.move(session.maze_id, session.id, direction.value)
        except ApiError as exc:
            raise MazeClientError(str(exc)) from exc
