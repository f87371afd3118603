"""Base class for maze clients used by the solvers."""

from abc import ABC, abstractmethod

from ..core.grid import Direction
from ..core.models import Link, MazeResponse, SessionResponse


class MazeClientError(Exception):
    """A request to the maze service could not be completed."""


class MazeClient(ABC):
    """Unified interface over the hypermedia maze API.

    Clients only follow links they were handed; they never expose walls.
    """

    @abstractmethod
    def create_maze(self, width: int, height: int) -> MazeResponse:
        raise NotImplementedError

    @abstractmethod
    def start_session(self, maze: MazeResponse) -> SessionResponse:
        """Follow the maze's ``start`` link."""
        raise NotImplementedError

    @abstractmethod
    def move(self, session: SessionResponse, direction: Direction) -> SessionResponse:
        """Follow the session's link named after ``direction``."""
        raise NotImplementedError

    @staticmethod
    def require_link(links: dict[str, Link], name: str) -> Link:
        link = links.get(name)
        if link is None:
            raise MazeClientError(f"no '{name}' link in response (have: {', '.join(links)})")
        return link
