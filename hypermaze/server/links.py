"""Hypermedia link construction."""

from ..core.maze import Maze
from ..core.models import Link
from ..core.navigation import available_directions
from ..core.session import MazeSession

MAZES_PATH = "/api/mazes"


def maze_path(maze_id: str) -> str:
    return f"{MAZES_PATH}/{maze_id}"


def session_path(maze_id: str, session_id: str) -> str:
    return f"{maze_path(maze_id)}/sessions/{session_id}"


def maze_links(maze_id: str) -> dict[str, Link]:
    return {
        "self": Link(href=maze_path(maze_id), rel="self", method="GET"),
        "start": Link(href=f"{maze_path(maze_id)}/sessions", rel="start", method="POST"),
    }


def list_links() -> dict[str, Link]:
    return {
        "self": Link(href=MAZES_PATH, rel="self", method="GET"),
        "create": Link(href=MAZES_PATH, rel="create", method="POST"),
    }


def session_links(session: MazeSession, maze: Maze) -> dict[str, Link]:
    """Links for a session: one move link per available direction.

    A completed session gets no move links, only ways back to the maze list.
    """
    base = session_path(session.maze_id, session.id)
    links = {"self": Link(href=base, rel="self", method="GET")}

    if session.is_completed:
        links["mazes"] = Link(href=MAZES_PATH, rel="collection", method="GET")
        links["newMaze"] = Link(href=MAZES_PATH, rel="create", method="POST")
        return links

    for direction in available_directions(maze, session.current_position):
        links[direction.value] = Link(
            href=f"{base}/move/{direction.value}", rel="move", method="POST"
        )
    return links
