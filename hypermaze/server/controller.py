"""Maze API controller.

Owns the stores and the generator source, turns domain objects into
hypermedia responses, and reports request failures as ``ApiError``.
"""

from __future__ import annotations

import logging
import random
import threading
from typing import Optional

from ..core.grid import Direction
from ..core.maze import Maze, generate_maze
from ..core.metrics import MetricsService
from ..core.models import (
    AggregateMetrics,
    MazeListResponse,
    MazeMetrics,
    MazeResponse,
    MazeSummaryResponse,
    PositionModel,
    ProblemDetails,
    SessionResponse,
)
from ..core.navigation import move
from ..core.session import MazeSession, MoveResult
from ..core.settings import MazeSettings
from ..core.store import InMemoryMazeStore, InMemorySessionStore
from . import links

logger = logging.getLogger(__name__)

BAD_REQUEST_TYPE = "https://tools.ietf.org/html/rfc7231#section-6.5.1"
NOT_FOUND_TYPE = "https://tools.ietf.org/html/rfc7231#section-6.5.4"

COMPLETED_MESSAGE = "Congratulations! You've completed the maze!"

MOVE_FAILURES = {
    MoveResult.ALREADY_COMPLETED: "Cannot move - session is already completed",
    MoveResult.BLOCKED: "Cannot move {direction} - blocked by wall",
    MoveResult.OUT_OF_BOUNDS: "Cannot move {direction} - out of bounds",
}


class ApiError(Exception):
    """Request failure rendered as a problem document."""

    def __init__(self, problem: ProblemDetails):
        super().__init__(problem.detail)
        self.problem = problem

    @property
    def status(self) -> int:
        return self.problem.status

    @classmethod
    def bad_request(cls, detail: str, instance: str) -> "ApiError":
        return cls(
            ProblemDetails(
                type=BAD_REQUEST_TYPE,
                title="Bad Request",
                status=400,
                detail=detail,
                instance=instance,
            )
        )

    @classmethod
    def not_found(cls, detail: str, instance: str) -> "ApiError":
        return cls(
            ProblemDetails(
                type=NOT_FOUND_TYPE,
                title="Not Found",
                status=404,
                detail=detail,
                instance=instance,
            )
        )


class MazeController:
    """Maze and session operations for the web layer."""

    def __init__(
        self,
        *,
        settings: MazeSettings,
        maze_store: InMemoryMazeStore,
        session_store: InMemorySessionStore,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.settings = settings
        self.maze_store = maze_store
        self.session_store = session_store
        self.metrics = MetricsService(maze_store, session_store)
        if rng is None:
            rng = random.Random(settings.seed)
        self._rng = rng
        # random.Random is not safe to share across request threads
        self._rng_lock = threading.Lock()

    # ------------------------------------------------------------------
    # Mazes
    # ------------------------------------------------------------------
    def create_maze(self, width: Optional[int] = None, height: Optional[int] = None) -> MazeResponse:
        width = self.settings.default_width if width is None else width
        height = self.settings.default_height if height is None else height
        instance = links.MAZES_PATH

        if width <= 0:
            raise ApiError.bad_request("Width must be a positive integer", instance)
        if height <= 0:
            raise ApiError.bad_request("Height must be a positive integer", instance)
        if width > self.settings.max_width:
            raise ApiError.bad_request(f"Width cannot exceed {self.settings.max_width}", instance)
        if height > self.settings.max_height:
            raise ApiError.bad_request(f"Height cannot exceed {self.settings.max_height}", instance)

        with self._rng_lock:
            maze = generate_maze(width, height, self._rng)
        self.maze_store.save(maze)
        logger.info("Maze created: %s (%dx%d)", maze.id, width, height)
        return self._maze_response(maze)

    def list_mazes(self) -> MazeListResponse:
        return MazeListResponse(
            mazes=[
                MazeSummaryResponse(
                    id=maze.id,
                    width=maze.width,
                    height=maze.height,
                    created_at=maze.created_at,
                    links=links.maze_links(maze.id),
                )
                for maze in self.maze_store.get_all()
            ],
            links=links.list_links(),
        )

    def get_maze(self, maze_id: str) -> MazeResponse:
        return self._maze_response(self._require_maze(maze_id, links.maze_path(maze_id)))

    # ------------------------------------------------------------------
    # Sessions
    # ------------------------------------------------------------------
    def create_session(self, maze_id: str) -> SessionResponse:
        maze = self._require_maze(maze_id, f"{links.maze_path(maze_id)}/sessions")
        session = MazeSession.start(maze)
        self.session_store.save(session)
        logger.info("Session started: %s on maze %s", session.id, maze.id)
        return self._session_response(session, maze)

    def get_session(self, maze_id: str, session_id: str) -> SessionResponse:
        instance = links.session_path(maze_id, session_id)
        maze = self._require_maze(maze_id, instance)
        session = self._require_session(maze_id, session_id, instance)
        return self._session_response(session, maze)

    def move(self, maze_id: str, session_id: str, direction: str) -> SessionResponse:
        instance = f"{links.session_path(maze_id, session_id)}/move/{direction}"
        try:
            parsed = Direction.parse(direction)
        except ValueError:
            raise ApiError.bad_request(
                f"Invalid direction '{direction}'. Valid directions are: north, south, east, west",
                instance,
            ) from None

        maze = self._require_maze(maze_id, instance)
        session = self._require_session(maze_id, session_id, instance)

        with self.session_store.lock_for(session.id):
            result = move(session, parsed, maze)
            if result is not MoveResult.SUCCESS:
                raise ApiError.bad_request(
                    MOVE_FAILURES[result].format(direction=direction), instance
                )
            self.session_store.save(session)
            response = self._session_response(session, maze, result)

        if session.is_completed:
            logger.info("Session %s completed maze %s in %d moves", session.id, maze.id, session.move_count)
        return response

    # ------------------------------------------------------------------
    # Metrics
    # ------------------------------------------------------------------
    def aggregate_metrics(self) -> AggregateMetrics:
        return self.metrics.aggregate()

    def maze_metrics(self, maze_id: str) -> MazeMetrics:
        metrics = self.metrics.for_maze(maze_id)
        if metrics is None:
            raise ApiError.not_found(
                f"Maze with ID '{maze_id}' was not found", f"/api/metrics/mazes/{maze_id}"
            )
        return metrics

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    def _require_maze(self, maze_id: str, instance: str) -> Maze:
        maze = self.maze_store.get(maze_id)
        if maze is None:
            logger.warning("Maze not found: %s", maze_id)
            raise ApiError.not_found(f"Maze with ID '{maze_id}' was not found", instance)
        return maze

    def _require_session(self, maze_id: str, session_id: str, instance: str) -> MazeSession:
        session = self.session_store.get(session_id)
        if session is None or session.maze_id != maze_id:
            logger.warning("Session not found: %s (maze %s)", session_id, maze_id)
            raise ApiError.not_found(f"Session with ID '{session_id}' was not found", instance)
        return session

    @staticmethod
    def _maze_response(maze: Maze) -> MazeResponse:
        return MazeResponse(
            id=maze.id,
            width=maze.width,
            height=maze.height,
            start=PositionModel.from_position(maze.start),
            end=PositionModel.from_position(maze.end),
            created_at=maze.created_at,
            links=links.maze_links(maze.id),
        )

    @staticmethod
    def _session_response(
        session: MazeSession, maze: Maze, result: Optional[MoveResult] = None
    ) -> SessionResponse:
        return SessionResponse(
            id=session.id,
            maze_id=session.maze_id,
            current_position=PositionModel.from_position(session.current_position),
            state=session.state.value,
            move_count=session.move_count,
            visited_count=len(session.visited_cells),
            started_at=session.started_at,
            move_result=result.value if result is not None else None,
            message=COMPLETED_MESSAGE if session.is_completed else None,
            links=links.session_links(session, maze),
        )


def build_controller(*, settings: MazeSettings) -> MazeController:
    """Factory to build MazeController with fresh in-memory stores."""
    return MazeController(
        settings=settings,
        maze_store=InMemoryMazeStore(),
        session_store=InMemorySessionStore(),
    )
