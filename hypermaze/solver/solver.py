"""Solve loop shared by all strategies."""

import logging
import random
import threading
import time
from dataclasses import dataclass
from typing import Optional

from ..core.grid import Direction
from ..core.models import Link, MazeResponse
from ..core.settings import SolverSettings
from .client_base import MazeClient
from .strategy_base import NextMoveStrategy
from .strategy_bfs import BreadthFirstStrategy
from .strategy_dfs import DepthFirstStrategy
from .strategy_random import RandomWalkStrategy

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SolveResult:
    maze_id: str
    session_id: str
    move_count: int
    elapsed_ms: float
    success: bool


def directions_from_links(links: dict[str, Link]) -> list[Direction]:
    """Directions offered as links, in North, South, East, West order."""
    return [d for d in Direction if d.value in links]


def create_strategy(name: str, rng: Optional[random.Random] = None) -> NextMoveStrategy:
    """根据名称创建策略（dfs / bfs / random）"""
    name = name.lower()
    if name == "bfs":
        return BreadthFirstStrategy()
    if name == "random":
        return RandomWalkStrategy(rng)
    if name == "dfs":
        return DepthFirstStrategy()
    raise ValueError(f"unknown solver algorithm: {name!r}")


class Solver:
    """Walks one maze to its end using only the links in each response."""

    def __init__(
        self,
        client: MazeClient,
        strategy: NextMoveStrategy,
        settings: Optional[SolverSettings] = None,
    ):
        self.client = client
        self.strategy = strategy
        self.settings = settings or SolverSettings()

    def solve(self, maze: MazeResponse, stop_event: Optional[threading.Event] = None) -> SolveResult:
        """Run one session to completion, exploration failure, or stop.

        Client errors propagate; retrying them is the caller's business.
        """
        started = time.perf_counter()
        move_count = 0
        limit = self.settings.max_moves or 4 * maze.width * maze.height

        session = self.client.start_session(maze)
        start = session.current_position.to_position()
        logger.info(
            "Started maze %s, session %s at (%d,%d)",
            maze.id, session.id, start.x, start.y,
        )

        self.strategy.reset(start)
        visited = {start}

        while not session.is_completed:
            if stop_event is not None and stop_event.is_set():
                logger.info("Solve of maze %s cancelled", maze.id)
                break

            current = session.current_position.to_position()
            available = directions_from_links(session.links)
            direction = self.strategy.next_move(current, available, visited)
            if direction is None:
                logger.warning(
                    "No moves left at (%d,%d), visited %d cells", current.x, current.y, len(visited)
                )
                break
            if move_count >= limit:
                logger.warning("Move limit %d reached on maze %s", limit, maze.id)
                break

            logger.debug(
                "Moving %s from (%d,%d), visited: %d",
                direction.value, current.x, current.y, len(visited),
            )
            session = self.client.move(session, direction)
            visited.add(session.current_position.to_position())
            move_count += 1

            self._pause(stop_event)

        elapsed_ms = (time.perf_counter() - started) * 1000
        success = session.is_completed
        logger.info(
            "Maze %s %s in %d moves (%.0fms)",
            maze.id, "solved" if success else "failed", move_count, elapsed_ms,
        )
        return SolveResult(
            maze_id=maze.id,
            session_id=session.id,
            move_count=move_count,
            elapsed_ms=elapsed_ms,
            success=success,
        )

    def _pause(self, stop_event: Optional[threading.Event]) -> None:
        delay = self.settings.delay_between_moves_ms / 1000
        if delay <= 0:
            return
        if stop_event is not None:
            stop_event.wait(delay)
        else:
            time.sleep(delay)


def build_solver(
    client: MazeClient,
    settings: SolverSettings,
) -> Solver:
    """Factory: strategy from ``settings.algorithm``, seeded when configured."""
    algorithm = settings.normalized_algorithm
    logger.info("Using solver algorithm: %s", algorithm)
    rng = random.Random(settings.seed) if settings.seed is not None else None
    return Solver(client, create_strategy(algorithm, rng), settings)
