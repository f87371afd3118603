"""Generate-and-solve loop."""

import logging
import threading
from typing import Optional

import requests

from ..core.settings import SolverSettings
from .client_base import MazeClient, MazeClientError
from .solver import Solver
from .stats import SolverStats

logger = logging.getLogger(__name__)


class SolverRunner:
    """Keeps creating mazes and solving them until told to stop.

    Exploration failures are recorded and the loop moves on; transport
    failures are logged and retried after a fixed backoff.
    """

    def __init__(
        self,
        client: MazeClient,
        solver: Solver,
        settings: SolverSettings,
        stats: Optional[SolverStats] = None,
    ):
        self.client = client
        self.solver = solver
        self.settings = settings
        self.stats = stats or SolverStats()

    def run(self, stop_event: threading.Event, max_mazes: Optional[int] = None) -> SolverStats:
        logger.info("Solver starting, connecting to %s", self.settings.api_base_url)

        while not stop_event.is_set():
            try:
                maze = self.client.create_maze(self.settings.maze_width, self.settings.maze_height)
                result = self.solver.solve(maze, stop_event)
            except (requests.RequestException, MazeClientError):
                logger.exception("API request failed, retrying after delay")
                stop_event.wait(self.settings.retry_backoff_ms / 1000)
                continue

            if stop_event.is_set() and not result.success:
                # interrupted, not a real failure
                break
            self.stats.record(result)
            interval = self.settings.stats_interval_mazes
            if interval > 0 and self.stats.mazes_attempted % interval == 0:
                self.log_stats()

            if max_mazes is not None and self.stats.mazes_attempted >= max_mazes:
                break
            if self.settings.delay_between_mazes_ms > 0:
                stop_event.wait(self.settings.delay_between_mazes_ms / 1000)

        self.log_stats()
        logger.info("Solver stopped")
        return self.stats

    def log_stats(self) -> None:
        logger.info(
            "Stats: %d solved, %d failed, %d total moves, avg %.1f moves/maze",
            self.stats.mazes_solved,
            self.stats.mazes_failed,
            self.stats.total_moves,
            self.stats.average_moves,
        )
