"""Session metrics computed from the stores on demand."""

from collections import Counter
from datetime import datetime, timezone
from typing import Callable, Optional

from .models import AggregateMetrics, CellModel, MazeMetrics, PositionModel, SessionSnapshot
from .session import MazeSession, SessionState
from .store import InMemoryMazeStore, InMemorySessionStore


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class MetricsService:
    """Aggregate and per-maze views over stored sessions."""

    def __init__(
        self,
        maze_store: InMemoryMazeStore,
        session_store: InMemorySessionStore,
        *,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        self.maze_store = maze_store
        self.session_store = session_store
        self._clock = clock

    def aggregate(self) -> AggregateMetrics:
        now = self._clock()
        sessions = self.session_store.get_all()
        active = [s for s in sessions if s.state is SessionState.IN_PROGRESS]
        completed = [s for s in sessions if s.state is SessionState.COMPLETED]

        completion_rate = len(completed) / len(sessions) * 100 if sessions else 0.0
        average_moves = (
            sum(s.move_count for s in completed) / len(completed) if completed else 0.0
        )

        counts_by_maze = Counter(s.maze_id for s in active)
        most_active = counts_by_maze.most_common(1)
        most_active_id, most_active_count = most_active[0] if most_active else (None, 0)

        return AggregateMetrics(
            active_sessions=len(active),
            completed_today=sum(1 for s in completed if s.started_at.date() == now.date()),
            completion_rate=round(completion_rate, 1),
            average_moves=round(average_moves, 1),
            most_active_maze_id=most_active_id,
            most_active_maze_session_count=most_active_count,
            system_velocity=round(sum(self._velocity(s, now) for s in active), 1),
            session_counts_by_maze=dict(counts_by_maze),
        )

    def for_maze(self, maze_id: str) -> Optional[MazeMetrics]:
        """Metrics for one maze, or None when the maze is unknown."""
        maze = self.maze_store.get(maze_id)
        if maze is None:
            return None

        now = self._clock()
        sessions = self.session_store.get_by_maze(maze_id)
        active = [s for s in sessions if s.state is SessionState.IN_PROGRESS]
        total_cells = maze.width * maze.height

        snapshots = [
            SessionSnapshot(
                session_id=s.id,
                current_position=PositionModel.from_position(s.current_position),
                move_count=s.move_count,
                visited_count=len(s.visited_cells),
                completion_percent=round(len(s.visited_cells) / total_cells * 100, 1),
                velocity=round(self._velocity(s, now), 1),
                duration_seconds=round((now - s.started_at).total_seconds(), 1),
            )
            for s in active
        ]

        return MazeMetrics(
            maze_id=maze.id,
            width=maze.width,
            height=maze.height,
            cells=[[CellModel.from_cell(cell) for cell in row] for row in maze.grid],
            active_sessions=len(active),
            total_completed=sum(1 for s in sessions if s.state is SessionState.COMPLETED),
            sessions=snapshots,
        )

    @staticmethod
    def _velocity(session: MazeSession, now: datetime) -> float:
        minutes = (now - session.started_at).total_seconds() / 60
        return session.move_count / minutes if minutes > 0 else 0.0
