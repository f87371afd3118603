"""Navigation session state."""

import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Optional

from .grid import Position


class SessionState(str, Enum):
    IN_PROGRESS = "InProgress"
    COMPLETED = "Completed"


class MoveResult(str, Enum):
    """Outcome of a single move attempt. Returned, never raised."""

    SUCCESS = "Success"
    BLOCKED = "Blocked"
    OUT_OF_BOUNDS = "OutOfBounds"
    ALREADY_COMPLETED = "AlreadyCompleted"


@dataclass
class MazeSession:
    """One navigation attempt through a maze.

    Mutated in place by ``navigation.move`` on successful moves only.
    """

    maze_id: str
    current_position: Position
    id: str = field(default_factory=lambda: str(uuid.uuid4()))
    state: SessionState = SessionState.IN_PROGRESS
    move_count: int = 0
    visited_cells: set[Position] = field(default_factory=set)
    started_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def __post_init__(self):
        self.visited_cells.add(self.current_position)

    @classmethod
    def start(cls, maze, session_id: Optional[str] = None) -> "MazeSession":
        """New session at the maze's start position."""
        if session_id is None:
            return cls(maze_id=maze.id, current_position=maze.start)
        return cls(maze_id=maze.id, current_position=maze.start, id=session_id)

    @property
    def is_completed(self) -> bool:
        return self.state is SessionState.COMPLETED
