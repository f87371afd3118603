"""Data models (Pydantic) for the hypermedia API and metrics."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from .grid import Cell, Position


class ApiModel(BaseModel):
    """Snake-case attributes, camelCase on the wire."""

    model_config = ConfigDict(populate_by_name=True)


class Link(ApiModel):
    """Hypermedia control."""

    href: str = Field(..., description="Target URL (relative to the API root)")
    rel: str = Field(..., description="Link relation")
    method: str = Field(default="GET", description="HTTP method to use")


class PositionModel(ApiModel):
    x: int
    y: int

    @classmethod
    def from_position(cls, position: Position) -> "PositionModel":
        return cls(x=position.x, y=position.y)

    def to_position(self) -> Position:
        return Position(self.x, self.y)


class CreateMazeRequest(ApiModel):
    width: Optional[int] = Field(default=None, description="Maze width in cells")
    height: Optional[int] = Field(default=None, description="Maze height in cells")


class MazeResponse(ApiModel):
    id: str
    width: int
    height: int
    start: PositionModel
    end: PositionModel
    created_at: datetime = Field(..., alias="createdAt")
    links: dict[str, Link] = Field(default_factory=dict, alias="_links")


class MazeSummaryResponse(ApiModel):
    id: str
    width: int
    height: int
    created_at: datetime = Field(..., alias="createdAt")
    links: dict[str, Link] = Field(default_factory=dict, alias="_links")


class MazeListResponse(ApiModel):
    mazes: list[MazeSummaryResponse] = Field(default_factory=list)
    links: dict[str, Link] = Field(default_factory=dict, alias="_links")


class SessionResponse(ApiModel):
    id: str
    maze_id: str = Field(..., alias="mazeId")
    current_position: PositionModel = Field(..., alias="currentPosition")
    state: str = Field(..., description="InProgress or Completed")
    move_count: int = Field(default=0, alias="moveCount")
    visited_count: int = Field(default=0, alias="visitedCount")
    started_at: Optional[datetime] = Field(default=None, alias="startedAt")
    move_result: Optional[str] = Field(default=None, alias="moveResult")
    message: Optional[str] = None
    links: dict[str, Link] = Field(default_factory=dict, alias="_links")

    @property
    def is_completed(self) -> bool:
        return self.state == "Completed"


class ProblemDetails(ApiModel):
    """RFC 7807 error body."""

    type: str
    title: str
    status: int
    detail: str
    instance: str


class CellModel(ApiModel):
    x: int
    y: int
    has_north_wall: bool = Field(..., alias="hasNorthWall")
    has_south_wall: bool = Field(..., alias="hasSouthWall")
    has_east_wall: bool = Field(..., alias="hasEastWall")
    has_west_wall: bool = Field(..., alias="hasWestWall")

    @classmethod
    def from_cell(cls, cell: Cell) -> "CellModel":
        return cls(
            x=cell.position.x,
            y=cell.position.y,
            has_north_wall=cell.has_north_wall,
            has_south_wall=cell.has_south_wall,
            has_east_wall=cell.has_east_wall,
            has_west_wall=cell.has_west_wall,
        )


class SessionSnapshot(ApiModel):
    session_id: str = Field(..., alias="sessionId")
    current_position: PositionModel = Field(..., alias="currentPosition")
    move_count: int = Field(..., alias="moveCount")
    visited_count: int = Field(..., alias="visitedCount")
    completion_percent: float = Field(..., alias="completionPercent", description="Share of cells visited, %")
    velocity: float = Field(..., description="Moves per minute")
    duration_seconds: float = Field(..., alias="durationSeconds")


class MazeMetrics(ApiModel):
    maze_id: str = Field(..., alias="mazeId")
    width: int
    height: int
    cells: list[list[CellModel]] = Field(default_factory=list, description="Row-major grid")
    active_sessions: int = Field(..., alias="activeSessions")
    total_completed: int = Field(..., alias="totalCompleted")
    sessions: list[SessionSnapshot] = Field(default_factory=list)


class AggregateMetrics(ApiModel):
    active_sessions: int = Field(..., alias="activeSessions")
    completed_today: int = Field(..., alias="completedToday")
    completion_rate: float = Field(..., alias="completionRate", description="Completed share of all sessions, %")
    average_moves: float = Field(..., alias="averageMoves")
    most_active_maze_id: Optional[str] = Field(default=None, alias="mostActiveMazeId")
    most_active_maze_session_count: int = Field(default=0, alias="mostActiveMazeSessionCount")
    system_velocity: float = Field(..., alias="systemVelocity")
    session_counts_by_maze: dict[str, int] = Field(default_factory=dict, alias="sessionCountsByMaze")
