"""Move validation and affordance rendering.

Both functions only look at one cell of the maze and the grid bounds; the
solvers never call into this module directly, they see its output as links.
"""

from .grid import Direction, Position
from .maze import Maze
from .session import MazeSession, MoveResult, SessionState


def move(session: MazeSession, direction: Direction, maze: Maze) -> MoveResult:
    """Try to move ``session`` one step; mutates it on SUCCESS only.

    Checks run in a fixed order: completed, wall, bounds. A caller standing in
    a corner with an open boundary wall therefore sees OUT_OF_BOUNDS, while a
    closed one reports BLOCKED.
    """
    if session.state is SessionState.COMPLETED:
        return MoveResult.ALREADY_COMPLETED

    cell = maze.cell_at(session.current_position)
    if not cell.can_move(direction):
        return MoveResult.BLOCKED

    target = session.current_position.move(direction)
    if not maze.contains(target):
        return MoveResult.OUT_OF_BOUNDS

    session.current_position = target
    session.move_count += 1
    session.visited_cells.add(target)
    if target == maze.end:
        session.state = SessionState.COMPLETED

    return MoveResult.SUCCESS


def available_directions(maze: Maze, position: Position) -> list[Direction]:
    """Directions that are wall-open and stay inside the grid.

    Ordered North, South, East, West. Raises ValueError for a position outside
    the maze. Session state is not considered here.
    """
    cell = maze.cell_at(position)
    return [
        direction
        for direction in Direction
        if cell.can_move(direction) and maze.contains(position.move(direction))
    ]
