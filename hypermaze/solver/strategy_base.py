"""Base class for solver strategies."""

from abc import ABC, abstractmethod
from typing import Iterable, Optional

from ..core.grid import Direction, Position


def unvisited_moves(
    current: Position, available: Iterable[Direction], visited: set[Position]
) -> list[Direction]:
    """Available directions whose target has not been visited, order kept."""
    return [d for d in available if current.move(d) not in visited]


def move_toward(
    current: Position, target: Position, available: Iterable[Direction]
) -> Optional[Direction]:
    """First available direction that brings ``current`` closer to ``target``.

    X axis before Y: east/west, then south/north. Returns None when no
    available direction reduces the distance.
    """
    dx = target.x - current.x
    dy = target.y - current.y

    preferred = []
    if dx > 0:
        preferred.append(Direction.EAST)
    elif dx < 0:
        preferred.append(Direction.WEST)
    if dy > 0:
        preferred.append(Direction.SOUTH)
    elif dy < 0:
        preferred.append(Direction.NORTH)

    options = set(available)
    for direction in preferred:
        if direction in options:
            return direction
    return None


class NextMoveStrategy(ABC):
    """Choose the next direction from local affordances only.

    The solver owns the visited set and passes it in on every call; a
    strategy keeps only its own backtracking structure.
    """

    name: str = ""

    def reset(self, start: Position) -> None:
        """Forget everything from a previous solve."""

    @abstractmethod
    def next_move(
        self,
        current: Position,
        available: list[Direction],
        visited: set[Position],
    ) -> Optional[Direction]:
        """Direction to move next, or None when no progress is possible."""
        raise NotImplementedError
