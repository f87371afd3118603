"""Grid primitives: directions, positions and walled cells."""

from dataclasses import dataclass
from enum import Enum


class Direction(str, Enum):
    """The four orthogonal moves. Iteration order is North, South, East, West."""

    NORTH = "north"
    SOUTH = "south"
    EAST = "east"
    WEST = "west"

    @property
    def delta(self) -> tuple[int, int]:
        return _DELTAS[self]

    @property
    def opposite(self) -> "Direction":
        return _OPPOSITES[self]

    @classmethod
    def parse(cls, name: str) -> "Direction":
        """Case-insensitive lookup; raises ValueError for anything else."""
        try:
            return cls(name.strip().lower())
        except (AttributeError, ValueError):
            raise ValueError(f"unknown direction: {name!r}") from None


_DELTAS = {
    Direction.NORTH: (0, -1),
    Direction.SOUTH: (0, 1),
    Direction.EAST: (1, 0),
    Direction.WEST: (-1, 0),
}

_OPPOSITES = {
    Direction.NORTH: Direction.SOUTH,
    Direction.SOUTH: Direction.NORTH,
    Direction.EAST: Direction.WEST,
    Direction.WEST: Direction.EAST,
}


@dataclass(frozen=True)
class Position:
    """Column x (0 = leftmost), row y (0 = topmost)."""

    x: int
    y: int

    def move(self, direction: Direction) -> "Position":
        # no clamping, bounds belong to the caller
        dx, dy = direction.delta
        return Position(self.x + dx, self.y + dy)

    def manhattan(self, other: "Position") -> int:
        return abs(self.x - other.x) + abs(self.y - other.y)


@dataclass(frozen=True)
class Cell:
    """One maze cell with its four wall flags."""

    position: Position
    has_north_wall: bool = True
    has_south_wall: bool = True
    has_east_wall: bool = True
    has_west_wall: bool = True

    def has_wall(self, direction: Direction) -> bool:
        if direction is Direction.NORTH:
            return self.has_north_wall
        if direction is Direction.SOUTH:
            return self.has_south_wall
        if direction is Direction.EAST:
            return self.has_east_wall
        return self.has_west_wall

    def can_move(self, direction: Direction) -> bool:
        return not self.has_wall(direction)

    def open_directions(self) -> list[Direction]:
        """返回打通的方向列表"""
        return [d for d in Direction if self.can_move(d)]
