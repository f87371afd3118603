"""Depth-first exploration with an explicit backtrack stack."""

from typing import Optional

from ..core.grid import Direction, Position
from .strategy_base import NextMoveStrategy, move_toward, unvisited_moves


class DepthFirstStrategy(NextMoveStrategy):
    """Take the first unvisited affordance (North, South, East, West);
    at a dead end walk back to the cell we came from."""

    name = "dfs"

    def __init__(self):
        self._backtrack: list[Position] = []

    def reset(self, start: Position) -> None:
        self._backtrack = []

    def next_move(
        self,
        current: Position,
        available: list[Direction],
        visited: set[Position],
    ) -> Optional[Direction]:
        options = unvisited_moves(current, available, visited)
        if options:
            self._backtrack.append(current)
            return self.pick(options)

        if self._backtrack:
            # only traversed edges are pushed, so the target is adjacent
            return move_toward(current, self._backtrack.pop(), available)

        return None

    def pick(self, options: list[Direction]) -> Direction:
        return options[0]
