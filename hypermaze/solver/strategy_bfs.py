"""Breadth-first target selection over a FIFO frontier.

Moves are still single physical steps; the frontier only decides which
unvisited cell to head for once the current cell has nothing new around it.
"""

from collections import deque
from typing import Optional

from ..core.grid import Direction, Position
from .strategy_base import NextMoveStrategy, move_toward, unvisited_moves


class BreadthFirstStrategy(NextMoveStrategy):
    """The target is chosen again on every step without an unvisited
    neighbour, so a later frontier entry can take over from an earlier one."""

    name = "bfs"

    def __init__(self):
        self._frontier: deque[Position] = deque()
        self._discovered: set[Position] = set()

    def reset(self, start: Position) -> None:
        self._frontier = deque([start])
        self._discovered = {start}

    def next_move(
        self,
        current: Position,
        available: list[Direction],
        visited: set[Position],
    ) -> Optional[Direction]:
        options = unvisited_moves(current, available, visited)
        for direction in options:
            target = current.move(direction)
            if target not in self._discovered:
                self._discovered.add(target)
                self._frontier.append(target)

        if options:
            return options[0]

        target = self._next_unvisited(visited)
        if target is None:
            return None

        # greedy step; None when the way toward the target is walled off
        return move_toward(current, target, available)

    def _next_unvisited(self, visited: set[Position]) -> Optional[Position]:
        """First unvisited frontier entry. Entries dequeued while searching,
        the hit included, go back on the tail in their original order."""
        skipped: deque[Position] = deque()
        while self._frontier:
            cell = self._frontier.popleft()
            skipped.append(cell)
            if cell not in visited:
                self._frontier.extend(skipped)
                return cell
        self._frontier.extend(skipped)
        return None
