"""Running totals across solved mazes."""

from .solver import SolveResult


class SolverStats:
    """Moves and time are only counted for solved mazes."""

    def __init__(self):
        self.mazes_solved = 0
        self.mazes_failed = 0
        self.total_moves = 0
        self.total_elapsed_ms = 0.0

    @property
    def mazes_attempted(self) -> int:
        return self.mazes_solved + self.mazes_failed

    @property
    def average_moves(self) -> float:
        return self.total_moves / self.mazes_solved if self.mazes_solved else 0.0

    @property
    def average_elapsed_ms(self) -> float:
        return self.total_elapsed_ms / self.mazes_solved if self.mazes_solved else 0.0

    def record(self, result: SolveResult) -> None:
        if result.success:
            self.mazes_solved += 1
            self.total_moves += result.move_count
            self.total_elapsed_ms += result.elapsed_ms
        else:
            self.mazes_failed += 1
