"""Random walk: random choice among unvisited affordances."""

import random
from typing import Optional

from ..core.grid import Direction
from .strategy_dfs import DepthFirstStrategy


class RandomWalkStrategy(DepthFirstStrategy):
    """Uniform choice among unvisited directions; dead ends are left through
    the depth-first backtrack stack."""

    name = "random"

    def __init__(self, rng: Optional[random.Random] = None):
        super().__init__()
        self.rng = rng or random.Random()

    def pick(self, options: list[Direction]) -> Direction:
        return options[self.rng.randrange(len(options))]
