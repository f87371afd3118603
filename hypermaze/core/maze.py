"""迷宫生成算法

使用显式栈的 DFS 回溯算法生成完美迷宫（连通、无环）
"""

import random
import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Iterable, Optional

from .grid import Cell, Direction, Position


@dataclass(frozen=True)
class Maze:
    """迷宫数据结构（创建后不可变）"""

    id: str
    width: int
    height: int
    grid: tuple[tuple[Cell, ...], ...]
    start: Position
    end: Position
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def contains(self, position: Position) -> bool:
        return 0 <= position.x < self.width and 0 <= position.y < self.height

    def cell_at(self, position: Position) -> Cell:
        """获取指定位置的格子

        Raises:
            ValueError: 位置不在网格内
        """
        if not self.contains(position):
            raise ValueError(
                f"position ({position.x},{position.y}) is outside a "
                f"{self.width}x{self.height} maze"
            )
        return self.grid[position.y][position.x]

    def get_cell(self, x: int, y: int) -> Cell:
        return self.cell_at(Position(x, y))

    def cells(self) -> Iterable[Cell]:
        """按行遍历所有格子"""
        for row in self.grid:
            yield from row


class _WallGrid:
    """生成过程中的可变墙壁表，所有墙初始为存在"""

    def __init__(self, width: int, height: int):
        self.width = width
        self.height = height
        self.walls = [
            [{d: True for d in Direction} for _ in range(width)] for _ in range(height)
        ]

    def contains(self, position: Position) -> bool:
        return 0 <= position.x < self.width and 0 <= position.y < self.height

    def neighbors(self, position: Position) -> list[tuple[Position, Direction]]:
        """获取网格内的相邻格子及方向（北、南、东、西顺序）"""
        result = []
        for direction in Direction:
            target = position.move(direction)
            if self.contains(target):
                result.append((target, direction))
        return result

    def remove_wall(self, position: Position, direction: Direction) -> None:
        """打通两个格子之间的墙，同时清除两侧的标记；目标必须在网格内"""
        target = position.move(direction)
        self._require(position)
        if not self.contains(target):
            raise ValueError(
                f"passage from ({position.x},{position.y}) {direction.value} leaves the grid"
            )
        self.walls[position.y][position.x][direction] = False
        self.walls[target.y][target.x][direction.opposite] = False

    def open_one_side(self, position: Position, direction: Direction) -> None:
        self._require(position)
        self.walls[position.y][position.x][direction] = False

    def _require(self, position: Position) -> None:
        if not self.contains(position):
            raise ValueError(f"position ({position.x},{position.y}) is outside the grid")

    def freeze(self) -> tuple[tuple[Cell, ...], ...]:
        return tuple(
            tuple(
                Cell(
                    position=Position(x, y),
                    has_north_wall=walls[Direction.NORTH],
                    has_south_wall=walls[Direction.SOUTH],
                    has_east_wall=walls[Direction.EAST],
                    has_west_wall=walls[Direction.WEST],
                )
                for x, walls in enumerate(row)
            )
            for y, row in enumerate(self.walls)
        )


def _new_maze(width: int, height: int, walls: _WallGrid, maze_id: Optional[str]) -> Maze:
    return Maze(
        id=maze_id or str(uuid.uuid4()),
        width=width,
        height=height,
        grid=walls.freeze(),
        start=Position(0, 0),
        end=Position(width - 1, height - 1),
    )


def _check_dimensions(width: int, height: int) -> None:
    if width <= 0:
        raise ValueError(f"width must be positive, got {width}")
    if height <= 0:
        raise ValueError(f"height must be positive, got {height}")


def generate_maze(
    width: int,
    height: int,
    rng: Optional[random.Random] = None,
    *,
    maze_id: Optional[str] = None,
) -> Maze:
    """使用 DFS 回溯算法生成迷宫

    从原点开始雕刻，起点固定为 (0,0)，终点固定为 (width-1, height-1)。
    相同种子的随机源生成完全相同的墙壁布局。

    Args:
        width: 迷宫宽度（格子数）
        height: 迷宫高度（格子数）
        rng: 随机源（None 则新建一个）
        maze_id: 迷宫 ID（None 则随机 UUID）

    Returns:
        生成的迷宫对象
    """
    _check_dimensions(width, height)
    if rng is None:
        rng = random.Random()

    walls = _WallGrid(width, height)
    visited = [[False] * width for _ in range(height)]

    origin = Position(0, 0)
    visited[origin.y][origin.x] = True
    stack = [origin]

    while stack:
        current = stack[-1]

        # 获取未访问的邻居
        unvisited = [
            (neighbor, direction)
            for neighbor, direction in walls.neighbors(current)
            if not visited[neighbor.y][neighbor.x]
        ]

        if unvisited:
            neighbor, direction = unvisited[rng.randrange(len(unvisited))]
            walls.remove_wall(current, direction)
            visited[neighbor.y][neighbor.x] = True
            stack.append(neighbor)
        else:
            # 回溯
            stack.pop()

    return _new_maze(width, height, walls, maze_id)


def build_maze(
    width: int,
    height: int,
    passages: Iterable[tuple[int, int, Direction]] = (),
    *,
    open_walls: Iterable[tuple[int, int, Direction]] = (),
    maze_id: Optional[str] = None,
) -> Maze:
    """按给定通道手工组装迷宫，用于固定场景和测试

    Args:
        passages: (x, y, 方向) 列表，双向打通
        open_walls: (x, y, 方向) 列表，只清除该格子一侧的墙（可指向边界外）
    """
    _check_dimensions(width, height)
    walls = _WallGrid(width, height)
    for x, y, direction in passages:
        walls.remove_wall(Position(x, y), direction)
    for x, y, direction in open_walls:
        walls.open_one_side(Position(x, y), direction)
    return _new_maze(width, height, walls, maze_id)
