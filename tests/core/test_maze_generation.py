"""Tests for maze generation."""

import random
from collections import deque

import pytest

from hypermaze.core.grid import Direction, Position
from hypermaze.core.maze import Maze, build_maze, generate_maze


def reachable_from_start(maze: Maze) -> set[Position]:
    seen = {maze.start}
    queue = deque([maze.start])
    while queue:
        position = queue.popleft()
        for direction in maze.cell_at(position).open_directions():
            target = position.move(direction)
            if maze.contains(target) and target not in seen:
                seen.add(target)
                queue.append(target)
    return seen


def open_passages(maze: Maze) -> int:
    """Each passage counted once (east and south sides only)."""
    return sum(
        (not cell.has_east_wall and cell.position.x < maze.width - 1)
        + (not cell.has_south_wall and cell.position.y < maze.height - 1)
        for cell in maze.cells()
    )


def wall_layout(maze: Maze):
    return [
        (c.has_north_wall, c.has_south_wall, c.has_east_wall, c.has_west_wall)
        for c in maze.cells()
    ]


def random_sizes(count=40, seed=7):
    rng = random.Random(seed)
    return [(rng.randint(1, 50), rng.randint(1, 50)) for _ in range(count)]


SIZES = [(1, 1), (1, 2), (2, 1), (1, 50), (50, 1), (2, 2), (50, 50)] + random_sizes()


class TestGenerateMaze:
    @pytest.mark.parametrize("width, height", SIZES)
    def test_every_cell_reachable_from_start(self, width, height):
        maze = generate_maze(width, height, random.Random(width * 100 + height))
        reachable = reachable_from_start(maze)
        assert maze.end in reachable
        assert len(reachable) == width * height

    @pytest.mark.parametrize("width, height", SIZES)
    def test_maze_is_a_spanning_tree(self, width, height):
        maze = generate_maze(width, height, random.Random(3))
        assert open_passages(maze) == width * height - 1

    @pytest.mark.parametrize("width, height", SIZES)
    def test_outer_boundary_keeps_its_walls(self, width, height):
        maze = generate_maze(width, height, random.Random(11))
        for x in range(width):
            assert maze.get_cell(x, 0).has_north_wall
            assert maze.get_cell(x, height - 1).has_south_wall
        for y in range(height):
            assert maze.get_cell(0, y).has_west_wall
            assert maze.get_cell(width - 1, y).has_east_wall

    def test_walls_are_reciprocal(self):
        maze = generate_maze(20, 15, random.Random(5))
        for cell in maze.cells():
            for direction in Direction:
                neighbor = cell.position.move(direction)
                if maze.contains(neighbor):
                    assert cell.has_wall(direction) == maze.cell_at(neighbor).has_wall(
                        direction.opposite
                    )

    def test_same_seed_gives_identical_walls(self):
        first = generate_maze(25, 25, random.Random(42))
        second = generate_maze(25, 25, random.Random(42))
        assert wall_layout(first) == wall_layout(second)
        assert first.id != second.id

    def test_different_seeds_differ(self):
        first = generate_maze(25, 25, random.Random(1))
        second = generate_maze(25, 25, random.Random(2))
        assert wall_layout(first) != wall_layout(second)

    def test_start_and_end(self):
        maze = generate_maze(7, 4, random.Random(0))
        assert maze.start == Position(0, 0)
        assert maze.end == Position(6, 3)

    def test_single_cell(self):
        maze = generate_maze(1, 1, random.Random(0))
        assert maze.start == maze.end == Position(0, 0)
        assert maze.get_cell(0, 0).open_directions() == []

    def test_single_row_is_a_corridor(self):
        maze = generate_maze(5, 1, random.Random(0))
        for x in range(4):
            assert maze.get_cell(x, 0).can_move(Direction.EAST)
            assert maze.get_cell(x + 1, 0).can_move(Direction.WEST)

    def test_works_without_rng(self):
        maze = generate_maze(3, 3)
        assert len(reachable_from_start(maze)) == 9

    def test_uses_given_id(self):
        assert generate_maze(2, 2, random.Random(0), maze_id="m-1").id == "m-1"

    @pytest.mark.parametrize("width, height", [(0, 5), (5, 0), (-1, 3), (3, -2)])
    def test_rejects_non_positive_dimensions(self, width, height):
        with pytest.raises(ValueError):
            generate_maze(width, height, random.Random(0))

    def test_large_maze_does_not_recurse(self):
        maze = generate_maze(200, 200, random.Random(9))
        assert len(reachable_from_start(maze)) == 200 * 200


class TestMaze:
    def test_cell_at_outside_grid_raises(self):
        maze = generate_maze(3, 3, random.Random(0))
        with pytest.raises(ValueError):
            maze.cell_at(Position(3, 0))
        with pytest.raises(ValueError):
            maze.cell_at(Position(0, -1))

    def test_grid_is_row_major(self):
        maze = generate_maze(4, 2, random.Random(0))
        assert maze.grid[1][3].position == Position(3, 1)
        assert maze.get_cell(3, 1).position == Position(3, 1)


class TestBuildMaze:
    def test_passages_open_both_sides(self):
        maze = build_maze(2, 1, [(0, 0, Direction.EAST)])
        assert maze.get_cell(0, 0).can_move(Direction.EAST)
        assert maze.get_cell(1, 0).can_move(Direction.WEST)

    def test_open_walls_touch_one_side_only(self):
        maze = build_maze(2, 1, open_walls=[(0, 0, Direction.NORTH), (0, 0, Direction.EAST)])
        assert maze.get_cell(0, 0).can_move(Direction.NORTH)
        assert maze.get_cell(0, 0).can_move(Direction.EAST)
        assert not maze.get_cell(1, 0).can_move(Direction.WEST)

    def test_passage_leaving_the_grid_is_rejected(self):
        with pytest.raises(ValueError):
            build_maze(2, 1, [(1, 0, Direction.EAST)])
        with pytest.raises(ValueError):
            build_maze(2, 1, [(0, 0, Direction.NORTH)])

    def test_cells_outside_the_grid_are_rejected(self):
        with pytest.raises(ValueError):
            build_maze(2, 1, [(2, 0, Direction.WEST)])
        with pytest.raises(ValueError):
            build_maze(2, 1, open_walls=[(-1, 0, Direction.EAST)])
