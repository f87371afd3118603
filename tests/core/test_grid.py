"""Tests for positions, directions and cells."""

import pytest

from hypermaze.core.grid import Cell, Direction, Position


class TestDirection:
    def test_iteration_order(self):
        assert list(Direction) == [
            Direction.NORTH,
            Direction.SOUTH,
            Direction.EAST,
            Direction.WEST,
        ]

    @pytest.mark.parametrize(
        "direction, opposite",
        [
            (Direction.NORTH, Direction.SOUTH),
            (Direction.SOUTH, Direction.NORTH),
            (Direction.EAST, Direction.WEST),
            (Direction.WEST, Direction.EAST),
        ],
    )
    def test_opposite(self, direction, opposite):
        assert direction.opposite is opposite

    @pytest.mark.parametrize("raw", ["north", "North", "NORTH", " north "])
    def test_parse_is_case_insensitive(self, raw):
        assert Direction.parse(raw) is Direction.NORTH

    @pytest.mark.parametrize("raw", ["up", "northeast", "", None])
    def test_parse_rejects_unknown(self, raw):
        with pytest.raises(ValueError):
            Direction.parse(raw)


class TestPosition:
    @pytest.mark.parametrize(
        "direction, expected",
        [
            (Direction.NORTH, Position(3, 1)),
            (Direction.SOUTH, Position(3, 3)),
            (Direction.EAST, Position(4, 2)),
            (Direction.WEST, Position(2, 2)),
        ],
    )
    def test_move(self, direction, expected):
        assert Position(3, 2).move(direction) == expected

    def test_move_does_not_clamp(self):
        assert Position(0, 0).move(Direction.NORTH) == Position(0, -1)
        assert Position(0, 0).move(Direction.WEST) == Position(-1, 0)

    def test_value_equality_and_hashing(self):
        assert Position(1, 2) == Position(1, 2)
        assert len({Position(1, 2), Position(1, 2), Position(2, 1)}) == 2

    def test_manhattan(self):
        assert Position(0, 0).manhattan(Position(3, 4)) == 7


class TestCell:
    def test_can_move_reads_wall_flags(self):
        cell = Cell(
            Position(0, 0),
            has_north_wall=True,
            has_south_wall=False,
            has_east_wall=False,
            has_west_wall=True,
        )
        assert not cell.can_move(Direction.NORTH)
        assert cell.can_move(Direction.SOUTH)
        assert cell.can_move(Direction.EAST)
        assert not cell.can_move(Direction.WEST)
        assert cell.open_directions() == [Direction.SOUTH, Direction.EAST]

    def test_default_cell_is_closed(self):
        assert Cell(Position(0, 0)).open_directions() == []
