"""Tests for the Position module."""

import pytest

from term_snake.errors import HitBound, InvalidDirection
from term_snake.position import Direction, Position


class TestPositionStep:
    @pytest.mark.parametrize(
        ("direction", "expected"),
        [
            (Direction.UP, Position(1, 2)),
            (Direction.DOWN, Position(3, 2)),
            (Direction.LEFT, Position(2, 1)),
            (Direction.RIGHT, Position(2, 3)),
        ],
    )
    def test_interior_step(self, direction, expected):
        origin = Position(2, 2)
        result = origin.step(direction, 4, 4)
        assert result == expected
        assert origin.distance(result) == 1

    def test_step_moves_on_one_axis(self):
        origin = Position(2, 2)
        assert origin.step(Direction.UP, 4, 4).y == origin.y
        assert origin.step(Direction.RIGHT, 4, 4).x == origin.x

    def test_step_does_not_mutate(self):
        origin = Position(2, 2)
        origin.step(Direction.DOWN, 4, 4)
        assert origin == Position(2, 2)

    def test_raw_keys_accepted(self):
        origin = Position(2, 2)
        assert origin.step("k", 4, 4) == Position(1, 2)
        assert origin.step("j", 4, 4) == Position(3, 2)
        assert origin.step("h", 4, 4) == Position(2, 1)
        assert origin.step("right", 4, 4) == Position(2, 3)


class TestPositionBounds:
    def test_up_at_top(self):
        with pytest.raises(HitBound):
            Position(0, 2).step(Direction.UP, 4, 4)

    def test_down_at_bottom(self):
        with pytest.raises(HitBound):
            Position(4, 2).step(Direction.DOWN, 4, 4)

    def test_left_at_left_edge(self):
        with pytest.raises(HitBound):
            Position(2, 0).step(Direction.LEFT, 4, 4)

    def test_right_at_right_edge(self):
        with pytest.raises(HitBound):
            Position(2, 4).step(Direction.RIGHT, 4, 4)

    def test_bounds_are_per_axis(self):
        # Row bound 2, column bound 6.
        assert Position(2, 3).step(Direction.RIGHT, 2, 6) == Position(2, 4)
        with pytest.raises(HitBound):
            Position(2, 3).step(Direction.DOWN, 2, 6)

    def test_hit_bound_details(self):
        with pytest.raises(HitBound) as excinfo:
            Position(0, 3).step(Direction.UP, 4, 4)
        assert excinfo.value.row == 0
        assert excinfo.value.col == 3
        assert excinfo.value.direction == "up"


class TestDirectionMapping:
    def test_unknown_key(self):
        with pytest.raises(InvalidDirection):
            Position(2, 2).step("x", 4, 4)

    def test_non_string_key(self):
        with pytest.raises(InvalidDirection):
            Direction.from_key(42)

    def test_invalid_direction_is_value_error(self):
        with pytest.raises(ValueError):
            Direction.from_key("space")

    def test_case_insensitive(self):
        assert Direction.from_key("UP") is Direction.UP
        assert Direction.from_key("W") is Direction.UP

    def test_opposites(self):
        assert Direction.UP.opposite is Direction.DOWN
        assert Direction.LEFT.opposite is Direction.RIGHT
        assert Direction.RIGHT.opposite is Direction.LEFT
        assert Direction.DOWN.opposite is Direction.UP


class TestPositionHelpers:
    def test_adjacent(self):
        assert Position(1, 1).is_adjacent(Position(1, 2))
        assert not Position(1, 1).is_adjacent(Position(2, 2))
        assert not Position(1, 1).is_adjacent(Position(1, 1))

    def test_immutable(self):
        pos = Position(1, 1)
        with pytest.raises(AttributeError):
            pos.x = 3
