"""Grid coordinates and directional stepping."""

from __future__ import annotations

import enum
from dataclasses import dataclass

from term_snake.errors import HitBound, InvalidDirection


class Direction(enum.Enum):
    """Cardinal movement directions with (row_delta, col_delta) values."""

    UP = (-1, 0)
    DOWN = (1, 0)
    LEFT = (0, -1)
    RIGHT = (0, 1)

    @property
    def opposite(self) -> Direction:
        return _OPPOSITES[self]

    @classmethod
    def from_key(cls, key: object) -> Direction:
        """Map a raw key name to a direction.

        Raises :class:`InvalidDirection` for keys with no mapping.
        """
        if isinstance(key, Direction):
            return key
        if isinstance(key, str):
            direction = _KEYMAP.get(key.lower())
            if direction is not None:
                return direction
        raise InvalidDirection(key)


# Pairs that would cause an instant 180° reversal.
_OPPOSITES: dict[Direction, Direction] = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}

# Arrow key names, vi keys, and WASD.
_KEYMAP: dict[str, Direction] = {
    "up": Direction.UP,
    "down": Direction.DOWN,
    "left": Direction.LEFT,
    "right": Direction.RIGHT,
    "k": Direction.UP,
    "j": Direction.DOWN,
    "h": Direction.LEFT,
    "l": Direction.RIGHT,
    "w": Direction.UP,
    "s": Direction.DOWN,
    "a": Direction.LEFT,
    "d": Direction.RIGHT,
}


@dataclass(frozen=True)
class Position:
    """An immutable (row, col) grid coordinate.

    ``x`` is the row and ``y`` the column, both zero-based.
    """

    x: int
    y: int

    def step(
        self,
        direction: Direction | str,
        row_bound: int,
        col_bound: int,
    ) -> Position:
        """Return the neighbouring position in *direction*.

        *row_bound* and *col_bound* are the largest valid row and column
        indices. Raises :class:`HitBound` when the step would leave the
        grid and :class:`InvalidDirection` for an unmapped key.
        """
        direction = Direction.from_key(direction)
        if direction is Direction.UP:
            if self.x == 0:
                raise HitBound(self.x, self.y, "up")
            return Position(self.x - 1, self.y)
        if direction is Direction.DOWN:
            if self.x == row_bound:
                raise HitBound(self.x, self.y, "down")
            return Position(self.x + 1, self.y)
        if direction is Direction.LEFT:
            if self.y == 0:
                raise HitBound(self.x, self.y, "left")
            return Position(self.x, self.y - 1)
        if self.y == col_bound:
            raise HitBound(self.x, self.y, "right")
        return Position(self.x, self.y + 1)

    def distance(self, other: Position) -> int:
        """Manhattan distance to *other*."""
        return abs(self.x - other.x) + abs(self.y - other.y)

    def is_adjacent(self, other: Position) -> bool:
        return self.distance(other) == 1

    def to_list(self) -> list[int]:
        return [self.x, self.y]
