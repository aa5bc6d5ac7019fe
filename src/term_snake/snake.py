"""Snake body representation."""

from __future__ import annotations

from collections import deque

from term_snake.position import Direction, Position


class Snake:
    """A snake represented as an ordered deque of body positions.

    The head is ``body[0]``; the tail is ``body[-1]``.
    """

    def __init__(
        self,
        start_row: int,
        start_col: int,
        direction: Direction = Direction.RIGHT,
        length: int = 3,
    ) -> None:
        if length < 1:
            raise ValueError("Snake length must be at least 1.")
        dr, dc = direction.value
        self.body: deque[Position] = deque()
        for i in range(length):
            row = start_row - dr * i
            col = start_col - dc * i
            if row < 0 or col < 0:
                raise ValueError("Snake does not fit at the start position.")
            self.body.append(Position(row, col))
        self.direction = direction

    @property
    def head(self) -> Position:
        """Return the head position."""
        return self.body[0]

    @property
    def tail(self) -> Position:
        """Return the tail position."""
        return self.body[-1]

    def __len__(self) -> int:
        return len(self.body)

    def push_head(self, position: Position) -> None:
        """Prepend a new head segment."""
        self.body.appendleft(position)

    def pop_tail(self) -> Position:
        """Remove and return the tail segment."""
        return self.body.pop()

    def occupies(self, position: Position) -> bool:
        """Check whether the snake occupies a given cell."""
        return position in self.body

    def to_dict(self) -> dict:
        """Serialize snake state to a dictionary."""
        return {
            "body": [p.to_list() for p in self.body],
            "direction": self.direction.name.lower(),
        }
