"""Exception hierarchy for the snake game."""

from __future__ import annotations


class SnakeError(Exception):
    """Base class for all game errors."""


class HitBound(SnakeError):
    """Raised when a move would leave the grid."""

    def __init__(self, row: int, col: int, direction: str) -> None:
        super().__init__(f"Hit bound moving {direction} from ({row}, {col}).")
        self.row = row
        self.col = col
        self.direction = direction


class InvalidDirection(SnakeError, ValueError):
    """Raised when an input key maps to no direction."""

    def __init__(self, key: object) -> None:
        super().__init__(f"Invalid direction: {key!r}.")
        self.key = key


class AdjacencyViolation(SnakeError, RuntimeError):
    """Raised when a move target is not next to the snake head.

    This is a programming error, never a gameplay outcome.
    """


class TerminalTooSmall(SnakeError, ValueError):
    """Raised when the grid does not fit the terminal window."""

    def __init__(self, rows: int, cols: int, lines: int, columns: int) -> None:
        super().__init__(
            f"A {rows}x{cols} grid needs a terminal of at least "
            f"{cols * 2}x{rows + 3} characters; this one is {columns}x{lines}."
        )
        self.rows = rows
        self.cols = cols
