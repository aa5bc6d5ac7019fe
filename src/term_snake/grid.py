"""Grid representation for the snake game."""

from __future__ import annotations

import enum
from dataclasses import dataclass

import numpy as np

from term_snake.position import Position

MIN_SIZE = 5


class Cell(enum.IntEnum):
    """Integer codes stored in the grid array."""

    BLANK = 0
    FOOD = 1
    BODY = 2
    HEAD = 3
    WALL = 4


class Grid:
    """NumPy-backed game grid.

    Coordinates use (row, col) ordering consistent with NumPy indexing.
    With ``walls`` enabled the outermost ring of cells is filled with
    :attr:`Cell.WALL` and the play area is the interior.
    """

    def __init__(self, rows: int, cols: int, walls: bool = False) -> None:
        if rows < MIN_SIZE or cols < MIN_SIZE:
            raise ValueError(
                f"Grid dimensions must be at least {MIN_SIZE}×{MIN_SIZE}."
            )
        self.rows = rows
        self.cols = cols
        self.walls = walls
        self.cells = np.zeros((rows, cols), dtype=np.int8)
        if walls:
            self.cells[0, :] = Cell.WALL
            self.cells[-1, :] = Cell.WALL
            self.cells[:, 0] = Cell.WALL
            self.cells[:, -1] = Cell.WALL

    @property
    def playable_cells(self) -> int:
        """Number of cells a snake can occupy."""
        if self.walls:
            return (self.rows - 2) * (self.cols - 2)
        return self.rows * self.cols

    def in_bounds(self, position: Position) -> bool:
        """Check whether a coordinate lies within the grid."""
        return 0 <= position.x < self.rows and 0 <= position.y < self.cols

    def get(self, position: Position) -> Cell:
        """Return the cell at the given coordinate."""
        return Cell(self.cells[position.x, position.y])

    def set(self, position: Position, cell: Cell) -> None:
        """Set the cell at the given coordinate."""
        self.cells[position.x, position.y] = cell

    def count(self, cell: Cell) -> int:
        """Return how many cells hold *cell*."""
        return int(np.count_nonzero(self.cells == cell))

    def blank_cells(self) -> list[Position]:
        """Return the coordinates of all blank cells."""
        rows, cols = np.where(self.cells == Cell.BLANK)
        return [
            Position(r, c)
            for r, c in zip(rows.tolist(), cols.tolist(), strict=True)
        ]

    def snapshot(self, head: Position | None = None) -> np.ndarray:
        """Return a read-only copy of the cells.

        When *head* is given its cell is marked :attr:`Cell.HEAD` in the
        copy only; the live grid keeps :attr:`Cell.BODY` there.
        """
        cells = self.cells.copy()
        if head is not None:
            cells[head.x, head.y] = Cell.HEAD
        cells.flags.writeable = False
        return cells

    def to_dict(self) -> dict:
        """Serialize grid state to a dictionary."""
        return {
            "rows": self.rows,
            "cols": self.cols,
            "walls": self.walls,
            "cells": self.cells.tolist(),
        }


@dataclass(frozen=True)
class Frame:
    """Immutable per-tick view of the game handed to renderers."""

    cells: np.ndarray
    score: int
    length: int
    timestamp: int

    @property
    def rows(self) -> int:
        return self.cells.shape[0]

    @property
    def cols(self) -> int:
        return self.cells.shape[1]

    def cell(self, row: int, col: int) -> Cell:
        return Cell(self.cells[row, col])
