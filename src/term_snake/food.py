"""Food placement and the food countdown timer."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import numpy as np

from term_snake.grid import Cell

if TYPE_CHECKING:
    from term_snake.grid import Grid
    from term_snake.position import Position

logger = logging.getLogger(__name__)


class FoodSpawner:
    """Keeps at most one food item on the grid.

    The food lives for ``2 * (rows + cols)`` ticks before it is moved.
    Placement draws uniformly among blank cells with a NumPy RNG, so a
    seeded generator gives reproducible games.
    """

    def __init__(
        self,
        grid: Grid,
        rng: np.random.Generator | None = None,
    ) -> None:
        self.grid = grid
        self.rng = rng if rng is not None else np.random.default_rng()
        self.position: Position | None = None
        self.food_time = 0

    @property
    def lifetime(self) -> int:
        """Ticks a freshly placed food survives."""
        return 2 * (self.grid.rows + self.grid.cols)

    @property
    def expired(self) -> bool:
        return self.food_time == 0

    def refresh(self) -> Position | None:
        """Replace the current food with a new one.

        The old food cell is cleared only if it still holds food. Returns
        the new position, or ``None`` if the grid has no blank cell.
        """
        if self.position is not None and self.grid.get(self.position) == Cell.FOOD:
            self.grid.set(self.position, Cell.BLANK)
        self.position = None
        return self.place()

    def place(self) -> Position | None:
        """Put food on a random blank cell and reset the timer."""
        blank = self.grid.blank_cells()
        if not blank:
            logger.warning("No blank cells available for food placement.")
            return None

        pos = blank[int(self.rng.integers(len(blank)))]
        self.grid.set(pos, Cell.FOOD)
        self.position = pos
        self.food_time = self.lifetime
        logger.debug("Food placed at (%d, %d).", pos.x, pos.y)
        return pos

    def tick(self) -> None:
        """Count the timer down, saturating at zero."""
        if self.food_time > 0:
            self.food_time -= 1

    def consume(self) -> None:
        """Mark the food as eaten so the next tick respawns it."""
        if self.position is not None:
            self.grid.set(self.position, Cell.BLANK)
        self.position = None
        self.food_time = 0

    def to_dict(self) -> dict:
        """Serialize food state to a dictionary."""
        return {
            "position": self.position.to_list() if self.position else None,
            "food_time": self.food_time,
        }
