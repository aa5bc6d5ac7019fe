"""Tick-based game engine composing grid, snake, and food logic."""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

import numpy as np

from term_snake.config import Difficulty, GameConfig
from term_snake.errors import AdjacencyViolation, HitBound, InvalidDirection
from term_snake.food import FoodSpawner
from term_snake.grid import Cell, Frame, Grid
from term_snake.position import Direction, Position
from term_snake.snake import Snake

if TYPE_CHECKING:
    from term_snake.controls import InputSource
    from term_snake.display import Renderer

logger = logging.getLogger(__name__)

QUIT_KEYS = frozenset({"esc", "q"})


class GameStatus(enum.IntEnum):
    """Lifecycle of a game. Transitions only move forward."""

    INITIALIZE = 0
    RUNNING = 1
    FINISHED = 2


class OutcomeKind(enum.Enum):
    WIN = "win"
    LOSS = "loss"
    QUIT = "quit"


@dataclass(frozen=True)
class GameOutcome:
    """Final result of a game, returned by :meth:`Game.run`."""

    kind: OutcomeKind
    score: int
    length: int
    max_score: int
    rows: int
    cols: int
    difficulty: Difficulty
    timestamp: int
    reason: str = ""

    def summary(self) -> str:
        if self.kind is OutcomeKind.WIN:
            return (
                "\tCongratulations!\n\n"
                "You won the game.\n"
                f" map: {self.rows}x{self.cols}\n"
                f" difficulty: {self.difficulty}"
            )
        lines = ["    Game Over"]
        if self.reason:
            lines.append(f" {self.reason}")
        lines.append(f"\n You got {self.score} / {self.max_score}!")
        return "\n".join(lines)


class Game:
    """Single-player snake game.

    The game owns the grid, snake, and food spawner. :meth:`run` drives the
    full render/input loop against external collaborators; :meth:`step`
    advances one tick with an explicit key and no rendering.
    """

    def __init__(
        self,
        config: GameConfig | None = None,
        rng: np.random.Generator | None = None,
    ) -> None:
        self.config = config if config is not None else GameConfig()
        self.grid = Grid(self.config.rows, self.config.cols, walls=self.config.walls)
        self.rng = rng if rng is not None else np.random.default_rng(self.config.seed)

        self.snake = Snake(
            self.config.start_row,
            self.config.start_col,
            Direction.RIGHT,
            length=self.config.initial_length,
        )
        for pos in self.snake.body:
            self.grid.set(pos, Cell.BODY)

        self.food = FoodSpawner(self.grid, rng=self.rng)

        self.status = GameStatus.INITIALIZE
        self.timestamp = 0
        self.score = 0
        self.length = self.config.initial_length
        self.last_direction = Direction.RIGHT
        self.outcome: GameOutcome | None = None

    # -- properties -------------------------------------------------------

    @property
    def rows(self) -> int:
        return self.grid.rows

    @property
    def cols(self) -> int:
        return self.grid.cols

    @property
    def finished(self) -> bool:
        return self.status is GameStatus.FINISHED

    @property
    def max_score(self) -> int:
        return self.grid.playable_cells - self.config.initial_length

    @property
    def wait_time(self) -> int:
        """Input poll timeout in milliseconds; shrinks as the score grows."""
        return self.rows * self.cols - self.score

    # -- main loop --------------------------------------------------------

    def run(self, renderer: Renderer, input_source: InputSource) -> GameOutcome:
        """Play until the game finishes and return its outcome."""
        self.start()
        while not self.finished:
            if not self.begin_tick():
                break
            renderer.render(self.frame())
            key = None
            if input_source.poll(self.wait_time):
                key = input_source.read()
            self.finish_tick(key)
        assert self.outcome is not None
        return self.outcome

    def step(self, key: Direction | str | None = None) -> GameOutcome | None:
        """Advance one tick with *key* as the player's input.

        Returns the outcome once the game has finished, else ``None``.
        Calling it on a finished game changes nothing.
        """
        if self.finished:
            return self.outcome
        if self.status is GameStatus.INITIALIZE:
            self.start()
        if self.begin_tick():
            self.finish_tick(key)
        return self.outcome

    def start(self) -> None:
        self._set_status(GameStatus.RUNNING)
        logger.info(
            "Game started on a %dx%d grid (%s).",
            self.rows, self.cols, self.config.difficulty,
        )

    def begin_tick(self) -> bool:
        """Win check, food refresh and clock advance.

        Returns ``False`` if the game ended before any input was needed.
        """
        if self.length == self.grid.playable_cells:
            self._finish(OutcomeKind.WIN)
            return False

        if self.food.expired:
            self.food.refresh()

        self.timestamp += 1
        self.food.tick()
        return True

    def finish_tick(self, key: Direction | str | None) -> None:
        """Resolve *key* into a direction and move the snake."""
        if isinstance(key, str) and key.lower() in QUIT_KEYS:
            self._finish(OutcomeKind.QUIT, "Quit by player.")
            return

        direction = self.resolve_direction(key)
        try:
            target = self.snake.head.step(direction, self.rows - 1, self.cols - 1)
        except HitBound as exc:
            self._finish(OutcomeKind.LOSS, "Hit Wall!")
            logger.debug("%s", exc)
            return
        self.move_snake(target)

    # -- rules ------------------------------------------------------------

    def resolve_direction(self, key: Direction | str | None) -> Direction:
        """Apply the direction lock to *key* and return the direction to use.

        Reversals, unmapped keys and missing input keep the last direction.
        """
        if key is None:
            return self.last_direction
        try:
            direction = Direction.from_key(key)
        except InvalidDirection:
            return self.last_direction
        if direction is self.last_direction.opposite:
            return self.last_direction
        self.last_direction = direction
        self.snake.direction = direction
        return direction

    def move_snake(self, target: Position) -> None:
        """Move the head onto *target*, handling food and collisions."""
        head = self.snake.head
        if not head.is_adjacent(target):
            raise AdjacencyViolation(
                f"Move target {target} is not adjacent to head {head}."
            )

        content = self.grid.get(target)
        ate = False
        if content == Cell.WALL:
            self._finish(OutcomeKind.LOSS, "Hit Wall!")
            return
        if content == Cell.BODY and target != self.snake.tail:
            self._finish(OutcomeKind.LOSS, "Bit yourself!")
            return
        if content == Cell.FOOD:
            self.score += 1
            self.length += 1
            ate = True
            self.food.consume()

        if not ate:
            vacated = self.snake.pop_tail()
            self.grid.set(vacated, Cell.BLANK)

        self.grid.set(target, Cell.BODY)
        self.snake.push_head(target)

    # -- views ------------------------------------------------------------

    def frame(self) -> Frame:
        """Snapshot the grid for rendering, with the head marked."""
        return Frame(
            cells=self.grid.snapshot(head=self.snake.head),
            score=self.score,
            length=self.length,
            timestamp=self.timestamp,
        )

    def get_state(self) -> dict:
        """Return the full, serializable game state."""
        return {
            "status": self.status.name.lower(),
            "timestamp": self.timestamp,
            "score": self.score,
            "length": self.length,
            "grid": self.grid.to_dict(),
            "snake": self.snake.to_dict(),
            "food": self.food.to_dict(),
        }

    # -- internals --------------------------------------------------------

    def _set_status(self, status: GameStatus) -> None:
        if status < self.status:
            raise ValueError(
                f"Cannot move game status from {self.status.name} to {status.name}."
            )
        self.status = status

    def _finish(self, kind: OutcomeKind, reason: str = "") -> None:
        self._set_status(GameStatus.FINISHED)
        self.outcome = GameOutcome(
            kind=kind,
            score=self.score,
            length=self.length,
            max_score=self.max_score,
            rows=self.rows,
            cols=self.cols,
            difficulty=self.config.difficulty,
            timestamp=self.timestamp,
            reason=reason,
        )
        logger.info(
            "Game finished (%s) at tick %d with score %d.",
            kind.value, self.timestamp, self.score,
        )
