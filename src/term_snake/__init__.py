"""Term Snake — terminal snake game engine."""

from term_snake.config import Difficulty, GameConfig
from term_snake.engine import Game, GameOutcome, GameStatus, OutcomeKind
from term_snake.errors import (
    AdjacencyViolation,
    HitBound,
    InvalidDirection,
    SnakeError,
)
from term_snake.grid import Cell, Frame, Grid
from term_snake.position import Direction, Position
from term_snake.snake import Snake

__all__ = [
    "AdjacencyViolation",
    "Cell",
    "Difficulty",
    "Direction",
    "Frame",
    "Game",
    "GameConfig",
    "GameOutcome",
    "GameStatus",
    "Grid",
    "HitBound",
    "InvalidDirection",
    "OutcomeKind",
    "Position",
    "Snake",
    "SnakeError",
]
